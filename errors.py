"""
errors.py – failure taxonomy shared by the decoder wrapper and controller.

None of these escape the controller: they are caught where the operation
was requested and turned into a ``False`` result plus one console line.
"""


class FrameBrowserError(Exception):
    """Base class for every frame-browser failure."""


class OpenFailure(FrameBrowserError):
    """Bad path, unreadable container, or a stream with no frames."""


class ReadFailure(FrameBrowserError):
    """The decoder produced no frame for the requested index."""


class OutOfRange(FrameBrowserError):
    """Seek target outside ``[0, total_frames - 1]``."""


class InvalidInput(FrameBrowserError):
    """Console entry that is not a frame number in ``[1, total_frames]``."""
