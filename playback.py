"""
playback.py – PlaybackController

Owns the one open stream, the decoded frame and the position counter.
Every navigation call returns True/False; on False the previous position and
frame are kept.

Public API
----------
load(path)          → open a video and show frame 0
advance() / retreat()
seek(index)         → zero-based
jump_to(entry)      → one-based console entry, e.g. "7" → index 6
prompt_jump()
render_current() / report_progress()
run_event_loop()
close()
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

import config
from app import run_event_loop as _run_event_loop
from console import Console
from errors import InvalidInput, OpenFailure, OutOfRange, ReadFailure
from overlays import compose_frame, position_text, progress_text
from video_source import StreamInfo, VideoSource

log = logging.getLogger(__name__)


def parse_frame_number(entry: Optional[str], total: int) -> int:
    """One-based console entry → zero-based index; raises InvalidInput."""
    try:
        number = int(entry.strip())
    except (AttributeError, ValueError):
        raise InvalidInput(f"not a frame number: {entry!r}") from None
    if not 1 <= number <= total:
        raise InvalidInput(f"frame {number} outside 1-{total}")
    return number - 1


class PlaybackController:
    def __init__(self, source=None, display=None, console: Console | None = None):
        self.source  = source if source is not None else VideoSource()
        self.display = display
        self.console = console or Console()

        self.info: Optional[StreamInfo] = None
        self.frame: Optional[np.ndarray] = None
        self.position = 0

    # ── metadata ────────────────────────────────────────────────────────────
    @property
    def is_loaded(self) -> bool:
        return self.info is not None

    @property
    def total_frames(self) -> int:
        return self.info.frame_count if self.info else 0

    @property
    def fps(self) -> float:
        return self.info.rate if self.info else config.DEFAULT_FPS

    # ── lifecycle ───────────────────────────────────────────────────────────
    def load(self, path: str) -> bool:
        self.close()
        try:
            info = self.source.open(path)
        except OpenFailure as exc:
            log.error("%s", exc)
            self.console.write(f"Error: {exc}")
            return False

        frame = self.source.read_next()
        if frame is None:
            self.source.close()
            log.error("no first frame in %s", path)
            self.console.write("Error: Cannot read first frame")
            return False

        self.info, self.frame, self.position = info, frame, 0

        self.console.write("Video loaded successfully:")
        self.console.write(f"  Total frames: {info.frame_count}")
        self.console.write(f"  FPS: {info.rate:g}")
        self.console.write(f"  Resolution: {frame.shape[1]}x{frame.shape[0]}")
        return True

    def close(self):
        self.source.close()
        self.info = None
        self.frame = None
        self.position = 0

    # ── navigation ──────────────────────────────────────────────────────────
    def advance(self) -> bool:
        if not self.is_loaded or self.position >= self.total_frames - 1:
            return False

        frame = self.source.read_next()
        if frame is None:
            log.warning("cannot read frame %d", self.position + 1)
            return False
        self.frame = frame
        self.position += 1
        return True

    def retreat(self) -> bool:
        if not self.is_loaded or self.position <= 0:
            return False
        try:
            frame = self._read_at(self.position - 1)
        except ReadFailure as exc:
            log.warning("%s", exc)
            return False
        # committed only once the frame is in hand
        self.frame = frame
        self.position -= 1
        return True

    def seek(self, target: int) -> bool:
        if not self.is_loaded:
            return False
        try:
            if not 0 <= target < self.total_frames:
                raise OutOfRange(
                    f"frame {target} outside 0-{self.total_frames - 1}")
            frame = self._read_at(target)
        except (OutOfRange, ReadFailure) as exc:
            log.warning("seek: %s", exc)
            return False
        self.frame = frame
        self.position = target
        return True

    def jump_to(self, entry: Optional[str]) -> bool:
        try:
            target = parse_frame_number(entry, self.total_frames)
        except InvalidInput as exc:
            log.info("%s", exc)
            self.console.write("Invalid frame number!")
            return False

        if not self.seek(target):
            self.console.write(f"Cannot read frame {target + 1}")
            return False
        self.console.write(f"Jumped to frame {target + 1}")
        return True

    def prompt_jump(self) -> bool:
        entry = self.console.prompt(f"Enter frame number (1-{self.total_frames}): ")
        return self.jump_to(entry)

    def _read_at(self, index: int) -> np.ndarray:
        if not self.source.seek_absolute(index):
            raise ReadFailure(f"cannot seek to frame {index}")
        frame = self.source.read_next()
        if frame is None:
            raise ReadFailure(f"cannot read frame {index}")
        return frame

    # ── output ──────────────────────────────────────────────────────────────
    def render_current(self):
        """Overlay the position on the held frame and show it."""
        if self.frame is None:
            return None
        surf = compose_frame(self.frame,
                             position_text(self.position, self.total_frames))
        if self.display is not None:
            self.display.show_frame(surf, self.info.sar)
        return surf

    def report_progress(self) -> None:
        if self.is_loaded:
            self.console.status(progress_text(self.position, self.total_frames))

    def run_event_loop(self):
        return _run_event_loop(self)
