import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from errors import OpenFailure
from video_source import StreamInfo


def make_frames(n, w=32, h=24):
    """Frame i is filled with the value i so tests can tell frames apart."""
    return [np.full((h, w, 3), i, dtype=np.uint8) for i in range(n)]


class FakeSource:
    """In-memory stand-in for VideoSource with cv2-like read/seek semantics."""

    def __init__(self, frames, rate=30.0, fail_open=False):
        self.frames = frames
        self.rate = rate
        self.fail_open = fail_open
        self.cursor = 0
        self.bad_reads = set()      # indices whose read returns None
        self.bad_seeks = set()      # indices whose seek fails
        self.opened = False
        self.seeks = []

    def open(self, fp):
        if self.fail_open or not self.frames:
            raise OpenFailure(f"Cannot open video file: {fp}")
        self.opened = True
        self.cursor = 0
        h, w = self.frames[0].shape[:2]
        return StreamInfo(frame_count=len(self.frames), rate=self.rate,
                          width=w, height=h)

    def read_next(self):
        if self.cursor >= len(self.frames) or self.cursor in self.bad_reads:
            return None
        frame = self.frames[self.cursor]
        self.cursor += 1
        return frame

    def seek_absolute(self, index):
        self.seeks.append(index)
        if index in self.bad_seeks:
            return False
        self.cursor = index
        return True

    def close(self):
        self.opened = False


class FakeDisplay:
    def __init__(self, events=()):
        self.events = list(events)
        self.shown = []
        self.timeouts = []
        self.closed = False

    def show_frame(self, surf, sar=1.0):
        self.shown.append(surf)

    def wait_for_key(self, timeout_ms=None):
        self.timeouts.append(timeout_ms)
        if not self.events:
            from events import InputEvent
            return InputEvent.QUIT
        return self.events.pop(0)

    def close_all(self):
        self.closed = True


class FakeConsole:
    def __init__(self, answers=()):
        self.answers = list(answers)
        self.lines = []
        self.statuses = []
        self.prompts = []

    def write(self, text=""):
        self.lines.append(text)

    def status(self, text):
        self.statuses.append(text)

    def prompt(self, text):
        self.prompts.append(text)
        return self.answers.pop(0) if self.answers else None


@pytest.fixture
def frames():
    return make_frames(10)


@pytest.fixture
def source(frames):
    return FakeSource(frames)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def player(source, console):
    from playback import PlaybackController

    p = PlaybackController(source, FakeDisplay(), console)
    assert p.load("ten_frames.mp4")
    return p
