# =========  video_source.py  =========
"""
Frame-indexed decoder built on PyAV.

Frame *i* is the i-th frame in presentation order.  Opening a file builds
the list of presentation timestamps once, so sequential reads and seeks
agree on what index a frame has even when timestamps have gaps.

Public API
----------
open(path)
read_next()          → next frame (HxWx3 uint8 RGB) or None
seek_absolute(index) → True when the following read_next() yields *index*
close()
Properties
----------
.path  → current file path
.info  → StreamInfo (frame count, rate, resolution, sample-aspect ratio)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator, Optional

import av  # PyAV – thin FFmpeg bindings
import numpy as np

import config
from errors import OpenFailure

log = logging.getLogger(__name__)


@dataclass
class StreamInfo:
    frame_count: int
    rate: float
    width: int
    height: int
    sar: float = 1.0


# ── metadata probes ─────────────────────────────────────────────────────────
def _stream_rate(vs) -> Fraction:
    rate = vs.average_rate or vs.guessed_rate
    if rate:
        return Fraction(rate)
    log.debug("no frame rate in metadata, assuming %s", config.DEFAULT_FPS)
    return Fraction(config.DEFAULT_FPS).limit_denominator(1001)


def _frame_index(fp: str, stream_index: int) -> tuple[int, Optional[list[int]]]:
    """
    Return (frame count, sorted PTS list).  Packet timestamps first; when
    the demuxer leaves some unset, decode the stream and use frame PTS.
    The list is None if frames carry no timestamps at all.
    """
    with av.open(fp) as c:
        vs = c.streams[stream_index]
        pts = [p.pts for p in c.demux(vs) if p.size]
    if pts and None not in pts:
        return len(pts), sorted(pts)

    log.debug("packet timestamps incomplete, decoding %s to index it", fp)
    with av.open(fp) as c:
        pts = [f.pts for f in c.decode(c.streams[stream_index])]
    if None in pts:
        log.warning("%s has untimed frames, seeking will decode from the start", fp)
        return len(pts), None
    return len(pts), sorted(pts)


# ────────────────────────────────────────────────────────────────────────────
class VideoSource:
    def __init__(self):
        self._container = None
        self._stream = None
        self._frames: Optional[Iterator[av.VideoFrame]] = None
        self._pending: Optional[av.VideoFrame] = None
        self._pts: Optional[list[int]] = None
        self.info: Optional[StreamInfo] = None
        self.path = ""

    @property
    def is_open(self) -> bool:
        return self._container is not None

    # ── public API ──────────────────────────────────────────────────────────
    def open(self, fp: str) -> StreamInfo:
        self.close()

        try:
            container = av.open(fp)
        except (av.error.FFmpegError, OSError) as exc:
            raise OpenFailure(f"Cannot open video file: {fp} ({exc})") from exc

        vs = next((s for s in container.streams if s.type == "video"), None)
        if vs is None:
            container.close()
            raise OpenFailure(f"No video stream in {fp}")

        try:
            count, pts = _frame_index(fp, vs.index)
        except av.error.FFmpegError as exc:
            container.close()
            raise OpenFailure(f"Cannot index {fp} ({exc})") from exc

        ctx = vs.codec_context
        sar = ctx.sample_aspect_ratio
        info = StreamInfo(
            frame_count=count,
            rate=float(_stream_rate(vs)),
            width=ctx.width,
            height=ctx.height,
            sar=float(sar) if sar else 1.0,
        )
        if info.frame_count <= 0:
            container.close()
            raise OpenFailure(f"Video has no frames: {fp}")
        if vs.frames and vs.frames != count:
            log.debug("container reports %d frames, indexed %d", vs.frames, count)

        self._container, self._stream = container, vs
        self._pts = pts
        self._frames = container.decode(vs)
        self.info = info
        self.path = fp
        log.debug("opened %s: %s", fp, info)
        return info

    def read_next(self) -> Optional[np.ndarray]:
        if self._pending is not None:
            frame, self._pending = self._pending, None
        else:
            frame = self._decode_next()
        if frame is None:
            return None
        return frame.to_ndarray(format="rgb24")

    def seek_absolute(self, index: int) -> bool:
        """
        Seek to the keyframe at or before frame *index*, then decode forward
        to the frame with exactly that timestamp.  It is held back so the
        next read_next() returns it.  Fails rather than settle on a
        different frame.
        """
        if self._container is None or not 0 <= index < self.info.frame_count:
            return False
        if self._pts is None:
            return self._seek_by_count(index)

        target = self._pts[index]
        self._pending = None
        try:
            self._container.seek(target, stream=self._stream, backward=True)
        except av.error.FFmpegError as exc:
            log.warning("seek to frame %d failed: %s", index, exc)
            return False
        self._frames = self._container.decode(self._stream)

        while True:
            frame = self._decode_next()
            if frame is None:
                log.warning("frame %d (pts %d) never decoded", index, target)
                return False
            if frame.pts is None or frame.pts < target:
                continue
            if frame.pts > target:
                log.warning("seek to frame %d (pts %d) passed it at pts %d",
                            index, target, frame.pts)
                return False
            self._pending = frame
            return True

    def close(self):
        if self._container is not None:
            self._container.close()
        self._container = self._stream = None
        self._frames = self._pending = None
        self._pts = None
        self.info = None
        self.path = ""

    # ── internals ───────────────────────────────────────────────────────────
    def _seek_by_count(self, index: int) -> bool:
        """No timestamps: rewind and decode *index* frames."""
        self._pending = None
        try:
            self._container.seek(0)
        except av.error.FFmpegError as exc:
            log.warning("rewind failed: %s", exc)
            return False
        self._frames = self._container.decode(self._stream)
        for _ in range(index):
            if self._decode_next() is None:
                return False
        self._pending = self._decode_next()
        return self._pending is not None

    def _decode_next(self) -> Optional[av.VideoFrame]:
        if self._frames is None:
            return None
        try:
            return next(self._frames, None)
        except av.error.FFmpegError as exc:
            log.warning("decode error in %s: %s", self.path, exc)
            return None
