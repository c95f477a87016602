"""
main.py – command-line entry point.

Takes the video path from argv or asks for it, applies CLI overrides to
config, then hands over to PlaybackController.  Returns -1 if the video
cannot be loaded.
"""
import argparse
import logging
import sys

import config
from console import Console
from display import Display
from playback import PlaybackController
from video_source import VideoSource

log = logging.getLogger(__name__)


def _positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Step through a video frame by frame")
    ap.add_argument("path", nargs="?", help="video file (prompted for if omitted)")
    ap.add_argument("--fullscreen", action="store_true", help="open a fullscreen window")
    ap.add_argument("--poll-ms", type=_positive_int, default=None,
                    help="key-wait interval while playing (default: one frame)")
    ap.add_argument("--log-level", default=config.LOG_LEVEL,
                    help="logging level (default: %(default)s)")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.fullscreen:
        config.FULLSCREEN = True
    if args.poll_ms is not None:
        config.PLAY_POLL_MS = args.poll_ms
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format=config.LOG_FORMAT)

    console = Console()
    console.write("=== Video Player ===")
    console.write("Built with PyAV + Pygame")
    console.write()

    path = args.path or console.prompt("Enter video file path: ") or ""

    player = PlaybackController(VideoSource(), Display(), console)
    if not player.load(path):
        log.error("failed to load %s", path)
        console.write(f"Failed to load video: {path}")
        return -1

    try:
        player.run_event_loop()
    finally:
        player.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
