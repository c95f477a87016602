# config.py
"""
Configuration settings for the frame browser.
"""

# ── Basic Application Settings ──────────────────────────────────────────────

WINDOW_TITLE = "Simple Video Player"

# Display settings
FULLSCREEN = False
WINDOWED_SIZE = None          # None → size the window to the video resolution

# ── Playback timing ────────────────────────────────────────────────────────

# Used when the stream carries no usable frame rate
DEFAULT_FPS = 30.0

# Poll interval (ms) while playing; None derives it from the stream rate
PLAY_POLL_MS = None

# ── Overlay ────────────────────────────────────────────────────────────────

OVERLAY_FONT_SIZE = 36
OVERLAY_COLOUR    = (0, 255, 0)
OVERLAY_POS       = (10, 10)

# ── Logging ────────────────────────────────────────────────────────────────

LOG_LEVEL  = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
