"""
overlays.py

Pygame overlay for the frame browser: position text drawn on the frame.
"""

from __future__ import annotations

import numpy as np
import pygame

import config

BG = (0, 0, 0, 180)

pygame.font.init()
_font: pygame.font.Font | None = None


def _overlay_font() -> pygame.font.Font:
    global _font
    if _font is None:
        _font = pygame.font.Font(None, config.OVERLAY_FONT_SIZE)
    return _font


# ── text ───────────────────────────────────────────────────────────────────
def position_text(position: int, total: int) -> str:
    return f"Frame: {position + 1}/{total}"


def progress_text(position: int, total: int) -> str:
    pct = (position + 1) / total * 100.0 if total else 0.0
    return f"{position_text(position, total)} ({pct:.1f}%)"


# ── main entry point ───────────────────────────────────────────────────────
def compose_frame(frame: np.ndarray, text: str) -> pygame.Surface:
    """
    Copy an RGB frame into a new surface and draw *text* in the top-left
    corner on a translucent badge.  The frame array is left untouched.
    """
    surf = pygame.image.frombuffer(np.ascontiguousarray(frame),
                                   frame.shape[1::-1], "RGB").copy()

    font = _overlay_font()
    txt  = font.render(text, True, config.OVERLAY_COLOUR)
    pad  = config.OVERLAY_FONT_SIZE // 6
    bg   = pygame.Surface((txt.get_width() + 2 * pad, txt.get_height() + pad),
                          pygame.SRCALPHA)
    bg.fill(BG)
    bg.blit(txt, (pad, pad // 2))
    surf.blit(bg, config.OVERLAY_POS)
    return surf
