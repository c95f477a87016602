"""
display.py – the Pygame window.

Opens lazily on the first frame (sized to the video unless
config.WINDOWED_SIZE is set), shows composed frame surfaces and blocks for
keys.  This is the only place the browser waits.
"""

from __future__ import annotations

from typing import Optional

import pygame
from pygame.locals import *

import config
from events import InputEvent, translate
from renderer import render_frame

_FALLBACK_SIZE = (640, 480)


class Display:
    def __init__(self, title: str | None = None):
        self.title = title or config.WINDOW_TITLE
        self.screen: Optional[pygame.Surface] = None

    # ── window ─────────────────────────────────────────────────────────────
    def _open(self, size: tuple[int, int]):
        pygame.init()
        pygame.display.set_caption(self.title)
        self.screen = pygame.display.set_mode(
            (0, 0) if config.FULLSCREEN else (config.WINDOWED_SIZE or size),
            pygame.FULLSCREEN if config.FULLSCREEN else 0,
        )

    def show_frame(self, surf: pygame.Surface, sar: float = 1.0) -> None:
        if self.screen is None:
            w, h = surf.get_size()
            self._open((int(w * sar), h))
        render_frame(self.screen, surf, sar)
        pygame.display.flip()

    # ── input ──────────────────────────────────────────────────────────────
    def wait_for_key(self, timeout_ms: Optional[int] = None) -> Optional[InputEvent]:
        """
        Block until a bound key arrives.  None waits forever; otherwise
        returns None once *timeout_ms* passes without one.
        """
        if self.screen is None:
            self._open(config.WINDOWED_SIZE or _FALLBACK_SIZE)

        if timeout_ms is None:
            while True:
                act = translate(pygame.event.wait())
                if act:
                    return act

        deadline = pygame.time.get_ticks() + timeout_ms
        while True:
            left = deadline - pygame.time.get_ticks()
            if left <= 0:
                return None
            e = pygame.event.wait(left)
            if e.type == NOEVENT:
                return None
            act = translate(e)
            if act:
                return act

    def close_all(self) -> None:
        if self.screen is not None:
            pygame.display.quit()
        self.screen = None
