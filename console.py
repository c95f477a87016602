"""
console.py – terminal side of the browser.

Regular lines, one overwritten status line, and a blocking prompt.  A line
written after a status line starts on a fresh row so the status is kept.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


class Console:
    def __init__(self, out: Optional[TextIO] = None, inp: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.inp = inp or sys.stdin
        self._status_open = False
        self._status_width = 0

    def _break_status(self):
        if self._status_open:
            self.out.write("\n")
            self._status_open = False

    def write(self, text: str = "") -> None:
        self._break_status()
        self.out.write(text + "\n")
        self.out.flush()

    def status(self, text: str) -> None:
        # pad so a shorter status fully covers the previous one
        self.out.write("\r" + text.ljust(self._status_width))
        self._status_width = len(text)
        self.out.flush()
        self._status_open = True

    def prompt(self, text: str) -> Optional[str]:
        """Print *text* and block for one line; None on end of input."""
        self._break_status()
        self.out.write(text)
        self.out.flush()
        line = self.inp.readline()
        if not line:
            return None
        return line.strip()
