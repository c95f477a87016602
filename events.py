#!/usr/bin/env python3
"""
events.py  – keyboard → InputEvent

• Names every input the browser understands (no raw key codes past here).
• Translates one Pygame event into an InputEvent, or None when unbound.
"""

from __future__ import annotations
from enum import Enum

from pygame.locals import *


class InputEvent(Enum):
    QUIT          = "quit"
    TOGGLE_PLAY   = "toggle_play"
    STEP_FORWARD  = "step_forward"
    STEP_BACKWARD = "step_backward"
    JUMP_FIRST    = "jump_first"
    JUMP_LAST     = "jump_last"
    JUMP_TO       = "jump_to"


# pygame reports the same key code with or without shift
KEY_BINDINGS: dict[int, InputEvent] = {
    K_q:      InputEvent.QUIT,
    K_ESCAPE: InputEvent.QUIT,
    K_SPACE:  InputEvent.TOGGLE_PLAY,
    K_d:      InputEvent.STEP_FORWARD,
    K_RIGHT:  InputEvent.STEP_FORWARD,
    K_a:      InputEvent.STEP_BACKWARD,
    K_LEFT:   InputEvent.STEP_BACKWARD,
    K_h:      InputEvent.JUMP_FIRST,
    K_HOME:   InputEvent.JUMP_FIRST,
    K_e:      InputEvent.JUMP_LAST,
    K_END:    InputEvent.JUMP_LAST,
    K_g:      InputEvent.JUMP_TO,
}

LEGEND = (
    "=== Simple Video Player Controls ===",
    "SPACE    : Play/Pause",
    "→ or D   : Next frame",
    "← or A   : Previous frame",
    "HOME / H : Go to first frame",
    "END / E  : Go to last frame",
    "G        : Go to specific frame",
    "ESC or Q : Quit",
    "===================================",
)


def translate(event) -> InputEvent | None:
    """Map one Pygame event to an InputEvent; window close counts as quit."""
    if event.type == QUIT:
        return InputEvent.QUIT
    if event.type == KEYDOWN:
        return KEY_BINDINGS.get(event.key)
    return None
