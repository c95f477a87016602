"""
controls.py – play/pause state machine.

Nothing here touches the decoder, the window or the console.  ``transition``
turns (state, event) into the next state plus the effects the loop must run;
``settle`` folds the outcome of one effect back into the state and yields
the console line to print, if any.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

import config
from events import InputEvent


class PlayState(Enum):
    PAUSED  = auto()
    PLAYING = auto()
    STOPPED = auto()


class Effect(Enum):
    ADVANCE     = auto()
    RETREAT     = auto()
    SEEK_FIRST  = auto()
    SEEK_LAST   = auto()
    PROMPT_JUMP = auto()
    ANNOUNCE    = auto()     # print the new play/pause state


_NAVIGATION = {
    InputEvent.STEP_FORWARD:  Effect.ADVANCE,
    InputEvent.STEP_BACKWARD: Effect.RETREAT,
    InputEvent.JUMP_FIRST:    Effect.SEEK_FIRST,
    InputEvent.JUMP_LAST:     Effect.SEEK_LAST,
    InputEvent.JUMP_TO:       Effect.PROMPT_JUMP,
}


def transition(state: PlayState,
               event: Optional[InputEvent]) -> tuple[PlayState, list[Effect]]:
    """*event* is None when the wait timed out or no bound key was pressed."""
    if state is PlayState.STOPPED:
        return state, []

    if event is InputEvent.QUIT:
        return PlayState.STOPPED, []

    if event is InputEvent.TOGGLE_PLAY:
        nxt = PlayState.PAUSED if state is PlayState.PLAYING else PlayState.PLAYING
        return nxt, [Effect.ANNOUNCE]

    if event in _NAVIGATION:
        return state, [_NAVIGATION[event]]

    # idle tick: playing auto-advances, paused does nothing
    if state is PlayState.PLAYING:
        return state, [Effect.ADVANCE]
    return state, []


def settle(state: PlayState, effect: Effect,
           ok: bool) -> tuple[PlayState, Optional[str]]:
    """Apply the result of running *effect*; returns (state, message)."""
    if effect is Effect.ANNOUNCE:
        return state, "▶ Playing" if state is PlayState.PLAYING else "⏸ Paused"

    if effect is Effect.ADVANCE:
        if ok:
            return state, None
        if state is PlayState.PLAYING:
            state = PlayState.PAUSED
        return state, "End of video reached"

    if effect is Effect.RETREAT:
        return state, None if ok else "Beginning of video reached"

    if effect is Effect.SEEK_FIRST:
        return state, "Jumped to first frame" if ok else "Cannot read first frame"

    if effect is Effect.SEEK_LAST:
        return state, "Jumped to last frame" if ok else "Cannot read last frame"

    # PROMPT_JUMP reports its own outcome, it knows the entered number
    return state, None


def poll_interval_ms(state: PlayState, fps: float) -> Optional[int]:
    """Key-wait timeout: None (block) while paused, one frame while playing."""
    if state is not PlayState.PLAYING:
        return None
    if config.PLAY_POLL_MS:
        return int(config.PLAY_POLL_MS)
    rate = fps if fps and fps > 0 else config.DEFAULT_FPS
    return max(1, int(1000 / rate))
