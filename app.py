#!/usr/bin/env python3
"""
app.py – interactive session for one loaded video

Each pass: draw the held frame, rewrite the status line, wait for a key
(forever when paused, one frame interval when playing), then run whatever
the state machine in controls.py asks for.
"""
from __future__ import annotations

import logging

from controls import Effect, PlayState, poll_interval_ms, settle, transition
from events import LEGEND

log = logging.getLogger(__name__)

_RUN = {
    Effect.ADVANCE:     lambda c: c.advance(),
    Effect.RETREAT:     lambda c: c.retreat(),
    Effect.SEEK_FIRST:  lambda c: c.seek(0),
    Effect.SEEK_LAST:   lambda c: c.seek(c.total_frames - 1),
    Effect.PROMPT_JUMP: lambda c: c.prompt_jump(),
    Effect.ANNOUNCE:    lambda c: True,
}


def run_event_loop(controller) -> PlayState:
    """Drive *controller* until quit; returns the terminal state."""
    console, display = controller.console, controller.display

    if controller.frame is None:
        console.write("No video loaded!")
        return PlayState.STOPPED

    console.write()
    for line in LEGEND:
        console.write(line)
    console.write()

    state = PlayState.PAUSED
    try:
        while state is not PlayState.STOPPED:
            controller.render_current()
            controller.report_progress()

            event = display.wait_for_key(poll_interval_ms(state, controller.fps))
            state, effects = transition(state, event)
            if event is not None:
                log.debug("%s → %s %s", event.value, state.name,
                          [e.name for e in effects])

            for effect in effects:
                ok = _RUN[effect](controller)
                state, msg = settle(state, effect, ok)
                if msg:
                    console.write(msg)
    finally:
        display.close_all()

    console.write("Playback stopped.")
    return state
