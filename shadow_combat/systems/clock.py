"""Clock system.

Advances the frame clock by exactly one tick and clears the previous tick's
damage events. Called once per :func:`shadow_combat.step.step`; nothing else
writes ``State.clock``.
"""

from dataclasses import replace
from pyrsistent import pvector

from shadow_combat.state import State


def clock_system(state: State) -> State:
    return replace(state, clock=state.clock.advance(), damage_events=pvector())
