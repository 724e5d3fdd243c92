"""Property component aggregates.

This module re-exports *property* components: attributes that define what an
entity can do or what it currently is (e.g. :class:`Health` for targets,
:class:`Damage` for attackers, :class:`CombatState` for the ability state
machine). Systems read these dataclasses to resolve attacks and advance
timed abilities.

All properties are immutable dataclasses; creating a new instance is how
state changes are expressed between ticks.
"""

from .ability import Ability
from .agent import Agent
from .combat_state import CombatState
from .damage import Damage
from .dead import Dead
from .health import Health

__all__ = [
    "Ability",
    "Agent",
    "CombatState",
    "Damage",
    "Dead",
    "Health",
]
