"""shadow_combat.components
=================================

Aggregate import surface for all ECS component dataclasses used by the engine.

*Properties* describe capabilities and persistent status of an entity
(health, damage, ability, combat mode); *effects* hold time-bound runtime
data such as ability timers.

    from shadow_combat.components import Health, Damage, CombatState

Attacker and target roles are capabilities, not classes: an entity with a
:class:`Damage` component can attack, one with a :class:`Health` component
can be targeted, regardless of what else it is.
"""

# Effects
from .effects import AbilityTimer

# Properties
from .properties import Ability
from .properties import Agent
from .properties import CombatState
from .properties import Damage
from .properties import Dead
from .properties import Health

__all__ = [
    # Effects
    "AbilityTimer",
    # Properties
    "Ability",
    "Agent",
    "CombatState",
    "Damage",
    "Dead",
    "Health",
]
