"""Action types.

Actions are the requests collaborators feed into :func:`shadow_combat.step.step`:

* :class:`AbilityAction`: input handling or AI asks an entity to engage its
  ability (the player's attack key, an enemy's trigger).
* :class:`AttackAction`: collision detection reports an attacker touching a
  target.
* :class:`WaitAction`: nothing to do this tick (timers still advance).

:class:`GymAction` is the stable integer mapping used by the Gymnasium
environment's ``Discrete`` action space.
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Union

from shadow_combat.types import EntityID


@dataclass(frozen=True)
class AbilityAction:
    entity_id: EntityID


@dataclass(frozen=True)
class AttackAction:
    attacker_id: EntityID
    target_id: EntityID


@dataclass(frozen=True)
class WaitAction:
    pass


Action = Union[AbilityAction, AttackAction, WaitAction]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    WAIT = 0  # start at 0 for explicitness
    ATTACK = auto()
