"""Common type aliases and enumerations.

``ContactFn`` and ``DamageSink`` are the extension points stored on the
``State`` to plug in the collision collaborator and the damage event
consumer respectively.
"""

from enum import StrEnum, auto
from typing import Callable, Sequence, Tuple, TYPE_CHECKING


# Forward declaration for ContactFn typing to avoid circular imports:
if TYPE_CHECKING:
    from shadow_combat.state import State
    from shadow_combat.events import DamageEvent

EntityID = int

ContactFn = Callable[["State"], Sequence[Tuple["EntityID", "EntityID"]]]
DamageSink = Callable[["DamageEvent"], None]


class Mode(StrEnum):
    """Combat mode of an entity (see :mod:`shadow_combat.utils.combat`)."""

    IDLE = auto()
    ACTIVE = auto()
    COOLDOWN = auto()


class AbilityKind(StrEnum):
    """What an engaged ability means for the entity owning it."""

    ATTACK = auto()
    INVINCIBLE = auto()
