"""Ability component.

Describes *which* timed ability an entity owns and how long its active and
cooldown windows last. The runtime progress lives in
:class:`shadow_combat.components.properties.CombatState`.
"""

from dataclasses import dataclass

from shadow_combat.config import AbilityConfig, DEFAULT_ABILITY_CONFIG
from shadow_combat.types import AbilityKind


@dataclass(frozen=True)
class Ability:
    """Timed ability descriptor.

    Attributes:
        kind: ``ATTACK`` (player swing) or ``INVINCIBLE`` (damage immunity).
        config: Active / cooldown durations in ticks.
    """

    kind: AbilityKind
    config: AbilityConfig = DEFAULT_ABILITY_CONFIG
