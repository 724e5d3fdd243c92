"""Convenience factory functions for authoring ``EntitySpec`` objects.

Each helper returns a preconfigured :class:`EntitySpec` for one of the
game's combatants. These are mutable blueprints converted into immutable ECS
entities by ``levels.convert.to_state``.
"""

from __future__ import annotations

from shadow_combat.components.properties import (
    Ability,
    Agent,
    Damage,
    Health,
)
from shadow_combat.config import (
    DEFAULT_ABILITY_CONFIG,
    ENEMY_DAMAGE_POINTS,
    ENEMY_MAX_HEALTH,
    ENEMY_NAME,
    PLAYER_DAMAGE_POINTS,
    PLAYER_MAX_HEALTH,
    PLAYER_NAME,
    SINKHOLE_DAMAGE_POINTS,
    SINKHOLE_NAME,
    AbilityConfig,
)
from shadow_combat.types import AbilityKind
from .entity_spec import EntitySpec


def create_player(
    health: int = PLAYER_MAX_HEALTH,
    damage_points: int = PLAYER_DAMAGE_POINTS,
    config: AbilityConfig = DEFAULT_ABILITY_CONFIG,
) -> EntitySpec:
    """Player-controlled attacker and target whose ability is an attack."""
    return EntitySpec(
        name=PLAYER_NAME,
        agent=Agent(),
        health=Health(health=health, max_health=health),
        damage=Damage(amount=damage_points),
        ability=Ability(kind=AbilityKind.ATTACK, config=config),
    )


def create_sinkhole(damage_points: int = SINKHOLE_DAMAGE_POINTS) -> EntitySpec:
    """Stationary hazard: attacks but cannot be targeted."""
    return EntitySpec(name=SINKHOLE_NAME, damage=Damage(amount=damage_points))


def create_enemy(
    name: str = ENEMY_NAME,
    health: int = ENEMY_MAX_HEALTH,
    damage_points: int = ENEMY_DAMAGE_POINTS,
    config: AbilityConfig = DEFAULT_ABILITY_CONFIG,
) -> EntitySpec:
    """Enemy that turns invincible for a while after each hit it takes."""
    return EntitySpec(
        name=name,
        health=Health(health=health, max_health=health),
        damage=Damage(amount=damage_points),
        ability=Ability(kind=AbilityKind.INVINCIBLE, config=config),
    )
