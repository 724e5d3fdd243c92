"""Health and damage helpers."""

from dataclasses import replace
from typing import Tuple

from shadow_combat.components import Dead, Health
from shadow_combat.state import State
from shadow_combat.types import EntityID
from shadow_combat.utils.combat import is_immune


def set_health(health: Health, value: int) -> Health:
    """Return ``health`` with its current value clamped into ``[0, max_health]``."""
    clamped = min(max(value, 0), health.max_health)
    return Health(health=clamped, max_health=health.max_health)


def adjust_health(health: Health, delta: int) -> Health:
    return set_health(health, health.health + delta)


def health_percentage(health: Health) -> int:
    """Current health as a whole percentage of the maximum.

    Exact halves round up (away from zero, as health is never negative):
    1/8 of max is 12.5% and reports 13. Integer arithmetic keeps this exact.
    """
    return (200 * health.health + health.max_health) // (2 * health.max_health)


def is_dead(health: Health) -> bool:
    return health.health <= 0


def take_damage(state: State, target_id: EntityID, amount: int) -> Tuple[State, bool]:
    """Apply ``amount`` to the target's health unless it is immune.

    The full amount goes through one clamped update; the target is marked
    ``Dead`` when health reaches zero.

    Returns:
        Tuple[State, bool]: The new state and whether damage was applied.

    Raises:
        ValueError: If the target has no health or the amount is negative.
    """
    if target_id not in state.health:
        raise ValueError(f"Entity {target_id} cannot be targeted (no health)")
    if amount < 0:
        raise ValueError(f"Damage amount cannot be negative: {amount}")
    if is_immune(state, target_id):
        return state, False

    health = adjust_health(state.health[target_id], -amount)
    dead = state.dead
    if is_dead(health):
        dead = dead.set(target_id, Dead())
    return replace(state, health=state.health.set(target_id, health), dead=dead), True


def _health_of(state: State, entity_id: EntityID) -> Health:
    if entity_id not in state.health:
        raise ValueError(f"Entity {entity_id} has no health")
    return state.health[entity_id]


def get_health(state: State, entity_id: EntityID) -> int:
    return _health_of(state, entity_id).health


def get_max_health(state: State, entity_id: EntityID) -> int:
    return _health_of(state, entity_id).max_health


def get_health_percentage(state: State, entity_id: EntityID) -> int:
    return health_percentage(_health_of(state, entity_id))


def is_entity_dead(state: State, entity_id: EntityID) -> bool:
    """True if the entity has been marked dead or its health is zero."""
    return entity_id in state.dead or is_dead(_health_of(state, entity_id))
