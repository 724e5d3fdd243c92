"""Damage resolution.

Any entity with a ``Damage`` component can attack any entity with a
``Health`` component; neither side's concrete kind matters. Immunity is the
target's own business (see :func:`shadow_combat.utils.health.take_damage`),
the resolver only reads the attacker's damage points, hands them over and
reports the outcome.
"""

import logging
from dataclasses import replace
from typing import Iterable, Tuple

from shadow_combat.events import DamageEvent
from shadow_combat.state import State
from shadow_combat.systems.combat import request_ability
from shadow_combat.types import AbilityKind, EntityID
from shadow_combat.utils.health import take_damage

logger = logging.getLogger(__name__)


def resolve_attack(state: State, attacker_id: EntityID, target_id: EntityID) -> State:
    """Inflict the attacker's damage points on the target.

    On success a :class:`DamageEvent` is appended to ``state.damage_events``
    and passed to ``state.damage_sink``. Targets with an ``INVINCIBLE``
    ability request it right after being hit.

    Raises:
        ValueError: If the attacker has no damage or the target no health.
    """
    if attacker_id not in state.damage:
        raise ValueError(f"Entity {attacker_id} cannot attack (no damage)")

    amount = state.damage[attacker_id].amount
    state, applied = take_damage(state, target_id, amount)
    if not applied:
        logger.debug(
            "%s is immune to %s", state.name_of(target_id), state.name_of(attacker_id)
        )
        return state

    health = state.health[target_id]
    event = DamageEvent(
        tick=state.now,
        attacker=state.name_of(attacker_id),
        target=state.name_of(target_id),
        amount=amount,
        health=health.health,
        max_health=health.max_health,
    )
    state = replace(state, damage_events=state.damage_events.append(event))
    if state.damage_sink is not None:
        state.damage_sink(event)

    ability = state.ability.get(target_id)
    if ability is not None and ability.kind == AbilityKind.INVINCIBLE:
        state = request_ability(state, target_id)
    return state


def resolve_attacks(
    state: State, pairs: Iterable[Tuple[EntityID, EntityID]]
) -> State:
    for attacker_id, target_id in pairs:
        state = resolve_attack(state, attacker_id, target_id)
    return state


def contact_system(state: State) -> State:
    """Resolve every attacker/target pair reported by ``state.contact_fn``."""
    return resolve_attacks(state, state.contact_fn(state))


def attack(state: State, attacker_id: EntityID) -> State:
    """Start an attack.

    Entities with an ability engage it (e.g. the player's swing); hazards
    without one just announce themselves.
    """
    if attacker_id not in state.damage:
        raise ValueError(f"Entity {attacker_id} cannot attack (no damage)")
    if attacker_id in state.ability:
        return request_ability(state, attacker_id)
    logger.info("%s is dealing damage", state.name_of(attacker_id))
    return state
