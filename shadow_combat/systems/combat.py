"""Combat state machine system.

Drives every ability owner through ``IDLE -> ACTIVE -> COOLDOWN -> IDLE``:

* :func:`request_ability` is the only way into ``ACTIVE``. Requests made
  while the entity is not idle (or is dead) are ignored.
* :func:`combat_state_system` evaluates each entity's timer once per tick
  against ``state.now`` and takes the automatic transitions.

State is entity-local, so evaluation order across entities does not matter.
"""

import logging
from dataclasses import replace

from shadow_combat.components import CombatState
from shadow_combat.state import State
from shadow_combat.types import EntityID
from shadow_combat.utils.combat import (
    IDLE_STATE,
    activate_combat_state,
    advance_combat_state,
)
from shadow_combat.utils.timer import remaining_ticks

logger = logging.getLogger(__name__)


def evaluate_entity(state: State, entity_id: EntityID) -> State:
    """Bring one entity's combat state up to date with the current tick."""
    combat = state.combat_state.get(entity_id)
    if combat is None:
        return state
    if entity_id not in state.ability:
        raise ValueError(f"Entity {entity_id} has a combat state but no ability")
    ability = state.ability[entity_id]
    updated = advance_combat_state(combat, ability.config, state.now)
    if updated == combat:
        return state
    logger.debug(
        "%s: %s -> %s at tick %d",
        state.name_of(entity_id),
        combat.mode,
        updated.mode,
        state.now,
    )
    return replace(state, combat_state=state.combat_state.set(entity_id, updated))


def combat_state_system(state: State) -> State:
    """Evaluate every combat state exactly once for the current tick."""
    for entity_id in list(state.combat_state.keys()):
        state = evaluate_entity(state, entity_id)
    return state


def request_ability(state: State, entity_id: EntityID) -> State:
    """Engage the entity's ability if it is idle.

    The entity is first evaluated at the current tick, so a cooldown that ends
    this tick does not block the request.

    Raises:
        ValueError: If the entity does not exist or owns no ability.
    """
    if entity_id not in state.entity:
        raise ValueError(f"Unknown entity {entity_id}")
    if entity_id not in state.ability:
        raise ValueError(f"Entity {entity_id} has no ability")

    if entity_id in state.dead:
        return state

    state = evaluate_entity(state, entity_id)
    combat: CombatState = state.combat_state.get(entity_id, IDLE_STATE)
    activated = activate_combat_state(combat, state.ability[entity_id].config, state.now)
    if activated == combat:
        assert combat.timer is not None
        logger.debug(
            "%s: ability request rejected while %s (%d ticks left)",
            state.name_of(entity_id),
            combat.mode,
            remaining_ticks(combat.timer, state.now),
        )
        return state

    logger.debug("%s: ability engaged at tick %d", state.name_of(entity_id), state.now)
    return replace(state, combat_state=state.combat_state.set(entity_id, activated))
