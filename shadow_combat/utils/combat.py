"""Combat state machine helpers.

``IDLE -> ACTIVE`` happens on request only; ``ACTIVE -> COOLDOWN`` and
``COOLDOWN -> IDLE`` happen when the armed timer finishes. At most one
transition is taken per evaluation, so an entity polled every tick spends
exactly ``active_duration_ticks`` in ``ACTIVE`` and ``cooldown_duration_ticks``
in ``COOLDOWN``.

Evaluating the same state twice with the same ``now`` yields the same result;
callers may poll freely within a tick.
"""

from shadow_combat.components import CombatState
from shadow_combat.config import AbilityConfig
from shadow_combat.state import State
from shadow_combat.types import AbilityKind, EntityID, Mode
from shadow_combat.utils.timer import is_timer_finished, start_timer

IDLE_STATE = CombatState()


def advance_combat_state(
    combat: CombatState, config: AbilityConfig, now: int
) -> CombatState:
    """Return the combat state after evaluating its timer at ``now``.

    Raises:
        ValueError: If ``combat.mode`` is not a known mode.
    """
    if combat.mode == Mode.IDLE:
        return combat
    if combat.mode not in (Mode.ACTIVE, Mode.COOLDOWN):
        raise ValueError(f"Invalid mode: {combat.mode!r}")

    assert combat.timer is not None
    if not is_timer_finished(combat.timer, now):
        return combat

    if combat.mode == Mode.ACTIVE:
        return CombatState(
            mode=Mode.COOLDOWN,
            timer=start_timer(now, config.cooldown_duration_ticks),
        )
    return IDLE_STATE


def activate_combat_state(
    combat: CombatState, config: AbilityConfig, now: int
) -> CombatState:
    """Enter ``ACTIVE`` if idle; any other mode is returned unchanged."""
    if combat.mode != Mode.IDLE:
        return combat
    return CombatState(
        mode=Mode.ACTIVE, timer=start_timer(now, config.active_duration_ticks)
    )


def get_mode(state: State, entity_id: EntityID) -> Mode:
    """Current mode; entities without an ability are always idle."""
    return state.combat_state.get(entity_id, IDLE_STATE).mode


def is_ability_engaged(state: State, entity_id: EntityID) -> bool:
    return get_mode(state, entity_id) == Mode.ACTIVE


def is_immune(state: State, entity_id: EntityID) -> bool:
    """True while an ``INVINCIBLE`` ability is engaged."""
    ability = state.ability.get(entity_id)
    if ability is None or ability.kind != AbilityKind.INVINCIBLE:
        return False
    return is_ability_engaged(state, entity_id)
