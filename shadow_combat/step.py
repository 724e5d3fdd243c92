"""State reducer and tick orchestration.

This module wires together all systems in the correct order to implement a
single *tick* transition. The exported :func:`step` is the only public entry
point for advancing the simulation and is pure: it returns a *new*
:class:`shadow_combat.state.State`.

Ordering (one tick):

1. ``clock_system`` advances the frame clock and clears last tick's events.
2. Ability requests (``AbilityAction``) are applied against the new tick.
3. ``combat_state_system`` evaluates every entity's state machine once.
4. Attacks are resolved: explicit ``AttackAction`` pairs first, then the
    pairs reported by ``state.contact_fn``.
"""

from typing import Iterable, List, Tuple

from shadow_combat.actions import AbilityAction, Action, AttackAction, WaitAction
from shadow_combat.state import State
from shadow_combat.systems.clock import clock_system
from shadow_combat.systems.combat import combat_state_system, request_ability
from shadow_combat.systems.damage import contact_system, resolve_attacks
from shadow_combat.types import EntityID


def step(state: State, actions: Iterable[Action] = ()) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.
        actions (Iterable[Action]): Requests collected since the last tick.

    Returns:
        State: Next state snapshot, one tick later.

    Raises:
        ValueError: If an action is not recognized or references an invalid entity.
    """
    actions = list(actions)
    for action in actions:
        if not isinstance(action, (AbilityAction, AttackAction, WaitAction)):
            raise ValueError(f"Action is not valid: {action!r}")

    state = clock_system(state)

    for action in actions:
        if isinstance(action, AbilityAction):
            state = request_ability(state, action.entity_id)

    state = combat_state_system(state)

    attack_pairs: List[Tuple[EntityID, EntityID]] = [
        (action.attacker_id, action.target_id)
        for action in actions
        if isinstance(action, AttackAction)
    ]
    state = resolve_attacks(state, attack_pairs)
    state = contact_system(state)
    return state
