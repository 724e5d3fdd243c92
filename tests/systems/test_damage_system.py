from dataclasses import replace
from typing import List

import pytest

from shadow_combat.components import AbilityTimer, CombatState, Damage
from shadow_combat.events import DamageEvent
from shadow_combat.systems.combat import request_ability
from shadow_combat.systems.damage import attack, contact_system, resolve_attack
from shadow_combat.types import AbilityKind, Mode
from shadow_combat.utils.combat import get_mode, is_immune
from shadow_combat.utils.health import (
    get_health,
    get_health_percentage,
    get_max_health,
    is_entity_dead,
)
from tests.test_utils import HAZARD_ID, PLAYER_ID, TARGET_ID, make_combat_state

ACTIVE = CombatState(mode=Mode.ACTIVE, timer=AbilityTimer(start_tick=0, duration_ticks=60))


def test_player_hits_target() -> None:
    state = make_combat_state(player_damage=20, target_kind=AbilityKind.ATTACK)
    new_state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(new_state, TARGET_ID) == 80
    assert get_max_health(new_state, TARGET_ID) == 100
    assert get_health_percentage(new_state, TARGET_ID) == 80
    assert not is_entity_dead(new_state, TARGET_ID)


def test_invincible_target_is_immune_while_active() -> None:
    state = make_combat_state(target_combat=ACTIVE)
    assert is_immune(state, TARGET_ID)
    new_state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(new_state, TARGET_ID) == 100
    assert len(new_state.damage_events) == 0


def test_attacking_target_is_not_immune() -> None:
    state = make_combat_state(target_kind=AbilityKind.ATTACK, target_combat=ACTIVE)
    assert not is_immune(state, TARGET_ID)
    new_state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(new_state, TARGET_ID) == 80


def test_invincible_target_engages_ability_after_hit() -> None:
    state = make_combat_state(tick=3)
    state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(state, TARGET_ID) == 80
    assert get_mode(state, TARGET_ID) == Mode.ACTIVE
    # Second hit in the same tick is absorbed
    state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(state, TARGET_ID) == 80


def test_invincible_target_on_cooldown_takes_damage() -> None:
    cooldown = CombatState(
        mode=Mode.COOLDOWN, timer=AbilityTimer(start_tick=60, duration_ticks=120)
    )
    state = make_combat_state(tick=70, target_combat=cooldown)
    state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(state, TARGET_ID) == 80
    assert state.combat_state[TARGET_ID] == cooldown


def test_overkill_clamps_to_zero_and_marks_dead() -> None:
    state = make_combat_state(target_hp=10, player_damage=20)
    state = resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert get_health(state, TARGET_ID) == 0
    assert is_entity_dead(state, TARGET_ID)
    assert TARGET_ID in state.dead
    # Dead targets do not engage abilities
    assert get_mode(state, TARGET_ID) == Mode.IDLE


def test_dead_target_stays_at_zero() -> None:
    state = make_combat_state(target_hp=10, target_kind=AbilityKind.ATTACK)
    for _ in range(3):
        state = resolve_attack(state, PLAYER_ID, TARGET_ID)
        assert get_health(state, TARGET_ID) == 0


def test_hazard_damages_player() -> None:
    state = make_combat_state(hazard_damage=30)
    state = resolve_attack(state, HAZARD_ID, PLAYER_ID)
    assert get_health(state, PLAYER_ID) == 70


def test_damage_event_recorded_and_sent_to_sink() -> None:
    received: List[DamageEvent] = []
    state = make_combat_state(tick=9, damage_sink=received.append)
    state = resolve_attack(state, HAZARD_ID, PLAYER_ID)
    assert received == list(state.damage_events)
    event = received[0]
    assert event.as_tuple() == ("Sinkhole", "Fae", 30)
    assert event.tick == 9
    assert event.message == (
        "Sinkhole inflicts 30 damage points on Fae. Fae's current health: 70/100"
    )


def test_immune_hit_not_sent_to_sink() -> None:
    received: List[DamageEvent] = []
    state = make_combat_state(target_combat=ACTIVE, damage_sink=received.append)
    resolve_attack(state, PLAYER_ID, TARGET_ID)
    assert received == []


def test_zero_damage_attacker() -> None:
    state = make_combat_state()
    state = replace(state, damage=state.damage.set(HAZARD_ID, Damage(amount=0)))
    state = resolve_attack(state, HAZARD_ID, PLAYER_ID)
    assert get_health(state, PLAYER_ID) == 100
    assert state.damage_events[0].amount == 0


def test_non_attacker_rejected() -> None:
    state = make_combat_state()
    state = replace(state, damage=state.damage.remove(PLAYER_ID))
    with pytest.raises(ValueError):
        resolve_attack(state, PLAYER_ID, TARGET_ID)


def test_non_targetable_rejected() -> None:
    with pytest.raises(ValueError):
        resolve_attack(make_combat_state(), PLAYER_ID, HAZARD_ID)


def test_negative_damage_rejected() -> None:
    with pytest.raises(ValueError):
        Damage(amount=-1)


def test_contact_system_uses_contact_fn() -> None:
    state = make_combat_state(
        target_kind=AbilityKind.ATTACK,
        contact_fn=lambda s: [(PLAYER_ID, TARGET_ID), (HAZARD_ID, PLAYER_ID)],
    )
    state = contact_system(state)
    assert get_health(state, TARGET_ID) == 80
    assert get_health(state, PLAYER_ID) == 70
    assert [e.as_tuple() for e in state.damage_events] == [
        ("Fae", "Demon", 20),
        ("Sinkhole", "Fae", 30),
    ]


def test_attack_engages_ability() -> None:
    state = attack(make_combat_state(), PLAYER_ID)
    assert get_mode(state, PLAYER_ID) == Mode.ACTIVE


def test_attack_by_hazard_only_logs(caplog: pytest.LogCaptureFixture) -> None:
    state = make_combat_state()
    with caplog.at_level("INFO", logger="shadow_combat.systems.damage"):
        assert attack(state, HAZARD_ID) == state
    assert "Sinkhole is dealing damage" in caplog.text


def test_attack_after_request_is_rejected_silently() -> None:
    state = request_ability(make_combat_state(), PLAYER_ID)
    assert attack(state, PLAYER_ID) == state
