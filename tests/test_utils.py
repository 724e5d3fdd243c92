from typing import Optional

from pyrsistent import pmap

from shadow_combat.components import (
    Ability,
    Agent,
    CombatState,
    Damage,
    Health,
)
from shadow_combat.clock import FrameClock
from shadow_combat.config import AbilityConfig
from shadow_combat.entity import Entity
from shadow_combat.state import State, no_contact_fn
from shadow_combat.types import AbilityKind, ContactFn, DamageSink, EntityID


PLAYER_ID: EntityID = 1
TARGET_ID: EntityID = 2
HAZARD_ID: EntityID = 3


def make_combat_state(
    *,
    player_hp: int = 100,
    player_max_hp: int = 100,
    player_damage: int = 20,
    target_hp: int = 100,
    target_max_hp: int = 100,
    target_damage: int = 10,
    target_kind: AbilityKind = AbilityKind.INVINCIBLE,
    target_combat: Optional[CombatState] = None,
    hazard_damage: int = 30,
    config: AbilityConfig = AbilityConfig(),
    tick: int = 0,
    contact_fn: ContactFn = no_contact_fn,
    damage_sink: Optional[DamageSink] = None,
) -> State:
    """Player (ATTACK ability), one target (configurable ability) and a hazard."""
    return State(
        contact_fn=contact_fn,
        damage_sink=damage_sink,
        entity=pmap(
            {
                PLAYER_ID: Entity(name="Fae"),
                TARGET_ID: Entity(name="Demon"),
                HAZARD_ID: Entity(name="Sinkhole"),
            }
        ),
        agent=pmap({PLAYER_ID: Agent()}),
        health=pmap(
            {
                PLAYER_ID: Health(health=player_hp, max_health=player_max_hp),
                TARGET_ID: Health(health=target_hp, max_health=target_max_hp),
            }
        ),
        damage=pmap(
            {
                PLAYER_ID: Damage(amount=player_damage),
                TARGET_ID: Damage(amount=target_damage),
                HAZARD_ID: Damage(amount=hazard_damage),
            }
        ),
        ability=pmap(
            {
                PLAYER_ID: Ability(kind=AbilityKind.ATTACK, config=config),
                TARGET_ID: Ability(kind=target_kind, config=config),
            }
        ),
        combat_state=pmap(
            {
                PLAYER_ID: CombatState(),
                TARGET_ID: target_combat if target_combat is not None else CombatState(),
            }
        ),
        clock=FrameClock(tick=tick),
    )
