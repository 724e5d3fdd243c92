"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole combat simulation at a single tick. All systems are pure functions that
take a previous ``State`` (plus the current tick, read from ``state.clock``)
and return a *new* ``State``; no mutation happens in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component. Having ``damage`` makes an entity an attacker, having
    ``health`` makes it a target.
* ``clock`` is the single frame counter. Only
    :func:`shadow_combat.systems.clock.clock_system` advances it.
* ``damage_events`` only holds the events resolved during the latest tick.

See :mod:`shadow_combat.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Optional
from pyrsistent import PMap, PVector, pmap, pvector

from shadow_combat.clock import FrameClock
from shadow_combat.entity import Entity
from shadow_combat.events import DamageEvent
from shadow_combat.components.properties import (
    Ability,
    Agent,
    CombatState,
    Damage,
    Dead,
    Health,
)
from shadow_combat.types import ContactFn, DamageSink, EntityID


def no_contact_fn(state: "State") -> tuple[()]:
    """Default collision collaborator: nothing is ever in contact."""
    return ()


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        contact_fn (ContactFn): Returns ``(attacker_id, target_id)`` pairs judged
            to be in contact this tick.
        damage_sink (DamageSink | None): Optional consumer of damage events.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        ability (PMap[EntityID, Ability]): Timed ability descriptors.
        agent (PMap[EntityID, Agent]): Player-controlled entity marker.
        combat_state (PMap[EntityID, CombatState]): Mode + timer per ability owner.
        damage (PMap[EntityID, Damage]): Attacker capability.
        dead (PMap[EntityID, Dead]): Entities whose health reached zero.
        health (PMap[EntityID, Health]): Target capability / health pools.
        clock (FrameClock): Process-wide frame counter.
        damage_events (PVector[DamageEvent]): Events resolved this tick.
    """

    contact_fn: "ContactFn" = no_contact_fn
    damage_sink: Optional["DamageSink"] = None

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    ability: PMap[EntityID, Ability] = pmap()
    agent: PMap[EntityID, Agent] = pmap()
    combat_state: PMap[EntityID, CombatState] = pmap()
    damage: PMap[EntityID, Damage] = pmap()
    dead: PMap[EntityID, Dead] = pmap()
    health: PMap[EntityID, Health] = pmap()

    # Time
    clock: FrameClock = FrameClock()

    # Events
    damage_events: PVector[DamageEvent] = pvector()

    @property
    def now(self) -> int:
        return self.clock.now()

    def name_of(self, entity_id: EntityID) -> str:
        """Display name of ``entity_id`` (falls back to ``"#<id>"``)."""
        entity = self.entity.get(entity_id)
        return entity.name if entity is not None else f"#{entity_id}"
