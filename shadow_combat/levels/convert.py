from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from pyrsistent import pmap

from shadow_combat.entity import Entity
from shadow_combat.state import State, no_contact_fn
from shadow_combat.types import ContactFn, DamageSink, EntityID
from shadow_combat.components.properties import CombatState
from shadow_combat.levels.entity_spec import EntitySpec, COMPONENT_TO_FIELD


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    return {store_name: {} for store_name in COMPONENT_TO_FIELD.values()}


def to_state(
    specs: Sequence[EntitySpec],
    contact_fn: ContactFn = no_contact_fn,
    damage_sink: Optional[DamageSink] = None,
) -> State:
    """
    Convert authoring specs into an immutable State at tick 0.

    Entity IDs are allocated in ``specs`` order starting at 0. Ability owners
    without an explicit ``combat_state`` start idle.
    """
    entity: Dict[EntityID, Entity] = {}
    stores: Dict[str, Dict[EntityID, Any]] = _init_store_maps()

    for eid, spec in enumerate(specs):
        entity[eid] = Entity(name=spec.name)
        for store_name, comp in spec.iter_components():
            stores[store_name][eid] = comp
        if spec.ability is not None and eid not in stores["combat_state"]:
            stores["combat_state"][eid] = CombatState()

    return State(
        contact_fn=contact_fn,
        damage_sink=damage_sink,
        entity=pmap(entity),
        ability=pmap(stores["ability"]),
        agent=pmap(stores["agent"]),
        combat_state=pmap(stores["combat_state"]),
        damage=pmap(stores["damage"]),
        health=pmap(stores["health"]),
    )
