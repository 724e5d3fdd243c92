"""Small arena: the player, one demon and optionally a sinkhole.

Used as the default initial state of the Gymnasium environment. Geometry is
out of scope, so contact is decided by combat mode alone: while the player's
attack is engaged it touches every living enemy, and a sinkhole (if present)
sits under the player and hits it every tick.
"""

from typing import List, Optional, Tuple

from shadow_combat.levels.convert import to_state
from shadow_combat.levels.factories import create_enemy, create_player, create_sinkhole
from shadow_combat.state import State
from shadow_combat.types import DamageSink, EntityID
from shadow_combat.utils.combat import is_ability_engaged


def enemy_ids(state: State) -> List[EntityID]:
    """Targets that are not the agent."""
    return [eid for eid in state.health if eid not in state.agent]


def hazard_ids(state: State) -> List[EntityID]:
    """Attackers that cannot be targeted."""
    return [eid for eid in state.damage if eid not in state.health]


def arena_contact_fn(state: State) -> List[Tuple[EntityID, EntityID]]:
    pairs: List[Tuple[EntityID, EntityID]] = []
    for agent_id in state.agent:
        if agent_id in state.dead:
            continue
        if is_ability_engaged(state, agent_id):
            for enemy_id in enemy_ids(state):
                if enemy_id not in state.dead:
                    pairs.append((agent_id, enemy_id))
        for hazard_id in hazard_ids(state):
            pairs.append((hazard_id, agent_id))
    return pairs


def generate(
    enemy_health: int = 40,
    sinkhole: bool = False,
    damage_sink: Optional[DamageSink] = None,
) -> State:
    specs = [create_player(), create_enemy(health=enemy_health)]
    if sinkhole:
        specs.append(create_sinkhole())
    return to_state(specs, contact_fn=arena_contact_fn, damage_sink=damage_sink)
