"""Gymnasium environment wrapper for the combat core.

Lets an agent play the player's side of an arena: every environment step is
one simulation tick. The agent either waits or presses attack; contact and
enemy reactions come from the arena's ``contact_fn``.

Observation: ``np.ndarray`` of ``int64`` with the layout given by
:data:`OBSERVATION_FIELDS`. Reward is the enemy health removed this tick.
``terminated`` is ``True`` once every enemy is dead, ``truncated`` when the
player dies or ``max_steps`` ticks have elapsed.

Usage:

``env = ShadowCombatEnv(enemy_health=60)``

Customization hooks:
    * ``initial_state_fn``: Provide a callable that returns a fully built ``State``.

Rendering is left to the host game; this environment exposes no render modes.
"""

import gymnasium as gym
import numpy as np
from typing import Any, Callable, Dict, List, Optional, Tuple

from shadow_combat.actions import AbilityAction, Action, GymAction
from shadow_combat.examples.arena import enemy_ids, generate
from shadow_combat.state import State
from shadow_combat.step import step
from shadow_combat.types import EntityID, Mode
from shadow_combat.utils.combat import get_mode

OBSERVATION_FIELDS = (
    "tick",
    "player_health",
    "player_max_health",
    "player_mode",
    "enemy_health",
    "enemy_max_health",
)

MODES: List[Mode] = list(Mode)


def enemy_health_totals(state: State) -> Tuple[int, int]:
    """Summed current / maximum health over every non-agent target."""
    ids = enemy_ids(state)
    current = sum(state.health[eid].health for eid in ids)
    maximum = sum(state.health[eid].max_health for eid in ids)
    return current, maximum


def observation_vector(state: State, agent_id: EntityID) -> np.ndarray:
    hp = state.health[agent_id]
    enemy_health, enemy_max_health = enemy_health_totals(state)
    return np.array(
        [
            state.now,
            hp.health,
            hp.max_health,
            MODES.index(get_mode(state, agent_id)),
            enemy_health,
            enemy_max_health,
        ],
        dtype=np.int64,
    )


class ShadowCombatEnv(gym.Env[np.ndarray, np.integer]):
    """Gymnasium ``Env`` implementation for the combat arena.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`shadow_combat.actions`.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(
        self,
        initial_state_fn: Callable[..., State] = generate,
        max_steps: int = 600,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            initial_state_fn: Callable returning an initial ``State`` with one agent.
            max_steps: Tick budget per episode before truncation.
            **kwargs: Forwarded to ``initial_state_fn`` (e.g. ``enemy_health``).
        """
        from gymnasium import spaces

        self._initial_state_fn = initial_state_fn
        self._initial_state_kwargs = kwargs
        self.max_steps = max_steps

        # Runtime state
        self.state: Optional[State] = None
        self.agent_id: Optional[EntityID] = None
        self._start_tick = 0

        self.observation_space = spaces.Box(
            low=0,
            high=1_000_000_000,
            shape=(len(OBSERVATION_FIELDS),),
            dtype=np.int64,
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Forwarded to Gymnasium's RNG seeding (the arena is deterministic).
            options: Gymnasium options (unused).

        Returns:
            Observation and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        self.state = self._initial_state_fn(**self._initial_state_kwargs)
        agent_id = next(iter(self.state.agent.keys()), None)
        if agent_id is None:
            raise ValueError("State contains no agent")
        self.agent_id = agent_id
        self._start_tick = self.state.now
        return observation_vector(self.state, self.agent_id), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """Apply one environment step (one simulation tick).

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None and self.agent_id is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        actions: List[Action] = []
        if GymAction(int(action)) == GymAction.ATTACK:
            actions.append(AbilityAction(self.agent_id))

        prev_enemy_health, _ = enemy_health_totals(self.state)
        self.state = step(self.state, actions)
        enemy_health, _ = enemy_health_totals(self.state)

        reward = float(prev_enemy_health - enemy_health)
        terminated = enemy_health == 0
        truncated = (
            self.agent_id in self.state.dead
            or self.state.now - self._start_tick >= self.max_steps
        )
        obs = observation_vector(self.state, self.agent_id)
        return obs, reward, terminated, truncated, self._get_info()

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return {
            "tick": self.state.now,
            "damage_events": [event.as_tuple() for event in self.state.damage_events],
        }
