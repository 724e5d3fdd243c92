"""Combat state component.

Holds the entity's current :class:`~shadow_combat.types.Mode` and the timer
armed for it. ``ACTIVE`` and ``COOLDOWN`` always carry a timer; ``IDLE``
never does. Violations are programming errors and raise on construction.
"""

from dataclasses import dataclass
from typing import Optional

from shadow_combat.components.effects import AbilityTimer
from shadow_combat.types import Mode


@dataclass(frozen=True)
class CombatState:
    """Mode + armed timer.

    Attributes:
        mode: Current combat mode.
        timer: Timer for the current ``ACTIVE`` / ``COOLDOWN`` window.
    """

    mode: Mode = Mode.IDLE
    timer: Optional[AbilityTimer] = None

    def __post_init__(self) -> None:
        if not isinstance(self.mode, Mode):
            raise ValueError(f"Invalid mode: {self.mode!r}")
        if self.mode == Mode.IDLE and self.timer is not None:
            raise ValueError("Idle combat state cannot carry a timer")
        if self.mode != Mode.IDLE and self.timer is None:
            raise ValueError(f"Combat state {self.mode} requires a timer")
