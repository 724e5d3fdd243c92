"""Frame clock.

The frame counter is the only time source of the simulation. It lives on the
``State`` as an immutable :class:`FrameClock` value and is advanced exactly
once per :func:`shadow_combat.step.step` call by
:func:`shadow_combat.systems.clock.clock_system`. Systems only ever read it
and pass ``now`` explicitly into timer and state-machine helpers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameClock:
    """Monotonic tick counter.

    Attributes:
        tick: Number of simulation steps elapsed (0-based).
    """

    tick: int = 0

    def __post_init__(self) -> None:
        if self.tick < 0:
            raise ValueError(f"Frame clock cannot be negative: {self.tick}")

    def advance(self) -> "FrameClock":
        """Return the clock one tick later."""
        return FrameClock(tick=self.tick + 1)

    def now(self) -> int:
        return self.tick
