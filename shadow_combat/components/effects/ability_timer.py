from dataclasses import dataclass


@dataclass(frozen=True)
class AbilityTimer:
    """Countdown for an ability-active or cooldown window.

    The timer stores when it was armed instead of a remaining amount, so
    checking it never changes it: :func:`shadow_combat.utils.timer.is_timer_finished`
    can be polled any number of times within a tick with the same answer.

    Attributes:
        start_tick:
            Frame clock value at which the window began.
        duration_ticks:
            Window length; the timer is finished once
            ``now - start_tick >= duration_ticks``.
    """

    start_tick: int
    duration_ticks: int

    def __post_init__(self) -> None:
        if self.duration_ticks <= 0:
            raise ValueError(f"Timer duration must be positive: {self.duration_ticks}")
