"""Ability timer helpers.

Timers are pure values; checking one never consumes it.
"""

from shadow_combat.components import AbilityTimer


def start_timer(now: int, duration_ticks: int) -> AbilityTimer:
    """Arm a timer beginning at ``now``."""
    return AbilityTimer(start_tick=now, duration_ticks=duration_ticks)


def is_timer_finished(timer: AbilityTimer, now: int) -> bool:
    """Return True once ``duration_ticks`` have elapsed since the timer started."""
    return now - timer.start_tick >= timer.duration_ticks


def remaining_ticks(timer: AbilityTimer, now: int) -> int:
    """Ticks left before the timer finishes (never negative)."""
    return max(0, timer.duration_ticks - (now - timer.start_tick))
