import pytest

from shadow_combat.components import AbilityTimer
from shadow_combat.utils.timer import is_timer_finished, remaining_ticks, start_timer


def test_start_timer_records_start_tick() -> None:
    timer = start_timer(now=42, duration_ticks=60)
    assert timer == AbilityTimer(start_tick=42, duration_ticks=60)


@pytest.mark.parametrize(
    "now, expected",
    [
        (10, False),
        (69, False),
        (70, True),
        (500, True),
    ],
)
def test_is_timer_finished(now: int, expected: bool) -> None:
    timer = start_timer(now=10, duration_ticks=60)
    assert is_timer_finished(timer, now) is expected


def test_is_timer_finished_is_idempotent() -> None:
    timer = start_timer(now=0, duration_ticks=5)
    results = [is_timer_finished(timer, 3) for _ in range(10)]
    assert results == [False] * 10
    results = [is_timer_finished(timer, 5) for _ in range(10)]
    assert results == [True] * 10
    assert timer == AbilityTimer(start_tick=0, duration_ticks=5)


def test_restart_replaces_window() -> None:
    first = start_timer(now=0, duration_ticks=5)
    assert is_timer_finished(first, 5)
    second = start_timer(now=5, duration_ticks=5)
    assert not is_timer_finished(second, 5)
    assert is_timer_finished(second, 10)


def test_remaining_ticks() -> None:
    timer = start_timer(now=10, duration_ticks=60)
    assert remaining_ticks(timer, 10) == 60
    assert remaining_ticks(timer, 40) == 30
    assert remaining_ticks(timer, 100) == 0


@pytest.mark.parametrize("duration", [0, -1])
def test_non_positive_duration_rejected(duration: int) -> None:
    with pytest.raises(ValueError):
        AbilityTimer(start_tick=0, duration_ticks=duration)
