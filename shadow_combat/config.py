"""Compiled-in gameplay constants.

Durations are authored in milliseconds at the canonical refresh rate and
converted once to ticks; every timer works in ticks only so behaviour does
not depend on the host frame rate.
"""

from dataclasses import dataclass

REFRESH_RATE = 60  # ticks per second
MS_TO_SEC = 1000

ABILITY_ACTIVE_MS = 1000
ABILITY_COOLDOWN_MS = 2000


def ticks_from_ms(ms: int, refresh_rate: int = REFRESH_RATE) -> int:
    """Convert a duration in milliseconds to whole ticks."""
    return refresh_rate * ms // MS_TO_SEC


ACTIVE_DURATION_TICKS = ticks_from_ms(ABILITY_ACTIVE_MS)
COOLDOWN_DURATION_TICKS = ticks_from_ms(ABILITY_COOLDOWN_MS)

# Player
PLAYER_NAME = "Fae"
PLAYER_MAX_HEALTH = 100
PLAYER_DAMAGE_POINTS = 20

# Environmental hazards
SINKHOLE_NAME = "Sinkhole"
SINKHOLE_DAMAGE_POINTS = 30

# Enemies
ENEMY_NAME = "Demon"
ENEMY_MAX_HEALTH = 40
ENEMY_DAMAGE_POINTS = 10


@dataclass(frozen=True)
class AbilityConfig:
    """Per-entity ability timing.

    Attributes:
        active_duration_ticks: Length of the ability-active window.
        cooldown_duration_ticks: Minimum wait after the active window before
            the ability can be requested again.
    """

    active_duration_ticks: int = ACTIVE_DURATION_TICKS
    cooldown_duration_ticks: int = COOLDOWN_DURATION_TICKS

    def __post_init__(self) -> None:
        if self.active_duration_ticks <= 0:
            raise ValueError(
                f"Active duration must be positive: {self.active_duration_ticks}"
            )
        if self.cooldown_duration_ticks <= 0:
            raise ValueError(
                f"Cooldown duration must be positive: {self.cooldown_duration_ticks}"
            )


DEFAULT_ABILITY_CONFIG = AbilityConfig()
