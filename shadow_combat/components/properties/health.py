from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Tracks current and maximum hit points for damage / healing systems.

    Attributes:
        health:
            Current hit points, always within ``[0, max_health]``. Use
            :func:`shadow_combat.utils.health.set_health` to derive a new
            value; it clamps instead of raising.
        max_health:
            Upper bound for ``health``. Must be positive and never changes
            after construction, so percentage derivation cannot divide by zero.
    """

    health: int
    max_health: int

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            raise ValueError(f"Maximum health must be positive: {self.max_health}")
        if not 0 <= self.health <= self.max_health:
            raise ValueError(
                f"Health {self.health} outside of [0, {self.max_health}]"
            )
