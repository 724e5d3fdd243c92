"""Damage component (attacker capability)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Damage:
    """Hit point damage inflicted on a target when an attack resolves."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Damage points cannot be negative: {self.amount}")
