"""Damage events.

Every successfully applied attack produces one :class:`DamageEvent`. The
resolver appends it to ``State.damage_events`` (cleared at the start of each
tick) and hands it to ``State.damage_sink`` when one is configured. Formatting
is left to the consumer; :func:`log_damage_event` is the stock sink that
writes the classic console line through :mod:`logging`.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DamageEvent:
    """A resolved attack.

    Attributes:
        tick: Frame clock value at resolution time.
        attacker: Attacker entity name.
        target: Target entity name.
        amount: Damage points applied.
        health: Target health after the attack.
        max_health: Target maximum health.
    """

    tick: int
    attacker: str
    target: str
    amount: int
    health: int
    max_health: int

    def as_tuple(self) -> Tuple[str, str, int]:
        """``(attacker-name, target-name, amount)`` as consumed by UI code."""
        return (self.attacker, self.target, self.amount)

    @property
    def message(self) -> str:
        return (
            f"{self.attacker} inflicts {self.amount} damage points on {self.target}. "
            f"{self.target}'s current health: {self.health}/{self.max_health}"
        )


def log_damage_event(event: DamageEvent) -> None:
    """Damage sink writing each event at INFO level."""
    logger.info(event.message)
