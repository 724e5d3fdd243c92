"""Agent marker component.

Presence of :class:`Agent` designates the player-controlled entity. Only one
agent is typically present; the Gymnasium environment selects the first.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
