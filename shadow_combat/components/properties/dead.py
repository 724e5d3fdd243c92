"""Dead marker component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker (no data). Set once health reaches zero; never removed."""

    pass
