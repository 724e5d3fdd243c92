"""Entity descriptor.

Each *thing* in the simulation is an ``EntityID`` (an integer) plus zero or
more component dataclasses stored in persistent maps on :class:`State`. The
:class:`Entity` descriptor only carries the display name used by damage
events and log lines; IDs themselves are allocated by
:func:`shadow_combat.levels.convert.to_state`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entity:
    """Entity descriptor.

    Attributes:
        name: Human readable name ("Fae", "Sinkhole", ...).
    """

    name: str
