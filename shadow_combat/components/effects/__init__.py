"""Effect components.

Time-bound runtime data attached to entities while a timed window is in
force. Currently the :class:`AbilityTimer` armed by the combat state machine.
"""

from .ability_timer import AbilityTimer

__all__ = ["AbilityTimer"]
