"""
Combat module of the combat core.

Contains the combat manager state machine, the immutable session snapshots
it publishes, and the pacing helpers used by front-ends.
"""

from .combat_manager import CombatListener, CombatManager
from .pacing import Pacer, sleep_pacer
from .session import CombatState, CombatTurn

__all__ = [
    "CombatListener",
    "CombatManager",
    "Pacer",
    "sleep_pacer",
    "CombatState",
    "CombatTurn",
]
