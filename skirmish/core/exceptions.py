"""
Exceptions raised by the combat core.
"""


class SkirmishError(Exception):
    """Base class for all errors raised by the combat core."""


class CombatStateError(SkirmishError):
    """Raised when the combat manager is driven into an impossible state.

    This signals a defect in the caller (e.g. resolving an attack while no
    adversary is bound), not a recoverable runtime condition.
    """
