"""
Core system module of the combat core.

Contains the constants and enumerations, configuration loading, logging
setup, console helpers and exceptions shared by the rest of the package.
"""

from .config import CombatConfig, load_config
from .constants import (
    CharacterType,
    CombatAction,
    CombatPhase,
    CombatResult,
    Difficulty,
)
from .exceptions import CombatStateError, SkirmishError
from .utils import RandomSource, ccapture, cprint, crule, make_bar, roll

__all__ = [
    # Import from config.py
    "CombatConfig",
    "load_config",
    # Import from constants.py
    "CharacterType",
    "CombatAction",
    "CombatPhase",
    "CombatResult",
    "Difficulty",
    # Import from exceptions.py
    "CombatStateError",
    "SkirmishError",
    # Import from utils.py
    "RandomSource",
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
    "roll",
]
