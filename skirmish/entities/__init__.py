"""
Entity module of the combat core.

Contains the Combatant stat engine, its player and adversary role
extensions, the ability hooks and the factories building combatants.
"""

from .ability import Ability, HookType
from .adversary_stats import (
    AdversaryStats,
    adversary_experience_threshold,
    derive_adversary_stats,
)
from .builtin_abilities import battle_hardened, keen_eye, life_steal, shield_surge
from .combatant import Combatant
from .factory import create_adversary, create_player, spawn_random_adversary
from .outcomes import AttackOutcome, HitOutcome, Rewards
from .roles import AdversaryRole, CombatantRole, PlayerRole

__all__ = [
    "Ability",
    "HookType",
    "AdversaryStats",
    "adversary_experience_threshold",
    "derive_adversary_stats",
    "battle_hardened",
    "keen_eye",
    "life_steal",
    "shield_surge",
    "Combatant",
    "create_adversary",
    "create_player",
    "spawn_random_adversary",
    "AttackOutcome",
    "HitOutcome",
    "Rewards",
    "AdversaryRole",
    "CombatantRole",
    "PlayerRole",
]
