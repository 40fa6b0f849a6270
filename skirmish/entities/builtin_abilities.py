"""
Ready-made abilities.
"""

import math
from typing import Any

from .ability import Ability


def life_steal(ratio: float = 0.1) -> Ability:
    """
    Heals the owner for a fraction of the damage it actually dealt.

    Args:
        ratio (float):
            Fraction of the applied damage converted into healing.

    Returns:
        Ability:
            The Life Steal ability.

    """

    def _on_attack(owner: Any, target: Any, damage: int) -> None:
        owner.heal(math.floor(damage * ratio))

    return Ability(
        name="Life Steal",
        description=f"Heal for {ratio:.0%} of damage dealt",
        on_attack=_on_attack,
    )


def shield_surge(amount: int = 10) -> Ability:
    """
    Restores shield whenever the owner defeats a target.

    Args:
        amount (int):
            Shield points restored on each kill.

    Returns:
        Ability:
            The Shield Surge ability.

    """

    def _on_kill(owner: Any, target: Any) -> None:
        owner.restore_shield(amount)

    return Ability(
        name="Shield Surge",
        description="Gain shield when defeating an enemy",
        on_kill=_on_kill,
    )


def keen_eye(bonus: float = 0.05) -> Ability:
    """
    Permanently raises the owner's critical rate when attached.

    The increase is subject to the usual rate cap.
    """

    def _passive(owner: Any) -> None:
        owner.crit_rate = owner.crit_rate + bonus

    return Ability(
        name="Keen Eye",
        description=f"Critical rate +{bonus:.0%}",
        passive=_passive,
    )


def battle_hardened(bonus: float = 0.02) -> Ability:
    """Raises the owner's dodge rate after every level-up (capped)."""

    def _on_level_up(owner: Any) -> None:
        owner.dodge_rate = owner.dodge_rate + bonus

    return Ability(
        name="Battle Hardened",
        description=f"Dodge rate +{bonus:.0%} on level-up",
        on_level_up=_on_level_up,
    )
