"""
Adversary stat derivation.

Stats start from a fixed base, are scaled by the difficulty tier and then by
a linear per-level growth, distinct for every stat. Integral stats are
floored after level scaling.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import (
    ADVERSARY_BASE_STATS,
    ADVERSARY_LEVEL_SCALING,
    AGGRESSIVE_DIFFICULTIES,
    DIFFICULTY_MULTIPLIERS,
    STARTING_EXPERIENCE_THRESHOLD,
    Difficulty,
)


class AdversaryStats(BaseModel):
    """Stats and rewards of an adversary of a given difficulty and level."""

    model_config = ConfigDict(frozen=True)

    health: int = Field(ge=0)
    shield: int = Field(ge=0)
    dodge_rate: float = Field(ge=0.0)
    crit_rate: float = Field(ge=0.0)
    attack_power: int = Field(ge=0)
    experience_reward: int = Field(ge=0)
    gold_reward: int = Field(ge=0)
    aggressive: bool = False


def derive_adversary_stats(difficulty: Difficulty, level: int) -> AdversaryStats:
    """
    Computes the stats of an adversary.

    Args:
        difficulty (Difficulty):
            The difficulty tier of the adversary.
        level (int):
            The level of the adversary (1 or more).

    Returns:
        AdversaryStats:
            The derived stats and rewards.

    Raises:
        ValueError:
            If the level is lower than 1.

    """
    if level < 1:
        raise ValueError(f"Adversary level must be at least 1, got {level}")

    stats: dict[str, float] = dict(ADVERSARY_BASE_STATS)

    for stat, multiplier in DIFFICULTY_MULTIPLIERS[difficulty].items():
        stats[stat] *= multiplier

    for stat, rate in ADVERSARY_LEVEL_SCALING.items():
        stats[stat] = math.floor(stats[stat] * (1 + (level - 1) * rate))

    return AdversaryStats(
        health=int(stats["health"]),
        shield=int(stats["shield"]),
        dodge_rate=stats["dodge_rate"],
        crit_rate=stats["crit_rate"],
        attack_power=int(stats["attack_power"]),
        experience_reward=int(stats["experience_reward"]),
        gold_reward=int(stats["gold_reward"]),
        aggressive=difficulty in AGGRESSIVE_DIFFICULTIES,
    )


def adversary_experience_threshold(difficulty: Difficulty, level: int) -> int:
    """Experience an adversary needs to reach its next level."""
    return round(STARTING_EXPERIENCE_THRESHOLD * level * difficulty.experience_multiplier)
