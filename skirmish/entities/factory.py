"""
Factories for players and adversaries.
"""

from skirmish.core.constants import Difficulty
from skirmish.core.logging import log_debug
from skirmish.core.utils import RandomSource, default_rng

from .ability import Ability
from .adversary_stats import adversary_experience_threshold, derive_adversary_stats
from .combatant import Combatant
from .roles import AdversaryRole, PlayerRole

# Difficulties drawn by spawn_random_adversary.
RANDOM_DIFFICULTIES = (Difficulty.EASY, Difficulty.NORMAL, Difficulty.HARD)

# Highest level drawn by spawn_random_adversary.
RANDOM_MAX_LEVEL = 3


def create_player(
    name: str = "Hero",
    health: int = 100,
    shield: int = 20,
    dodge_rate: float = 0.1,
    crit_rate: float = 0.05,
    attack_power: int = 15,
    abilities: list[Ability] | None = None,
    rng: RandomSource | None = None,
) -> Combatant:
    """
    Creates the player combatant.

    Args:
        name (str): Display name of the player.
        health (int): Starting (and maximum) health.
        shield (int): Starting (and maximum) shield.
        dodge_rate (float): Probability of dodging a hit.
        crit_rate (float): Probability of a critical hit.
        attack_power (int): Base damage of an attack.
        abilities (list[Ability] | None): Abilities attached in order.
        rng (RandomSource | None): Random source of the player's rolls.

    Returns:
        Combatant: The player.

    """
    player = Combatant(
        name=name,
        role=PlayerRole(),
        health=health,
        shield=shield,
        dodge_rate=dodge_rate,
        crit_rate=crit_rate,
        attack_power=attack_power,
        rng=rng,
    )
    for ability in abilities or []:
        player.add_ability(ability)
    return player


def create_adversary(
    enemy_type: str,
    difficulty: Difficulty = Difficulty.NORMAL,
    level: int = 1,
    name: str | None = None,
    rng: RandomSource | None = None,
) -> Combatant:
    """
    Creates an adversary whose stats derive from its difficulty and level.

    Rewards are computed here, once, and never recomputed.

    Args:
        enemy_type (str): Type label of the adversary.
        difficulty (Difficulty): Difficulty tier.
        level (int): Level of the adversary (1 or more).
        name (str | None): Display name, defaults to the type label.
        rng (RandomSource | None): Random source of the adversary's rolls.

    Returns:
        Combatant: The adversary.

    """
    stats = derive_adversary_stats(difficulty, level)
    adversary = Combatant(
        name=name or enemy_type,
        role=AdversaryRole(
            difficulty=difficulty,
            enemy_type=enemy_type,
            aggressive=stats.aggressive,
            experience_reward=stats.experience_reward,
            gold_reward=stats.gold_reward,
        ),
        health=stats.health,
        shield=stats.shield,
        dodge_rate=stats.dodge_rate,
        crit_rate=stats.crit_rate,
        attack_power=stats.attack_power,
        rng=rng,
    )
    adversary.level = level
    adversary.experience_to_next_level = adversary_experience_threshold(difficulty, level)
    log_debug(f"Created adversary {adversary!r}")
    return adversary


def spawn_random_adversary(
    enemy_type: str,
    rng: RandomSource | None = None,
) -> Combatant:
    """
    Creates an adversary with a random level and difficulty.

    Draws two samples: the level (1 to RANDOM_MAX_LEVEL) first, then the
    difficulty among RANDOM_DIFFICULTIES.

    Args:
        enemy_type (str): Type label of the adversary.
        rng (RandomSource | None): Random source for the draws, also given to
            the adversary.

    Returns:
        Combatant: The adversary.

    """
    rng = rng or default_rng
    level = int(rng() * RANDOM_MAX_LEVEL) + 1
    difficulty = RANDOM_DIFFICULTIES[int(rng() * len(RANDOM_DIFFICULTIES))]
    return create_adversary(enemy_type, difficulty, level, rng=rng)
