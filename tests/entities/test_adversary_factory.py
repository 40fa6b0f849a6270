"""
Tests for adversary stat derivation and the combatant factories.
"""

import pytest
from skirmish.core.constants import CharacterType, Difficulty
from skirmish.entities.adversary_stats import (
    adversary_experience_threshold,
    derive_adversary_stats,
)
from skirmish.entities.builtin_abilities import keen_eye, life_steal
from skirmish.entities.factory import (
    create_adversary,
    create_player,
    spawn_random_adversary,
)


def sequence(*samples: float):
    """Random source replaying the given samples, then 0.99 forever."""
    remaining = list(samples)

    def _next() -> float:
        return remaining.pop(0) if remaining else 0.99

    return _next


# ============================================================================
# STAT DERIVATION
# ============================================================================


@pytest.mark.parametrize(
    "difficulty, health, shield, attack_power, experience, gold",
    [
        (Difficulty.EASY, 40, 7, 8, 16, 4),
        (Difficulty.NORMAL, 50, 10, 10, 20, 5),
        (Difficulty.HARD, 75, 13, 13, 30, 7),
        (Difficulty.BOSS, 150, 20, 20, 60, 15),
    ],
)
def test_level_one_stats_per_difficulty(difficulty, health, shield, attack_power, experience, gold):
    stats = derive_adversary_stats(difficulty, 1)

    assert stats.health == health
    assert stats.shield == shield
    assert stats.attack_power == attack_power
    assert stats.experience_reward == experience
    assert stats.gold_reward == gold


def test_level_scaling_is_linear_and_floored():
    """
    Normal level 3: 50*1.4, 10*1.2, 10*1.3, 20*1.6 and 5*1.5, floored.
    """
    stats = derive_adversary_stats(Difficulty.NORMAL, 3)

    assert stats.health == 70
    assert stats.shield == 12
    assert stats.attack_power == 13
    assert stats.experience_reward == 32
    assert stats.gold_reward == 7
    assert stats.dodge_rate == pytest.approx(0.05)
    assert stats.crit_rate == pytest.approx(0.03)


def test_boss_rates_are_scaled_but_not_by_level():
    level_one = derive_adversary_stats(Difficulty.BOSS, 1)
    level_five = derive_adversary_stats(Difficulty.BOSS, 5)

    assert level_one.dodge_rate == pytest.approx(0.075)
    assert level_one.crit_rate == pytest.approx(0.045)
    assert level_five.dodge_rate == pytest.approx(level_one.dodge_rate)


def test_aggressive_only_for_hard_and_boss():
    assert not derive_adversary_stats(Difficulty.EASY, 1).aggressive
    assert not derive_adversary_stats(Difficulty.NORMAL, 1).aggressive
    assert derive_adversary_stats(Difficulty.HARD, 1).aggressive
    assert derive_adversary_stats(Difficulty.BOSS, 1).aggressive


def test_invalid_level_is_rejected():
    with pytest.raises(ValueError):
        derive_adversary_stats(Difficulty.NORMAL, 0)


@pytest.mark.parametrize(
    "difficulty, level, threshold",
    [
        (Difficulty.NORMAL, 1, 100),
        (Difficulty.NORMAL, 3, 300),
        (Difficulty.EASY, 2, 160),
        (Difficulty.HARD, 1, 150),
        (Difficulty.BOSS, 1, 250),
    ],
)
def test_adversary_experience_threshold(difficulty, level, threshold):
    assert adversary_experience_threshold(difficulty, level) == threshold


# ============================================================================
# FACTORIES
# ============================================================================


def test_create_player_defaults():
    player = create_player()

    assert player.name == "Hero"
    assert player.is_player()
    assert player.char_type == CharacterType.PLAYER
    assert player.health == player.max_health == 100
    assert player.shield == player.max_shield == 20
    assert player.dodge_rate == pytest.approx(0.1)
    assert player.crit_rate == pytest.approx(0.05)
    assert player.attack_power == 15
    assert player.player_role.gold == 0
    assert player.player_role.highest_level == 1


def test_create_player_attaches_abilities_in_order():
    abilities = [life_steal(), keen_eye()]
    player = create_player(abilities=abilities)

    assert player.abilities == abilities
    assert player.crit_rate == pytest.approx(0.1), "Passive should apply on creation"


def test_create_adversary_from_table():
    goblin = create_adversary("Goblin", Difficulty.NORMAL, level=3)

    assert goblin.name == "Goblin"
    assert goblin.is_adversary()
    assert goblin.char_type == CharacterType.ENEMY
    assert goblin.level == 3
    assert goblin.experience_to_next_level == 300
    assert goblin.health == goblin.max_health == 70
    assert goblin.shield == goblin.max_shield == 12
    assert goblin.attack_power == 13

    role = goblin.adversary_role
    assert role.enemy_type == "Goblin"
    assert role.difficulty == Difficulty.NORMAL
    assert role.experience_reward == 32
    assert role.gold_reward == 7
    assert not role.aggressive


def test_create_adversary_custom_name():
    boss = create_adversary("Dragon", Difficulty.BOSS, name="Ancient Dragon")

    assert boss.name == "Ancient Dragon"
    assert boss.adversary_role.enemy_type == "Dragon"
    assert boss.adversary_role.aggressive


def test_adversary_rewards_are_fixed_at_creation():
    slime = create_adversary("Slime", Difficulty.EASY)
    slime.level_up()

    assert slime.adversary_role.experience_reward == 16
    assert slime.adversary_role.gold_reward == 4


def test_role_accessors_reject_wrong_side():
    player = create_player()
    slime = create_adversary("Slime")

    with pytest.raises(TypeError):
        player.adversary_role
    with pytest.raises(TypeError):
        slime.player_role


def test_spawn_random_adversary_draws_level_then_difficulty():
    """
    The first sample picks the level, the second the difficulty.
    """
    adversary = spawn_random_adversary("Skeleton", rng=sequence(0.7, 0.1))

    assert adversary.level == 3
    assert adversary.adversary_role.difficulty == Difficulty.EASY


@pytest.mark.parametrize(
    "level_sample, difficulty_sample, level, difficulty",
    [
        (0.0, 0.0, 1, Difficulty.EASY),
        (0.4, 0.5, 2, Difficulty.NORMAL),
        (0.99, 0.99, 3, Difficulty.HARD),
    ],
)
def test_spawn_random_adversary_ranges(level_sample, difficulty_sample, level, difficulty):
    adversary = spawn_random_adversary("Slime", rng=sequence(level_sample, difficulty_sample))

    assert adversary.level == level
    assert adversary.adversary_role.difficulty == difficulty


def test_spawn_random_adversary_never_draws_boss():
    for i in range(30):
        sample = i / 30
        adversary = spawn_random_adversary("Slime", rng=sequence(sample, sample))
        assert adversary.adversary_role.difficulty != Difficulty.BOSS
        assert 1 <= adversary.level <= 3
