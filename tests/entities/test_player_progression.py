"""
Tests for the player role: gold, lifetime counters and reward collection.
"""

import pytest
from pydantic import ValidationError
from skirmish.core.constants import Difficulty
from skirmish.entities.factory import create_adversary, create_player
from skirmish.entities.roles import PlayerRole


@pytest.fixture
def player():
    return create_player(rng=lambda: 0.99)


def test_gain_and_spend_gold():
    role = PlayerRole()
    role.gain_gold(25)

    assert role.spend_gold(10) is True
    assert role.gold == 15
    assert role.spend_gold(20) is False, "Cannot spend more than the balance"
    assert role.gold == 15


def test_negative_amounts_do_not_change_gold():
    role = PlayerRole(gold=5)
    role.gain_gold(-3)

    assert role.spend_gold(-3) is False
    assert role.gold == 5


def test_player_role_validates_assignment():
    role = PlayerRole()
    with pytest.raises(ValidationError):
        role.gold = -1


def test_lifetime_experience_counts_every_grant(player):
    player.gain_experience(60)
    player.gain_experience(60)

    assert player.level == 2
    assert player.experience == 20
    assert player.player_role.total_experience_gained == 120


def test_highest_level_follows_level_ups(player):
    player.level_up()
    player.level_up()

    assert player.level == 3
    assert player.player_role.highest_level == 3


def test_claim_rewards_pays_precomputed_rewards(player):
    slime = create_adversary("Slime", Difficulty.NORMAL, level=3)

    rewards = player.claim_rewards(slime)

    assert rewards.experience == 32
    assert rewards.gold == 7
    assert not rewards.leveled_up
    role = player.player_role
    assert role.gold == 7
    assert role.total_enemies_defeated == 1
    assert role.total_experience_gained == 32
    assert player.experience == 32


def test_claim_rewards_reports_level_up(player):
    player.gain_experience(90)
    boss = create_adversary("Dragon", Difficulty.BOSS)

    rewards = player.claim_rewards(boss)

    assert rewards.leveled_up
    assert player.level == 2
    assert player.experience == 50


def test_claim_rewards_requires_player_and_adversary(player):
    other = create_player(name="Rival")
    slime = create_adversary("Slime")

    with pytest.raises(TypeError):
        player.claim_rewards(other)
    with pytest.raises(TypeError):
        slime.claim_rewards(player)
