"""
Tests for the ability hooks and the built-in abilities.
"""

import pytest
from pydantic import ValidationError
from skirmish.core.constants import MAX_RATE
from skirmish.entities.ability import Ability, HookType
from skirmish.entities.builtin_abilities import (
    battle_hardened,
    keen_eye,
    life_steal,
    shield_surge,
)
from skirmish.entities.combatant import Combatant
from skirmish.entities.roles import PlayerRole


def never() -> float:
    return 0.99


@pytest.fixture
def hero():
    return Combatant(
        name="Hero",
        role=PlayerRole(),
        health=100,
        shield=0,
        dodge_rate=0.1,
        crit_rate=0.05,
        attack_power=20,
        rng=never,
    )


@pytest.fixture
def target():
    return Combatant(
        name="Target",
        role=PlayerRole(),
        health=30,
        shield=5,
        dodge_rate=0.05,
        crit_rate=0.0,
        attack_power=5,
        rng=never,
    )


def test_ability_requires_a_name():
    with pytest.raises(ValidationError):
        Ability(name="")


def test_ability_is_immutable():
    ability = Ability(name="Frozen")
    with pytest.raises(ValidationError):
        ability.name = "Thawed"


def test_handler_lookup_by_hook():
    """
    Unset handlers resolve to None, set ones to the callable itself.
    """

    def _on_kill(owner, target):
        pass

    ability = Ability(name="Finisher", on_kill=_on_kill)

    assert ability.handler(HookType.ON_KILL) is _on_kill
    for hook in (HookType.ON_ATTACK, HookType.ON_DAMAGED, HookType.ON_LEVEL_UP, HookType.PASSIVE):
        assert ability.handler(hook) is None, f"{hook} should have no handler"


def test_passive_runs_once_on_attach(hero: Combatant):
    calls = []
    ability = Ability(name="Aura", passive=lambda owner: calls.append(owner.name))

    hero.add_ability(ability)
    hero.level_up()
    hero.take_damage(10)

    assert calls == ["Hero"]
    assert hero.abilities == [ability]


def test_hooks_fire_in_attachment_order(hero: Combatant, target: Combatant):
    order = []
    hero.add_ability(Ability(name="First", on_attack=lambda o, t, d: order.append("first")))
    hero.add_ability(Ability(name="Second", on_attack=lambda o, t, d: order.append("second")))

    hero.attack(target)

    assert order == ["first", "second"]


def test_life_steal_heals_a_fraction_of_applied_damage(hero: Combatant, target: Combatant):
    """
    20 attack against 5 shield applies 15 damage; 10% of it floors to 1.
    """
    hero.add_ability(life_steal())
    hero.take_damage(50)

    hero.attack(target)

    assert target.health == 15
    assert hero.health == 51


def test_life_steal_heals_nothing_on_dodge(hero: Combatant):
    evasive = Combatant(
        name="Evasive",
        role=PlayerRole(),
        health=30,
        shield=0,
        dodge_rate=0.5,
        crit_rate=0.0,
        attack_power=5,
        rng=lambda: 0.0,
    )
    hero.add_ability(life_steal(ratio=1.0))
    hero.take_damage(50)

    assert hero.attack(evasive) == 0
    assert hero.health == 50


def test_shield_surge_restores_shield_on_kill(target: Combatant):
    striker = Combatant(
        name="Striker",
        role=PlayerRole(),
        health=100,
        shield=20,
        dodge_rate=0.0,
        crit_rate=0.0,
        attack_power=50,
        rng=never,
    )
    striker.add_ability(shield_surge())
    striker.take_damage(15)
    assert striker.shield == 5

    striker.attack(target)

    assert target.is_dead()
    assert striker.shield == 15


def test_shield_surge_does_nothing_without_kill(hero: Combatant, target: Combatant):
    hero.max_shield = 20
    hero.add_ability(shield_surge())

    hero.attack(target)

    assert target.is_alive()
    assert hero.shield == 0


def test_keen_eye_raises_crit_rate_within_cap(hero: Combatant):
    hero.add_ability(keen_eye())
    assert hero.crit_rate == pytest.approx(0.1)

    hero.add_ability(keen_eye(bonus=2.0))
    assert hero.crit_rate == MAX_RATE


def test_battle_hardened_raises_dodge_on_level_up(hero: Combatant):
    hero.add_ability(battle_hardened())
    assert hero.dodge_rate == pytest.approx(0.1)

    hero.gain_experience(100)

    assert hero.level == 2
    assert hero.dodge_rate == pytest.approx(0.12)
