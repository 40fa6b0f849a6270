"""
Tests for the terminal rendering helpers.
"""

from skirmish.combat.session import CombatTurn
from skirmish.core.constants import CombatAction, Difficulty
from skirmish.entities.factory import create_adversary, create_player
from skirmish.ui.cli_interface import PlayerInterface, format_turn


def test_format_turn_colors():
    dodged = CombatTurn(action=CombatAction.ATTACK, actor_name="Slime", is_dodged=True, message="dodged")
    healed = CombatTurn(action=CombatAction.USE_ITEM, actor_name="Hero", damage=-30, message="healed")
    critical = CombatTurn(action=CombatAction.ATTACK, actor_name="Hero", damage=20, is_critical=True, message="crit")

    assert "[dim white]dodged[/]" in format_turn(dodged)
    assert "[green]healed[/]" in format_turn(healed)
    assert "[bold red]crit[/]" in format_turn(critical)


def test_get_digit_choice():
    assert PlayerInterface.get_digit_choice("3") == 3
    assert PlayerInterface.get_digit_choice("x") == -1


def test_status_lines():
    player = create_player()
    goblin = create_adversary("Goblin", Difficulty.HARD)

    player_line = player.get_status_line()
    goblin_line = goblin.get_status_line(show_numbers=False, show_bars=True)

    assert "Hero" in player_line
    assert "100/100" in player_line
    assert "20/20" in player_line
    assert "Goblin" in goblin_line
    assert "Hard" in goblin_line
    assert "▮" in goblin_line
    assert "75/75" not in goblin_line
