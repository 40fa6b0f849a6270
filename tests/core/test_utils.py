"""
Tests for the console and random helpers.
"""

from rich.rule import Rule
from skirmish.core import utils
from skirmish.core.utils import ccapture, crule, make_bar, roll


def test_roll_succeeds_below_chance():
    assert roll(lambda: 0.2, 0.5)
    assert not roll(lambda: 0.5, 0.5)
    assert not roll(lambda: 0.0, 0.0), "A zero chance never succeeds"


def test_make_bar_proportions():
    bar = make_bar(5, 10, length=10, color="green")

    assert bar.count("▮") == 5
    assert bar.count("▯") == 5
    assert bar.startswith("[green]")


def test_make_bar_full_and_empty():
    assert make_bar(10, 10).count("▯") == 0
    assert make_bar(0, 10).count("▮") == 0


def test_make_bar_handles_zero_maximum():
    bar = make_bar(0, 0, length=8)

    assert bar.count("▮") == 0
    assert bar.count("▯") == 8


def test_ccapture_renders_markup():
    output = ccapture("[bold]Hero[/]")

    assert "Hero" in output
    assert "[bold]" not in output


def test_crule_prints_titled_rule(mocker):
    printer = mocker.patch.object(utils.console, "print")

    crule("Final Report", style="bold blue")

    (rule,), _ = printer.call_args
    assert isinstance(rule, Rule)
    assert rule.title == "Final Report"
    assert rule.style == "bold blue"
