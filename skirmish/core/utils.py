"""
Utilities module for the combat core.

Holds the shared rich console with its printing helpers, the markup bars of
the status lines, and the random source contract used by the stat engine and
the combat manager.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.rule import Rule

# A zero-argument callable returning a uniform sample in [0, 1).
RandomSource = Callable[[], float]

# Used whenever no random source is injected.
default_rng: RandomSource = random.random

# Console shared by the printing helpers and the log handler.
console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*renderables: Any, style: str | None = None) -> None:
    """Prints renderables or markup strings on the shared console."""
    console.print(*renderables, style=style)


def crule(title: str = "", style: str = "rule.line") -> None:
    """
    Prints a horizontal separator across the shared console.

    Args:
        title (str): Markup shown in the middle of the line, if any.
        style (str): Style of the line and of the title.

    """
    console.print(Rule(title, style=style))


def ccapture(content: Any) -> str:
    """
    Renders content on the shared console without printing it.

    Args:
        content (Any): A renderable or a markup string.

    Returns:
        str: The rendered text, ANSI codes included.

    """
    with console.capture() as captured:
        console.print(content, end="")
    return captured.get()


def roll(rng: RandomSource, chance: float) -> bool:
    """
    Draws one sample from the random source and checks it against a chance.

    Args:
        rng (RandomSource): The random source to sample.
        chance (float): Probability of success, in [0, 1].

    Returns:
        bool: True if the sample falls below the chance.

    """
    return rng() < chance


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Builds a gauge in rich markup, filled in proportion to current/maximum.

    Args:
        current (int): Value shown as filled cells.
        maximum (int): Value of a full gauge.
        length (int): Number of cells. Defaults to 10.
        color (str): Markup style of the filled cells. Defaults to "white".

    Returns:
        str: The gauge markup.

    """
    # No maximum at all (e.g. a combatant without shield) renders empty.
    filled = int(current * length / maximum) if maximum > 0 else 0
    filled = max(0, min(filled, length))
    gauge = f"[{color}]" + "▮" * filled
    if filled < length:
        gauge += "[dim white]" + "▯" * (length - filled) + "[/]"
    return gauge + "[/]"
