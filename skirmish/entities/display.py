"""
Combatant display module.

Provides the status line of a combatant, with health and shield shown as
numbers, rich markup bars, or both.
"""

from typing import Any

from skirmish.core.utils import make_bar


class CombatantDisplay:
    """
    Handles display and formatting for Combatant objects.

    Attributes:
        owner (Any):
            The Combatant instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def get_status_line(self, show_numbers: bool = True, show_bars: bool = False) -> str:
        """
        Get a formatted status line for the combatant.

        Args:
            show_numbers (bool): Whether to show numerical values. Defaults to True.
            show_bars (bool): Whether to show bar representations. Defaults to False.

        Returns:
            str: A formatted string representing the combatant's status.

        """
        owner = self.owner
        name_width = min(max(len(owner.name), 8), 16)
        status = (
            f"{owner.char_type.emoji} {owner.char_type.colorize(f'{owner.name:<{name_width}}')} "
            f"| [cyan]Lv:{owner.level:>2}[/] "
        )

        # Default to showing numbers if neither is specified.
        if not show_numbers and not show_bars:
            show_numbers = True

        hp = "| [green]HP:"
        if show_numbers:
            hp += f"{owner.health:>3}/{owner.max_health}"
        hp += "[/]"
        if show_bars:
            hp += make_bar(owner.health, owner.max_health, color="green", length=8)
        status += hp + " "

        sh = "| [blue]SH:"
        if show_numbers:
            sh += f"{owner.shield:>3}/{owner.max_shield}"
        sh += "[/]"
        if show_bars:
            sh += make_bar(owner.shield, owner.max_shield, color="blue", length=8)
        status += sh + " "

        status += f"| [red]ATK:{owner.attack_power:>3}[/]"

        if owner.is_adversary():
            difficulty = owner.adversary_role.difficulty
            status += f" | [{difficulty.color}]{difficulty.display_name}[/]"

        return status
