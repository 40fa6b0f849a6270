"""
User interface module for the terminal demo.

Provides a rich table-based action menu read through prompt_toolkit, and
helpers to render the combat log.
"""

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from skirmish.combat.session import CombatTurn
from skirmish.core.constants import CombatAction
from skirmish.core.utils import ccapture

ACTION_DESCRIPTIONS: dict[CombatAction, str] = {
    CombatAction.ATTACK: "Strike the adversary.",
    CombatAction.DEFEND: "Halve the damage of the next hit.",
    CombatAction.USE_ITEM: "Drink a healing potion.",
    CombatAction.RUN: "Try to escape from the fight.",
}


def format_turn(turn: CombatTurn) -> str:
    """
    Formats a combat log entry with rich markup.

    Args:
        turn (CombatTurn): The log entry.

    Returns:
        str: The formatted entry.

    """
    if turn.is_dodged:
        color = "dim white"
    elif turn.damage < 0:
        color = "green"
    elif turn.is_critical:
        color = "bold red"
    else:
        color = "white"
    return f"    {turn.action.emoji} [{color}]{turn.message}[/]"


class PlayerInterface:
    """
    Command-line interface for choosing the player's action.

    Actions are listed in a rich table and selected by number; 'q' quits.
    """

    def __init__(self) -> None:
        self.session: PromptSession = PromptSession(erase_when_done=True)

    def choose_action(self, exit_entry: str | None = "Quit") -> CombatAction | None:
        """Choose an action from the list of combat actions.

        Args:
            exit_entry (str | None): Text of the exit option, None to hide it.

        Returns:
            CombatAction | None: The selected action, or None to quit.

        """
        actions = list(CombatAction)
        table = Table(title="Actions", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Description", style="magenta")
        for i, action in enumerate(actions, 1):
            table.add_row(str(i), f"{action.emoji} {action.display_name}", ACTION_DESCRIPTIONS[action])
        if exit_entry:
            table.add_row()
            table.add_row("q", exit_entry, "")
        prompt = "\n" + ccapture(table) + "\nAction > "
        while True:
            answer = self.session.prompt(ANSI(prompt)).strip()
            if not answer:
                continue
            if exit_entry and answer.lower() == "q":
                return None
            index = self.get_digit_choice(answer) - 1
            if 0 <= index < len(actions):
                return actions[index]

    def confirm(self, question: str) -> bool:
        """Asks a yes/no question, defaulting to yes."""
        answer = self.session.prompt(f"{question} [Y/n] > ").strip().lower()
        return answer in ("", "y", "yes")

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """Returns the number typed by the user, or -1 if not a number."""
        return int(answer) if answer.isdigit() else -1
