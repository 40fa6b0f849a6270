"""
Main entry point of the terminal demo.

Creates a player with a couple of abilities, then chains fights against
randomly generated adversaries until the player is defeated or quits. The
combat log, the status lines and the action menu are rendered with rich.
"""

import argparse
import logging
from pathlib import Path

from skirmish.combat.combat_manager import CombatManager
from skirmish.combat.pacing import sleep_pacer
from skirmish.combat.session import CombatState
from skirmish.core.config import load_config
from skirmish.core.constants import CombatResult
from skirmish.core.logging import setup_logging
from skirmish.core.utils import cprint, crule
from skirmish.entities.builtin_abilities import life_steal, shield_surge
from skirmish.entities.factory import create_player, spawn_random_adversary
from skirmish.ui.cli_interface import PlayerInterface, format_turn

ENEMY_TYPES = ("Red Square", "Slime", "Goblin", "Skeleton")


class CombatPrinter:
    """Listener printing the combat log entries that are new in each snapshot."""

    def __init__(self) -> None:
        self.printed = 0

    def __call__(self, state: CombatState) -> None:
        # A shorter log means a new session started.
        if len(state.turns) < self.printed:
            self.printed = 0
        for turn in state.turns[self.printed :]:
            cprint(format_turn(turn))
        self.printed = len(state.turns)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Turn-based duel combat demo.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file overriding the combat configuration.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging of every roll.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)
    config = load_config(args.config)

    ui = PlayerInterface()
    player = create_player(name=config.player_name, abilities=[life_steal(), shield_surge()])
    manager = CombatManager(player, config=config, pacer=sleep_pacer(config.adversary_turn_delay))
    manager.set_listener(CombatPrinter())

    crule("Skirmish", style="bold green")
    encounter = 0
    try:
        while True:
            encounter += 1
            adversary = spawn_random_adversary(ENEMY_TYPES[(encounter - 1) % len(ENEMY_TYPES)])
            crule(f":crossed_swords:  Encounter {encounter}", style="bold green")
            manager.start_combat(adversary)

            while not manager.is_combat_over():
                cprint(player.get_status_line(show_bars=True))
                cprint(adversary.get_status_line(show_bars=True))
                action = ui.choose_action()
                if action is None:
                    return
                manager.perform_action(action)

            state = manager.get_current_state()
            cprint(f"[{state.result.color}]{state.result.display_name}[/]")
            if state.result is CombatResult.PLAYER_VICTORY and state.rewards is not None:
                cprint(
                    f"Gained {state.rewards.experience} XP and {state.rewards.gold} gold."
                    + (" [bold cyan]Level up![/]" if state.rewards.leveled_up else "")
                )
            if state.result is CombatResult.PLAYER_DEFEAT:
                return
            if not ui.confirm("Continue to the next encounter?"):
                return
    except (KeyboardInterrupt, EOFError):
        cprint("")
        crule(":crossed_swords:  Combat Interrupted", style="bold red")
    finally:
        role = player.player_role
        crule("📊  Final Report", style="bold blue")
        cprint(player.get_status_line(show_bars=True))
        cprint(
            f"Gold: {role.gold} | Enemies defeated: {role.total_enemies_defeated} | "
            f"Highest level: {role.highest_level} | XP gained: {role.total_experience_gained}"
        )


if __name__ == "__main__":
    main()
