"""
Combat manager module.

Drives one player against one adversary through a turn-based state machine:
the player submits an action, the adversary answers, until one side dies or
the player escapes.
"""

import math
from collections.abc import Callable
from typing import Any

from catchery import log_warning

from skirmish.core.config import CombatConfig
from skirmish.core.constants import CombatAction, CombatPhase, CombatResult
from skirmish.core.exceptions import CombatStateError
from skirmish.core.logging import log_debug, log_info
from skirmish.core.utils import RandomSource, default_rng, roll
from skirmish.entities.combatant import Combatant
from skirmish.entities.outcomes import AttackOutcome

from .pacing import Pacer
from .session import CombatantVitals, CombatState, CombatTurn

CombatListener = Callable[[CombatState], None]


class CombatManager:
    """Manages the flow of a duel between the player and one adversary.

    The state machine has three phases: PLAYER_TURN, ADVERSARY_TURN and
    ENDED. Only the player turn accepts actions; anything submitted in
    another phase, or without an adversary, is silently ignored. Every
    transition replaces ``state`` with a new immutable snapshot and pushes
    it to the registered listener.

    The adversary turn is a separate step (``run_adversary_turn``). With
    ``auto_advance`` enabled it runs right after the player's action,
    preceded by the optional ``pacer``; otherwise the caller schedules it.
    """

    def __init__(
        self,
        player: Combatant,
        config: CombatConfig | None = None,
        rng: RandomSource | None = None,
        pacer: Pacer | None = None,
        auto_advance: bool = True,
    ) -> None:
        """Initialize the CombatManager.

        Args:
            player (Combatant): The combatant controlled by the user.
            config (CombatConfig | None): Tunable parameters, defaults if None.
            rng (RandomSource | None): Random source of the escape rolls.
            pacer (Pacer | None): Called right before an automatic adversary turn.
            auto_advance (bool): Whether the adversary acts right after the player.

        """
        if not player.is_player():
            raise TypeError(f"{player.name} must have a player role to lead a combat")

        self.player: Combatant = player
        self.adversary: Combatant | None = None
        self.config: CombatConfig = config or CombatConfig()
        self.rng: RandomSource = rng or default_rng
        self.pacer: Pacer | None = pacer
        self.auto_advance: bool = auto_advance

        self._listener: CombatListener | None = None
        self.state: CombatState = CombatState()

    # ============================================================================
    # OBSERVATION
    # ============================================================================

    def set_listener(self, listener: CombatListener | None) -> None:
        """Registers the state listener, replacing the previous one.

        Args:
            listener (CombatListener | None): The new listener, or None to
                unregister.

        """
        self._listener = listener

    def get_current_state(self) -> CombatState:
        return self.state

    def _update_state(self, **changes: Any) -> None:
        """Replaces the snapshot with an updated copy and notifies the listener.

        The vitals of both combatants are captured on every update.
        """
        changes["player_vitals"] = CombatantVitals.of(self.player)
        changes["adversary_vitals"] = (
            CombatantVitals.of(self.adversary) if self.adversary is not None else None
        )
        self.state = self.state.model_copy(update=changes)
        if self._listener is not None:
            self._listener(self.state)

    # ============================================================================
    # LIFECYCLE
    # ============================================================================

    def start_combat(self, adversary: Combatant) -> None:
        """Starts a new combat against an adversary.

        Args:
            adversary (Combatant): The adversary to fight.

        """
        if not adversary.is_adversary():
            raise TypeError(f"{adversary.name} must have an adversary role to be fought")

        self.adversary = adversary
        log_info(
            f"Combat started: {self.player.name} vs {adversary.name}",
            {"level": adversary.level, "difficulty": adversary.adversary_role.difficulty},
        )
        self._update_state(
            phase=CombatPhase.PLAYER_TURN,
            current_adversary=adversary,
            turns=(),
            result=CombatResult.ONGOING,
            player_defending=False,
            rewards=None,
        )

    def reset_combat(self) -> None:
        """Forces the state machine back to its initial state, without adversary."""
        self.adversary = None
        self._update_state(
            phase=CombatPhase.PLAYER_TURN,
            current_adversary=None,
            turns=(),
            result=CombatResult.ONGOING,
            player_defending=False,
            rewards=None,
        )

    def is_combat_over(self) -> bool:
        return self.state.result is not CombatResult.ONGOING

    # ============================================================================
    # PLAYER TURN
    # ============================================================================

    def perform_action(self, action: CombatAction | str) -> None:
        """Submits a player action.

        Ignored when there is no adversary, when combat is over, or when it is
        not the player's turn.

        Args:
            action (CombatAction | str): The action, or its value.

        Raises:
            ValueError: If the action is not a known combat action.

        """
        action = CombatAction(action)

        if self.adversary is None or self.is_combat_over() or not self.state.is_player_turn:
            log_debug(
                f"Ignoring {action.display_name}: not accepting actions",
                {
                    "has_adversary": self.adversary is not None,
                    "phase": self.state.phase,
                    "result": self.state.result,
                },
            )
            return

        if action is CombatAction.ATTACK:
            self._player_attack()
        elif action is CombatAction.DEFEND:
            self._player_defend()
        elif action is CombatAction.USE_ITEM:
            self._player_use_item()
        elif action is CombatAction.RUN:
            self._player_run()

    def _player_attack(self) -> None:
        adversary = self._require_adversary()
        outcome = self.player.strike(adversary)
        self._end_player_turn(self._attack_turn(self.player, adversary, outcome))

    def _player_defend(self) -> None:
        turn = CombatTurn(
            action=CombatAction.DEFEND,
            actor_name=self.player.name,
            target_name=self.player.name,
            message=f"{self.player.name} takes a defensive stance.",
        )
        self._end_player_turn(turn, player_defending=True)

    def _player_use_item(self) -> None:
        heal_amount = math.floor(self.player.max_health * self.config.potion_heal_ratio)
        self.player.heal(heal_amount)
        turn = CombatTurn(
            action=CombatAction.USE_ITEM,
            actor_name=self.player.name,
            target_name=self.player.name,
            # Healing is logged as negative damage.
            damage=-heal_amount,
            message=(
                f"{self.player.name} used a healing potion and recovered "
                f"{heal_amount} health."
            ),
        )
        self._end_player_turn(turn)

    def _player_run(self) -> None:
        if roll(self.rng, self.config.escape_chance):
            turn = CombatTurn(
                action=CombatAction.RUN,
                actor_name=self.player.name,
                message=f"{self.player.name} successfully escaped from battle!",
            )
            log_info(f"{self.player.name} escaped")
            self._update_state(
                turns=(*self.state.turns, turn),
                phase=CombatPhase.ENDED,
                result=CombatResult.PLAYER_ESCAPED,
            )
            return

        turn = CombatTurn(
            action=CombatAction.RUN,
            actor_name=self.player.name,
            message=f"{self.player.name} tried to escape but failed!",
        )
        self._end_player_turn(turn)

    def _end_player_turn(self, turn: CombatTurn, **changes: Any) -> None:
        """Logs the player's turn and hands over to the adversary.

        The adversary may already be dead, killed by the attack itself or by
        an ability hook; the combat then ends in victory instead.
        """
        turns = (*self.state.turns, turn)
        if self._require_adversary().is_dead():
            self._declare_victory(turns)
            return

        self._update_state(
            turns=turns,
            phase=CombatPhase.ADVERSARY_TURN,
            **changes,
        )
        if self.auto_advance:
            if self.pacer is not None:
                self.pacer()
            self.run_adversary_turn()

    # ============================================================================
    # ADVERSARY TURN
    # ============================================================================

    def run_adversary_turn(self) -> None:
        """Resolves the adversary's attack on the player.

        Ignored outside the ADVERSARY_TURN phase. The defending discount, if
        set, applies to this attack and is then cleared. A dead adversary does
        not strike: the combat ends in victory. If the player's ability hooks
        kill the adversary during its attack, the combat also ends in victory,
        unless the player died as well, which is a defeat.
        """
        if self.state.phase is not CombatPhase.ADVERSARY_TURN:
            log_debug(
                "Ignoring adversary turn: not the adversary's phase",
                {"phase": self.state.phase},
            )
            return

        adversary = self._require_adversary()
        if adversary.is_dead():
            self._declare_victory(self.state.turns)
            return

        defending = self.state.player_defending
        multiplier = self.config.defend_damage_factor if defending else 1.0

        outcome = adversary.strike(self.player, damage_multiplier=multiplier)
        turns = (*self.state.turns, self._attack_turn(adversary, self.player, outcome, defended=defending))

        if self.player.is_dead():
            log_info(f"{self.player.name} was defeated by {adversary.name}")
            self._update_state(
                turns=turns,
                phase=CombatPhase.ENDED,
                result=CombatResult.PLAYER_DEFEAT,
                player_defending=False,
            )
        elif adversary.is_dead():
            self._declare_victory(turns)
        else:
            self._update_state(
                turns=turns,
                phase=CombatPhase.PLAYER_TURN,
                result=CombatResult.ONGOING,
                player_defending=False,
            )

    def _declare_victory(self, turns: tuple[CombatTurn, ...]) -> None:
        """Pays the adversary's rewards and ends the combat in victory."""
        adversary = self._require_adversary()
        rewards = self.player.claim_rewards(adversary)
        log_info(
            f"{self.player.name} defeated {adversary.name}",
            {"experience": rewards.experience, "gold": rewards.gold},
        )
        self._update_state(
            turns=turns,
            phase=CombatPhase.ENDED,
            result=CombatResult.PLAYER_VICTORY,
            player_defending=False,
            rewards=rewards,
        )

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _require_adversary(self) -> Combatant:
        """Returns the bound adversary.

        Raises:
            CombatStateError: If no adversary is bound.

        """
        if self.adversary is None:
            log_warning(
                "Attempted to resolve an attack with no adversary bound",
                {
                    "player": self.player.name,
                    "phase": str(self.state.phase),
                    "context": "attack_resolution",
                },
            )
            raise CombatStateError("No adversary in combat")
        return self.adversary

    @staticmethod
    def _attack_turn(
        actor: Combatant,
        target: Combatant,
        outcome: AttackOutcome,
        defended: bool = False,
    ) -> CombatTurn:
        """Builds the log entry of an attack."""
        if outcome.dodged:
            message = f"{actor.name} attacked but {target.name} dodged!"
        else:
            if outcome.critical:
                message = f"{actor.name} landed a critical hit on {target.name} for {outcome.damage} damage"
            else:
                message = f"{actor.name} attacked {target.name} for {outcome.damage} damage"
            if outcome.shield_absorbed:
                message += f" ({outcome.shield_absorbed} absorbed by shield)"
            if defended:
                message += " (reduced by defense)"
            message += "!" if outcome.critical else "."

        return CombatTurn(
            action=CombatAction.ATTACK,
            actor_name=actor.name,
            target_name=target.name,
            damage=outcome.damage,
            shield_absorbed=outcome.shield_absorbed,
            is_critical=outcome.critical,
            is_dodged=outcome.dodged,
            message=message,
        )
