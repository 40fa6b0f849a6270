"""
Combatant module for the combat core.

Defines the Combatant class: the stat container shared by the player and the
adversaries, together with the damage, healing, experience and leveling math
and the dispatch of ability hooks.
"""

import math
from typing import Any

from skirmish.core.constants import (
    ATTACK_GROWTH,
    CRITICAL_MULTIPLIER,
    HEALTH_GROWTH,
    MAX_RATE,
    SHIELD_GROWTH,
    STARTING_EXPERIENCE_THRESHOLD,
    STARTING_LEVEL,
    THRESHOLD_GROWTH,
    CharacterType,
)
from skirmish.core.logging import log_debug
from skirmish.core.utils import RandomSource, default_rng, roll

from .ability import Ability, HookType
from .display import CombatantDisplay
from .outcomes import AttackOutcome, HitOutcome, Rewards
from .roles import AdversaryRole, CombatantRole, PlayerRole


def _clamp_rate(value: float) -> float:
    """Clamps a dodge or critical rate into [0, MAX_RATE]."""
    return min(MAX_RATE, max(0.0, value))


class Combatant:
    """
    Represents anything that can fight: stats, progression, abilities and
    combat counters. Side-specific data lives in the ``role`` record.

    Attributes:
        name (str):
            Display name, used to compose turn messages.
        role (CombatantRole):
            The player or adversary extension of this combatant.
        health (int):
            Current health, between 0 and ``max_health``.
        shield (int):
            Current shield, between 0 and ``max_shield``.
        attack_power (int):
            Base damage of an attack.
        level (int):
            Current level.
        experience (int):
            Experience accumulated towards the next level.
        experience_to_next_level (int):
            Experience threshold of the next level.
        abilities (list[Ability]):
            Attached abilities, in trigger order.
        kills (int):
            Number of targets this combatant has defeated.
        damage_dealt (int):
            Cumulative damage applied to targets' health.
        damage_taken (int):
            Cumulative damage that reached this combatant's health.
        rng (RandomSource):
            Random source used for this combatant's critical and dodge rolls.

    """

    name: str
    role: CombatantRole
    health: int
    shield: int
    attack_power: int
    level: int
    experience: int
    experience_to_next_level: int
    abilities: list[Ability]
    kills: int
    damage_dealt: int
    damage_taken: int
    rng: RandomSource

    def __init__(
        self,
        name: str,
        role: CombatantRole,
        health: int,
        shield: int,
        dodge_rate: float,
        crit_rate: float,
        attack_power: int,
        rng: RandomSource | None = None,
    ) -> None:
        if not name:
            raise ValueError("Combatant name must be a non-empty string")
        if health <= 0:
            raise ValueError(f"Combatant health must be positive, got {health}")
        if shield < 0 or attack_power < 0:
            raise ValueError(
                f"Combatant shield and attack power must be non-negative, "
                f"got shield={shield}, attack_power={attack_power}"
            )

        self.name = name
        self.role = role
        self.rng = rng or default_rng

        # Basic stats.
        self._max_health = health
        self.health = health
        self._max_shield = shield
        self.shield = shield
        self._dodge_rate = _clamp_rate(dodge_rate)
        self._crit_rate = _clamp_rate(crit_rate)
        self.attack_power = attack_power

        # Level and progression.
        self.level = STARTING_LEVEL
        self.experience = 0
        self.experience_to_next_level = STARTING_EXPERIENCE_THRESHOLD

        self.abilities = []

        # Combat tracking.
        self.kills = 0
        self.damage_dealt = 0
        self.damage_taken = 0

        self.display = CombatantDisplay(owner=self)

    # ============================================================================
    # STAT PROPERTIES
    # ============================================================================

    @property
    def max_health(self) -> int:
        """Returns the maximum health."""
        return self._max_health

    @max_health.setter
    def max_health(self, value: int) -> None:
        """Sets the maximum health, lowering the current health if needed."""
        self._max_health = max(0, value)
        self.health = min(self.health, self._max_health)

    @property
    def max_shield(self) -> int:
        """Returns the maximum shield."""
        return self._max_shield

    @max_shield.setter
    def max_shield(self, value: int) -> None:
        """Sets the maximum shield, lowering the current shield if needed."""
        self._max_shield = max(0, value)
        self.shield = min(self.shield, self._max_shield)

    @property
    def dodge_rate(self) -> float:
        """Returns the probability of negating an incoming hit."""
        return self._dodge_rate

    @dodge_rate.setter
    def dodge_rate(self, value: float) -> None:
        self._dodge_rate = _clamp_rate(value)

    @property
    def crit_rate(self) -> float:
        """Returns the probability of doubling an outgoing attack."""
        return self._crit_rate

    @crit_rate.setter
    def crit_rate(self, value: float) -> None:
        self._crit_rate = _clamp_rate(value)

    # ============================================================================
    # ROLE HELPERS
    # ============================================================================

    @property
    def char_type(self) -> CharacterType:
        """Returns the side this combatant fights on."""
        if isinstance(self.role, PlayerRole):
            return CharacterType.PLAYER
        return CharacterType.ENEMY

    @property
    def colored_name(self) -> str:
        """Returns the name with color coding based on the character type."""
        return self.char_type.colorize(self.name)

    def is_player(self) -> bool:
        return isinstance(self.role, PlayerRole)

    def is_adversary(self) -> bool:
        return isinstance(self.role, AdversaryRole)

    @property
    def player_role(self) -> PlayerRole:
        """
        Returns the player role of this combatant.

        Raises:
            TypeError: If this combatant is not the player.

        """
        if not isinstance(self.role, PlayerRole):
            raise TypeError(f"{self.name} is not a player combatant")
        return self.role

    @property
    def adversary_role(self) -> AdversaryRole:
        """
        Returns the adversary role of this combatant.

        Raises:
            TypeError: If this combatant is not an adversary.

        """
        if not isinstance(self.role, AdversaryRole):
            raise TypeError(f"{self.name} is not an adversary combatant")
        return self.role

    # ============================================================================
    # ABILITIES
    # ============================================================================

    def add_ability(self, ability: Ability) -> None:
        """
        Attaches an ability and immediately applies its passive handler.

        Args:
            ability (Ability):
                The ability to attach.

        """
        self.abilities.append(ability)
        if ability.passive is not None:
            log_debug(f"{self.name} applies passive of {ability.name}")
            ability.passive(self)

    def _trigger(self, hook: HookType, *args: Any) -> None:
        """
        Invokes the handlers registered for a hook, in attachment order.

        Args:
            hook (HookType):
                The combat event being dispatched.
            *args (Any):
                The event arguments following the owner.

        """
        for ability in list(self.abilities):
            handler = ability.handler(hook)
            if handler is not None:
                log_debug(f"{self.name} triggers {ability.name} ({hook.value})")
                handler(self, *args)

    # ============================================================================
    # ATTACK AND DAMAGE
    # ============================================================================

    def strike(self, target: "Combatant", damage_multiplier: float = 1.0) -> AttackOutcome:
        """
        Resolves one attack against a target.

        The attack power is the candidate damage, doubled on a critical hit.
        The damage multiplier, when not 1, is applied afterwards and floored.
        The target then absorbs the hit. If the target dies the kill counter
        grows and on-kill hooks fire; on-attack hooks always fire last, even
        when the target dodged.

        Args:
            target (Combatant):
                The combatant receiving the attack.
            damage_multiplier (float):
                Extra multiplier applied to the nominal damage (e.g. the
                defending discount). Defaults to 1.0.

        Returns:
            AttackOutcome:
                The full outcome of the attack.

        """
        nominal = self.attack_power
        critical = roll(self.rng, self.crit_rate)
        if critical:
            nominal *= CRITICAL_MULTIPLIER
        if damage_multiplier != 1.0:
            nominal = math.floor(nominal * damage_multiplier)

        hit = target.receive_hit(nominal, attacker=self)
        self.damage_dealt += hit.health_damage

        killed = target.is_dead()
        if killed:
            self.kills += 1
            self._trigger(HookType.ON_KILL, target)

        self._trigger(HookType.ON_ATTACK, target, hit.health_damage)

        log_debug(
            f"{self.name} attacks {target.name}",
            {
                "nominal": nominal,
                "critical": critical,
                "dodged": hit.dodged,
                "absorbed": hit.shield_absorbed,
                "damage": hit.health_damage,
                "killed": killed,
            },
        )

        return AttackOutcome(
            nominal_damage=nominal,
            critical=critical,
            dodged=hit.dodged,
            shield_absorbed=hit.shield_absorbed,
            damage=hit.health_damage,
            killed=killed,
        )

    def attack(self, target: "Combatant") -> int:
        """
        Attacks a target.

        Args:
            target (Combatant):
                The combatant to attack.

        Returns:
            int:
                The damage actually applied to the target's health.

        """
        return self.strike(target).damage

    def receive_hit(self, amount: int, attacker: "Combatant | None" = None) -> HitOutcome:
        """
        Absorbs an incoming hit, accounting for dodge chance and shield.

        A successful dodge negates the hit entirely. Otherwise the shield
        absorbs damage first and the excess spills over into health. The
        on-damaged hooks fire in both cases with the damage that reached
        health.

        Args:
            amount (int):
                Incoming damage.
            attacker (Combatant | None):
                The combatant dealing the hit, if any.

        Returns:
            HitOutcome:
                What happened to the hit.

        """
        amount = max(0, amount)

        if roll(self.rng, self.dodge_rate):
            self._trigger(HookType.ON_DAMAGED, attacker, 0)
            return HitOutcome(amount=amount, dodged=True)

        absorbed = min(self.shield, amount)
        self.shield -= absorbed
        health_damage = amount - absorbed

        if health_damage > 0:
            self.health = max(0, self.health - health_damage)
            self.damage_taken += health_damage

        self._trigger(HookType.ON_DAMAGED, attacker, health_damage)

        return HitOutcome(
            amount=amount,
            shield_absorbed=absorbed,
            health_damage=health_damage,
        )

    def take_damage(self, amount: int, attacker: "Combatant | None" = None) -> int:
        """
        Takes damage, accounting for dodge chance and shield.

        Args:
            amount (int):
                Amount of damage to potentially take.
            attacker (Combatant | None):
                The combatant dealing the damage, if any.

        Returns:
            int:
                The damage that reached health (0 on a dodge).

        """
        return self.receive_hit(amount, attacker).health_damage

    def is_dead(self) -> bool:
        """
        Checks if the combatant is dead (health <= 0).

        Returns:
            bool:
                True if the combatant is dead, False otherwise

        """
        return self.health <= 0

    def is_alive(self) -> bool:
        return self.health > 0

    # ============================================================================
    # HEALING
    # ============================================================================

    def heal(self, amount: int) -> int:
        """
        Restores health, up to the maximum.

        Args:
            amount (int):
                Amount of health to restore.

        Returns:
            int:
                The amount actually healed.

        """
        old_health = self.health
        self.health = min(self.max_health, self.health + max(0, amount))
        return self.health - old_health

    def restore_shield(self, amount: int) -> int:
        """
        Restores shield, up to the maximum.

        Args:
            amount (int):
                Amount of shield to restore.

        Returns:
            int:
                The amount actually restored.

        """
        old_shield = self.shield
        self.shield = min(self.max_shield, self.shield + max(0, amount))
        return self.shield - old_shield

    # ============================================================================
    # EXPERIENCE AND LEVELING
    # ============================================================================

    def gain_experience(self, amount: int) -> bool:
        """
        Accumulates experience and levels up if the threshold is reached.

        Only one level-up is evaluated per call: a grant crossing two
        thresholds levels up once and keeps the leftover experience, even if
        it is still above the new threshold.

        Args:
            amount (int):
                Amount of experience to gain.

        Returns:
            bool:
                True if the combatant leveled up.

        Raises:
            ValueError:
                If the amount is negative.

        """
        if amount < 0:
            raise ValueError(f"Experience gained must be non-negative, got {amount}")
        if isinstance(self.role, PlayerRole):
            self.role.total_experience_gained += amount

        self.experience += amount
        if self.experience >= self.experience_to_next_level:
            self.level_up()
            return True
        return False

    def level_up(self) -> None:
        """
        Levels up: raises the threshold and the stats, restores health and
        shield, then fires the on-level-up hooks. Rates are left untouched.
        """
        self.level += 1
        self.experience -= self.experience_to_next_level
        self.experience_to_next_level = math.floor(
            self.experience_to_next_level * THRESHOLD_GROWTH
        )

        self.max_health = math.floor(self.max_health * HEALTH_GROWTH)
        self.health = self.max_health
        self.max_shield = math.floor(self.max_shield * SHIELD_GROWTH)
        self.shield = self.max_shield
        self.attack_power = math.floor(self.attack_power * ATTACK_GROWTH)

        if isinstance(self.role, PlayerRole):
            self.role.highest_level = max(self.role.highest_level, self.level)

        log_debug(f"{self.name} reached level {self.level}")

        self._trigger(HookType.ON_LEVEL_UP)

    # ============================================================================
    # REWARDS
    # ============================================================================

    def claim_rewards(self, defeated: "Combatant") -> Rewards:
        """
        Collects the rewards of a defeated adversary.

        Args:
            defeated (Combatant):
                The adversary that was defeated.

        Returns:
            Rewards:
                The experience and gold gained, and whether a level-up
                happened.

        Raises:
            TypeError:
                If this combatant is not the player or the defeated one is
                not an adversary.

        """
        player = self.player_role
        adversary = defeated.adversary_role

        leveled_up = self.gain_experience(adversary.experience_reward)
        player.gain_gold(adversary.gold_reward)
        player.total_enemies_defeated += 1

        return Rewards(
            experience=adversary.experience_reward,
            gold=adversary.gold_reward,
            leveled_up=leveled_up,
        )

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def get_status_line(self, show_numbers: bool = True, show_bars: bool = False) -> str:
        """Returns a formatted status line (see CombatantDisplay)."""
        return self.display.get_status_line(show_numbers=show_numbers, show_bars=show_bars)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', type={self.char_type}, "
            f"level={self.level}, health={self.health}/{self.max_health}, "
            f"shield={self.shield}/{self.max_shield})"
        )
