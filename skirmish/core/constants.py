"""
Constants and enumerations for the combat core.

Defines the tuning constants of the stat engine, the enumerations for
combatant roles, adversary difficulties, combat actions, phases and results,
and the difficulty tables used to derive adversary stats.
"""

from enum import Enum

# Hard cap applied to dodge and critical rates.
MAX_RATE = 0.9

# Damage multiplier applied on a critical hit.
CRITICAL_MULTIPLIER = 2

# Starting progression of every combatant.
STARTING_LEVEL = 1
STARTING_EXPERIENCE_THRESHOLD = 100

# Growth factors applied by a level-up (results are floored).
THRESHOLD_GROWTH = 1.5
HEALTH_GROWTH = 1.2
SHIELD_GROWTH = 1.1
ATTACK_GROWTH = 1.15


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class CharacterType(NiceEnum):
    """Defines the side a combatant fights on."""

    PLAYER = "PLAYER"
    ENEMY = "ENEMY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this character type."""
        return {
            CharacterType.PLAYER: "👤",
            CharacterType.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this character type."""
        return {
            CharacterType.PLAYER: "bold blue",
            CharacterType.ENEMY: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies character type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class Difficulty(NiceEnum):
    """Difficulty tier of an adversary."""

    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    BOSS = "Boss"

    @property
    def color(self) -> str:
        """Returns the color string associated with this difficulty."""
        return {
            Difficulty.EASY: "green",
            Difficulty.NORMAL: "white",
            Difficulty.HARD: "yellow",
            Difficulty.BOSS: "bold magenta",
        }.get(self, "dim white")

    @property
    def experience_multiplier(self) -> float:
        """Multiplier applied to the experience threshold of an adversary."""
        return {
            Difficulty.EASY: 0.8,
            Difficulty.NORMAL: 1.0,
            Difficulty.HARD: 1.5,
            Difficulty.BOSS: 2.5,
        }.get(self, 1.0)


class CombatAction(NiceEnum):
    """Actions the player can submit during its turn."""

    ATTACK = "attack"
    DEFEND = "defend"
    USE_ITEM = "use_item"
    RUN = "run"

    @property
    def emoji(self) -> str:
        return {
            CombatAction.ATTACK: "⚔️",
            CombatAction.DEFEND: "🛡️",
            CombatAction.USE_ITEM: "🧪",
            CombatAction.RUN: "🏃",
        }.get(self, "❔")


class CombatPhase(NiceEnum):
    """Phases of the combat state machine."""

    PLAYER_TURN = "player_turn"
    ADVERSARY_TURN = "adversary_turn"
    ENDED = "ended"


class CombatResult(NiceEnum):
    """Outcome of a combat session."""

    ONGOING = "ongoing"
    PLAYER_VICTORY = "player_victory"
    PLAYER_DEFEAT = "player_defeat"
    PLAYER_ESCAPED = "player_escaped"

    @property
    def color(self) -> str:
        return {
            CombatResult.ONGOING: "white",
            CombatResult.PLAYER_VICTORY: "bold green",
            CombatResult.PLAYER_DEFEAT: "bold red",
            CombatResult.PLAYER_ESCAPED: "bold yellow",
        }.get(self, "dim white")


# Base stats shared by every adversary before any scaling.
ADVERSARY_BASE_STATS: dict[str, float] = {
    "health": 50,
    "shield": 10,
    "dodge_rate": 0.05,
    "crit_rate": 0.03,
    "attack_power": 10,
    "experience_reward": 20,
    "gold_reward": 5,
}

# Per-difficulty stat multipliers. Missing stats are left untouched.
DIFFICULTY_MULTIPLIERS: dict[Difficulty, dict[str, float]] = {
    Difficulty.EASY: {
        "health": 0.8,
        "shield": 0.7,
        "attack_power": 0.8,
        "experience_reward": 0.8,
        "gold_reward": 0.8,
    },
    Difficulty.NORMAL: {},
    Difficulty.HARD: {
        "health": 1.5,
        "shield": 1.3,
        "dodge_rate": 1.2,
        "crit_rate": 1.2,
        "attack_power": 1.3,
        "experience_reward": 1.5,
        "gold_reward": 1.5,
    },
    Difficulty.BOSS: {
        "health": 3,
        "shield": 2,
        "dodge_rate": 1.5,
        "crit_rate": 1.5,
        "attack_power": 2,
        "experience_reward": 3,
        "gold_reward": 3,
    },
}

# Difficulties whose adversaries are flagged as aggressive.
AGGRESSIVE_DIFFICULTIES = frozenset({Difficulty.HARD, Difficulty.BOSS})

# Linear per-level growth of adversary stats: stat * (1 + (level - 1) * rate).
ADVERSARY_LEVEL_SCALING: dict[str, float] = {
    "health": 0.2,
    "shield": 0.1,
    "attack_power": 0.15,
    "experience_reward": 0.3,
    "gold_reward": 0.25,
}
