"""
Configuration module for the combat core.

Holds the tunable parameters of a combat session and loads them from a JSON
file. Every field is validated by pydantic, so an out-of-range value is
rejected at load time instead of surfacing mid-combat.
"""

import json
from pathlib import Path

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class CombatConfig(BaseModel):
    """
    Tunable parameters of the combat manager and of the terminal demo.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    escape_chance: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Probability that a RUN action succeeds.",
    )
    defend_damage_factor: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Multiplier applied to the next hit taken while defending.",
    )
    potion_heal_ratio: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Fraction of the maximum health restored by USE_ITEM.",
    )
    adversary_turn_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Pacing delay, in seconds, before the adversary acts.",
    )
    player_name: str = Field(
        default="Hero",
        min_length=1,
        description="Display name of the player combatant.",
    )


def load_config(filepath: Path | None = None) -> CombatConfig:
    """
    Loads a combat configuration from a JSON file.

    Args:
        filepath (Path | None):
            The JSON file to read. When None, or when the file does not
            exist, the default configuration is returned.

    Returns:
        CombatConfig:
            The validated configuration.

    Raises:
        ValueError:
            If the file is not valid JSON, is not an object, or holds values
            rejected by validation.

    """
    if filepath is None:
        return CombatConfig()
    if not filepath.exists():
        log_warning(
            f"Configuration file not found, using defaults: {filepath}",
            {"filepath": str(filepath), "context": "load_config"},
        )
        return CombatConfig()
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {filepath}, got {type(data).__name__}")
        return CombatConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
