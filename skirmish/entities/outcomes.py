"""
Outcome records produced by the stat engine.
"""

from pydantic import BaseModel, ConfigDict, Field


class HitOutcome(BaseModel):
    """Result of a combatant absorbing one incoming hit."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(description="Incoming damage before dodge and shield.")
    dodged: bool = Field(default=False, description="Whether the hit was dodged.")
    shield_absorbed: int = Field(default=0, description="Damage absorbed by the shield.")
    health_damage: int = Field(default=0, description="Damage that reached health.")


class AttackOutcome(BaseModel):
    """Result of one attack from an attacker to a target."""

    model_config = ConfigDict(frozen=True)

    nominal_damage: int = Field(
        description="Damage rolled by the attacker, after critical and modifiers.",
    )
    critical: bool = Field(default=False, description="Whether the attack was critical.")
    dodged: bool = Field(default=False, description="Whether the target dodged.")
    shield_absorbed: int = Field(default=0, description="Damage absorbed by the target's shield.")
    damage: int = Field(default=0, description="Damage applied to the target's health.")
    killed: bool = Field(default=False, description="Whether the target died.")


class Rewards(BaseModel):
    """Rewards collected by the player after defeating an adversary."""

    model_config = ConfigDict(frozen=True)

    experience: int = Field(default=0, ge=0, description="Experience gained.")
    gold: int = Field(default=0, ge=0, description="Gold gained.")
    leveled_up: bool = Field(default=False, description="Whether the player leveled up.")
