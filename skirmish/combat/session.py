"""
Combat session records.

A combat session is observed through immutable snapshots: every transition
of the combat manager produces a new CombatState, which replaces the previous
one entirely. The combatants themselves are live objects, so each snapshot
also freezes their vitals as they were at that transition.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from skirmish.core.constants import CombatAction, CombatPhase, CombatResult
from skirmish.entities.combatant import Combatant
from skirmish.entities.outcomes import Rewards


class CombatTurn(BaseModel):
    """One resolved action by either side."""

    model_config = ConfigDict(frozen=True)

    action: CombatAction = Field(description="The action performed.")
    actor_name: str = Field(description="Name of the acting combatant.")
    target_name: str = Field(
        default="",
        description="Name of the target, empty when the action has none.",
    )
    damage: int = Field(
        default=0,
        description="Damage applied to the target's health; negative for healing.",
    )
    shield_absorbed: int = Field(
        default=0,
        description="Damage absorbed by the target's shield.",
    )
    is_critical: bool = Field(default=False, description="Whether the hit was critical.")
    is_dodged: bool = Field(default=False, description="Whether the target dodged.")
    message: str = Field(default="", description="Human-readable description.")

    def __str__(self) -> str:
        return self.message


class CombatantVitals(BaseModel):
    """Health and shield of a combatant at one point of the session."""

    model_config = ConfigDict(frozen=True)

    name: str
    level: int
    health: int
    max_health: int
    shield: int
    max_shield: int

    @classmethod
    def of(cls, combatant: Combatant) -> "CombatantVitals":
        return cls(
            name=combatant.name,
            level=combatant.level,
            health=combatant.health,
            max_health=combatant.max_health,
            shield=combatant.shield,
            max_shield=combatant.max_shield,
        )


class CombatState(BaseModel):
    """Immutable snapshot of a combat session."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    phase: CombatPhase = Field(
        default=CombatPhase.PLAYER_TURN,
        description="Current phase of the state machine.",
    )
    current_adversary: Combatant | None = Field(
        default=None,
        description="The adversary being fought, if any.",
    )
    turns: tuple[CombatTurn, ...] = Field(
        default=(),
        description="Ordered log of the resolved turns.",
    )
    result: CombatResult = Field(
        default=CombatResult.ONGOING,
        description="Outcome of the session.",
    )
    player_defending: bool = Field(
        default=False,
        description="Whether the next hit on the player is reduced.",
    )
    rewards: Rewards | None = Field(
        default=None,
        description="Rewards collected on victory.",
    )
    player_vitals: CombatantVitals | None = Field(
        default=None,
        description="The player's vitals when the snapshot was taken.",
    )
    adversary_vitals: CombatantVitals | None = Field(
        default=None,
        description="The adversary's vitals when the snapshot was taken.",
    )

    @computed_field(description="Whether the player may submit an action")
    @property
    def is_player_turn(self) -> bool:
        return self.phase is CombatPhase.PLAYER_TURN

    @property
    def is_over(self) -> bool:
        return self.result is not CombatResult.ONGOING

    @property
    def last_turn(self) -> CombatTurn | None:
        return self.turns[-1] if self.turns else None
