"""
Role extensions of a combatant.

A combatant is a single stat record; the fields that only make sense for one
side of the fight live in a role record attached to it. The player role
tracks wealth and lifetime progression, the adversary role holds its tier
and the rewards fixed at creation.
"""

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import Difficulty


class PlayerRole(BaseModel):
    """
    Player-specific progression and wealth.
    """

    model_config = ConfigDict(validate_assignment=True)

    gold: int = Field(
        default=0,
        ge=0,
        description="Current gold balance.",
    )
    total_experience_gained: int = Field(
        default=0,
        ge=0,
        description="Experience gained over the player's lifetime.",
    )
    total_enemies_defeated: int = Field(
        default=0,
        ge=0,
        description="Adversaries defeated over the player's lifetime.",
    )
    highest_level: int = Field(
        default=1,
        ge=1,
        description="Highest level ever reached.",
    )

    def gain_gold(self, amount: int) -> None:
        """
        Adds gold to the balance.

        Args:
            amount (int):
                The amount of gold to add.

        """
        self.gold += max(0, amount)

    def spend_gold(self, amount: int) -> bool:
        """
        Spends gold if the balance allows it.

        Args:
            amount (int):
                The amount of gold to spend.

        Returns:
            bool:
                True if the gold was spent, False if the balance is too low.

        """
        if amount < 0 or self.gold < amount:
            return False
        self.gold -= amount
        return True


class AdversaryRole(BaseModel):
    """
    Adversary-specific data, fixed once the adversary is created.
    """

    model_config = ConfigDict(frozen=True)

    difficulty: Difficulty = Field(
        description="Difficulty tier of the adversary.",
    )
    enemy_type: str = Field(
        description="Type label of the adversary (e.g. 'Goblin').",
    )
    aggressive: bool = Field(
        default=False,
        description="Whether the difficulty tier flags the adversary as aggressive.",
    )
    experience_reward: int = Field(
        ge=0,
        description="Experience granted to the player on defeat.",
    )
    gold_reward: int = Field(
        ge=0,
        description="Gold granted to the player on defeat.",
    )


CombatantRole = PlayerRole | AdversaryRole
