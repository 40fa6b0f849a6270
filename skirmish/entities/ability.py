"""
Ability module for the combat core.

An ability is a named bundle of independently optional handlers that a
combatant invokes at well defined points of combat: after attacking, after
being hit, after a kill, after a level-up, and once when attached.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import NiceEnum


class HookType(NiceEnum):
    """Combat events an ability can react to."""

    ON_ATTACK = "on_attack"  # Attacker, after every attack attempt
    ON_DAMAGED = "on_damaged"  # Defender, after every incoming hit (even dodged)
    ON_KILL = "on_kill"  # Attacker, when the target's health reaches 0
    ON_LEVEL_UP = "on_level_up"  # After the stats of a level-up are applied
    PASSIVE = "passive"  # Once, when the ability is attached


class Ability(BaseModel):
    """
    A named, immutable set of optional combat hooks.

    Handler signatures (``owner`` is the combatant holding the ability):

    - ``on_attack(owner, target, damage)``: ``damage`` is the damage actually
      applied to the target's health (0 on a dodge).
    - ``on_damaged(owner, attacker, damage)``: ``attacker`` may be None,
      ``damage`` is the damage that reached health after shields.
    - ``on_kill(owner, target)``: the target is passed in its final state.
    - ``on_level_up(owner)``
    - ``passive(owner)``
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        description="The name of the ability.",
    )
    description: str = Field(
        default="",
        description="A brief description of the ability.",
    )
    on_attack: Callable[[Any, Any, int], None] | None = Field(
        default=None,
        description="Handler fired by the attacker after each attack.",
    )
    on_damaged: Callable[[Any, Any, int], None] | None = Field(
        default=None,
        description="Handler fired by the defender after each hit.",
    )
    on_kill: Callable[[Any, Any], None] | None = Field(
        default=None,
        description="Handler fired by the attacker when its target dies.",
    )
    on_level_up: Callable[[Any], None] | None = Field(
        default=None,
        description="Handler fired after a level-up.",
    )
    passive: Callable[[Any], None] | None = Field(
        default=None,
        description="Handler fired once when the ability is attached.",
    )

    def handler(self, hook: HookType) -> Callable[..., None] | None:
        """
        Returns the handler registered for the given hook, if any.

        Args:
            hook (HookType):
                The combat event being dispatched.

        Returns:
            Callable[..., None] | None:
                The handler, or None if the ability ignores that event.

        """
        return getattr(self, hook.value)

    def __str__(self) -> str:
        return self.name
