"""
Skirmish package: a turn-based duel combat core.

This package contains the combatant model (stats, leveling and ability
hooks), the combat state machine driving a player against one adversary,
and a small terminal front-end built on top of them.
"""
