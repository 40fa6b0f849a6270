"""
User interface module.

Provides the console interface used by the terminal demo.
"""

from .cli_interface import PlayerInterface, format_turn

__all__ = [
    "PlayerInterface",
    "format_turn",
]
