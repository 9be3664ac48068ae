"""
Command modules for the panaddr CLI.

Each module registers its commands with the main Typer app.
"""

from . import address_commands

__all__ = [
    "address_commands",
]
