"""
CLI package for panaddr.

This module organizes the command-line interface for panaddr.
"""

from .app import app

# Import commands to register them with the CLI
# This must be after importing app to avoid circular imports
from .commands import address_commands
