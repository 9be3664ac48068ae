"""
Main CLI application for panaddr.

This module provides the main Typer application and the logging and
exception handling shared by every command.
"""

import sys
import logging

import typer

from panaddr.core.logging_utils import configure_logging
from .common import CommonOptions

# Create main Typer app with auto-completion support
app = typer.Typer(
    help="Generate PAN-OS address object and address group CLI commands",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Get logger
logger = logging.getLogger("panaddr")

# Apply common options to the app
CommonOptions.apply_to_app(app)

# Warnings and above by default; --verbose and --log-level adjust it
configure_logging(level="warning")


def _global_exception_handler(exc_type, exc_value, exc_traceback):
    """
    Global exception handler for unhandled exceptions.
    Provides more user-friendly error messages for common issues.
    """
    from panaddr.core.exceptions import PANAddrError, ConfigError, ValidationError, FileOperationError

    if isinstance(exc_value, PANAddrError):
        if isinstance(exc_value, ValidationError):
            logger.error(f"Validation error: {exc_value}")
        elif isinstance(exc_value, ConfigError):
            logger.error(f"Profile error: {exc_value}")
        elif isinstance(exc_value, FileOperationError):
            logger.error(f"File error: {exc_value}")
        else:
            logger.error(f"{exc_type.__name__}: {exc_value}")
    elif isinstance(exc_value, (FileNotFoundError, PermissionError)):
        logger.error(f"{exc_type.__name__}: {exc_value}")
    else:
        logger.error(f"Unexpected error: {exc_type.__name__}: {exc_value}")
        if logger.getEffectiveLevel() <= logging.DEBUG:
            import traceback
            logger.debug("Traceback:")
            for line in traceback.format_tb(exc_traceback):
                logger.debug(line.rstrip())
    sys.exit(1)


# Set up the global exception handler
sys.excepthook = _global_exception_handler
