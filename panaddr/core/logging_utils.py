"""
Logging utilities for panaddr.

This module provides functions for configuring and using the logging system.
All records go to the single ``panaddr`` logger; console records are written
to stderr because stdout carries the generated directives.
"""

import json
import logging
import os
import sys
import traceback
from typing import List, Optional

import typer

# Define log levels
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Create a global logger
logger = logging.getLogger("panaddr")


class JsonFormatter(logging.Formatter):
    """Formatter emitting one JSON document per record."""

    def format(self, record):
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "value": str(record.exc_info[1]),
                "traceback": traceback.format_tb(record.exc_info[2]),
            }

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data.update(extra_data)

        return json.dumps(log_data, default=str)


def _console_handlers() -> List[logging.Handler]:
    """Return the stream handlers of the logger, excluding file handlers."""
    return [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
    ]


def _set_level(level: str) -> None:
    logger.setLevel(LOG_LEVELS[level])
    for handler in _console_handlers():
        handler.setLevel(LOG_LEVELS[level])


def _file_handler(log_file: str, formatter: logging.Formatter) -> logging.FileHandler:
    dir_path = os.path.dirname(os.path.abspath(log_file))
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    handler = logging.FileHandler(log_file)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: str = "info",
    log_file: Optional[str] = None,
    quiet: bool = False,
    verbose: bool = False,
    json_format: bool = False,
) -> None:
    """
    Configure the global logger.

    Args:
        level: Log level (debug, info, warning, error, critical)
        log_file: Path to log file (optional)
        quiet: Suppress console output if True
        verbose: Enable verbose output if True
        json_format: Use JSON formatting for structured logging
    """
    if verbose:
        level = "debug"
    elif quiet and level == "info":
        level = "warning"

    log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if json_format:
        console_formatter = JsonFormatter()
        file_formatter = JsonFormatter()
    else:
        console_formatter = logging.Formatter(DETAILED_FORMAT if verbose else CONSOLE_FORMAT)
        file_formatter = logging.Formatter(DETAILED_FORMAT)

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = _file_handler(log_file, file_formatter)
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    logger.debug(
        f"Logging configured: level={level}, log_file={log_file}, quiet={quiet}, "
        f"verbose={verbose}, json_format={json_format}"
    )


def log_structured(message: str, level: str = "info", **kwargs) -> None:
    """
    Log a message with structured additional data.

    Args:
        message: Log message
        level: Log level (debug, info, warning, error, critical)
        **kwargs: Additional structured data to include in the log
    """
    log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    logger.log(log_level, message, extra={"extra_data": kwargs})


# Option callbacks for use with Typer CLI
def verbose_callback(value: bool) -> bool:
    """Typer callback for verbose flag"""
    if value:
        if not logger.handlers:
            configure_logging(level="debug")
        else:
            _set_level("debug")
    return value


def quiet_callback(value: bool) -> bool:
    """Typer callback for quiet flag"""
    if value:
        for handler in _console_handlers():
            logger.removeHandler(handler)
    return value


def log_level_callback(value: Optional[str]) -> Optional[str]:
    """Typer callback to validate and set log level"""
    if value is None:
        return None
    value = value.lower()
    if value not in LOG_LEVELS:
        valid_levels = ", ".join(LOG_LEVELS.keys())
        raise typer.BadParameter(f"Log level must be one of: {valid_levels}")

    if logger.handlers:
        _set_level(value)

    return value


def log_file_callback(value: Optional[str]) -> Optional[str]:
    """Typer callback for log file"""
    if value:
        for handler in logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
        try:
            logger.addHandler(_file_handler(value, logging.Formatter(DETAILED_FORMAT)))
        except OSError as e:
            raise typer.BadParameter(f"Cannot write to log file: {str(e)}")

    return value
