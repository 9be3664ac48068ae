"""
Command base utilities for the panaddr CLI.

This module provides the shared pieces every command uses: the error-handling
decorator, request synthesis with precondition checks, and result output.
Generated commands are written to stdout untouched so they can be piped or
pasted; status messages go to a rich console on stderr.
"""

import logging
import traceback
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

import typer
from rich.console import Console

from panaddr.core.exceptions import PANAddrError, ValidationError
from panaddr.core.input_reader import write_output
from panaddr.core.logging_utils import log_structured
from panaddr.core.models import GenerationRequest, ResultStatus, SynthesisResult
from panaddr.core.synthesizer import synthesize
from panaddr.core.validation import validate_request

# Type variable for command functions
F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger("panaddr")

# Rich consoles: status messages on stderr, tables on stdout
console = Console(stderr=True)
output_console = Console()

# Exit code used when every entry was skipped
EXIT_NOTHING_GENERATED = 2


def handle_error(error: Exception, command_name: str) -> None:
    """
    Report a command error and exit with status 1.

    Args:
        error: The exception to handle
        command_name: Name of the command for logging
    """
    if isinstance(error, ValidationError):
        log_structured(
            f"Validation failed in {command_name}: {error}",
            "error",
            command=command_name,
            field=error.field,
        )
        console.print(f"[red]Missing input:[/red] {error}")
    elif isinstance(error, PANAddrError):
        log_structured(
            f"Command error in {command_name}: {error}",
            "error",
            command=command_name,
            error_type=type(error).__name__,
        )
        console.print(f"[red]Error:[/red] {error}")
    else:
        log_structured(
            f"Unexpected error in {command_name}: {error}",
            "error",
            command=command_name,
            error_type=type(error).__name__,
            traceback=traceback.format_exc(),
        )
        console.print(f"[red]Unexpected error:[/red] {error}")
        if logger.getEffectiveLevel() <= logging.DEBUG:
            console.print(traceback.format_exc())
    raise typer.Exit(1)


def command_error_handler(f: F) -> F:
    """
    Decorator to standardize error handling for commands.

    Args:
        f: Command function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            handle_error(e, f.__name__)

    return cast(F, wrapper)


def run_request(request: GenerationRequest) -> SynthesisResult:
    """
    Validate a request and synthesize it.

    Args:
        request: The request to run

    Returns:
        SynthesisResult

    Raises:
        ValidationError: If the request fails its precondition checks
    """
    validate_request(request)
    return synthesize(request)


def emit_result(result: SynthesisResult, output_file: Optional[str] = None, group_requested: bool = False) -> None:
    """
    Print or save the generated commands and report the outcome.

    Args:
        result: The synthesis result
        output_file: File to write the commands to instead of stdout (optional)
        group_requested: Whether the request asked for an address group

    Raises:
        typer.Exit: With EXIT_NOTHING_GENERATED when no directive was produced
    """
    if output_file:
        path = write_output(result.text, output_file)
        console.print(f"Commands saved to [blue]{path}[/blue]")
    else:
        typer.echo(result.text)

    status = result.status
    if status == ResultStatus.COMPLETE:
        message = f"[green]Commands generated[/green] for {len(result.members) or len(result.directives)} entries."
        if group_requested and result.members:
            message += " Address group configured."
        console.print(message)
    elif status == ResultStatus.PARTIAL:
        console.print(
            f"[yellow]Commands generated with {result.skipped} skipped "
            f"{'entry' if result.skipped == 1 else 'entries'}.[/yellow] See the '#' lines for details."
        )
    else:
        if result.skipped:
            console.print("[red]No valid commands generated:[/red] all entries were malformed or skipped.")
        else:
            console.print("[red]No commands generated:[/red] the entry list might be empty.")
        raise typer.Exit(EXIT_NOTHING_GENERATED)
