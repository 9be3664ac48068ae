"""
Common CLI options and callbacks for panaddr.

This module provides reusable option factories and callbacks for CLI commands.
"""

from typing import Optional

import typer

from panaddr.constants import PANOS_MAX_NAME_LENGTH
from panaddr.core.logging_utils import (
    verbose_callback,
    quiet_callback,
    log_level_callback,
    log_file_callback,
)
from panaddr.core.models import ObjectType
from panaddr.core.policy import DetectionOrder, RenameSuffixSource, SanitizeMode, SynthesisPolicy

from .completions import (
    complete_entry_files,
    complete_profile_files,
    complete_object_types,
)


class CommonOptions:
    """Global options shared by every command."""

    @staticmethod
    def apply_to_app(app: typer.Typer):
        """Apply common options to the application."""

        @app.callback()
        def callback(
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Enable verbose output", callback=verbose_callback
            ),
            quiet: bool = typer.Option(
                False, "--quiet", "-q", help="Suppress log output", callback=quiet_callback
            ),
            log_level: Optional[str] = typer.Option(
                None,
                "--log-level",
                "-l",
                help="Set log level (debug, info, warning, error, critical)",
                callback=log_level_callback,
            ),
            log_file: Optional[str] = typer.Option(
                None, "--log-file", "-f", help="Log to file", callback=log_file_callback
            ),
        ):
            """Generate PAN-OS address object and address group CLI commands."""
            pass


class InputOptions:
    """Options for entry input, output and profiles."""

    @staticmethod
    def entries():
        """Positional entries."""
        return typer.Argument(None, help="Entries, one per argument (combined with --input)")

    @staticmethod
    def input_file():
        return typer.Option(
            None,
            "--input",
            "-i",
            help="File with one entry per line ('-' reads stdin)",
            autocompletion=complete_entry_files,
        )

    @staticmethod
    def output_file():
        return typer.Option(
            None, "--output", "-o", help="Write the commands to this file instead of stdout"
        )

    @staticmethod
    def profile():
        return typer.Option(
            None,
            "--profile",
            "-p",
            help="YAML profile with default settings (defaults to $PANADDR_PROFILE)",
            autocompletion=complete_profile_files,
        )


class NamingOptions:
    """Options that shape constructed object names and their attributes."""

    @staticmethod
    def zone():
        return typer.Option(
            None, "--zone", "-z", help="Zone name used as the object name prefix and default tag"
        )

    @staticmethod
    def object_type():
        return typer.Option(
            None,
            "--type",
            "-t",
            help="Object type: auto, HST, SBN, ADR or FQDN (auto-detected if not specified)",
            callback=object_type_callback,
            autocompletion=complete_object_types,
        )

    @staticmethod
    def tag():
        return typer.Option(None, "--tag", help="Tag for the objects (uses the zone name if empty)")

    @staticmethod
    def description():
        return typer.Option(
            None, "--description", "-d", help="Description for the objects (uses each entry if empty)"
        )

    @staticmethod
    def create_tag():
        return typer.Option(
            None, "--create-tag/--no-create-tag", help="Declare the tag before using it"
        )


class GroupOptions:
    """Options for address group assembly."""

    @staticmethod
    def enabled():
        return typer.Option(
            None, "--group/--no-group", help="Add the generated objects to an address group"
        )

    @staticmethod
    def suffix():
        return typer.Option(
            None, "--group-suffix", help="Address group name suffix (ZONE_ADG_<suffix>)"
        )

    @staticmethod
    def tag():
        return typer.Option(None, "--group-tag", help="Tag for the address group (uses the zone name if empty)")

    @staticmethod
    def create_tag():
        return typer.Option(
            None, "--create-group-tag/--no-create-group-tag", help="Declare the group tag before using it"
        )


class PolicyOptions:
    """Options overriding the synthesis policy."""

    @staticmethod
    def sanitize():
        return typer.Option(
            None,
            "--sanitize",
            help="Suffix sanitization: dot-preserving or dot-replacing",
        )

    @staticmethod
    def detection():
        return typer.Option(
            None,
            "--detection",
            help="Auto-detection precedence: range-first or subnet-first",
        )

    @staticmethod
    def suffix_source():
        return typer.Option(
            None,
            "--suffix-source",
            help="Rename suffix source: full-name or last-segment (OriginalName_Suffix)",
        )

    @staticmethod
    def tag_groups():
        return typer.Option(
            None, "--tag-group/--no-tag-group", help="Emit a tag directive for the address group"
        )

    @staticmethod
    def compact():
        return typer.Option(
            False, "--compact", help="Do not separate object blocks with blank lines"
        )

    @staticmethod
    def max_name_length():
        return typer.Option(
            None,
            "--max-name-length",
            min=1,
            help=f"Skip entries whose new name is longer than this (PAN-OS allows {PANOS_MAX_NAME_LENGTH})",
        )

    @staticmethod
    def build(
        base: SynthesisPolicy,
        sanitize: Optional[SanitizeMode] = None,
        detection: Optional[DetectionOrder] = None,
        rename_suffix: Optional[RenameSuffixSource] = None,
        tag_groups: Optional[bool] = None,
        compact: bool = False,
        max_name_length: Optional[int] = None,
    ) -> SynthesisPolicy:
        """
        Apply command line overrides to a base policy.

        Args:
            base: Policy from the profile
            sanitize: Sanitization mode override
            detection: Detection order override
            rename_suffix: Rename suffix source override
            tag_groups: Group tagging override
            compact: Drop blank separator lines
            max_name_length: Name length limit override

        Returns:
            SynthesisPolicy
        """
        return base.replace(
            sanitize=sanitize,
            detection=detection,
            rename_suffix=rename_suffix,
            tag_groups=tag_groups,
            block_separator=False if compact else None,
            max_name_length=max_name_length,
        )


def object_type_callback(value: Optional[str]) -> Optional[str]:
    """
    Validate the object type option.

    Args:
        value: The object type as typed by the user

    Returns:
        The normalized type code, "auto", or None

    Raises:
        typer.BadParameter: If the value is not a known type
    """
    if value is None:
        return None
    if value.lower() == "auto":
        return "auto"
    normalized = value.upper()
    valid = [t.value for t in ObjectType]
    if normalized not in valid:
        raise typer.BadParameter(
            f"Invalid object type: '{value}'. Valid options are: auto, {', '.join(valid)}"
        )
    return normalized
