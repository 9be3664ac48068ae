"""
Address commands for the panaddr CLI.

This module provides the create, rename and delete commands that generate
PAN-OS set commands, plus helpers to preview group names and detected types.
"""

import logging
from typing import List, Optional

import typer
from rich.table import Table

from panaddr.constants import OBJECT_TYPE_CODES
from panaddr.core.config_loader import load_profile
from panaddr.core.input_reader import read_entries
from panaddr.core.models import GenerationRequest, ObjectType, Operation
from panaddr.core.naming import classify, preview_group_name
from panaddr.core.policy import DetectionOrder, RenameSuffixSource, SanitizeMode

from ..app import app
from ..command_base import command_error_handler, console, emit_result, output_console, run_request
from ..common import GroupOptions, InputOptions, NamingOptions, PolicyOptions

# Get logger
logger = logging.getLogger("panaddr")


@app.command("create")
@command_error_handler
def create_objects(
    entries: Optional[List[str]] = InputOptions.entries(),
    zone: Optional[str] = NamingOptions.zone(),
    object_type: Optional[str] = NamingOptions.object_type(),
    tag: Optional[str] = NamingOptions.tag(),
    description: Optional[str] = NamingOptions.description(),
    create_tag: Optional[bool] = NamingOptions.create_tag(),
    group: Optional[bool] = GroupOptions.enabled(),
    group_suffix: Optional[str] = GroupOptions.suffix(),
    group_tag: Optional[str] = GroupOptions.tag(),
    create_group_tag: Optional[bool] = GroupOptions.create_tag(),
    sanitize: Optional[SanitizeMode] = PolicyOptions.sanitize(),
    detection: Optional[DetectionOrder] = PolicyOptions.detection(),
    tag_group: Optional[bool] = PolicyOptions.tag_groups(),
    compact: bool = PolicyOptions.compact(),
    max_name_length: Optional[int] = PolicyOptions.max_name_length(),
    input_file: Optional[str] = InputOptions.input_file(),
    output_file: Optional[str] = InputOptions.output_file(),
    profile: Optional[str] = InputOptions.profile(),
):
    """
    Create address objects from raw values.

    Each entry is an IP address, subnet, range or FQDN. Objects are named
    ZONE_TYPE_VALUE; the type is detected from each value unless --type is
    given.

    Examples:

        panaddr create --zone DMZ 1.1.1.1 10.0.0.0/16 www.example.com

        panaddr create --zone DMZ --type SBN --group --group-suffix Web -i subnets.txt
    """
    settings = load_profile(profile)
    policy = PolicyOptions.build(
        settings.policy,
        sanitize=sanitize,
        detection=detection,
        tag_groups=tag_group,
        compact=compact,
        max_name_length=max_name_length,
    )

    request = settings.build_request(
        Operation.CREATE,
        read_entries(entries, input_file),
        zone_name=zone,
        object_type=ObjectType(object_type) if object_type not in (None, "auto") else None,
        auto_detect=object_type == "auto",
        tag=tag,
        description=description,
        create_tag=create_tag,
        group_enabled=group,
        group_suffix=group_suffix,
        group_tag=group_tag,
        group_create_tag=create_group_tag,
        policy=policy,
    )

    logger.info(f"Creating address objects for zone {request.zone}")
    result = run_request(request)
    emit_result(result, output_file, group_requested=request.group is not None)


@app.command("rename")
@command_error_handler
def rename_objects(
    entries: Optional[List[str]] = InputOptions.entries(),
    zone: Optional[str] = NamingOptions.zone(),
    tag: Optional[str] = NamingOptions.tag(),
    description: Optional[str] = NamingOptions.description(),
    group: Optional[bool] = GroupOptions.enabled(),
    group_suffix: Optional[str] = GroupOptions.suffix(),
    group_tag: Optional[str] = GroupOptions.tag(),
    sanitize: Optional[SanitizeMode] = PolicyOptions.sanitize(),
    suffix_source: Optional[RenameSuffixSource] = PolicyOptions.suffix_source(),
    tag_group: Optional[bool] = PolicyOptions.tag_groups(),
    compact: bool = PolicyOptions.compact(),
    max_name_length: Optional[int] = PolicyOptions.max_name_length(),
    input_file: Optional[str] = InputOptions.input_file(),
    output_file: Optional[str] = InputOptions.output_file(),
    profile: Optional[str] = InputOptions.profile(),
):
    """
    Rename existing address objects to the ZONE_OBJ_NAME convention.

    Each entry is the name of an existing address object. The new name is
    built from the whole name, or from the text after its last underscore
    with --suffix-source last-segment.

    Examples:

        panaddr rename --zone APP LegacyServer web-01
    """
    settings = load_profile(profile)
    policy = PolicyOptions.build(
        settings.policy,
        sanitize=sanitize,
        rename_suffix=suffix_source,
        tag_groups=tag_group,
        compact=compact,
        max_name_length=max_name_length,
    )

    # Tag declarations are only emitted for create
    request = settings.build_request(
        Operation.RENAME,
        read_entries(entries, input_file),
        zone_name=zone,
        tag=tag,
        description=description,
        group_enabled=group,
        group_suffix=group_suffix,
        group_tag=group_tag,
        policy=policy,
    )

    logger.info(f"Renaming address objects for zone {request.zone}")
    result = run_request(request)
    emit_result(result, output_file, group_requested=request.group is not None)


@app.command("delete")
@command_error_handler
def delete_objects(
    entries: Optional[List[str]] = InputOptions.entries(),
    input_file: Optional[str] = InputOptions.input_file(),
    output_file: Optional[str] = InputOptions.output_file(),
):
    """
    Delete address objects by name.

    Names are used exactly as given, one delete command per entry.

    Examples:

        panaddr delete OLD_HOST_1 OLD_HOST_2
    """
    request = GenerationRequest(zone_name="", operation=Operation.DELETE, entries=read_entries(entries, input_file))

    logger.info("Deleting address objects")
    result = run_request(request)
    emit_result(result, output_file)


@app.command("group-name")
@command_error_handler
def group_name(
    zone: Optional[str] = NamingOptions.zone(),
    suffix: Optional[str] = typer.Option(None, "--suffix", "-s", help="Address group name suffix"),
    sanitize: Optional[SanitizeMode] = PolicyOptions.sanitize(),
    profile: Optional[str] = InputOptions.profile(),
):
    """Show the address group name that --group would produce."""
    settings = load_profile(profile)
    zone_name = zone if zone is not None else settings.zone
    if not (zone_name or "").strip():
        console.print("[red]Missing input:[/red] Please enter the zone name.")
        raise typer.Exit(1)

    if suffix is None:
        profile_suffix = settings.group.get("suffix")
        suffix = str(profile_suffix) if profile_suffix is not None else None
    policy = PolicyOptions.build(settings.policy, sanitize=sanitize)
    typer.echo(preview_group_name(zone_name, suffix, policy))


@app.command("classify")
@command_error_handler
def classify_entries(
    entries: Optional[List[str]] = InputOptions.entries(),
    detection: Optional[DetectionOrder] = PolicyOptions.detection(),
    input_file: Optional[str] = InputOptions.input_file(),
    profile: Optional[str] = InputOptions.profile(),
):
    """Show the object type automatic detection picks for each entry."""
    settings = load_profile(profile)
    order = detection or settings.policy.detection

    values = [entry.strip() for entry in read_entries(entries, input_file) if entry.strip()]
    if not values:
        console.print("[red]Missing input:[/red] Please provide at least one entry.")
        raise typer.Exit(1)

    table = Table(title=f"Detected Object Types ({DetectionOrder(order).value})")
    table.add_column("Entry")
    table.add_column("Type")
    table.add_column("Kind")
    for value in values:
        object_type = classify(value, order)
        table.add_row(value, object_type.value, OBJECT_TYPE_CODES[object_type.value])

    output_console.print(table)
