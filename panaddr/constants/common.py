"""
Common constants for panaddr.

This module defines the object-type codes, the directive grammar used for
PAN-OS set commands, and default values shared by the synthesizer and CLI.
"""

from typing import Dict

# Marker that starts every comment line in generated output
COMMENT_MARKER = "#"

# Object type codes used in constructed names
OBJECT_TYPE_CODES = {
    "HST": "Host",
    "SBN": "Subnet",
    "ADR": "Address Range",
    "FQDN": "FQDN",
}

# Placeholder type code for renamed objects (original type is unknown)
RENAME_TYPE_CODE = "OBJ"

# Type code for address groups
GROUP_TYPE_CODE = "ADG"

# Directive templates, keyed by directive kind
DIRECTIVES: Dict[str, str] = {
    "ip_netmask": "set address {name} ip-netmask {value}",
    "ip_range": "set address {name} ip-range {value}",
    "fqdn": "set address {name} fqdn {value}",
    "description": 'set address {name} description "{text}"',
    "tag": "set address {name} tag [ {tag} ]",
    "rename": "rename address {old} to {new}",
    "delete": "delete address {name}",
    "tag_declaration": "set tag {tag}",
    "group_static": "set address-group {name} static [ {members} ]",
    "group_description": 'set address-group {name} description "{text}"',
    "group_tag": "set address-group {name} tag [ {tag} ]",
}

# Definition directive used for each object type code on create
DEFINITION_DIRECTIVES = {
    "HST": "ip_netmask",
    "SBN": "ip_netmask",
    "ADR": "ip_range",
    "FQDN": "fqdn",
}

# Section headers
SECTION_HEADERS = {
    "tags": "# Tag Declarations",
    "group": "# Address Group Configuration",
}

# Default values
DEFAULT_VALUES = {
    "HOST_MASK": "/32",
    "GROUP_DESCRIPTION": "Address group for {zone}",
    "PROFILE_ENV_VAR": "PANADDR_PROFILE",
}

# PAN-OS object name limit, used when a maximum name length is requested
PANOS_MAX_NAME_LENGTH = 63
