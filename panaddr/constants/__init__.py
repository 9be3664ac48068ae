"""
Constants package for panaddr.

This package exports the constants used to build PAN-OS address directives.
"""

from .common import (
    COMMENT_MARKER,
    OBJECT_TYPE_CODES,
    RENAME_TYPE_CODE,
    GROUP_TYPE_CODE,
    DIRECTIVES,
    DEFINITION_DIRECTIVES,
    SECTION_HEADERS,
    DEFAULT_VALUES,
    PANOS_MAX_NAME_LENGTH,
)

# Define the public API
__all__ = [
    "COMMENT_MARKER",
    "OBJECT_TYPE_CODES",
    "RENAME_TYPE_CODE",
    "GROUP_TYPE_CODE",
    "DIRECTIVES",
    "DEFINITION_DIRECTIVES",
    "SECTION_HEADERS",
    "DEFAULT_VALUES",
    "PANOS_MAX_NAME_LENGTH",
]
