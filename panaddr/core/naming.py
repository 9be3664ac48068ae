"""
Naming helpers for panaddr.

This module classifies raw values by shape, reduces values to name-safe
suffixes, and builds object and group names following the
``{ZONE}_{TYPE}_{SUFFIX}`` convention.
"""

import logging
import re
from typing import Optional, Tuple

from ..constants import GROUP_TYPE_CODE
from .models import ObjectType
from .policy import DEFAULT_POLICY, DetectionOrder, RenameSuffixSource, SanitizeMode, SynthesisPolicy

logger = logging.getLogger("panaddr")

# Four groups of 1-3 digits; octets are not range-checked
DOTTED_QUAD = re.compile(r"^[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}$")

_SEPARATORS = {
    SanitizeMode.DOT_PRESERVING: re.compile(r"[/\s-]+"),
    SanitizeMode.DOT_REPLACING: re.compile(r"[./\s-]+"),
}
_DISALLOWED = {
    SanitizeMode.DOT_PRESERVING: re.compile(r"[^A-Za-z0-9_.]"),
    SanitizeMode.DOT_REPLACING: re.compile(r"[^A-Za-z0-9_]"),
}
_UNDERSCORE_RUNS = re.compile(r"_{2,}")
_WHITESPACE = re.compile(r"\s")


def classify(value: str, order: DetectionOrder = DetectionOrder.RANGE_FIRST) -> ObjectType:
    """
    Classify a raw value as host, subnet, range or FQDN from its shape.

    Every value classifies to exactly one type; FQDN is the fallback.

    Args:
        value: Trimmed raw value
        order: Precedence of the range and subnet checks

    Returns:
        ObjectType
    """
    if order == DetectionOrder.SUBNET_FIRST:
        checks = (("/", ObjectType.SUBNET), ("-", ObjectType.RANGE))
    else:
        checks = (("-", ObjectType.RANGE), ("/", ObjectType.SUBNET))

    for marker, object_type in checks:
        if marker in value:
            return object_type

    if DOTTED_QUAD.match(value):
        return ObjectType.HOST

    return ObjectType.FQDN


def sanitize_suffix(value: str, mode: SanitizeMode = SanitizeMode.DOT_PRESERVING) -> str:
    """
    Reduce a raw value to a name-safe suffix.

    Runs of separators become a single underscore, remaining disallowed
    characters are removed, repeated underscores collapse, and leading and
    trailing underscores are trimmed. The result may be empty.

    Args:
        value: Raw value or original object name
        mode: Whether dots survive or are treated as separators

    Returns:
        str: Sanitized suffix, possibly empty
    """
    mode = SanitizeMode(mode)
    suffix = _SEPARATORS[mode].sub("_", value)
    suffix = _DISALLOWED[mode].sub("", suffix)
    suffix = _UNDERSCORE_RUNS.sub("_", suffix)
    return suffix.strip("_")


def rename_suffix_source(original_name: str, source: RenameSuffixSource) -> Tuple[Optional[str], str]:
    """
    Select the part of an existing object name that feeds the new suffix.

    Args:
        original_name: Trimmed original object name
        source: Suffix source choice

    Returns:
        Tuple of (suffix source or None, reason when None)
    """
    if source == RenameSuffixSource.FULL_NAME:
        return original_name, ""

    index = original_name.rfind("_")
    if index == -1:
        return None, "Malformed entry (expected OriginalObjectName_SuffixForNewName)"
    segment = original_name[index + 1:]
    if not segment:
        return None, "Malformed entry (empty suffix part after underscore)"
    return segment, ""


def build_name(zone_name: str, type_code: str, suffix: str) -> str:
    """Build an upper-cased ``{ZONE}_{TYPE}_{SUFFIX}`` name."""
    return f"{zone_name.strip()}_{type_code}_{suffix}".upper()


def preview_group_name(zone_name: str, suffix: Optional[str] = None, policy: SynthesisPolicy = DEFAULT_POLICY) -> str:
    """
    Return the address group name that group assembly would build.

    An empty suffix is permitted and leaves a trailing underscore.

    Args:
        zone_name: Zone name prefix
        suffix: Free-text group suffix (optional)
        policy: Policy supplying the sanitization mode

    Returns:
        str: Upper-cased group name
    """
    sanitized = sanitize_suffix((suffix or "").strip(), policy.sanitize)
    return build_name(zone_name, GROUP_TYPE_CODE, sanitized)


def quote_token(value: str) -> str:
    """
    Quote a CLI token when it contains whitespace or is empty.

    Double quotes inside the value become single quotes so the token stays balanced.
    """
    value = value.replace('"', "'")
    if not value or _WHITESPACE.search(value):
        return f'"{value}"'
    return value


def description_text(text: str) -> str:
    """Make free text safe to place inside a double-quoted description."""
    return text.replace('"', "'")
