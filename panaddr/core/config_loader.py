"""
Profile loader for panaddr.

A profile is a YAML file holding defaults for the request fields and the
synthesis policy, so that recurring runs (same zone, same tag, same group
layout) do not need every option on the command line.

Example profile::

    zone: DMZ
    tag: WebTier
    create_tag: true
    type: auto
    group:
      enabled: true
      suffix: WebServers
      create_tag: true
    policy:
      sanitize: dot-preserving
      detection: range-first
"""

import os
import logging
from typing import Any, Dict, Iterable, Optional

import yaml

from ..constants import DEFAULT_VALUES
from .exceptions import ConfigError
from .models import GenerationRequest, GroupSpec, ObjectType, Operation
from .policy import SynthesisPolicy

logger = logging.getLogger("panaddr")

PROFILE_KEYS = {"zone", "tag", "description", "create_tag", "type", "group", "policy"}
GROUP_KEYS = {"enabled", "suffix", "tag", "create_tag"}


class Profile:
    """
    Request defaults loaded from a YAML profile.

    Values given explicitly when building a request win over profile values.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, source: Optional[str] = None):
        """
        Initialize a profile from a parsed mapping.

        Args:
            data: Parsed profile mapping (optional, empty profile when None)
            source: Where the profile came from, for error messages

        Raises:
            ConfigError: If the mapping holds unknown keys or invalid values
        """
        data = data or {}
        self.source = source or "<profile>"

        if not isinstance(data, dict):
            raise ConfigError(f"{self.source}: profile must be a mapping, got {type(data).__name__}")

        unknown = set(data) - PROFILE_KEYS
        if unknown:
            raise ConfigError(f"{self.source}: unknown profile settings: {', '.join(sorted(unknown))}")

        self.zone = _text(data.get("zone"))
        self.tag = _text(data.get("tag"))
        self.description = _text(data.get("description"))
        self.create_tag = bool(data.get("create_tag", False))
        self.object_type = self._parse_type(data.get("type"))

        group = data.get("group") or {}
        if not isinstance(group, dict):
            raise ConfigError(f"{self.source}: 'group' must be a mapping")
        unknown = set(group) - GROUP_KEYS
        if unknown:
            raise ConfigError(f"{self.source}: unknown group settings: {', '.join(sorted(unknown))}")
        self.group = group

        policy = data.get("policy") or {}
        if not isinstance(policy, dict):
            raise ConfigError(f"{self.source}: 'policy' must be a mapping")
        try:
            self.policy = SynthesisPolicy.from_dict(policy)
        except ValueError as e:
            raise ConfigError(f"{self.source}: invalid policy: {e}")

    def _parse_type(self, value: Optional[str]) -> Optional[ObjectType]:
        if value is None or str(value).lower() == "auto":
            return None
        try:
            return ObjectType(str(value).upper())
        except ValueError:
            valid = ", ".join(["auto"] + [t.value for t in ObjectType])
            raise ConfigError(f"{self.source}: invalid object type '{value}', expected one of: {valid}")

    @property
    def group_enabled(self) -> bool:
        return bool(self.group.get("enabled", False))

    def build_request(
        self,
        operation: Operation,
        entries: Iterable[str],
        zone_name: Optional[str] = None,
        object_type: Optional[ObjectType] = None,
        auto_detect: bool = False,
        tag: Optional[str] = None,
        description: Optional[str] = None,
        create_tag: Optional[bool] = None,
        group_enabled: Optional[bool] = None,
        group_suffix: Optional[str] = None,
        group_tag: Optional[str] = None,
        group_create_tag: Optional[bool] = None,
        policy: Optional[SynthesisPolicy] = None,
    ) -> GenerationRequest:
        """
        Build a request, filling unset arguments from the profile.

        Args:
            operation: Operation to apply
            entries: Raw entries
            zone_name: Zone name override
            object_type: Fixed object type override
            auto_detect: Force automatic detection even if the profile fixes a type
            tag: Tag override
            description: Description override
            create_tag: Tag declaration override
            group_enabled: Group assembly override
            group_suffix: Group suffix override
            group_tag: Group tag override
            group_create_tag: Group tag declaration override
            policy: Policy override

        Returns:
            GenerationRequest
        """
        if auto_detect:
            effective_type = None
        else:
            effective_type = object_type if object_type is not None else self.object_type

        enabled = group_enabled if group_enabled is not None else self.group_enabled
        group = None
        if enabled:
            group = GroupSpec(
                suffix=_first(group_suffix, _text(self.group.get("suffix"))),
                tag=_first(group_tag, _text(self.group.get("tag"))),
                create_tag=bool(_first(group_create_tag, self.group.get("create_tag", False))),
            )

        return GenerationRequest(
            zone_name=_first(zone_name, self.zone) or "",
            operation=operation,
            entries=entries,
            object_type=effective_type,
            tag=_first(tag, self.tag),
            description=_first(description, self.description),
            create_tag=bool(_first(create_tag, self.create_tag)),
            group=group,
            policy=policy or self.policy,
        )


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def _text(value: Any) -> Optional[str]:
    # YAML turns bare numbers into ints (zone: 100)
    return None if value is None else str(value)


def load_profile(file_path: Optional[str] = None) -> Profile:
    """
    Load a profile from a YAML file.

    When no path is given, the file named by the ``PANADDR_PROFILE``
    environment variable is used; without either, an empty profile is
    returned.

    Args:
        file_path: Path to the YAML profile (optional)

    Returns:
        Profile

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or holds invalid settings
    """
    env_var = DEFAULT_VALUES["PROFILE_ENV_VAR"]
    file_path = file_path or os.environ.get(env_var)
    if not file_path:
        logger.debug("No profile given, using built-in defaults")
        return Profile()

    logger.debug(f"Loading profile from file: {file_path}")
    if not os.path.exists(file_path):
        logger.error(f"Profile file not found: {file_path}")
        raise ConfigError(f"Profile file not found: {file_path}")

    try:
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"Error parsing YAML in profile {file_path}: {e}"
        logger.error(error_msg)
        raise ConfigError(error_msg)
    except OSError as e:
        error_msg = f"Cannot read profile {file_path}: {e}"
        logger.error(error_msg)
        raise ConfigError(error_msg)

    profile = Profile(data, source=file_path)
    logger.info(f"Loaded profile from {file_path}")
    return profile
