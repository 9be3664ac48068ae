"""
Synthesis policies for panaddr.

The naming rules seen across generations of the address-command tooling differ
in a few places. Each difference is exposed here as a named choice so that a
single synthesizer can reproduce any of them.
"""

import dataclasses
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional


class SanitizeMode(str, Enum):
    """
    How a raw value is reduced to a name-safe suffix.
    """
    DOT_PRESERVING = "dot-preserving"   # Keep dots: DMZ_HST_1.1.1.1 (default)
    DOT_REPLACING = "dot-replacing"     # Dots become underscores: DMZ_HST_1_1_1_1


class DetectionOrder(str, Enum):
    """
    Precedence of the shape checks used by automatic type detection.
    """
    RANGE_FIRST = "range-first"     # '-' -> ADR, '/' -> SBN, dotted quad -> HST, else FQDN (default)
    SUBNET_FIRST = "subnet-first"   # '/' -> SBN, '-' -> ADR, dotted quad -> HST, else FQDN


class RenameSuffixSource(str, Enum):
    """
    Which part of an existing object name feeds the new name's suffix.
    """
    FULL_NAME = "full-name"         # The whole original name (default)
    LAST_SEGMENT = "last-segment"   # Text after the last underscore: OriginalName_Suffix


@dataclass(frozen=True)
class SynthesisPolicy:
    """
    Bundle of naming and layout choices applied uniformly to one synthesis run.

    Attributes:
        sanitize: Suffix sanitization mode
        detection: Shape-check precedence for automatic type detection
        rename_suffix: Suffix source for rename operations
        tag_groups: Emit a tag directive for the address group
        block_separator: Emit a blank line after each create/rename block
        max_name_length: Skip entries whose constructed name is longer than this

    Raises:
        ValueError: If an enum value or the name length is invalid
    """

    sanitize: SanitizeMode = SanitizeMode.DOT_PRESERVING
    detection: DetectionOrder = DetectionOrder.RANGE_FIRST
    rename_suffix: RenameSuffixSource = RenameSuffixSource.FULL_NAME
    tag_groups: bool = True
    block_separator: bool = True
    max_name_length: Optional[int] = None

    def __post_init__(self):
        # Frozen: normalized values are written through object.__setattr__
        object.__setattr__(self, "sanitize", SanitizeMode(self.sanitize))
        object.__setattr__(self, "detection", DetectionOrder(self.detection))
        object.__setattr__(self, "rename_suffix", RenameSuffixSource(self.rename_suffix))
        object.__setattr__(self, "tag_groups", bool(self.tag_groups))
        object.__setattr__(self, "block_separator", bool(self.block_separator))
        if self.max_name_length is not None:
            if int(self.max_name_length) < 1:
                raise ValueError(f"max_name_length must be positive, got {self.max_name_length}")
            object.__setattr__(self, "max_name_length", int(self.max_name_length))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SynthesisPolicy":
        """
        Build a policy from a mapping such as the ``policy`` section of a profile.

        Args:
            data: Mapping of policy field names to values

        Returns:
            SynthesisPolicy

        Raises:
            ValueError: If the mapping holds unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown policy settings: {', '.join(sorted(unknown))}")
        return cls(**data)

    def replace(self, **changes) -> "SynthesisPolicy":
        """Return a copy of this policy with the given fields changed."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sanitize": self.sanitize.value,
            "detection": self.detection.value,
            "rename_suffix": self.rename_suffix.value,
            "tag_groups": self.tag_groups,
            "block_separator": self.block_separator,
            "max_name_length": self.max_name_length,
        }


DEFAULT_POLICY = SynthesisPolicy()
