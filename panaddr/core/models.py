"""
Request and result types for panaddr.

A ``GenerationRequest`` describes one submission; a ``SynthesisResult`` holds
the ordered output lines produced for it. Neither outlives a single call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..constants import COMMENT_MARKER
from .policy import DEFAULT_POLICY, SynthesisPolicy


class Operation(str, Enum):
    """Operation applied to every entry of a request."""
    CREATE = "create"
    RENAME = "rename"
    DELETE = "delete"


class ObjectType(str, Enum):
    """Address object type codes selectable for create."""
    HOST = "HST"
    SUBNET = "SBN"
    RANGE = "ADR"
    FQDN = "FQDN"


class ResultStatus(str, Enum):
    """Outcome of a synthesis run as seen by the caller."""
    EMPTY = "empty"         # No directive was generated
    PARTIAL = "partial"     # Directives plus at least one skipped entry
    COMPLETE = "complete"   # Directives and no skipped entries


@dataclass(frozen=True)
class GroupSpec:
    """
    Address group options. Presence on a request enables group assembly.
    """

    suffix: Optional[str] = None
    tag: Optional[str] = None
    create_tag: bool = False


@dataclass(frozen=True, repr=False)
class GenerationRequest:
    """
    Immutable input bundle for a single synthesis run.

    Attributes:
        zone_name: Naming prefix, also the fallback tag
        operation: Operation applied to every entry
        entries: Raw entries in input order
        object_type: Fixed type for create, or None for automatic detection
        tag: Tag override (zone name is used when empty)
        description: Description override (the entry is used when empty)
        create_tag: Emit a tag declaration for the entry tag
        group: Address group options, or None for no group
        policy: Naming and layout choices
    """

    zone_name: str
    operation: Operation
    entries: Tuple[str, ...]
    object_type: Optional[ObjectType] = None
    tag: Optional[str] = None
    description: Optional[str] = None
    create_tag: bool = False
    group: Optional[GroupSpec] = None
    policy: SynthesisPolicy = DEFAULT_POLICY

    def __post_init__(self):
        object.__setattr__(self, "zone_name", self.zone_name or "")
        object.__setattr__(self, "operation", Operation(self.operation))
        if self.object_type is not None:
            object.__setattr__(self, "object_type", ObjectType(self.object_type))
        object.__setattr__(self, "entries", tuple(self.entries))
        if self.policy is None:
            object.__setattr__(self, "policy", DEFAULT_POLICY)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "GenerationRequest":
        """
        Build a request from a multi-line block with one entry per line.

        Args:
            text: Raw multi-line input
            **kwargs: Remaining GenerationRequest arguments

        Returns:
            GenerationRequest
        """
        return cls(entries=(text or "").split("\n"), **kwargs)

    @property
    def zone(self) -> str:
        return self.zone_name.strip()

    @property
    def auto_detect(self) -> bool:
        return self.object_type is None

    @property
    def effective_tag(self) -> str:
        """Tag applied to entries: the tag override, else the zone name."""
        return (self.tag or "").strip() or self.zone

    @property
    def effective_group_tag(self) -> str:
        """Tag applied to the address group: the group tag, else the zone name."""
        if self.group is None:
            return ""
        return (self.group.tag or "").strip() or self.zone

    def cleaned_entries(self) -> List[str]:
        """Return the trimmed entries with blank lines removed, in input order."""
        return [entry.strip() for entry in self.entries if entry and entry.strip()]

    def __repr__(self):
        return (
            f"GenerationRequest(zone_name={self.zone_name!r}, operation={self.operation.value!r}, "
            f"object_type={self.object_type.value if self.object_type else 'auto'!r}, "
            f"entries={len(self.entries)})"
        )


class SynthesisResult:
    """
    Ordered output lines of a synthesis run.

    Lines are directives, comments (starting with ``#``) or blank separators.
    The result behaves like a read-only sequence of strings.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None, members: Optional[Iterable[str]] = None, skipped: int = 0):
        self.lines: List[str] = list(lines or [])
        self.members: List[str] = list(members or [])
        self.skipped = skipped

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def __contains__(self, line) -> bool:
        return line in self.lines

    def __eq__(self, other):
        if isinstance(other, SynthesisResult):
            return self.lines == other.lines
        if isinstance(other, list):
            return self.lines == other
        return NotImplemented

    def __repr__(self):
        return f"SynthesisResult(lines={len(self.lines)}, members={len(self.members)}, skipped={self.skipped})"

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def directives(self) -> List[str]:
        return [line for line in self.lines if line.strip() and not line.startswith(COMMENT_MARKER)]

    @property
    def comments(self) -> List[str]:
        return [line for line in self.lines if line.startswith(COMMENT_MARKER)]

    @property
    def status(self) -> ResultStatus:
        if not self.directives:
            return ResultStatus.EMPTY
        if self.skipped:
            return ResultStatus.PARTIAL
        return ResultStatus.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "directives": len(self.directives),
            "skipped": self.skipped,
            "members": list(self.members),
        }
