"""
Command synthesizer for panaddr.

This module turns a ``GenerationRequest`` into the ordered PAN-OS CLI lines
that create, rename or delete address objects, optionally declaring tags and
bundling the resulting objects into an address group.
"""

import logging
from typing import List

from ..constants import (
    DEFAULT_VALUES,
    DEFINITION_DIRECTIVES,
    DIRECTIVES,
    RENAME_TYPE_CODE,
    SECTION_HEADERS,
)
from .logging_utils import log_structured
from .models import GenerationRequest, ObjectType, Operation, SynthesisResult
from .naming import (
    build_name,
    classify,
    description_text,
    preview_group_name,
    quote_token,
    rename_suffix_source,
    sanitize_suffix,
)

logger = logging.getLogger("panaddr")


class CommandSynthesizer:
    """
    Builds PAN-OS address directives for one request.

    A synthesizer instance holds the state of a single run: the output lines,
    the names emitted so far (group members) and the count of skipped
    entries. Entry-level problems become skip comments; nothing here raises
    for a well-formed request.
    """

    def __init__(self, request: GenerationRequest):
        """
        Initialize the synthesizer.

        Args:
            request: The request to synthesize
        """
        self.request = request
        self.policy = request.policy
        self.lines: List[str] = []
        self.members: List[str] = []
        self.skipped = 0

    def run(self) -> SynthesisResult:
        """
        Produce the full line sequence for the request.

        Returns:
            SynthesisResult: Ordered output lines
        """
        request = self.request
        entries = request.cleaned_entries()
        logger.debug(f"Synthesizing {request!r} with {self.policy!r}")

        # Blank entries leave no trace, so an all-blank list yields an empty result
        if not entries:
            logger.warning("Nothing generated: no entries were provided")
            return SynthesisResult()

        if request.operation != Operation.DELETE and not request.zone:
            logger.warning("Nothing generated: zone name is required for create and rename")
            return SynthesisResult(["# Nothing generated: zone name is required for create and rename"])

        if request.operation == Operation.CREATE:
            self._emit_tag_declarations()

        for entry in entries:
            if request.operation == Operation.DELETE:
                self._emit_delete(entry)
            else:
                self._emit_entry(entry)

        if request.operation != Operation.DELETE and request.group is not None:
            self._emit_group()

        result = SynthesisResult(self.lines, self.members, self.skipped)
        log_structured(
            f"Generated {len(result.directives)} directives for {len(entries)} entries",
            "info",
            operation=request.operation.value,
            zone=request.zone,
            emitted=len(self.members),
            skipped=self.skipped,
            status=result.status.value,
        )
        return result

    def _skip(self, reason: str, raw: str) -> None:
        operation = self.request.operation.value.upper()
        logger.warning(f"Skipping {operation} entry '{raw}': {reason}")
        self.lines.append(f"# Skipping {operation}: {reason}: {raw}")
        self.skipped += 1

    def _emit_tag_declarations(self) -> None:
        request = self.request
        tags = []
        if request.create_tag:
            tags.append(request.effective_tag)
        if request.group is not None and request.group.create_tag:
            tags.append(request.effective_group_tag)

        # dict keeps first-seen order while dropping duplicates
        unique_tags = list(dict.fromkeys(tag for tag in tags if tag))
        if not unique_tags:
            return

        logger.debug(f"Declaring tags: {', '.join(unique_tags)}")
        self.lines.append(SECTION_HEADERS["tags"])
        for tag in unique_tags:
            self.lines.append(DIRECTIVES["tag_declaration"].format(tag=quote_token(tag)))
        self.lines.append("")

    def _emit_delete(self, entry: str) -> None:
        logger.debug(f"Deleting address object '{entry}'")
        self.lines.append(DIRECTIVES["delete"].format(name=entry))

    def _working_type(self, entry: str) -> str:
        request = self.request
        if request.operation == Operation.RENAME:
            return RENAME_TYPE_CODE
        if request.auto_detect:
            object_type = classify(entry, self.policy.detection)
            logger.debug(f"Detected type {object_type.value} for '{entry}'")
            return object_type.value
        return request.object_type.value

    def _emit_entry(self, entry: str) -> None:
        request = self.request

        if request.operation == Operation.RENAME:
            source, reason = rename_suffix_source(entry, self.policy.rename_suffix)
            if source is None:
                self._skip(reason, entry)
                return
        else:
            source = entry

        suffix = sanitize_suffix(source, self.policy.sanitize)
        if not suffix:
            self._skip("Value reduces to an empty name suffix", entry)
            return

        type_code = self._working_type(entry)
        name = build_name(request.zone, type_code, suffix)

        limit = self.policy.max_name_length
        if limit is not None and len(name) > limit:
            self._skip(f"Name {name} exceeds {limit} characters", entry)
            return

        if request.operation == Operation.RENAME:
            self.lines.append(DIRECTIVES["rename"].format(old=entry, new=name))
        else:
            self.lines.append(self._definition(type_code, name, entry))

        description = (request.description or "").strip() or entry
        self.lines.append(DIRECTIVES["description"].format(name=name, text=description_text(description)))

        tag = request.effective_tag
        if tag:
            self.lines.append(DIRECTIVES["tag"].format(name=name, tag=quote_token(tag)))

        if self.policy.block_separator:
            self.lines.append("")

        logger.debug(f"Emitted address object {name} from '{entry}'")
        self.members.append(name)

    def _definition(self, type_code: str, name: str, value: str) -> str:
        if type_code == ObjectType.HOST.value and "/" not in value:
            value = f"{value}{DEFAULT_VALUES['HOST_MASK']}"
        return DIRECTIVES[DEFINITION_DIRECTIVES[type_code]].format(name=name, value=value)

    def _emit_group(self) -> None:
        request = self.request
        group = request.group
        group_name = preview_group_name(request.zone, group.suffix, self.policy)

        if not self.members:
            logger.warning(f"Address group {group_name} not created: no objects were generated")
            self.lines.append(f"# Address group {group_name} not created: no objects were generated")
            return

        suffix_text = (group.suffix or "").strip()
        description = suffix_text or DEFAULT_VALUES["GROUP_DESCRIPTION"].format(zone=request.zone)

        logger.debug(f"Assembling address group {group_name} with {len(self.members)} members")
        self.lines.append(SECTION_HEADERS["group"])
        self.lines.append(DIRECTIVES["group_static"].format(name=group_name, members=" ".join(self.members)))
        self.lines.append(DIRECTIVES["group_description"].format(name=group_name, text=description_text(description)))

        tag = request.effective_group_tag
        if self.policy.tag_groups and tag:
            self.lines.append(DIRECTIVES["group_tag"].format(name=group_name, tag=quote_token(tag)))


def synthesize(request: GenerationRequest) -> SynthesisResult:
    """
    Synthesize the PAN-OS directives for a request.

    Args:
        request: The request to synthesize

    Returns:
        SynthesisResult: Ordered output lines
    """
    return CommandSynthesizer(request).run()
