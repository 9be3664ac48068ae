"""
Core functionality for panaddr.

This package contains the command synthesizer and the naming, policy,
validation, profile and input helpers it relies on.
"""

from .exceptions import PANAddrError, ConfigError, ValidationError, FileOperationError
from .models import GenerationRequest, GroupSpec, ObjectType, Operation, ResultStatus, SynthesisResult
from .policy import DEFAULT_POLICY, DetectionOrder, RenameSuffixSource, SanitizeMode, SynthesisPolicy
from .naming import classify, sanitize_suffix, build_name, preview_group_name
from .synthesizer import CommandSynthesizer, synthesize
from .validation import check_request, validate_request
from .config_loader import Profile, load_profile
from .input_reader import read_entries, write_output

__all__ = [
    "PANAddrError",
    "ConfigError",
    "ValidationError",
    "FileOperationError",
    "GenerationRequest",
    "GroupSpec",
    "ObjectType",
    "Operation",
    "ResultStatus",
    "SynthesisResult",
    "DEFAULT_POLICY",
    "DetectionOrder",
    "RenameSuffixSource",
    "SanitizeMode",
    "SynthesisPolicy",
    "classify",
    "sanitize_suffix",
    "build_name",
    "preview_group_name",
    "CommandSynthesizer",
    "synthesize",
    "check_request",
    "validate_request",
    "Profile",
    "load_profile",
    "read_entries",
    "write_output",
]
