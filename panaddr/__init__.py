"""
panaddr for PAN-OS address objects

Generates PAN-OS CLI commands that create, rename or delete address objects
following the ZONE_TYPE_VALUE naming convention, with optional tag
declarations and address group assembly.
"""

import logging

__version__ = "0.3.0"

from .core.exceptions import PANAddrError, ConfigError, ValidationError, FileOperationError
from .core.models import GenerationRequest, GroupSpec, ObjectType, Operation, ResultStatus, SynthesisResult
from .core.policy import DEFAULT_POLICY, DetectionOrder, RenameSuffixSource, SanitizeMode, SynthesisPolicy
from .core.naming import classify, sanitize_suffix, preview_group_name
from .core.synthesizer import CommandSynthesizer, synthesize
from .core.validation import check_request, validate_request
from .core.config_loader import Profile, load_profile

# Set up logging
logger = logging.getLogger("panaddr")


def generate_commands(request: GenerationRequest) -> str:
    """
    Validate a request and return the generated commands as one text block.

    Args:
        request: The request to run

    Returns:
        str: Newline-joined commands

    Raises:
        ValidationError: If the zone name (create/rename) or the entry list is missing
    """
    validate_request(request)
    return synthesize(request).text
