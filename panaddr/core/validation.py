"""
Request validation for panaddr.

Callers check a request here before synthesizing it. A request that fails
these checks is refused as a whole; entry-level problems are left to the
synthesizer, which reports them as skip comments.
"""

import logging
from typing import List, Tuple

from .exceptions import ValidationError
from .models import GenerationRequest, Operation

logger = logging.getLogger("panaddr")


def check_request(request: GenerationRequest) -> Tuple[bool, List[str]]:
    """
    Check the preconditions of a request.

    Args:
        request: The request to check

    Returns:
        Tuple[bool, List[str]]: (is_valid, list of "field: message" problems)
    """
    problems = []

    if request.operation != Operation.DELETE and not request.zone:
        problems.append("zone_name: Please enter the zone name.")

    if not request.cleaned_entries():
        if request.operation == Operation.DELETE:
            problems.append("entries: Please provide the names of the objects to delete.")
        else:
            problems.append("entries: Please paste your object list or values.")

    is_valid = len(problems) == 0
    if not is_valid:
        logger.debug(f"Request failed validation with {len(problems)} problems")
    return is_valid, problems


def validate_request(request: GenerationRequest) -> None:
    """
    Validate a request, raising on the first failed precondition.

    Args:
        request: The request to validate

    Raises:
        ValidationError: If the zone name (create/rename) or the entry list is missing
    """
    is_valid, problems = check_request(request)
    if not is_valid:
        field, _, message = problems[0].partition(": ")
        raise ValidationError(message, field=field)
