"""
Auto-completion functions for the panaddr CLI.
"""

import os
from typing import List

from panaddr.core.models import ObjectType


def complete_entry_files() -> List[str]:
    """
    Auto-complete entry list files.
    Returns text and CSV files in the current directory.
    """
    return [f for f in os.listdir(".") if f.endswith((".txt", ".csv", ".lst")) and os.path.isfile(f)]


def complete_profile_files() -> List[str]:
    """
    Auto-complete profile files.
    Returns YAML files in the current directory.
    """
    return [f for f in os.listdir(".") if f.endswith((".yaml", ".yml")) and os.path.isfile(f)]


def complete_object_types() -> List[str]:
    return ["auto"] + [t.value for t in ObjectType]
