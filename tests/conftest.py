"""
Test configuration and fixtures for panaddr tests.

This module provides pytest fixtures for unit and integration tests.
"""

import os
import sys
import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from panaddr.core.models import GenerationRequest, GroupSpec, Operation
from panaddr.core.policy import SynthesisPolicy


@pytest.fixture(autouse=True)
def no_profile_env(monkeypatch):
    """Keep a developer's PANADDR_PROFILE out of the tests."""
    monkeypatch.delenv("PANADDR_PROFILE", raising=False)


@pytest.fixture
def make_request():
    """Return a factory for create requests with test-friendly defaults."""
    def _make(entries, zone_name="DMZ", operation=Operation.CREATE, **kwargs):
        if isinstance(entries, str):
            entries = [entries]
        return GenerationRequest(zone_name=zone_name, operation=operation, entries=entries, **kwargs)
    return _make


@pytest.fixture
def compact_policy():
    """Return a policy without blank separator lines between blocks."""
    return SynthesisPolicy(block_separator=False)


@pytest.fixture
def web_group():
    """Return a group spec for a WebServers group."""
    return GroupSpec(suffix="WebServers")


@pytest.fixture
def sample_profile_yaml():
    """Return the text of a complete profile."""
    return """
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
  block_separator: false
"""


@pytest.fixture
def profile_file(tmp_path, sample_profile_yaml):
    """Write the sample profile to disk and return its path."""
    path = tmp_path / "profile.yaml"
    path.write_text(sample_profile_yaml)
    return str(path)


@pytest.fixture
def entries_file(tmp_path):
    """Write a mixed entry list (with blank lines) to disk and return its path."""
    path = tmp_path / "entries.txt"
    path.write_text("1.1.1.1\n\n10.20.0.0/24\n   \nmain.example.com\n")
    return str(path)
