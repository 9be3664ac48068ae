"""
Unit tests for synthesis policies.
"""

import dataclasses

import pytest

from panaddr.core.policy import (
    DEFAULT_POLICY,
    DetectionOrder,
    RenameSuffixSource,
    SanitizeMode,
    SynthesisPolicy,
)


def test_defaults():
    policy = SynthesisPolicy()
    assert policy.sanitize == SanitizeMode.DOT_PRESERVING
    assert policy.detection == DetectionOrder.RANGE_FIRST
    assert policy.rename_suffix == RenameSuffixSource.FULL_NAME
    assert policy.tag_groups is True
    assert policy.block_separator is True
    assert policy.max_name_length is None
    assert policy == DEFAULT_POLICY


def test_string_values_are_coerced():
    policy = SynthesisPolicy(sanitize="dot-replacing", detection="subnet-first", rename_suffix="last-segment")
    assert policy.sanitize == SanitizeMode.DOT_REPLACING
    assert policy.detection == DetectionOrder.SUBNET_FIRST
    assert policy.rename_suffix == RenameSuffixSource.LAST_SEGMENT


def test_invalid_enum_value():
    with pytest.raises(ValueError):
        SynthesisPolicy(sanitize="dots-everywhere")


def test_invalid_name_length():
    with pytest.raises(ValueError, match="max_name_length"):
        SynthesisPolicy(max_name_length=0)


def test_from_dict():
    policy = SynthesisPolicy.from_dict({"detection": "subnet-first", "block_separator": False})
    assert policy.detection == DetectionOrder.SUBNET_FIRST
    assert policy.block_separator is False
    assert policy.sanitize == SanitizeMode.DOT_PRESERVING


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown policy settings: colour"):
        SynthesisPolicy.from_dict({"colour": "blue"})


def test_replace_ignores_none():
    base = SynthesisPolicy(block_separator=False)
    changed = base.replace(sanitize=SanitizeMode.DOT_REPLACING, detection=None)

    assert changed.sanitize == SanitizeMode.DOT_REPLACING
    assert changed.detection == DetectionOrder.RANGE_FIRST
    assert changed.block_separator is False
    # The original is untouched
    assert base.sanitize == SanitizeMode.DOT_PRESERVING


def test_to_dict_round_trip():
    policy = SynthesisPolicy(rename_suffix=RenameSuffixSource.LAST_SEGMENT, max_name_length=63)
    assert SynthesisPolicy.from_dict(policy.to_dict()) == policy


def test_policy_is_frozen():
    policy = SynthesisPolicy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.block_separator = False


def test_default_policy_cannot_change():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_POLICY.sanitize = SanitizeMode.DOT_REPLACING
    assert DEFAULT_POLICY == SynthesisPolicy()


def test_replace_validates_changes():
    with pytest.raises(ValueError, match="max_name_length"):
        SynthesisPolicy().replace(max_name_length=0)
