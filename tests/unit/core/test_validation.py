"""
Unit tests for request validation.
"""

import pytest

from panaddr import generate_commands
from panaddr.core.exceptions import ValidationError
from panaddr.core.models import GenerationRequest, Operation
from panaddr.core.validation import check_request, validate_request


class TestCheckRequest:
    """Tests for check_request."""

    def test_valid_create(self, make_request):
        assert check_request(make_request("1.1.1.1")) == (True, [])

    def test_missing_zone(self, make_request):
        is_valid, problems = check_request(make_request("1.1.1.1", zone_name="   "))
        assert not is_valid
        assert problems == ["zone_name: Please enter the zone name."]

    def test_missing_entries(self, make_request):
        is_valid, problems = check_request(make_request(["", "  "]))
        assert not is_valid
        assert problems == ["entries: Please paste your object list or values."]

    def test_both_missing(self, make_request):
        _, problems = check_request(make_request([], zone_name="", operation=Operation.RENAME))
        assert len(problems) == 2

    def test_delete_needs_no_zone(self):
        request = GenerationRequest(zone_name="", operation=Operation.DELETE, entries=["OLD_1"])
        assert check_request(request) == (True, [])

    def test_delete_without_names(self):
        request = GenerationRequest(zone_name="", operation=Operation.DELETE, entries=[" "])
        _, problems = check_request(request)
        assert problems == ["entries: Please provide the names of the objects to delete."]


class TestValidateRequest:
    """Tests for validate_request."""

    def test_raises_first_problem(self, make_request):
        with pytest.raises(ValidationError) as excinfo:
            validate_request(make_request([], zone_name=""))

        assert str(excinfo.value) == "Please enter the zone name."
        assert excinfo.value.field == "zone_name"

    def test_passes_valid_request(self, make_request):
        validate_request(make_request("1.1.1.1"))


class TestGenerateCommands:
    """Tests for the package-level convenience function."""

    def test_returns_text(self, make_request):
        text = generate_commands(make_request("1.1.1.1"))
        assert text.startswith("set address DMZ_HST_1.1.1.1 ip-netmask 1.1.1.1/32\n")

    def test_refuses_invalid_request(self, make_request):
        with pytest.raises(ValidationError):
            generate_commands(make_request("1.1.1.1", zone_name=""))
