"""Tests for identity validation."""

import pytest

from bizbuzz.data import BusinessIdentity
from bizbuzz.errors import ValidationError
from bizbuzz.validation import FIELD_MESSAGES, validate, validate_identity


@pytest.mark.parametrize(
    ("name", "location"),
    [
        ("Cake & Co", "Mumbai"),
        ("  Cake & Co  ", "\tMumbai\n"),
        ("X", "Y"),
    ],
)
def test_valid_identity_has_no_errors(name: str, location: str) -> None:
    assert validate(name, location) == {}


@pytest.mark.parametrize("blank", ["", " ", "   ", "\t\n"])
def test_blank_name_reported(blank: str) -> None:
    errors = validate(blank, "Mumbai")
    assert errors == {"name": "Business name is required"}


@pytest.mark.parametrize("blank", ["", " ", "\n"])
def test_blank_location_reported(blank: str) -> None:
    errors = validate("Cake & Co", blank)
    assert errors == {"location": "Location is required"}


def test_both_blank_reports_both_fields_in_order() -> None:
    errors = validate("", "  ")
    assert list(errors) == ["name", "location"]
    assert errors["name"] == FIELD_MESSAGES["name"]
    assert errors["location"] == FIELD_MESSAGES["location"]


def test_validate_identity_returns_untrimmed_identity() -> None:
    identity = validate_identity(" Cake & Co ", "Mumbai")
    assert identity == BusinessIdentity(name=" Cake & Co ", location="Mumbai")


def test_validate_identity_raises_with_field_errors() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_identity("", "Mumbai")
    assert exc_info.value.field_errors == {"name": "Business name is required"}
    assert "name" in str(exc_info.value)
