"""Identity validation for business lookups."""

from bizbuzz.data import BusinessIdentity
from bizbuzz.errors import ValidationError

FIELD_MESSAGES: dict[str, str] = {
    "name": "Business name is required",
    "location": "Location is required",
}


def validate(name: str, location: str) -> dict[str, str]:
    """Check that both identity fields are non-empty after trimming.

    Args:
        name: Business name as entered.
        location: Business location as entered.

    Returns:
        Mapping of failing field name to message. Empty when valid.
    """
    errors: dict[str, str] = {}
    if not name.strip():
        errors["name"] = FIELD_MESSAGES["name"]
    if not location.strip():
        errors["location"] = FIELD_MESSAGES["location"]
    return errors


def validate_identity(name: str, location: str) -> BusinessIdentity:
    """Validate and build a BusinessIdentity.

    Raises:
        ValidationError: If either field is empty or whitespace-only.
    """
    errors = validate(name, location)
    if errors:
        raise ValidationError(errors)
    return BusinessIdentity(name=name, location=location)
