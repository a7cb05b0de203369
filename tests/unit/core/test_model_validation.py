"""
Unit tests for mapping model validation errors.
"""
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError

from core.infrastructure.model_validation import invalid_input_from


def test_field_error_is_prefixed():
    """Test field errors name the field."""
    error = ValidationError({"stock": ["Ensure this value is less than or equal to 2147483647."]})

    result = invalid_input_from(error)

    assert result.code == "INVALID_INPUT"
    assert result.message == "stock: Ensure this value is less than or equal to 2147483647."


def test_non_field_error():
    """Test errors raised from clean() keep their message."""
    result = invalid_input_from(ValidationError({NON_FIELD_ERRORS: ["Name is required"]}))

    assert result.message == "Name is required"


def test_plain_error():
    """Test errors without a field."""
    assert invalid_input_from(ValidationError("Slug is required")).message == "Slug is required"
