"""
Maps model validation failures raised by ``full_clean`` to domain errors.
"""
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError

from core.domain.exceptions import InvalidInputError


def invalid_input_from(error: ValidationError) -> InvalidInputError:
    """
    Build an InvalidInputError carrying the first validation message.

    Field errors are prefixed with the field name, e.g.
    ``stock: Ensure this value is less than or equal to 2147483647.``
    """
    if hasattr(error, "error_dict"):
        field, messages = next(iter(error.message_dict.items()))
        if field == NON_FIELD_ERRORS:
            return InvalidInputError(messages[0])
        return InvalidInputError(f"{field}: {messages[0]}")
    if error.messages:
        return InvalidInputError(error.messages[0])
    return InvalidInputError()
