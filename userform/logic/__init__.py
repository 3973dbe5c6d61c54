"""Validation logic for the user details form."""

from userform.logic.validation import check_field, validate_field, validate_form

__all__ = [
    "check_field",
    "validate_field",
    "validate_form",
]
