"""
FormState / ErrorState - Value and error mappings for the user details form.

Both mappings are keyed by FieldName. FormState always holds every field;
ErrorState only holds fields that currently fail validation.
"""

from typing import Dict, Optional, Union

from userform.config.field_registry import FieldName, iter_field_rules

FieldValue = Union[str, bool]

FormState = Dict[FieldName, FieldValue]
"""Current value of every field (field -> value)"""

ErrorState = Dict[FieldName, str]
"""Field-specific validation errors (field -> error message)"""

ErrorUpdate = Dict[FieldName, Optional[str]]
"""Partial ErrorState change; None means the key was cleared"""


def create_initial_form_state() -> FormState:
    """
    Creates a FormState with every field at its initial value.

    Returns:
        FormState: "" for text-like fields, False for the checkbox
    """
    return {rule.name: rule.initial_value for rule in iter_field_rules()}


def is_blank(value) -> bool:
    """True for None, False, and empty or whitespace-only strings."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def get_state_summary(values: FormState, errors: ErrorState) -> str:
    """
    Get a human-readable summary of the current form state.
    Useful for debugging and logging.

    Args:
        values: Current FormState
        errors: Current ErrorState

    Returns:
        str: Formatted summary
    """
    filled = [name.value for name, value in values.items() if not is_blank(value)]
    invalid = [name.value for name, message in errors.items() if message]

    return f"""
Form Summary
==========================================
Filled Fields: {len(filled)}/{len(values)}
Filled: {filled}
Validation Errors: {invalid}
Valid: {not invalid}
    """.strip()
