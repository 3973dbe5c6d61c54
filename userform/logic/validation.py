"""
Validation Engine

Live (per-field) and whole-form validation for the user details form.
Both paths apply the same rule set: presence first, then the field's
format validator. Validation never raises for any value. An unknown field
key raises ValueError in the per-field functions and is skipped by
validate_form.
"""

import logging
from typing import Optional, Tuple, Union

from userform.config.field_registry import (
    FieldName,
    FieldRule,
    get_field_rule,
    iter_field_rules,
    required_message,
    resolve_field_name,
)
from userform.logic.validators import get_validator
from userform.state.form_state import ErrorState, ErrorUpdate, FieldValue, FormState, is_blank

logger = logging.getLogger(__name__)


def _check_rule(rule: FieldRule, value: FieldValue) -> Optional[str]:
    # Only a real True ticks the checkbox
    if rule.is_checkbox:
        return None if value is True else required_message(rule)

    if is_blank(value):
        return required_message(rule) if rule.required else None

    if not isinstance(value, str):
        return f"{rule.label} is invalid"

    if not rule.validator:
        return None

    validator = get_validator(rule.validator)
    if validator is None:
        logger.warning(f"VALIDATION | Unknown validator '{rule.validator}' for {rule.name.value}")
        return None

    config = dict(rule.validator_config)
    if rule.choices:
        config.setdefault("choices", rule.choices)

    is_valid, message = validator.validate(value, label=rule.label, **config)
    if is_valid:
        return None
    return rule.message or message or f"{rule.label} is invalid"


def check_field(name: Union[str, FieldName], value: FieldValue) -> Optional[str]:
    """
    Evaluate one field value against its rule.

    Args:
        name: Field key
        value: Current value

    Returns:
        The error message, or None if the value is valid
    """
    return _check_rule(get_field_rule(name), value)


def validate_field(
    name: Union[str, FieldName],
    value: FieldValue,
    form_state: Optional[FormState] = None,
    errors: Optional[ErrorState] = None,
    verbose: bool = False,
) -> ErrorUpdate:
    """
    Live validation of a single field.

    Merges the outcome into ``errors`` when given: the field's key is set
    when the value fails and deleted when it passes. No other key is
    touched.

    Args:
        name: Field key
        value: New value of the field
        form_state: Current FormState (rules are per-field, so it is only
            consulted for logging)
        errors: Live ErrorState to update in place
        verbose: Enable verbose logging

    Returns:
        ErrorUpdate: {field: message} or {field: None} when cleared
    """
    rule = get_field_rule(name)
    message = _check_rule(rule, value)

    if errors is not None:
        if message:
            errors[rule.name] = message
        else:
            errors.pop(rule.name, None)

    if verbose:
        filled = sum(1 for v in (form_state or {}).values() if not is_blank(v))
        logger.info(
            f"VALIDATION | {rule.name.value}: {message or 'ok'} "
            f"(filled={filled}/{len(form_state or {})})"
        )

    return {rule.name: message}


def validate_form(
    form_state: FormState,
    errors: Optional[ErrorState] = None,
    verbose: bool = False,
) -> Tuple[bool, ErrorState]:
    """
    Whole-form validation, as run on submit.

    Every field in the registry is checked, whether or not it is present
    in ``form_state`` (a missing field counts as its initial value, an
    unknown key is logged and skipped). When
    ``errors`` is given its contents are replaced with the new mapping.

    Args:
        form_state: Current FormState
        errors: Live ErrorState to replace in place
        verbose: Enable verbose logging

    Returns:
        Tuple of (is_valid, new ErrorState)
    """
    new_errors: ErrorState = {}
    values = {}
    for key, value in form_state.items():
        try:
            values[resolve_field_name(key)] = value
        except ValueError:
            logger.warning(f"VALIDATION | Skipping unknown field: {key!r}")

    for rule in iter_field_rules():
        value = values.get(rule.name, rule.initial_value)
        message = _check_rule(rule, value)
        if message:
            new_errors[rule.name] = message

    if errors is not None:
        errors.clear()
        errors.update(new_errors)

    is_valid = not new_errors

    if verbose:
        logger.info(f"VALIDATION | Form valid={is_valid}, errors={[f.value for f in new_errors]}")

    return is_valid, new_errors
