"""Configuration and field registry."""

from userform.config.settings import (
    VALIDATE_ON_CHANGE,
    LOG_LEVEL,
    LOG_FORMAT,
    VERBOSE,
)
from userform.config.field_registry import (
    FieldName,
    FieldKind,
    FieldRule,
    FIELD_RULES,
    get_field_rule,
    iter_field_rules,
    required_message,
    resolve_field_name,
    check_registry,
)
from userform.config.constants import (
    PHONE_DIGITS,
    GENDER_CHOICES,
    COUNTRY_CHOICES,
    DATE_FORMAT_HINT,
    CHECKED_VALUES,
    TERMS_MESSAGE,
)

__all__ = [
    # Settings
    "VALIDATE_ON_CHANGE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "VERBOSE",
    # Registry
    "FieldName",
    "FieldKind",
    "FieldRule",
    "FIELD_RULES",
    "get_field_rule",
    "iter_field_rules",
    "required_message",
    "resolve_field_name",
    "check_registry",
    # Constants
    "PHONE_DIGITS",
    "GENDER_CHOICES",
    "COUNTRY_CHOICES",
    "DATE_FORMAT_HINT",
    "CHECKED_VALUES",
    "TERMS_MESSAGE",
]
