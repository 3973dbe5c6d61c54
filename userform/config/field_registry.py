"""
Field Registry - Static definition of the user details form.

Enumerates every managed field with its label, input kind, required-ness
and format rule. The registry is closed: FieldName lists exactly the keys
that FormState and ErrorState may hold.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from userform.config.constants import (
    COUNTRY_CHOICES,
    GENDER_CHOICES,
    PHONE_DIGITS,
    TERMS_MESSAGE,
)

logger = logging.getLogger(__name__)


class FieldName(str, Enum):
    """Keys of the managed fields, as used by the rendering surface."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    PHONE_NUMBER = "phoneNumber"
    EMAIL = "email"
    GENDER = "gender"
    TEMPORARY_ADDRESS = "temporaryAddress"
    PERMANENT_ADDRESS = "permanentAddress"
    COUNTRY = "country"
    NATIVE_LANGUAGE = "nativeLanguage"
    DOB = "dob"
    CURRENT_ORGANIZATION = "currentOrganization"
    AGREE_TO_TERMS = "agreeToTerms"


class FieldKind(str, Enum):
    """Input kind the rendering surface uses for a field."""

    TEXT = "text"
    TEL = "tel"
    EMAIL = "email"
    RADIO = "radio"
    TEXTAREA = "textarea"
    SELECT = "select"
    DATE = "date"
    CHECKBOX = "checkbox"


class FieldRule(BaseModel):
    """Validation rule for one field."""

    model_config = ConfigDict(frozen=True)

    name: FieldName
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = True
    validator: Optional[str] = Field(None, description="Name of a registered format validator")
    validator_config: Dict[str, Any] = Field(default_factory=dict)
    choices: Tuple[str, ...] = ()
    message: Optional[str] = Field(None, description="Overrides the validator's message")

    @property
    def is_checkbox(self) -> bool:
        return self.kind == FieldKind.CHECKBOX

    @property
    def initial_value(self) -> Union[str, bool]:
        return False if self.is_checkbox else ""


_RULES: Tuple[FieldRule, ...] = (
    FieldRule(name=FieldName.FIRST_NAME, label="First Name"),
    FieldRule(name=FieldName.LAST_NAME, label="Last Name"),
    FieldRule(
        name=FieldName.PHONE_NUMBER,
        label="Phone Number",
        kind=FieldKind.TEL,
        validator="phone",
        validator_config={"digits": PHONE_DIGITS},
    ),
    FieldRule(name=FieldName.EMAIL, label="Email", kind=FieldKind.EMAIL, validator="email"),
    FieldRule(
        name=FieldName.GENDER,
        label="Gender",
        kind=FieldKind.RADIO,
        validator="choice",
        choices=GENDER_CHOICES,
    ),
    FieldRule(name=FieldName.TEMPORARY_ADDRESS, label="Temporary Address", kind=FieldKind.TEXTAREA),
    FieldRule(name=FieldName.PERMANENT_ADDRESS, label="Permanent Address", kind=FieldKind.TEXTAREA),
    FieldRule(
        name=FieldName.COUNTRY,
        label="Country/Region",
        kind=FieldKind.SELECT,
        validator="choice",
        choices=COUNTRY_CHOICES,
    ),
    FieldRule(name=FieldName.NATIVE_LANGUAGE, label="Native Language"),
    FieldRule(name=FieldName.DOB, label="Date of Birth", kind=FieldKind.DATE, validator="date"),
    FieldRule(name=FieldName.CURRENT_ORGANIZATION, label="Current Organization"),
    FieldRule(
        name=FieldName.AGREE_TO_TERMS,
        label="Terms and Conditions",
        kind=FieldKind.CHECKBOX,
        validator="accepted",
        message=TERMS_MESSAGE,
    ),
)

FIELD_RULES: Dict[FieldName, FieldRule] = {rule.name: rule for rule in _RULES}


def resolve_field_name(name: Union[str, FieldName]) -> FieldName:
    """
    Map a field key to its FieldName.

    Raises:
        ValueError: If the key is not a managed field
    """
    return FieldName(name)


def get_field_rule(name: Union[str, FieldName]) -> FieldRule:
    """Get the rule for a field. Raises ValueError for unknown keys."""
    return FIELD_RULES[resolve_field_name(name)]


def iter_field_rules() -> Iterator[FieldRule]:
    """Iterate every rule in form order."""
    return iter(_RULES)


def required_message(rule: FieldRule) -> str:
    """Message shown when a required field is left empty (or a checkbox unticked)."""
    if rule.is_checkbox and rule.message:
        return rule.message
    return f"{rule.label} is required"


def check_registry() -> List[str]:
    """Check the registry against FieldName. Returns list of problems."""
    problems = []

    missing = set(FieldName) - set(FIELD_RULES)
    if missing:
        problems.append(f"Fields without a rule: {sorted(f.value for f in missing)}")

    if len(FIELD_RULES) != len(_RULES):
        problems.append("Duplicate field rule")

    # Imported here to avoid a cycle with the validators' config imports
    from userform.logic.validators import get_validator

    for rule in _RULES:
        if rule.validator and get_validator(rule.validator) is None:
            problems.append(f"Field '{rule.name.value}' uses unknown validator '{rule.validator}'")
        if rule.kind in (FieldKind.RADIO, FieldKind.SELECT) and not rule.choices:
            problems.append(f"Field '{rule.name.value}' has no choices")

    for problem in problems:
        logger.error(f"REGISTRY | {problem}")

    return problems
