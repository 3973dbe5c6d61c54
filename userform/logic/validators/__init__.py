"""
Field Validators

Provides format validation for the form's field kinds.
Extra validators can be added with register_validator().
"""

from typing import Optional

from userform.logic.validators.base import BaseValidator
from userform.logic.validators.accepted import AcceptedValidator
from userform.logic.validators.choice import ChoiceValidator
from userform.logic.validators.date import DateValidator
from userform.logic.validators.email import EmailValidator
from userform.logic.validators.phone import PhoneValidator

# Registry of built-in validators
_VALIDATORS = {
    "accepted": AcceptedValidator(),
    "choice": ChoiceValidator(),
    "date": DateValidator(),
    "email": EmailValidator(),
    "phone": PhoneValidator(),
}


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator
