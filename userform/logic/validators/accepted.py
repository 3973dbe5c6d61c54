"""Accepted Validator"""

from typing import Tuple, Optional

from userform.logic.validators.base import BaseValidator


class AcceptedValidator(BaseValidator):
    """Validates that a checkbox has been ticked."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        label = kwargs.get("label", "This field")

        if value is not True:
            return False, f"{label} must be accepted"

        return True, None
