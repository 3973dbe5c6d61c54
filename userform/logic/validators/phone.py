"""Phone Validator"""

import re
from typing import Tuple, Optional

from userform.config.constants import PHONE_DIGITS
from userform.logic.validators.base import BaseValidator


class PhoneValidator(BaseValidator):
    """Validates phone numbers as a bare run of ASCII digits."""

    DIGITS_PATTERN = re.compile(r"[0-9]+")

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        label = kwargs.get("label", "Phone Number")
        digits = kwargs.get("digits", PHONE_DIGITS)
        message = f"{label} must be {digits} digits"

        if not isinstance(value, str):
            return False, message

        # Formatting characters are not stripped: "(615) 555-1234" is rejected
        if not self.DIGITS_PATTERN.fullmatch(value) or len(value) != digits:
            return False, message

        return True, None
