"""Date Validator"""

import re
from datetime import date
from typing import Tuple, Optional

from userform.logic.validators.base import BaseValidator


class DateValidator(BaseValidator):
    """Validates ISO calendar dates as submitted by a date input (YYYY-MM-DD)."""

    # fromisoformat alone also takes "20000101" and week dates
    DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        label = kwargs.get("label", "Date")
        message = f"{label} must be a valid date"

        if not isinstance(value, str) or not self.DATE_PATTERN.fullmatch(value):
            return False, message

        try:
            date.fromisoformat(value)
        except ValueError:
            return False, message

        return True, None
