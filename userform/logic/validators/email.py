"""Email Validator"""

import re
from typing import Tuple, Optional

from userform.logic.validators.base import BaseValidator


class EmailValidator(BaseValidator):
    """Validates email addresses by shape only: something@something.something"""

    EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        label = kwargs.get("label", "Email")

        if not isinstance(value, str) or not self.EMAIL_PATTERN.search(value):
            return False, f"{label} is invalid"

        return True, None
