"""Choice Validator"""

from typing import Tuple, Optional

from userform.logic.validators.base import BaseValidator


class ChoiceValidator(BaseValidator):
    """Validates that a value is one of a fixed set of options (radio, select)."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        label = kwargs.get("label", "Value")
        choices = tuple(kwargs.get("choices") or ())

        if value not in choices:
            return False, f"{label} must be one of: {', '.join(choices)}"

        return True, None
