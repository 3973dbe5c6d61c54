"""
Base Validator

Common interface of the format checks a FieldRule can name.
"""

from abc import ABC, abstractmethod
from typing import Tuple, Optional


class BaseValidator(ABC):
    """
    A format check for one kind of form input.

    The engine only calls a validator once the field is known to be a
    non-blank string; presence is checked before it. A rejected value is
    reported through the returned message, never by raising.
    """

    @abstractmethod
    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        """
        Check a field value.

        Args:
            value: The submitted value
            **kwargs: ``label`` of the field plus the rule's
                validator_config (``digits``, ``choices``, ...)

        Returns:
            (True, None) when the value passes, otherwise
            (False, message to show under the field)
        """
