"""State types for the user details form."""

from userform.state.form_state import (
    FieldValue,
    FormState,
    ErrorState,
    ErrorUpdate,
    create_initial_form_state,
    is_blank,
    get_state_summary,
)
from userform.state.submission_state import SubmissionState, create_submission_state

__all__ = [
    "FieldValue",
    "FormState",
    "ErrorState",
    "ErrorUpdate",
    "create_initial_form_state",
    "is_blank",
    "get_state_summary",
    "SubmissionState",
    "create_submission_state",
]
