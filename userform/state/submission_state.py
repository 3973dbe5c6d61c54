"""
SubmissionState - State schema for the LangGraph submit workflow.

Carries a snapshot of the form values through whole-form validation and,
when the form is clean, through completion.
"""

from typing import TypedDict, Dict, Any, Optional

from userform.state.form_state import ErrorState, FormState


class SubmissionState(TypedDict):
    """
    Complete state for one submit event.
    """

    values: FormState
    """Snapshot of the form values being submitted"""

    errors: ErrorState
    """Errors found by whole-form validation (replaces the live mapping)"""

    is_valid: bool
    """Whether the form passed validation"""

    result_data: Optional[Dict[str, Any]]
    """Final user details keyed by field name (only set when valid)"""

    payload_json: Optional[str]
    """result_data rendered as indented JSON"""


def create_submission_state(values: FormState) -> SubmissionState:
    """
    Creates the initial SubmissionState for a submit event.

    Args:
        values: Current FormState (copied, so later edits do not leak in)

    Returns:
        SubmissionState: Initial state with no outcome yet
    """
    return {
        "values": dict(values),
        "errors": {},
        "is_valid": False,
        "result_data": None,
        "payload_json": None,
    }
