"""
Form Validation Node

Runs whole-form validation on the submitted values.
"""

import logging

from userform.logic.validation import validate_form
from userform.state.submission_state import SubmissionState

logger = logging.getLogger(__name__)


def form_validation_node(state: SubmissionState, verbose: bool = False) -> SubmissionState:
    """
    Validate every field of the submitted values.

    Args:
        state: Current SubmissionState
        verbose: Enable verbose logging

    Returns:
        SubmissionState: Updated with the full error mapping and is_valid
    """
    is_valid, errors = validate_form(state["values"], verbose=verbose)

    if not is_valid:
        logger.info(f"SUBMIT | Blocked, {len(errors)} invalid field(s): {[f.value for f in errors]}")
    elif verbose:
        logger.info("SUBMIT | All fields valid")

    return {
        **state,
        "errors": errors,
        "is_valid": is_valid,
    }
