"""
Conditional Edge Functions

Routing logic for the submit graph.
"""

import logging

from userform.state.submission_state import SubmissionState

logger = logging.getLogger(__name__)


def route_after_form_validation(state: SubmissionState) -> str:
    """
    Route after whole-form validation.

    Returns:
        "completion" when every field is valid, otherwise "END"
    """
    if state.get("is_valid"):
        logger.info("ROUTING | Form valid -> completion")
        return "completion"

    logger.info("ROUTING | Form invalid -> END")
    return "END"
