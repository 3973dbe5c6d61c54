"""
Completion Node

Handles the final step when the submitted form is valid: turns the
values into UserDetails and exposes them as the submission result.
"""

import logging
import json

from userform.models import UserDetails
from userform.state.submission_state import SubmissionState

logger = logging.getLogger(__name__)


def completion_node(state: SubmissionState, verbose: bool = False) -> SubmissionState:
    """
    Produce the collected data of a valid submission.

    Args:
        state: Current SubmissionState (already validated)
        verbose: Enable verbose logging

    Returns:
        SubmissionState: Updated with result_data and payload_json
    """
    details = UserDetails.from_form_state(state["values"])
    result_data = details.to_payload()
    payload_json = json.dumps(result_data, indent=2)

    logger.info(f"COMPLETION | Collected data: {payload_json}")

    if verbose:
        logger.info(f"COMPLETION | Fields: {list(result_data.keys())}")

    return {
        **state,
        "result_data": result_data,
        "payload_json": payload_json,
    }
