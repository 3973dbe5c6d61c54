"""
Submit Graph Builder

Constructs the LangGraph workflow that runs when the form is submitted.

Graph Structure:
    START -> form_validation -> [route_after_form_validation]

    - If every field is valid -> completion -> END
    - Otherwise -> END (errors are shown, nothing is produced)
"""

import logging
from functools import lru_cache

from langgraph.graph import StateGraph, END

from userform.state.submission_state import SubmissionState
from userform.nodes.form_validation import form_validation_node
from userform.nodes.completion import completion_node
from userform.routing.conditional_edges import route_after_form_validation

logger = logging.getLogger(__name__)


def create_submit_graph(verbose: bool = False):
    """
    Creates the LangGraph workflow for a submit event.

    Args:
        verbose: Enable verbose logging

    Returns:
        Compiled LangGraph workflow
    """
    logger.info("Creating submit graph")

    workflow = StateGraph(SubmissionState)

    workflow.add_node(
        "form_validation",
        lambda s: form_validation_node(s, verbose),
    )
    workflow.add_node(
        "completion",
        lambda s: completion_node(s, verbose),
    )

    workflow.set_entry_point("form_validation")

    workflow.add_conditional_edges(
        "form_validation",
        route_after_form_validation,
        {
            "completion": "completion",
            "END": END,
        },
    )
    workflow.add_edge("completion", END)

    return workflow.compile()


@lru_cache(maxsize=2)
def get_submit_graph(verbose: bool = False):
    """Get the compiled submit graph (built once per verbose setting)."""
    return create_submit_graph(verbose)
