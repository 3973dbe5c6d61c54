"""Processing nodes for the submit graph."""

from userform.nodes.form_validation import form_validation_node
from userform.nodes.completion import completion_node

__all__ = [
    "form_validation_node",
    "completion_node",
]
