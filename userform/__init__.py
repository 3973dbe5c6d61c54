"""
User Details Form

Field registry and validation engine for a client-side user details form,
with a LangGraph submit workflow that produces the collected data.
"""

from userform.config.field_registry import FieldName, FieldKind, FieldRule, get_field_rule
from userform.state.form_state import FormState, ErrorState, create_initial_form_state
from userform.logic.validation import check_field, validate_field, validate_form
from userform.models import UserDetails, SubmissionResult
from userform.form_context import FormContext

__all__ = [
    "FieldName",
    "FieldKind",
    "FieldRule",
    "get_field_rule",
    "FormState",
    "ErrorState",
    "create_initial_form_state",
    "check_field",
    "validate_field",
    "validate_form",
    "UserDetails",
    "SubmissionResult",
    "FormContext",
]
