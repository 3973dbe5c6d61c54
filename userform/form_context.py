"""
FormContext - Caller-owned state of one mounted user details form.

The rendering surface creates a FormContext when the form is mounted,
forwards change/blur/submit events to it, and reads ``values`` and
``errors`` back for display. Nothing is shared between contexts.
"""

import logging
from typing import Dict, Optional, Set, Union

from userform.config.constants import CHECKED_VALUES
from userform.config.field_registry import FieldName, FieldRule, get_field_rule
from userform.config.settings import VALIDATE_ON_CHANGE
from userform.graph.submit_graph import get_submit_graph
from userform.logic.validation import validate_field
from userform.models import SubmissionResult
from userform.state.form_state import (
    ErrorState,
    ErrorUpdate,
    FieldValue,
    FormState,
    create_initial_form_state,
    get_state_summary,
)
from userform.state.submission_state import create_submission_state

logger = logging.getLogger(__name__)

FIELD_UNTOUCHED = "untouched"
FIELD_VALID = "valid"
FIELD_INVALID = "invalid"


def coerce_value(rule: FieldRule, raw_value, raw_type: str = "text") -> FieldValue:
    """
    Turn a raw event value into the field's value type.

    The rule's kind decides the type; a disagreeing raw_type is ignored.
    A bool sent for a text-like field is kept as is so validation rejects it.
    """
    if raw_type != rule.kind.value:
        logger.debug(f"FORM | {rule.name.value} reported as {raw_type!r}, treating as {rule.kind.value!r}")

    if rule.is_checkbox:
        if isinstance(raw_value, str):
            return raw_value.strip().lower() in CHECKED_VALUES
        return bool(raw_value)

    if raw_value is None:
        return ""
    if isinstance(raw_value, bool):
        return raw_value
    return str(raw_value)


class FormContext:
    """
    Values, errors and touched fields of one form instance.

    Usage:
        form = FormContext()
        form.handle_change("email", "jane@example")
        form.handle_blur("email")
        result = form.handle_submit()
    """

    def __init__(self, verbose: bool = False, validate_on_change: Optional[bool] = None):
        self.verbose = verbose
        self.validate_on_change = VALIDATE_ON_CHANGE if validate_on_change is None else validate_on_change

        self.values: FormState = create_initial_form_state()
        self.errors: ErrorState = {}
        self.touched: Set[FieldName] = set()
        self.submitted: Optional[SubmissionResult] = None

    def _rule_for_event(self, event: str, name: Union[str, FieldName]) -> Optional[FieldRule]:
        try:
            return get_field_rule(name)
        except ValueError:
            logger.warning(f"FORM | Ignoring {event} for unknown field: {name!r}")
            return None

    def handle_change(
        self,
        name: Union[str, FieldName],
        raw_value,
        raw_type: str = "text",
    ) -> ErrorUpdate:
        """
        A field's value changed.

        Args:
            name: Field key
            raw_value: Value from the input (checked state for checkboxes)
            raw_type: Input type reported by the surface

        Returns:
            ErrorUpdate for the field, empty if the field is unknown
        """
        rule = self._rule_for_event("change", name)
        if rule is None:
            return {}

        value = coerce_value(rule, raw_value, raw_type)
        self.values[rule.name] = value
        self.touched.add(rule.name)

        if self.validate_on_change:
            return validate_field(rule.name, value, self.values, self.errors, self.verbose)

        self.errors.pop(rule.name, None)
        return {rule.name: None}

    def handle_blur(self, name: Union[str, FieldName], raw_value=None) -> ErrorUpdate:
        """
        A field lost focus. Re-validates it with the given or stored value.

        Returns:
            ErrorUpdate for the field, empty if the field is unknown
        """
        rule = self._rule_for_event("blur", name)
        if rule is None:
            return {}

        if raw_value is not None:
            self.values[rule.name] = coerce_value(rule, raw_value, rule.kind.value)
        self.touched.add(rule.name)

        return validate_field(rule.name, self.values[rule.name], self.values, self.errors, self.verbose)

    def handle_submit(self) -> SubmissionResult:
        """
        The form was submitted. Re-validates every field and replaces the
        error mapping; when clean, the final values are returned as data.
        """
        graph = get_submit_graph(self.verbose)
        final_state = graph.invoke(create_submission_state(self.values))

        self.errors.clear()
        self.errors.update(final_state["errors"])
        self.touched.update(self.values.keys())

        result = SubmissionResult(
            is_valid=final_state["is_valid"],
            errors=self.errors_by_name(),
            data=final_state.get("result_data"),
            payload_json=final_state.get("payload_json"),
        )
        self.submitted = result

        if self.verbose:
            logger.info(get_form_summary(self))

        return result

    def error_for(self, name: Union[str, FieldName]) -> str:
        """Message to display under a field, or "" when it is valid."""
        return self.errors.get(get_field_rule(name).name, "")

    def field_status(self, name: Union[str, FieldName]) -> str:
        rule = get_field_rule(name)
        if rule.name not in self.touched:
            return FIELD_UNTOUCHED
        return FIELD_INVALID if self.errors.get(rule.name) else FIELD_VALID

    @property
    def is_valid(self) -> bool:
        """True when no displayed error remains (untouched fields are not checked)."""
        return not any(self.errors.values())

    def errors_by_name(self) -> Dict[str, str]:
        return {name.value: message for name, message in self.errors.items() if message}

    def values_by_name(self) -> Dict[str, FieldValue]:
        return {name.value: value for name, value in self.values.items()}

    def reset(self):
        """Return to the state of a freshly mounted form."""
        self.values = create_initial_form_state()
        self.errors.clear()
        self.touched.clear()
        self.submitted = None


def get_form_summary(context: FormContext) -> str:
    """Human-readable summary of a FormContext for debug logging."""
    summary = get_state_summary(context.values, context.errors)
    return f"{summary}\nTouched: {len(context.touched)}/{len(context.values)}"
