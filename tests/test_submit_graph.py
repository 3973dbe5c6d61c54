"""Tests for the submit graph and its nodes."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import ValidationError

from userform.config.field_registry import FieldName
from userform.graph.submit_graph import create_submit_graph, get_submit_graph
from userform.models import UserDetails
from userform.nodes.completion import completion_node
from userform.nodes.form_validation import form_validation_node
from userform.routing.conditional_edges import route_after_form_validation
from userform.state.submission_state import create_submission_state


class TestNodes:
    def test_form_validation_node_invalid(self, empty_form):
        state = form_validation_node(create_submission_state(empty_form))
        assert state["is_valid"] is False
        assert len(state["errors"]) == 12

    def test_form_validation_node_valid(self, valid_form):
        state = form_validation_node(create_submission_state(valid_form))
        assert state["is_valid"] is True
        assert state["errors"] == {}

    def test_completion_node(self, valid_form):
        state = completion_node(create_submission_state(valid_form))
        assert state["result_data"]["firstName"] == "Jane"
        assert state["result_data"]["dob"] == "2000-01-01"
        assert state["result_data"]["agreeToTerms"] is True
        assert '"phoneNumber": "1234567890"' in state["payload_json"]


class TestRouting:
    def test_route_valid(self):
        assert route_after_form_validation({"is_valid": True}) == "completion"

    def test_route_invalid(self):
        assert route_after_form_validation({"is_valid": False}) == "END"


class TestSubmitGraph:
    def test_invalid_submission_skips_completion(self, empty_form):
        graph = create_submit_graph()
        result = graph.invoke(create_submission_state(empty_form))
        assert result["is_valid"] is False
        assert result.get("result_data") is None

    def test_valid_submission(self, valid_form):
        result = get_submit_graph().invoke(create_submission_state(valid_form))
        assert result["is_valid"] is True
        assert result["errors"] == {}
        assert result["result_data"]["country"] == "India"

    def test_graph_is_cached(self):
        assert get_submit_graph() is get_submit_graph()


class TestUserDetails:
    def test_from_form_state(self, valid_form):
        details = UserDetails.from_form_state(valid_form)
        assert details.first_name == "Jane"
        assert details.dob.year == 2000

    def test_payload_uses_field_keys(self, valid_form):
        payload = UserDetails.from_form_state(valid_form).to_payload()
        assert set(payload) == {name.value for name in FieldName}

    def test_bad_date_rejected(self, valid_form):
        with pytest.raises(ValidationError):
            UserDetails.from_form_state({**valid_form, FieldName.DOB: "not a date"})
