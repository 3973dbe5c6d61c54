"""Test fixtures for the user details form."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from userform.config.field_registry import FieldName
from userform.state.form_state import create_initial_form_state


@pytest.fixture
def empty_form():
    return create_initial_form_state()


@pytest.fixture
def valid_form():
    """A fully populated form that passes every rule."""
    return {
        FieldName.FIRST_NAME: "Jane",
        FieldName.LAST_NAME: "Doe",
        FieldName.PHONE_NUMBER: "1234567890",
        FieldName.EMAIL: "j@x.com",
        FieldName.GENDER: "Female",
        FieldName.TEMPORARY_ADDRESS: "12 Temp Street",
        FieldName.PERMANENT_ADDRESS: "34 Home Road",
        FieldName.COUNTRY: "India",
        FieldName.NATIVE_LANGUAGE: "English",
        FieldName.DOB: "2000-01-01",
        FieldName.CURRENT_ORGANIZATION: "Acme",
        FieldName.AGREE_TO_TERMS: True,
    }
