"""
Pydantic Models

The collected user details, and the outcome of a submission as exposed
to the rendering surface.
"""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from userform.state.form_state import FormState


class UserDetails(BaseModel):
    """Final data of a successfully validated form (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    phone_number: str = Field(..., alias="phoneNumber")
    email: str
    gender: str
    temporary_address: str = Field(..., alias="temporaryAddress")
    permanent_address: str = Field(..., alias="permanentAddress")
    country: str
    native_language: str = Field(..., alias="nativeLanguage")
    dob: date
    current_organization: str = Field(..., alias="currentOrganization")
    agree_to_terms: bool = Field(..., alias="agreeToTerms")

    @classmethod
    def from_form_state(cls, values: FormState) -> "UserDetails":
        return cls.model_validate(
            {getattr(name, "value", name): value for name, value in values.items()}
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict keyed like the form fields."""
        return self.model_dump(mode="json", by_alias=True)


class SubmissionResult(BaseModel):
    """Outcome of a submit event."""
    is_valid: bool
    errors: Dict[str, str] = {}
    data: Optional[Dict[str, Any]] = None
    payload_json: Optional[str] = None
