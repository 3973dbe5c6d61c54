"""Tests for field validators."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from userform.logic.validators import get_validator, register_validator
from userform.logic.validators.base import BaseValidator
from userform.logic.validators.accepted import AcceptedValidator
from userform.logic.validators.choice import ChoiceValidator
from userform.logic.validators.date import DateValidator
from userform.logic.validators.email import EmailValidator
from userform.logic.validators.phone import PhoneValidator


class TestEmailValidator:
    def setup_method(self):
        self.v = EmailValidator()

    def test_valid_email(self):
        valid, err = self.v.validate("a@b.co")
        assert valid is True
        assert err is None

    def test_plain_address(self):
        valid, err = self.v.validate("plainaddress", label="Email")
        assert valid is False
        assert err == "Email is invalid"

    def test_missing_dot(self):
        valid, err = self.v.validate("a@b")
        assert valid is False

    def test_shape_only(self):
        # Any non-space runs around "@" and "." are accepted
        valid, err = self.v.validate("x+tag@sub.domain.example")
        assert valid is True


class TestPhoneValidator:
    def setup_method(self):
        self.v = PhoneValidator()

    def test_valid_phone(self):
        valid, err = self.v.validate("6155551234")
        assert valid is True

    def test_short_phone(self):
        valid, err = self.v.validate("123", label="Phone Number", digits=10)
        assert valid is False
        assert err == "Phone Number must be 10 digits"

    def test_long_phone(self):
        valid, err = self.v.validate("12345678901")
        assert valid is False

    def test_letters(self):
        valid, err = self.v.validate("12345abcde")
        assert valid is False

    def test_phone_with_formatting(self):
        valid, err = self.v.validate("(615) 555-1234")
        assert valid is False

    def test_non_ascii_digits(self):
        valid, err = self.v.validate("١٢٣٤٥٦٧٨٩٠")
        assert valid is False

    def test_custom_digit_count(self):
        valid, err = self.v.validate("1234567", digits=7)
        assert valid is True


class TestChoiceValidator:
    def setup_method(self):
        self.v = ChoiceValidator()

    def test_valid_choice(self):
        valid, err = self.v.validate("Male", choices=("Male", "Female"))
        assert valid is True

    def test_invalid_choice(self):
        valid, err = self.v.validate("Other", label="Gender", choices=("Male", "Female"))
        assert valid is False
        assert err == "Gender must be one of: Male, Female"

    def test_case_sensitive(self):
        valid, err = self.v.validate("india", choices=("India",))
        assert valid is False


class TestDateValidator:
    def setup_method(self):
        self.v = DateValidator()

    def test_valid_date(self):
        valid, err = self.v.validate("2000-01-01")
        assert valid is True

    def test_impossible_date(self):
        valid, err = self.v.validate("2001-02-30", label="Date of Birth")
        assert valid is False
        assert err == "Date of Birth must be a valid date"

    def test_not_a_date(self):
        valid, err = self.v.validate("yesterday")
        assert valid is False


class TestAcceptedValidator:
    def setup_method(self):
        self.v = AcceptedValidator()

    def test_ticked(self):
        valid, err = self.v.validate(True)
        assert valid is True

    def test_unticked(self):
        valid, err = self.v.validate(False)
        assert valid is False

    def test_string_is_not_ticked(self):
        valid, err = self.v.validate("true")
        assert valid is False


class TestGetValidator:
    def test_get_email(self):
        v = get_validator("email")
        assert isinstance(v, EmailValidator)

    def test_get_unknown(self):
        v = get_validator("nonexistent")
        assert v is None

    def test_register_validator(self):
        class UpperValidator(BaseValidator):
            def validate(self, value, **kwargs):
                return value.isupper(), None if value.isupper() else "Must be upper case"

        register_validator("upper_test", UpperValidator())
        assert get_validator("upper_test").validate("ABC") == (True, None)


class TestDateValidatorStrictness:
    def setup_method(self):
        self.v = DateValidator()

    def test_padded_date(self):
        valid, err = self.v.validate(" 2000-01-01")
        assert valid is False

    def test_compact_date(self):
        valid, err = self.v.validate("20000101")
        assert valid is False

    def test_week_date(self):
        valid, err = self.v.validate("2000-W01-1")
        assert valid is False
