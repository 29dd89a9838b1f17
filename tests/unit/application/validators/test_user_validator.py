"""Unit tests for UserValidator."""

import pytest

from pos.application.dtos import UserRequest
from pos.application.responses import FieldError
from pos.application.validators import UserValidator


class TestUserValidator:
    def setup_method(self):
        self.validator = UserValidator()

    def test_valid_request(self):
        result = self.validator.validate(
            UserRequest(username="bob", email="bob@example.com", password="pw-123"),
        )

        assert result.is_valid
        assert result.errors == ()

    def test_all_fields_missing_reports_each_in_order(self):
        result = self.validator.validate(UserRequest())

        assert not result.is_valid
        assert result.errors == (
            FieldError("username", "required"),
            FieldError("email", "required"),
            FieldError("password", "required"),
        )

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_username_is_required(self, blank):
        result = self.validator.validate(
            UserRequest(username=blank, email="bob@example.com", password="pw"),
        )

        assert result.errors == (FieldError("username", "required"),)

    def test_empty_username_only_reports_username(self):
        result = self.validator.validate(
            UserRequest(username="", email="x@y.io", password="p"),
        )

        assert [e.field for e in result.errors] == ["username"]

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "bob@", "@example.com", "bob@example", "bob example@x.com"],
    )
    def test_malformed_email(self, email):
        result = self.validator.validate(
            UserRequest(username="bob", email=email, password="pw"),
        )

        assert result.errors == (FieldError("email", "must be a valid email address"),)

    def test_missing_email_reports_required_only(self):
        result = self.validator.validate(UserRequest(username="bob", password="pw"))

        assert result.errors == (FieldError("email", "required"),)

    def test_password_at_bcrypt_limit_is_valid(self):
        result = self.validator.validate(
            UserRequest(username="bob", email="bob@example.com", password="a" * 72),
        )

        assert result.is_valid

    def test_password_over_bcrypt_limit(self):
        result = self.validator.validate(
            UserRequest(username="bob", email="bob@example.com", password="a" * 73),
        )

        assert result.errors == (FieldError("password", "must not exceed 72 bytes"),)

    def test_password_limit_counts_utf8_bytes(self):
        # 37 two-byte characters = 74 bytes
        result = self.validator.validate(
            UserRequest(username="bob", email="bob@example.com", password="ñ" * 37),
        )

        assert [e.field for e in result.errors] == ["password"]

    def test_username_too_long(self):
        result = self.validator.validate(
            UserRequest(username="u" * 51, email="bob@example.com", password="pw"),
        )

        assert result.errors == (
            FieldError("username", "must not exceed 50 characters"),
        )

    def test_multiple_violations_reported_together(self):
        result = self.validator.validate(
            UserRequest(username=" ", email="nope", password=None),
        )

        assert [e.field for e in result.errors] == ["username", "email", "password"]

    def test_email_at_column_limit_is_valid(self):
        email = "b" * 243 + "@example.com"

        result = self.validator.validate(
            UserRequest(username="bob", email=email, password="pw"),
        )

        assert len(email) == 255
        assert result.is_valid

    def test_email_too_long(self):
        email = "b" * 288 + "@example.com"

        result = self.validator.validate(
            UserRequest(username="bob", email=email, password="pw"),
        )

        assert result.errors == (
            FieldError("email", "must not exceed 255 characters"),
        )
