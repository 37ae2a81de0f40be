"""Tests for request schema rules and validation message formatting."""

import pytest
from pydantic import ValidationError

from around.api.error_handlers import format_validation_errors
from around.models.mixins import is_object_id, new_object_id
from around.schemas.auth import SignIn, SignUp
from around.schemas.card import CardCreate
from around.schemas.user import UserProfileUpdate


def _messages(exc_info) -> list[str]:
    return [error["msg"] for error in exc_info.value.errors()]


class TestTextRules:
    """Tests for bounded text fields."""

    def test_trims_whitespace(self):
        update = UserProfileUpdate(name="  Jacques  ")
        assert update.name == "Jacques"

    def test_empty_and_short_have_different_messages(self):
        with pytest.raises(ValidationError) as empty:
            UserProfileUpdate(name="")
        with pytest.raises(ValidationError) as short:
            UserProfileUpdate(name="J")
        assert _messages(empty) == ["The name field cannot be empty"]
        assert _messages(short) == ["The name field needs at least 2 characters"]

    def test_boundaries(self):
        assert UserProfileUpdate(about="ab").about == "ab"
        assert UserProfileUpdate(about="a" * 30).about == "a" * 30
        with pytest.raises(ValidationError) as exc_info:
            UserProfileUpdate(about="a" * 31)
        assert _messages(exc_info) == ["The maximum length of the about field is 30 characters"]


class TestUrlRule:
    """Tests for URL-shaped fields."""

    @pytest.mark.parametrize(
        "link",
        ["https://example.com/a.jpg", "http://example.com", "https://sub.example.co.uk/p?q=1"],
    )
    def test_accepts(self, link):
        assert CardCreate(name="Card", link=link).link == link

    @pytest.mark.parametrize("link", ["example", "ftp://example.com/a.jpg", "https://", "  "])
    def test_rejects(self, link):
        with pytest.raises(ValidationError):
            CardCreate(name="Card", link=link)

    def test_keeps_original_string(self):
        assert CardCreate(name="Card", link="https://example.com").link == "https://example.com"

    def test_length_limit(self):
        base = "https://example.com/"
        longest = base + "a" * (2048 - len(base))
        assert CardCreate(name="Card", link=longest).link == longest
        with pytest.raises(ValidationError) as exc_info:
            CardCreate(name="Card", link=longest + "a")
        assert _messages(exc_info) == ["The maximum length of the link field is 2048 characters"]


class TestEmailAndPassword:
    """Tests for the credential fields."""

    def test_email_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SignUp(email="not-an-email", password="longpass1")
        assert _messages(exc_info) == ["The email is not valid"]

    def test_password_min_length(self):
        with pytest.raises(ValidationError) as exc_info:
            SignUp(email="a@x.com", password="1234567")
        assert _messages(exc_info) == ["The password field needs at least 8 characters"]
        assert SignUp(email="a@x.com", password="12345678").password == "12345678"

    def test_signin_accepts_short_password(self):
        """A wrong password must reach the credential check, not fail validation."""
        assert SignIn(email="a@x.com", password="wrong").password == "wrong"

    def test_signin_rejects_empty_password(self):
        with pytest.raises(ValidationError):
            SignIn(email="a@x.com", password="")


class TestObjectIds:
    """Tests for identifier generation and format checks."""

    def test_new_ids_are_valid_and_unique(self):
        ids = {new_object_id() for _ in range(100)}
        assert len(ids) == 100
        assert all(is_object_id(value) for value in ids)

    @pytest.mark.parametrize("value", ["", "123", "g" * 24, "a" * 23, "a" * 25, None, 42])
    def test_invalid(self, value):
        assert not is_object_id(value)


class TestFormatValidationErrors:
    """Tests for joining validation errors into one message."""

    def test_one_message_per_field(self):
        errors = [
            {"type": "missing", "loc": ("body", "email"), "msg": "Field required"},
            {"type": "string_too_short", "loc": ("body", "name"), "msg": "short name"},
            {"type": "string_too_long", "loc": ("body", "name"), "msg": "long name"},
        ]
        assert format_validation_errors(errors) == "The email field is required | short name"

    def test_body_level_errors(self):
        errors = [{"type": "json_invalid", "loc": ("body", 3), "msg": "JSON decode error"}]
        assert format_validation_errors(errors) == "Request body is not valid JSON"

    def test_missing_body(self):
        errors = [{"type": "missing", "loc": ("body",), "msg": "Field required"}]
        assert format_validation_errors(errors) == "Request body is required"

    def test_unknown_types_do_not_leak_pydantic_wording(self):
        errors = [{"type": "int_parsing", "loc": ("query", "page"), "msg": "Input should be..."}]
        assert format_validation_errors(errors) == "The page field is invalid"
