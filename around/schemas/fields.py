"""Reusable field rules for request schemas.

Each rule raises ``PydanticCustomError`` with the exact text the client should
see, so the validation handler can return it unchanged.
"""

from collections.abc import Callable
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, HttpUrl, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

_http_url = TypeAdapter(HttpUrl)

# Matches the String(2048) link and avatar columns
URL_MAX_LENGTH = 2048

# Error types raised below; their messages are meant for the client as-is
RULE_ERROR_TYPES = frozenset(
    {"string_empty", "string_too_short", "string_too_long", "url_invalid", "email_invalid"}
)


def _empty(field: str) -> PydanticCustomError:
    return PydanticCustomError(
        "string_empty", "The {field} field cannot be empty", {"field": field}
    )


def text_rule(field: str, min_length: int, max_length: int) -> Callable[[str], str]:
    """Trimmed text with separate messages for empty, too short and too long values."""

    def check(value: str) -> str:
        value = value.strip()
        if not value:
            raise _empty(field)
        if len(value) < min_length:
            raise PydanticCustomError(
                "string_too_short",
                "The {field} field needs at least {min_length} characters",
                {"field": field, "min_length": min_length},
            )
        if len(value) > max_length:
            raise PydanticCustomError(
                "string_too_long",
                "The maximum length of the {field} field is {max_length} characters",
                {"field": field, "max_length": max_length},
            )
        return value

    return check


def url_rule(field: str) -> Callable[[str], str]:
    """An absolute http(s) URL. The original string is kept, not the normalized one."""

    def check(value: str) -> str:
        value = value.strip()
        if not value:
            raise _empty(field)
        if len(value) > URL_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long",
                "The maximum length of the {field} field is {max_length} characters",
                {"field": field, "max_length": URL_MAX_LENGTH},
            )
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise PydanticCustomError(
                "url_invalid", "The {field} field must be a valid URL", {"field": field}
            ) from None
        return value

    return check


def email_rule(value: str) -> str:
    value = value.strip()
    if not value:
        raise _empty("email")
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_invalid", "The email is not valid") from None
    return result.normalized


def password_rule(value: str) -> str:
    if not value:
        raise _empty("password")
    if len(value) < 8:
        raise PydanticCustomError(
            "string_too_short", "The password field needs at least 8 characters"
        )
    # bcrypt only looks at the first 72 bytes
    if len(value) > 128:
        raise PydanticCustomError(
            "string_too_long", "The maximum length of the password field is 128 characters"
        )
    return value


def required_text_rule(field: str) -> Callable[[str], str]:
    """Any non-empty string."""

    def check(value: str) -> str:
        if not value.strip():
            raise _empty(field)
        return value

    return check


Name = Annotated[str, AfterValidator(text_rule("name", 2, 30))]
About = Annotated[str, AfterValidator(text_rule("about", 2, 30))]
Avatar = Annotated[str, AfterValidator(url_rule("avatar"))]
Link = Annotated[str, AfterValidator(url_rule("link"))]
Email = Annotated[str, AfterValidator(email_rule)]
Password = Annotated[str, AfterValidator(password_rule)]
LoginPassword = Annotated[str, AfterValidator(required_text_rule("password"))]
