"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict

from around.schemas.fields import About, Avatar, Email, LoginPassword, Name, Password


class SignUp(BaseModel):
    """User registration request. Profile fields fall back to defaults."""

    model_config = ConfigDict(extra="forbid")

    name: Name | None = None
    about: About | None = None
    avatar: Avatar | None = None
    email: Email
    password: Password


class SignIn(BaseModel):
    """User login request."""

    model_config = ConfigDict(extra="forbid")

    email: Email
    password: LoginPassword


class TokenResponse(BaseModel):
    """JWT token response."""

    token: str
