"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field

from around.schemas.fields import About, Avatar, Name


class UserProfileUpdate(BaseModel):
    """Partial update of the current user's profile."""

    model_config = ConfigDict(extra="forbid")

    name: Name | None = None
    about: About | None = None


class UserAvatarUpdate(BaseModel):
    """Replace the current user's avatar."""

    model_config = ConfigDict(extra="forbid")

    avatar: Avatar


class UserResponse(BaseModel):
    """Public user fields. The password hash is never part of a response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    about: str
    avatar: str
    email: str


class UserEnvelope(BaseModel):
    data: UserResponse
