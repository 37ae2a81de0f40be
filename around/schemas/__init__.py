"""Pydantic schemas for API requests and responses."""

from around.schemas.auth import SignIn, SignUp, TokenResponse
from around.schemas.card import CardCreate, CardEnvelope, CardResponse
from around.schemas.user import UserAvatarUpdate, UserEnvelope, UserProfileUpdate, UserResponse

__all__ = [
    "SignUp",
    "SignIn",
    "TokenResponse",
    "CardCreate",
    "CardResponse",
    "CardEnvelope",
    "UserProfileUpdate",
    "UserAvatarUpdate",
    "UserResponse",
    "UserEnvelope",
]
