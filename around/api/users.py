"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from around.api.dependencies import CurrentIdentity, get_user_service, valid_user_id
from around.models.user import User
from around.schemas.user import UserAvatarUpdate, UserEnvelope, UserProfileUpdate, UserResponse
from around.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _envelope(user: User) -> UserEnvelope:
    return UserEnvelope(data=UserResponse.model_validate(user))


@router.get("", response_model=list[UserResponse])
async def get_users(
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users. An empty store gives an empty list."""
    return [UserResponse.model_validate(user) for user in users.list_users()]


@router.get("/me", response_model=UserEnvelope)
async def get_me(
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get the user the token was issued for."""
    return _envelope(users.get_user(identity.user_id))


@router.patch("/me", response_model=UserEnvelope)
async def update_me(
    profile: UserProfileUpdate,
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update name and/or about of the current user."""
    return _envelope(users.update_profile(identity.user_id, profile))


@router.patch("/me/avatar", response_model=UserEnvelope)
async def update_my_avatar(
    payload: UserAvatarUpdate,
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Replace the avatar of the current user."""
    return _envelope(users.update_avatar(identity.user_id, payload.avatar))


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(
    user_id: Annotated[str, Depends(valid_user_id)],
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user profile by id."""
    return _envelope(users.get_user(user_id))
