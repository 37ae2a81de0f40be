"""Signup and signin endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from around.api.dependencies import get_user_service
from around.schemas.auth import SignIn, SignUp, TokenResponse
from around.schemas.user import UserResponse
from around.services.auth import create_access_token
from around.services.users import UserService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    user_data: SignUp,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user. The response never includes the password."""
    user = await users.create_user(user_data)
    return UserResponse.model_validate(user)


@router.post("/signin", response_model=TokenResponse)
async def signin(
    credentials: SignIn,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Exchange email and password for a bearer token."""
    user = await users.authenticate(credentials.email, credentials.password)
    return TokenResponse(token=create_access_token(user.id))
