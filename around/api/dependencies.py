"""FastAPI dependencies for authentication, path validation and services."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from around.database import get_db
from around.errors import BadRequestError, UnauthorizedError
from around.models.mixins import is_object_id
from around.services.auth import AUTHORIZATION_REQUIRED, BEARER_CHALLENGE, decode_access_token
from around.services.cards import CardService
from around.services.users import UserService

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """The authenticated subject of the current request."""

    user_id: str


def require_authorization_header(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Reject the request unless a non-empty authorization header is present."""
    if authorization is None or not authorization.strip():
        raise UnauthorizedError(AUTHORIZATION_REQUIRED, headers=BEARER_CHALLENGE)
    return authorization


def get_current_identity(
    authorization: Annotated[str, Depends(require_authorization_header)],
) -> Identity:
    """Resolve the identity from a `Bearer <token>` authorization header."""
    if not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError(AUTHORIZATION_REQUIRED, headers=BEARER_CHALLENGE)

    token = authorization.removeprefix(BEARER_PREFIX).strip()
    return Identity(user_id=decode_access_token(token))


def valid_user_id(user_id: str) -> str:
    """Path parameter check for `/users/{user_id}`."""
    if not is_object_id(user_id):
        raise BadRequestError("Invalid User ID")
    return user_id.lower()


def valid_card_id(card_id: str) -> str:
    """Path parameter check for `/cards/{card_id}/...`."""
    if not is_object_id(card_id):
        raise BadRequestError("Invalid Card ID")
    return card_id.lower()


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_card_service(
    db: Annotated[Session, Depends(get_db)],
) -> CardService:
    """Get card service with dependencies."""
    return CardService(db)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
