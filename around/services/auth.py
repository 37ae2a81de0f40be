"""Credential hashing and JWT handling."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from around.config import get_settings
from around.errors import UnauthorizedError

settings = get_settings()

AUTHORIZATION_REQUIRED = "Authorization Required"
BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


async def hash_password(password: str) -> str:
    """Hash a password off the event loop."""
    return await run_in_threadpool(pwd_context.hash, password)


async def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash off the event loop."""
    return await run_in_threadpool(pwd_context.verify, plain_password, hashed_password)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed token for a user, valid for the configured lifetime."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": user_id,
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """Verify a token and return the user id it was issued for.

    Raises:
        UnauthorizedError: bad signature, malformed token, expired token or no subject.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise UnauthorizedError(AUTHORIZATION_REQUIRED, headers=BEARER_CHALLENGE) from e

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise UnauthorizedError(AUTHORIZATION_REQUIRED, headers=BEARER_CHALLENGE)
    return user_id
