"""User service: signup, login and profile operations."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from around.errors import ConflictError, NotFoundError, UnauthorizedError
from around.models.user import User
from around.schemas.auth import SignUp
from around.schemas.user import UserProfileUpdate
from around.services.auth import hash_password, verify_password

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "A user with this email already exists"
INVALID_CREDENTIALS = "Incorrect email or password"
USER_NOT_FOUND = "User not found"


class UserService:
    """Service for user-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[User]:
        return list(self.db.scalars(select(User).order_by(User.created_at, User.id)))

    def get_user(self, user_id: str) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.scalars(select(User).where(User.email == email)).first()

    async def create_user(self, data: SignUp) -> User:
        """Create a user after checking the email is free.

        Profile fields left out of the request keep the model defaults.
        """
        if self.get_user_by_email(data.email) is not None:
            raise ConflictError(EMAIL_TAKEN)

        password_hash = await hash_password(data.password)
        profile = data.model_dump(include={"name", "about", "avatar"}, exclude_none=True)
        user = User(email=data.email, password_hash=password_hash, **profile)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Another signup with the same email won the race past the check above
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN) from e
        self.db.refresh(user)

        logger.info(f"Created user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Return the user for a valid email/password pair.

        The same error is raised whether the email or the password is wrong.
        """
        user = self.get_user_by_email(email)
        if user is None or not await verify_password(password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return user

    def update_profile(self, user_id: str, data: UserProfileUpdate) -> User:
        user = self.get_user(user_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in changes.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_avatar(self, user_id: str, avatar: str) -> User:
        user = self.get_user(user_id)
        user.avatar = avatar
        self.db.commit()
        self.db.refresh(user)
        return user
