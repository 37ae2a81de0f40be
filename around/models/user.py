"""User model."""

from sqlalchemy import Column, String

from around.database import Base
from around.models.mixins import CreatedAtMixin, ObjectIdMixin

DEFAULT_NAME = "Jacques Cousteau"
DEFAULT_ABOUT = "Explorer"
DEFAULT_AVATAR = "https://pictures.s3.yandex.net/resources/avatar_1604080799.jpg"


class User(Base, ObjectIdMixin, CreatedAtMixin):
    """User profile and login credentials."""

    __tablename__ = "users"

    name = Column(String(30), nullable=False, default=DEFAULT_NAME)
    about = Column(String(30), nullable=False, default=DEFAULT_ABOUT)
    avatar = Column(String(2048), nullable=False, default=DEFAULT_AVATAR)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
