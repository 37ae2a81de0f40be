"""SQLAlchemy models."""

from around.models.card import Card, card_likes
from around.models.user import User

__all__ = [
    "User",
    "Card",
    "card_likes",
]
