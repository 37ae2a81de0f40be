"""Card model and the likes association table."""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import relationship

from around.database import Base
from around.models.mixins import CreatedAtMixin, ObjectIdMixin

# Composite primary key keeps likes a set: one row per (card, user)
card_likes = Table(
    "card_likes",
    Base.metadata,
    Column("card_id", String(24), ForeignKey("cards.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", String(24), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Card(Base, ObjectIdMixin, CreatedAtMixin):
    """A picture posted by a user."""

    __tablename__ = "cards"

    name = Column(String(30), nullable=False)
    link = Column(String(2048), nullable=False)
    owner_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", backref="cards")
    liked_by = relationship("User", secondary=card_likes, lazy="selectin")

    @property
    def likes(self) -> list[str]:
        """Ids of the users who liked the card."""
        return [user.id for user in self.liked_by]
