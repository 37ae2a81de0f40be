"""Card service: posting, deleting and liking cards."""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from around.errors import ForbiddenError, NotFoundError
from around.models.card import Card, card_likes
from around.schemas.card import CardCreate, CardResponse

logger = logging.getLogger(__name__)

CARD_NOT_FOUND = "Card not found"
NOT_CARD_OWNER = "You can only delete your own cards"


class CardService:
    """Service for card-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_cards(self) -> list[Card]:
        return list(self.db.scalars(select(Card).order_by(Card.created_at, Card.id)))

    def get_card(self, card_id: str) -> Card:
        card = self.db.get(Card, card_id)
        if card is None:
            raise NotFoundError(CARD_NOT_FOUND)
        return card

    def create_card(self, owner_id: str, data: CardCreate) -> Card:
        card = Card(name=data.name, link=data.link, owner_id=owner_id)
        self.db.add(card)
        self.db.commit()
        self.db.refresh(card)
        return card

    def delete_card(self, card_id: str, user_id: str) -> CardResponse:
        """Delete a card owned by the user and return it as it was before deletion."""
        card = self.get_card(card_id)
        if card.owner_id != user_id:
            raise ForbiddenError(NOT_CARD_OWNER)

        deleted = CardResponse.model_validate(card)
        self.db.delete(card)
        self.db.commit()

        logger.info(f"User {user_id} deleted card {card_id}")
        return deleted

    def like_card(self, card_id: str, user_id: str) -> Card:
        """Add the user to the card's likes. Liking twice changes nothing."""
        card = self.get_card(card_id)
        if not self._is_liked(card_id, user_id):
            try:
                self.db.execute(insert(card_likes).values(card_id=card_id, user_id=user_id))
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                # A concurrent like for the same pair already landed
                if not self._is_liked(card_id, user_id):
                    raise
        self.db.refresh(card)
        return card

    def unlike_card(self, card_id: str, user_id: str) -> Card:
        """Remove the user from the card's likes. A no-op when not liked."""
        card = self.get_card(card_id)
        self.db.execute(
            delete(card_likes).where(
                card_likes.c.card_id == card_id, card_likes.c.user_id == user_id
            )
        )
        self.db.commit()
        self.db.refresh(card)
        return card

    def _is_liked(self, card_id: str, user_id: str) -> bool:
        row = self.db.execute(
            select(card_likes.c.card_id).where(
                card_likes.c.card_id == card_id, card_likes.c.user_id == user_id
            )
        ).first()
        return row is not None
