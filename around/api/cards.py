"""Card API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from around.api.dependencies import CurrentIdentity, get_card_service, valid_card_id
from around.models.card import Card
from around.schemas.card import CardCreate, CardEnvelope, CardResponse
from around.services.cards import CardService

router = APIRouter(prefix="/cards", tags=["cards"])

# Checked before authentication so a malformed id is a 400 regardless of the token
CardId = Annotated[str, Depends(valid_card_id)]


def _envelope(card: Card) -> CardEnvelope:
    return CardEnvelope(data=CardResponse.model_validate(card))


@router.get("", response_model=list[CardResponse])
async def get_cards(
    identity: CurrentIdentity,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Get all cards. An empty store gives an empty list."""
    return [CardResponse.model_validate(card) for card in cards.list_cards()]


@router.post("", response_model=CardEnvelope, status_code=status.HTTP_201_CREATED)
async def create_card(
    card_data: CardCreate,
    identity: CurrentIdentity,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Post a new card owned by the current user."""
    return _envelope(cards.create_card(identity.user_id, card_data))


@router.delete("/{card_id}", response_model=CardEnvelope)
async def delete_card(
    card_id: CardId,
    identity: CurrentIdentity,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Delete a card (owner only)."""
    return CardEnvelope(data=cards.delete_card(card_id, identity.user_id))


@router.put("/{card_id}/likes", response_model=CardEnvelope)
async def like_card(
    card_id: CardId,
    identity: CurrentIdentity,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Like a card. Liking again keeps a single like."""
    return _envelope(cards.like_card(card_id, identity.user_id))


@router.delete("/{card_id}/likes", response_model=CardEnvelope)
async def unlike_card(
    card_id: CardId,
    identity: CurrentIdentity,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Remove the current user's like from a card."""
    return _envelope(cards.unlike_card(card_id, identity.user_id))
