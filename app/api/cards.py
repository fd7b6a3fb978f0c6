"""
Card management endpoints.
"""

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from app.api.deps import get_backend
from app.backend import BankingBackend
from app.backend.schemas import CardType

logger = logging.getLogger(__name__)

router = APIRouter()

LAST4_PATTERN = re.compile(r"^\d{4}$")
EXPIRY_PATTERN = re.compile(r"^\d{2}/\d{2}$")


class CardCreate(BaseModel):
    """Schema for adding a card."""

    nickname: str
    card_type: CardType = CardType.debit
    issuer: str
    last4: str
    expiry: str


class CardResponse(BaseModel):
    nickname: str
    card_type: CardType
    issuer: str
    last4: str
    expiry: str


@router.get("", response_model=List[CardResponse])
def list_cards(backend: BankingBackend = Depends(get_backend)):
    """Get the caller's cards."""
    return [
        CardResponse(**card.model_dump()) for card in backend.get_all_cards()
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def add_card(
    card: CardCreate,
    backend: BankingBackend = Depends(get_backend),
):
    """Add a card."""
    if not LAST4_PATTERN.match(card.last4):
        raise HTTPException(
            status_code=400, detail="Last 4 digits must be exactly 4 numbers"
        )
    if not EXPIRY_PATTERN.match(card.expiry):
        raise HTTPException(status_code=400, detail="Expiry must be in MM/YY format")

    nickname = card.nickname.strip()
    issuer = card.issuer.strip()
    if not nickname or not issuer:
        raise HTTPException(status_code=400, detail="Nickname and issuer are required")

    backend.add_card(
        nickname=nickname,
        card_type=card.card_type,
        issuer=issuer,
        last4=card.last4,
        expiry=card.expiry,
    )
    logger.info(f"Added {card.card_type.value} card {nickname}")

    return {"message": "Card added successfully", "nickname": nickname}


@router.delete("/{nickname}")
def remove_card(
    nickname: str,
    backend: BankingBackend = Depends(get_backend),
):
    """Remove a card by nickname."""
    backend.remove_card(nickname)
    logger.info(f"Removed card {nickname}")
    return {"message": "Card removed successfully"}
