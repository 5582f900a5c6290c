"""Data models for card decks."""

from card_deck.models.card import Card, Rank, Suit
from card_deck.models.deck import Deck, canonical_cards

__all__ = [
    "Card", "Rank", "Suit",
    "Deck", "canonical_cards",
]
