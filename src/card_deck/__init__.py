"""A standard 52-card deck with shuffling and a compact text encoding."""

from card_deck.models import Card, Deck, Rank, Suit
from card_deck.codec import decode_cards, decode_deck, encode_cards, encode_deck
from card_deck.exceptions import (
    DeckDecodeError,
    MalformedLengthError,
    UnrecognizedCodeError,
    UnrecognizedRankCodeError,
    UnrecognizedSuitCodeError,
)

__all__ = [
    "Card", "Deck", "Rank", "Suit",
    "decode_cards", "decode_deck", "encode_cards", "encode_deck",
    "DeckDecodeError", "MalformedLengthError", "UnrecognizedCodeError",
    "UnrecognizedRankCodeError", "UnrecognizedSuitCodeError",
]
