"""Single-line text format for decks.

Each card is its rank code followed by its suit code ('AS', 'TH', '2C');
a deck is the concatenation of its cards with no separators, so N cards
encode to exactly 2N characters.
"""

from typing import Iterable, List

from card_deck.exceptions import MalformedLengthError, UnrecognizedCodeError
from card_deck.logging_utils import get_logger
from card_deck.models.card import Card, Rank, Suit
from card_deck.models.deck import Deck

logger = get_logger(__name__)


def encode_cards(cards: Iterable[Card]) -> str:
    return "".join(card.to_text() for card in cards)


def encode_deck(deck: Deck) -> str:
    """Encode a deck, top card first."""
    return encode_cards(deck.cards)


def decode_cards(text: str) -> List[Card]:
    """Decode a string of two-character card codes.

    Decoding is all-or-nothing: the first bad pair aborts the whole input.

    Raises:
        MalformedLengthError: Input is empty or ends with half a card.
        UnrecognizedRankCodeError: A rank character is not in 'A23456789TJQK'.
        UnrecognizedSuitCodeError: A suit character is not in 'SDCH'.
    """
    if not text:
        logger.debug("Rejected empty deck text")
        raise MalformedLengthError("Deck text is empty", text=text, position=0)
    if len(text) % 2:
        logger.debug("Rejected odd-length deck text (%d chars)", len(text))
        raise MalformedLengthError(
            f"Incomplete trailing rank or suit code at position {len(text) - 1}: "
            f"{text[-1]!r}",
            text=text, position=len(text) - 1)

    cards = []
    for i in range(0, len(text), 2):
        pos = i
        try:
            rank = Rank.from_code(text[i])
            pos = i + 1
            suit = Suit.from_code(text[i + 1])
        except UnrecognizedCodeError as e:
            e.text = text
            e.position = pos
            logger.debug("Rejected deck text at position %d: %s", pos, e)
            raise
        cards.append(Card(rank, suit))

    logger.debug("Decoded %d cards", len(cards))
    return cards


def decode_deck(text: str) -> Deck:
    """Decode a deck; the result is marked as shuffled."""
    return Deck.from_text(text)
