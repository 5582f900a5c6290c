"""Deck model: canonical construction, shuffling, and accessors."""

import random
from typing import Iterable, Iterator, List, Optional, Tuple

from card_deck import config
from card_deck.logging_utils import get_logger
from card_deck.models.card import Card, Rank, Suit

logger = get_logger(__name__)

# Suits in canonical order, each paired with whether its ranks run Ace->King.
CANONICAL_SUIT_ORDER: Tuple[Tuple[Suit, bool], ...] = (
    (Suit.SPADES, True),
    (Suit.DIAMONDS, True),
    (Suit.CLUBS, False),
    (Suit.HEARTS, False),
)


def canonical_cards() -> List[Card]:
    """Return the 52 cards of a freshly opened pack.

    Spades and Diamonds run Ace to King, Clubs and Hearts run King to Ace.
    """
    ascending = sorted(Rank)
    cards = []
    for suit, rising in CANONICAL_SUIT_ORDER:
        ranks = ascending if rising else list(reversed(ascending))
        for rank in ranks:
            cards.append(Card(rank, suit))
    return cards


class Deck:
    """An ordered sequence of cards plus a flag recording whether it was shuffled.

    Deck() builds the canonical 52-card order. Use from_cards() for arbitrary
    sequences (no validation), new_shuffled() for a randomized full deck and
    from_text() to decode the single-line text format.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None):
        """Initialize a new deck.

        Args:
            cards: Cards in order, top first. Defaults to the canonical 52.
            rng: Random generator used by shuffle() when none is passed to it.
        """
        self._cards: List[Card] = canonical_cards() if cards is None else list(cards)
        self._shuffled = False
        self._random = rng

    @classmethod
    def from_cards(cls, cards: Iterable[Card],
                   rng: Optional[random.Random] = None) -> "Deck":
        """Wrap any sequence of cards; size and duplicates are not checked."""
        deck = cls(cards, rng=rng)
        logger.debug("Built deck from %d custom cards", len(deck._cards))
        return deck

    @classmethod
    def new_shuffled(cls, rng: Optional[random.Random] = None) -> "Deck":
        """Build a canonical deck and shuffle it."""
        deck = cls(rng=rng)
        deck.shuffle()
        return deck

    @classmethod
    def from_text(cls, text: str) -> "Deck":
        """Decode a deck from its text form, e.g. 'AS2C5DTH'.

        Raises:
            MalformedLengthError: Input is empty or has an odd length.
            UnrecognizedRankCodeError: A rank character is unknown.
            UnrecognizedSuitCodeError: A suit character is unknown.
        """
        from card_deck.codec.text import decode_cards
        deck = cls.from_cards(decode_cards(text))
        deck._shuffled = True
        return deck

    def to_text(self) -> str:
        """Encode the deck as concatenated two-character card codes."""
        from card_deck.codec.text import encode_cards
        return encode_cards(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the deck in place.

        Every permutation is equally likely. The generator is, in order of
        preference: rng, the one given at construction, or a new one seeded
        from CARD_DECK_SHUFFLE_SEED (OS entropy when unset).
        """
        if rng is None:
            if self._random is None:
                self._random = random.Random(config.SHUFFLE_SEED)
            rng = self._random
        rng.shuffle(self._cards)
        self._shuffled = True
        logger.debug("Shuffled deck of %d cards", len(self._cards))

    def size(self) -> int:
        return len(self._cards)

    @property
    def shuffled(self) -> bool:
        return self._shuffled

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Read-only view of the cards, top of the deck first."""
        return tuple(self._cards)

    @property
    def is_complete(self) -> bool:
        """True if the deck holds each of the 52 cards exactly once."""
        return len(self._cards) == 52 and set(self._cards) == set(canonical_cards())

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __getitem__(self, index):
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Deck(size={len(self._cards)}, shuffled={self._shuffled})"
