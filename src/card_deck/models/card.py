"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum

from card_deck.exceptions import (
    MalformedLengthError,
    UnrecognizedRankCodeError,
    UnrecognizedSuitCodeError,
)


class Suit(str, Enum):
    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"
    HEARTS = "H"

    @classmethod
    def from_code(cls, c: str) -> "Suit":
        for s in cls:
            if s.value == c:
                return s
        raise UnrecognizedSuitCodeError(f"Unknown suit code: {c!r}", code=c)

    @property
    def symbol(self) -> str:
        return {"S": "♠", "D": "♦", "C": "♣", "H": "♥"}[self.value]

    @property
    def color(self) -> str:
        return "red" if self in (Suit.DIAMONDS, Suit.HEARTS) else "black"


class Rank(str, Enum):
    """Card rank, ordered Ace (low) through King.

    Members compare by numeric_value, not by their string codes.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def numeric_value(self) -> int:
        values = {
            "A": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7,
            "8": 8, "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13,
        }
        return values[self.value]

    @property
    def label(self) -> str:
        """Long-form label for display ('10' for Ten)."""
        return "10" if self is Rank.TEN else self.value

    @classmethod
    def from_code(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c:
                return r
        raise UnrecognizedRankCodeError(f"Unknown rank code: {c!r}", code=c)

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.numeric_value < other.numeric_value

    def __le__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.numeric_value <= other.numeric_value

    def __gt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.numeric_value > other.numeric_value

    def __ge__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.numeric_value >= other.numeric_value


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a two-character card code like 'AS', 'TH', '2C'."""
        if len(s) != 2:
            raise MalformedLengthError(
                f"Card code must be exactly 2 characters, got {s!r}",
                text=s, position=min(len(s), 2))
        return cls(Rank.from_code(s[0]), Suit.from_code(s[1]))

    def to_text(self) -> str:
        """Return the two-character code like 'AS'."""
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self.to_text()}')"

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"
