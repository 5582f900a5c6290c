"""Plain text formatting for terminal output."""

from card_deck.models.card import Card
from card_deck.models.deck import Deck


class TextFormatter:
    """Format cards and decks as human-readable text.

    Uses long-form labels ('10♥'), so the output is for display only and is
    not accepted by the decoder.
    """

    def __init__(self, per_line: int = 13):
        self.per_line = per_line

    def format_card(self, card: Card) -> str:
        return str(card)

    def format_deck(self, deck: Deck) -> str:
        """Format a deck with a header line and the cards in rows."""
        state = "shuffled" if deck.shuffled else "unshuffled"
        lines = [f"=== Deck: {deck.size()} cards ({state}) ==="]

        cards = [self.format_card(c) for c in deck]
        for start in range(0, len(cards), self.per_line):
            lines.append(" ".join(f"{c:>3}" for c in cards[start:start + self.per_line]))

        if not cards:
            lines.append("(empty)")

        return "\n".join(lines)
