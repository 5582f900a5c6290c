"""Rich table formatting for terminal output."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from card_deck.models.card import Card
from card_deck.models.deck import Deck


class TableFormatter:
    """Format decks as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    @staticmethod
    def card_text(card: Card) -> Text:
        """Card label coloured by suit."""
        return Text(str(card), style="red" if card.suit.color == "red" else "bold")

    def build_deck_table(self, deck: Deck) -> Table:
        state = "shuffled" if deck.shuffled else "unshuffled"
        table = Table(title=f"Deck ({deck.size()} cards, {state})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Card")
        table.add_column("Code", style="cyan")
        table.add_column("Rank", justify="right")
        table.add_column("Suit")

        for i, card in enumerate(deck, 1):
            table.add_row(
                str(i),
                self.card_text(card),
                card.to_text(),
                card.rank.label,
                card.suit.name.title(),
            )

        return table

    def print_deck(self, deck: Deck) -> None:
        """Print a deck as a Rich table."""
        if not deck.size():
            self.console.print("[dim]Empty deck.[/dim]")
            return
        self.console.print(self.build_deck_table(deck))
