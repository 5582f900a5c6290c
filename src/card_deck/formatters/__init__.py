"""Output formatting for terminal and tables."""

from card_deck.formatters.text import TextFormatter
from card_deck.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
