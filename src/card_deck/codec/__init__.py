"""Text encoding and decoding of decks."""

from card_deck.codec.text import decode_cards, decode_deck, encode_cards, encode_deck

__all__ = ["decode_cards", "decode_deck", "encode_cards", "encode_deck"]
