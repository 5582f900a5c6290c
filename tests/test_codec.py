"""Tests for the single-line deck text format."""

import random

import pytest

from card_deck.codec import decode_cards, decode_deck, encode_cards, encode_deck
from card_deck.exceptions import (
    DeckDecodeError,
    MalformedLengthError,
    UnrecognizedCodeError,
    UnrecognizedRankCodeError,
    UnrecognizedSuitCodeError,
)
from card_deck.models.card import Card, Rank, Suit
from card_deck.models.deck import Deck


class TestDecode:
    def test_sample(self):
        deck = decode_deck("AS2C5DTH")
        assert list(deck) == [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.TWO, Suit.CLUBS),
            Card(Rank.FIVE, Suit.DIAMONDS),
            Card(Rank.TEN, Suit.HEARTS),
        ]
        assert deck.shuffled is True
        assert deck.size() == 4

    def test_deck_from_text(self):
        deck = Deck.from_text("KHKH")
        assert deck.size() == 2
        assert deck.shuffled is True

    def test_decode_cards_returns_list(self):
        assert decode_cards("QS") == [Card(Rank.QUEEN, Suit.SPADES)]

    @pytest.mark.parametrize("text", ["AS2", "A", "AS2CT"])
    def test_odd_length(self, text):
        with pytest.raises(MalformedLengthError) as exc:
            decode_deck(text)
        assert exc.value.position == len(text) - 1
        assert exc.value.text == text

    def test_empty(self):
        with pytest.raises(MalformedLengthError):
            decode_deck("")

    def test_unknown_codes(self):
        with pytest.raises(UnrecognizedCodeError):
            decode_deck("XX")

    def test_unknown_rank_checked_before_suit(self):
        with pytest.raises(UnrecognizedRankCodeError) as exc:
            decode_deck("ASXX")
        assert exc.value.code == "X"
        assert exc.value.position == 2
        assert exc.value.text == "ASXX"

    def test_unknown_suit(self):
        with pytest.raises(UnrecognizedSuitCodeError) as exc:
            decode_deck("AS2Z")
        assert exc.value.code == "Z"
        assert exc.value.position == 3

    @pytest.mark.parametrize("text", ["as", "10H", "1H", "A♠", "AS ", " AS"])
    def test_non_canonical_input_rejected(self, text):
        with pytest.raises(DeckDecodeError):
            decode_deck(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode_deck("AS2")
        with pytest.raises(ValueError):
            decode_deck("ZZ")

    def test_no_fallback_to_ace_of_spades(self):
        """Unknown characters never decode as AS."""
        for bad in ("?S", "A?", "??"):
            with pytest.raises(UnrecognizedCodeError):
                decode_deck(bad)

    def test_allows_duplicates(self):
        deck = decode_deck("ASASAS")
        assert deck.size() == 3
        assert len(set(deck)) == 1


class TestEncode:
    def test_card_codes(self):
        assert encode_cards([Card(Rank.ACE, Suit.SPADES)]) == "AS"
        assert encode_cards([Card(Rank.TWO, Suit.SPADES)]) == "2S"
        assert encode_cards([Card(Rank.TEN, Suit.HEARTS)]) == "TH"

    def test_length_is_twice_size(self):
        deck = Deck.new_shuffled(random.Random(3))
        assert len(encode_deck(deck)) == 104

    def test_empty(self):
        assert encode_deck(Deck.from_cards([])) == ""

    def test_matches_deck_method(self):
        deck = Deck()
        assert encode_deck(deck) == deck.to_text() == str(deck)


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "AS2C5DTH",
        "KH",
        "TSTSTS",
        "AS2S3S4S5S6S7S8S9STSJSQSKS",
    ])
    def test_text_round_trip(self, text):
        assert encode_deck(decode_deck(text)) == text

    def test_shuffled_deck_round_trip(self):
        deck = Deck.new_shuffled(random.Random(77))
        decoded = decode_deck(encode_deck(deck))
        assert decoded == deck
        assert decoded.shuffled

    def test_canonical_deck_round_trip(self):
        assert decode_deck(encode_deck(Deck())) == Deck()
