"""Tests for configuration and logging helpers."""

import logging

import pytest

from card_deck import config
from card_deck.codec import decode_deck
from card_deck.exceptions import MalformedLengthError
from card_deck.logging_utils import get_logger
from card_deck.models.deck import Deck


class TestSeedParsing:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_unset(self, raw):
        assert config._parse_seed(raw) is None

    def test_integer(self):
        assert config._parse_seed("42") == 42

    def test_invalid(self):
        with pytest.raises(ValueError):
            config._parse_seed("lucky")


class TestLogging:
    def test_get_logger(self):
        assert get_logger("card_deck.test").name == "card_deck.test"

    def test_shuffle_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="card_deck"):
            Deck().shuffle()
        assert "Shuffled deck of 52 cards" in caplog.text

    def test_decode_failure_logged_and_raised(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="card_deck"):
            with pytest.raises(MalformedLengthError):
                decode_deck("AS2")
        assert "odd-length" in caplog.text

    def test_setup_logging_uses_level(self, monkeypatch):
        from card_deck import logging_utils
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        logging_utils.setup_logging("DEBUG")
        assert calls[0]["level"] == logging.DEBUG
