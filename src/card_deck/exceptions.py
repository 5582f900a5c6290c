"""Errors raised when decoding the single-line deck text format."""

from typing import Optional


class DeckDecodeError(ValueError):
    """Base class for all text decode failures.

    Attributes:
        text: The full input that failed to decode.
        position: Character offset where decoding stopped, if known.
    """

    def __init__(self, message: str, text: Optional[str] = None,
                 position: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.position = position


class MalformedLengthError(DeckDecodeError):
    """Input is empty or ends with an incomplete rank/suit pair."""
    pass


class UnrecognizedCodeError(DeckDecodeError):
    """A character is outside the rank or suit alphabet."""

    def __init__(self, message: str, code: str, text: Optional[str] = None,
                 position: Optional[int] = None):
        super().__init__(message, text=text, position=position)
        self.code = code


class UnrecognizedRankCodeError(UnrecognizedCodeError):
    pass


class UnrecognizedSuitCodeError(UnrecognizedCodeError):
    pass
