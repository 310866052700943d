"""Errors raised when decoding serialized Seconds values."""

from typing import Any


class ParseError(ValueError):
    """Serialized input could not be decoded into a Seconds value.

    Attributes:
        data: The offending input, as received by the decoder
    """

    def __init__(self, message: str, *, data: Any = None):
        super().__init__(message)
        self.data: Any = data


class MalformedLiteralError(ParseError):
    """JSON input is neither an integer literal nor ``null``."""


class MalformedNumericStringError(ParseError):
    """An attribute value's ``N`` field is not a base-10 int64 string."""
