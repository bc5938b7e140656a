"""Exceptions raised by the big integer and transform code."""

from enum import Enum


class ParseErrorKind(Enum):
    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"


class ParseError(ValueError):
    """Raised by the strict parser when the text is not a plain run of digits."""

    def __init__(self, kind: ParseErrorKind, text: str = ""):
        self.kind = kind
        self.text = text
        message = kind.value
        if kind is ParseErrorKind.INVALID_DIGIT:
            message = f"{message}: {text!r}"
        super().__init__(message)

    @classmethod
    def empty(cls) -> "ParseError":
        return cls(ParseErrorKind.EMPTY)

    @classmethod
    def invalid(cls, text: str) -> "ParseError":
        return cls(ParseErrorKind.INVALID_DIGIT, text)


class TransformError(ValueError):
    """No usable modulus, generator or root of unity for a transform size."""
