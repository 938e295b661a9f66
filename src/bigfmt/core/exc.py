"""
Errors raised by the formatting engine.

Rejected input derives from InvalidArgument, a ValueError; each subclass names
the case it covers. A value no digit adapter understands raises
UnsupportedValueError, a TypeError.
"""

__all__ = [
    "InvalidArgument",
    "DigitsMissingError",
    "MalformedDigitsError",
    "MalformedPartsError",
    "UnsupportedStyleError",
    "UnsupportedValueError",
]


class InvalidArgument(ValueError):
    """Base class for local input validation failures (programming errors, not transient)."""
    pass


class DigitsMissingError(InvalidArgument):
    """Raised when a RawDigits carries no digit string at all."""
    pass


class MalformedDigitsError(InvalidArgument):
    """Raised when a digit string contains characters other than '0'-'9'."""
    pass


class MalformedPartsError(InvalidArgument):
    """Raised when integer/fraction parts cannot be rendered.

    Covers an integer part that is None, empty or whitespace-only, a fraction
    part that is None, and a negative decimal length.
    """
    pass


class UnsupportedStyleError(InvalidArgument):
    """Raised when a format spec starts with a letter outside N, F, E, G.

    Attributes
    ----------
    style : str
        The offending style letter as given by the caller.
    """

    def __init__(self, style: str):
        super().__init__(f"Unsupported format style {style!r}. Supported: N, F, E, G")
        self.style = style


class UnsupportedValueError(TypeError):
    """Raised when no digit adapter knows how to render a value."""

    def __init__(self, value):
        super().__init__(f"Cannot render value of type {type(value).__name__}")
        self.value = value
