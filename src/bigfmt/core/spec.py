"""
Format spec parsing: "N", "F3", "e10", "G" -> tagged FormatSpec values.

A spec is a single style letter (case-insensitive) optionally followed by a
non-negative decimal precision. When the remainder is not a plain run of
digits ("N-1", "F2x") or does not fit in a 32-bit int, the precision is left
unset and the style default applies later.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .constants import (
    DEFAULT_EXP_PRECISION,
    DEFAULT_FIXED_PRECISION,
    DEFAULT_GROUPED_PRECISION,
    DIGIT_CHARS,
    MAX_PRECISION,
    SUPPORTED_STYLES,
)
from .exc import UnsupportedStyleError


@dataclass(frozen=True)
class Default:
    """No spec given: render every available digit."""


@dataclass(frozen=True)
class Fixed:
    precision: Optional[int] = None

    def resolved(self) -> int:
        return DEFAULT_FIXED_PRECISION if self.precision is None else self.precision


@dataclass(frozen=True)
class Grouped:
    precision: Optional[int] = None

    def resolved(self) -> int:
        return DEFAULT_GROUPED_PRECISION if self.precision is None else self.precision


@dataclass(frozen=True)
class Scientific:
    """Exponential style; `letter` keeps the caller's case ('E' or 'e')."""
    precision: Optional[int] = None
    letter: str = "E"

    def resolved(self) -> int:
        return DEFAULT_EXP_PRECISION if self.precision is None else self.precision


@dataclass(frozen=True)
class General:
    """Fixed or scientific, chosen by the magnitude of the value."""
    precision: Optional[int] = None


FormatSpec = Union[Default, Fixed, Grouped, Scientific, General]


def _parse_precision(rest: str) -> Optional[int]:
    if not rest or not set(rest) <= DIGIT_CHARS:
        return None
    significant = rest.lstrip("0")
    if len(significant) > len(str(MAX_PRECISION)):
        return None
    precision = int(significant or "0")
    return precision if precision <= MAX_PRECISION else None


def parse_format_spec(spec: Optional[str]) -> FormatSpec:
    """Parse a format spec string.

    Examples:
      None / ""  -> Default()
      "N"        -> Grouped(None)
      "f4"       -> Fixed(4)
      "e10"      -> Scientific(10, "e")
      "G2"       -> General(2)
      "X"        -> UnsupportedStyleError
    """
    if not spec:
        return Default()

    letter, rest = spec[0], spec[1:]
    style = letter.upper()
    if style not in SUPPORTED_STYLES:
        raise UnsupportedStyleError(letter)

    precision = _parse_precision(rest)
    if style == "N":
        return Grouped(precision)
    if style == "F":
        return Fixed(precision)
    if style == "E":
        return Scientific(precision, letter)
    return General(precision)


__all__ = [
    "Default",
    "Fixed",
    "Grouped",
    "Scientific",
    "General",
    "FormatSpec",
    "parse_format_spec",
]
