"""
Digit-string primitives: RawDigits, DecimalParts and ExpParts.

- RawDigits: unsigned digit string + decimal exponent + sign, as produced by a
  bignum-to-string conversion (e.g. mpf_get_str / mpfr_get_str).
- DecimalParts: canonical (sign, integer digits, fraction digits).
- ExpParts: scientific view (sign, lead digit, mantissa tail, power of ten).

All three are immutable values created fresh per formatting call. The
transforms between them never round: every significant digit of the input is
kept, and truncation is left to the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import (
    DIGIT_CHARS,
    INF_MARKER,
    NAN_MARKER,
    SPECIAL_INF,
    SPECIAL_NAN,
)
from .exc import DigitsMissingError, MalformedDigitsError

# Debug printing control
DEBUG_PARTS = False

def _dbg(msg: str) -> None:
    if DEBUG_PARTS:
        print(msg)


_SPECIAL_BY_MARKER = {INF_MARKER: SPECIAL_INF, NAN_MARKER: SPECIAL_NAN}


# ----------------------------
# RawDigits (input contract)
# ----------------------------

@dataclass(frozen=True)
class RawDigits:
    """Unsigned digits with a base-10 decimal-point position.

    `decimal_exponent` counts the digits that lie before the decimal point and
    may be <= 0 or exceed len(digits): ("123", 5) is 12300, ("123", -1) is 0.0123.
    """
    digits: Optional[str]
    decimal_exponent: int
    is_negative: bool = False

    @classmethod
    def from_signed(cls, s: Optional[str], decimal_exponent: int) -> "RawDigits":
        """Bridge from a GMP-style string whose first char may be '-'."""
        if s is not None and s.startswith("-"):
            return cls(s[1:], decimal_exponent, True)
        return cls(s, decimal_exponent, False)

    @property
    def special(self) -> Optional[str]:
        """'inf' / 'nan' for MPFR's @Inf@ / @NaN@ markers, else None."""
        if self.digits is None:
            return None
        return _SPECIAL_BY_MARKER.get(self.digits)


# ----------------------------
# DecimalParts / ExpParts
# ----------------------------

@dataclass(frozen=True)
class DecimalParts:
    """Sign, integer digits and fraction digits.

    When produced by `split`, `integer_part` has no leading zero unless it is
    exactly "0" and `fraction_part` has no trailing zero. Instances built by
    hand are not validated here; the renderers reject malformed parts.
    """
    is_negative: bool
    integer_part: Optional[str]
    fraction_part: Optional[str]
    special: Optional[str] = None

    def is_zero(self) -> bool:
        if self.special is not None:
            return False
        combined = (self.integer_part or "") + (self.fraction_part or "")
        return not combined.strip("0")

    def to_raw(self) -> RawDigits:
        """Re-join the parts at their boundary (inverse of `split` up to zero trimming)."""
        if self.special == SPECIAL_INF:
            return RawDigits(INF_MARKER, 0, self.is_negative)
        if self.special == SPECIAL_NAN:
            return RawDigits(NAN_MARKER, 0, self.is_negative)
        integer = self.integer_part or ""
        return RawDigits(integer + (self.fraction_part or ""), len(integer), self.is_negative)


@dataclass(frozen=True)
class ExpParts:
    """Scientific view: value = sign * lead_digit.mantissa_tail * 10**exponent.

    `lead_digit` is "0" only for zero; `mantissa_tail` is not trimmed further.
    """
    is_negative: bool
    lead_digit: str
    mantissa_tail: str
    exponent: int
    special: Optional[str] = None


# ----------------------------
# Splitter
# ----------------------------

def split(raw: RawDigits) -> DecimalParts:
    """Normalise RawDigits into canonical DecimalParts.

    Examples:
      ("0012345600", 2)  -> ("0", "123456")
      ("000123456000", 6) -> ("123", "456")
      ("7", 4)           -> ("7000", "")
      ("", 0)            -> ("0", "")
    """
    digits = raw.digits
    if digits is None:
        raise DigitsMissingError("split(): digit string is missing")

    special = raw.special
    if special is not None:
        _dbg(f"split: special={special}, negative={raw.is_negative}")
        return DecimalParts(raw.is_negative, "0", "", special)

    if not digits:
        digits = "0"
    bad = set(digits) - DIGIT_CHARS
    if bad:
        raise MalformedDigitsError(f"split(): non-digit characters {sorted(bad)!r} in digit string")

    n = len(digits)
    p = raw.decimal_exponent
    if p >= n:
        integer, fraction = digits + "0" * (p - n), ""
    elif p <= 0:
        integer, fraction = "0", "0" * (-p) + digits
    else:
        integer, fraction = digits[:p], digits[p:]
    _dbg(f"split: digits={digits!r}, p={p} -> int={integer!r}, frac={fraction!r}")

    integer = integer.lstrip("0") or "0"
    fraction = fraction.rstrip("0")
    return DecimalParts(raw.is_negative, integer, fraction)


# ----------------------------
# Exponentiator
# ----------------------------

def to_exp_parts(p: DecimalParts) -> ExpParts:
    """Re-index DecimalParts around the first significant digit (no rounding).

    Examples:
      ("123", "456")  -> ("1", "23456", 2)
      ("0", "00123")  -> ("1", "23", -3)
      ("0", "")       -> ("0", "", 0)
    """
    if p.special is not None:
        return ExpParts(p.is_negative, "0", "", 0, p.special)

    integer = p.integer_part or ""
    combined = integer + (p.fraction_part or "")
    significant = combined.lstrip("0")
    if not significant:
        return ExpParts(p.is_negative, "0", "", 0)

    i = len(combined) - len(significant)
    exponent = len(integer) - 1 - i
    _dbg(f"to_exp_parts: combined={combined!r}, first_nonzero={i}, exp={exponent}")
    return ExpParts(p.is_negative, significant[0], significant[1:], exponent)


__all__ = [
    "RawDigits",
    "DecimalParts",
    "ExpParts",
    "split",
    "to_exp_parts",
]
