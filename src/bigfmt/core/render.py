"""
Renderers for DecimalParts / ExpParts.

Truncation contract: fraction and mantissa digits beyond `decimal_length` are
cut off, never rounded. "F2" of 12345.6789 is "12345.67", not "12345.68".
Shorter digit runs are right-padded with '0'. A `decimal_length` of 0 drops the
decimal separator together with every fractional digit.

All validation happens before any output is assembled; a renderer either
returns the complete string or raises.
"""

from __future__ import annotations

from typing import Optional, Union

from .constants import SPECIAL_INF, SPECIAL_NAN
from .exc import MalformedPartsError
from .locale_format import INVARIANT, LocaleNumberFormat
from .parts import DecimalParts, ExpParts

# Debug printing control (render layer)
DEBUG_RENDER = False

def _dbg(msg: str) -> None:
    if DEBUG_RENDER:
        print(msg)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _special_symbol(p: Union[DecimalParts, ExpParts], fmt: LocaleNumberFormat) -> Optional[str]:
    if p.special == SPECIAL_INF:
        return fmt.negative_infinity_symbol if p.is_negative else fmt.infinity_symbol
    if p.special == SPECIAL_NAN:
        return fmt.nan_symbol
    return None


def _check_length(decimal_length: int, where: str) -> None:
    if decimal_length < 0:
        raise MalformedPartsError(f"{where}: decimal_length must be >= 0, got {decimal_length}")


def _check_parts(p: DecimalParts, decimal_length: int, where: str) -> None:
    if p.integer_part is None or not p.integer_part.strip():
        raise MalformedPartsError(f"{where}: integer part is missing or blank")
    if p.fraction_part is None:
        raise MalformedPartsError(f"{where}: fraction part is missing")
    _check_length(decimal_length, where)


def fit_digits(digits: str, length: int) -> str:
    """Truncate `digits` to `length` chars or right-pad with '0' up to it."""
    if len(digits) > length:
        return digits[:length]
    return digits.ljust(length, "0")


def group_digits(integer: str, separator: str, size: int) -> str:
    """Insert `separator` every `size` digits counted from the right."""
    head = len(integer) % size or size
    groups = [integer[:head]]
    groups.extend(integer[i:i + size] for i in range(head, len(integer), size))
    return separator.join(groups)


def _sign(is_negative: bool, fmt: LocaleNumberFormat) -> str:
    return fmt.negative_sign if is_negative else ""


# ---------------------------------------------------------------------------
# Fixed / Grouped / Full
# ---------------------------------------------------------------------------

def format_fixed(p: DecimalParts, decimal_length: int, fmt: LocaleNumberFormat = INVARIANT) -> str:
    """Fixed-point: '-123.00', '12345.67', '12345' (decimal_length=0)."""
    symbol = _special_symbol(p, fmt)
    if symbol is not None:
        return symbol
    _check_parts(p, decimal_length, "format_fixed")

    out = _sign(p.is_negative, fmt) + p.integer_part
    if decimal_length > 0:
        out += fmt.decimal_separator + fit_digits(p.fraction_part, decimal_length)
    _dbg(f"format_fixed: {p} len={decimal_length} -> {out!r}")
    return out


def format_grouped(p: DecimalParts, decimal_length: int, fmt: LocaleNumberFormat = INVARIANT) -> str:
    """Fixed-point with grouped integer digits: '123,456,789.9876'."""
    symbol = _special_symbol(p, fmt)
    if symbol is not None:
        return symbol
    _check_parts(p, decimal_length, "format_grouped")

    out = _sign(p.is_negative, fmt) + group_digits(p.integer_part, fmt.group_separator, fmt.group_size)
    if decimal_length > 0:
        out += fmt.decimal_separator + fit_digits(p.fraction_part, decimal_length)
    _dbg(f"format_grouped: {p} len={decimal_length} -> {out!r}")
    return out


def format_full(p: DecimalParts, fmt: LocaleNumberFormat = INVARIANT) -> str:
    """Every available digit, no padding: '-0.000123', '7000'."""
    symbol = _special_symbol(p, fmt)
    if symbol is not None:
        return symbol
    _check_parts(p, 0, "format_full")

    out = _sign(p.is_negative, fmt) + p.integer_part
    if p.fraction_part:
        out += fmt.decimal_separator + p.fraction_part
    return out


def format_currency(p: DecimalParts, decimal_length: int, fmt: LocaleNumberFormat = INVARIANT) -> str:
    """Currency: symbol + grouped digits; negatives in parentheses, e.g. '(¤1,234.50)'."""
    symbol = _special_symbol(p, fmt)
    if symbol is not None:
        return symbol
    _check_parts(p, decimal_length, "format_currency")

    body = fmt.currency_symbol + group_digits(p.integer_part, fmt.currency_group_separator, fmt.group_size)
    if decimal_length > 0:
        body += fmt.currency_decimal_separator + fit_digits(p.fraction_part, decimal_length)
    return f"({body})" if p.is_negative else body


# ---------------------------------------------------------------------------
# Scientific
# ---------------------------------------------------------------------------

def format_exp(
    e: ExpParts,
    exponent_letter: str,
    exponent_width: int,
    decimal_length: int,
    fmt: LocaleNumberFormat = INVARIANT,
) -> str:
    """Scientific notation with an explicit exponent sign.

    Examples (letter 'E', width 3):
      ("1", "23456", 2),  decimal_length=3 -> '1.234E+002'
      ("1", "23", -2),    decimal_length=3 -> '1.230E-002'
      ("1", "23456789", 4), decimal_length=0 -> '1E+004'
    """
    symbol = _special_symbol(e, fmt)
    if symbol is not None:
        return symbol
    _check_length(decimal_length, "format_exp")
    if exponent_width < 0:
        raise MalformedPartsError(f"format_exp: exponent_width must be >= 0, got {exponent_width}")

    out = _sign(e.is_negative, fmt) + e.lead_digit
    if decimal_length > 0:
        out += fmt.decimal_separator + fit_digits(e.mantissa_tail, decimal_length)
    exp_sign = fmt.negative_sign if e.exponent < 0 else fmt.positive_sign
    # wider exponents are never truncated
    out += exponent_letter + exp_sign + str(abs(e.exponent)).rjust(exponent_width, "0")
    _dbg(f"format_exp: {e} len={decimal_length} -> {out!r}")
    return out


__all__ = [
    "fit_digits",
    "group_digits",
    "format_fixed",
    "format_grouped",
    "format_full",
    "format_currency",
    "format_exp",
]
