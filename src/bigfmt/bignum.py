"""
Bignum adapters: the inbound contract of the formatting engine.

The engine never does arithmetic. It needs two capabilities from whatever
bignum layer owns a value:

  - to_raw_digits(value) -> RawDigits   (base-10 digits + decimal exponent + sign)
  - compare_abs(value, threshold) -> -1 / 0 / 1   (exact |value| vs threshold)

Adapters are provided for int, float, Decimal, gmpy2.mpz, gmpy2.mpfr and for
RawDigits itself. Any other type can take part by implementing `DigitSource`.

Digit strings are produced through gmpy2 so that values with thousands of
digits are not subject to Python's int <-> str conversion limit.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

import gmpy2
from gmpy2 import mpfr, mpq, mpz

from .core.constants import INF_MARKER, NAN_MARKER
from .core.exc import UnsupportedValueError
from .core.parts import RawDigits, split, to_exp_parts


@runtime_checkable
class DigitSource(Protocol):
    """Structural contract for third-party bignum types."""

    def to_raw_digits(self) -> RawDigits:
        ...

    def compare_abs(self, threshold: float) -> int:
        ...


_MPZ_TYPE = type(mpz(0))
_MPFR_TYPE = type(mpfr(0))


# ---------------------------------------------------------------------------
# Digits
# ---------------------------------------------------------------------------

def _mpz_digits(z) -> RawDigits:
    s = gmpy2.digits(z, 10)
    raw = RawDigits.from_signed(s, 0)
    return RawDigits(raw.digits, len(raw.digits), raw.is_negative)


def _mpfr_digits(x) -> RawDigits:
    if gmpy2.is_nan(x):
        return RawDigits(NAN_MARKER, 0)
    if gmpy2.is_infinite(x):
        return RawDigits(INF_MARKER, 0, x < 0)
    # mpfr.digits(10) -> (signed mantissa, decimal exponent, precision)
    mantissa, exponent, _prec = x.digits(10)
    return RawDigits.from_signed(mantissa, exponent)


def _decimal_digits(d: Decimal) -> RawDigits:
    if d.is_nan():
        return RawDigits(NAN_MARKER, 0)
    if d.is_infinite():
        return RawDigits(INF_MARKER, 0, d.is_signed())
    sign, digits, exponent = d.as_tuple()
    s = "".join(map(str, digits))
    return RawDigits(s, len(s) + exponent, bool(sign))


def to_raw_digits(value: Any) -> RawDigits:
    """Render `value` as base-10 RawDigits without losing any digit."""
    if isinstance(value, RawDigits):
        return value
    if isinstance(value, DigitSource):
        return value.to_raw_digits()
    if isinstance(value, _MPFR_TYPE):
        return _mpfr_digits(value)
    if isinstance(value, _MPZ_TYPE):
        return _mpz_digits(value)
    if isinstance(value, Decimal):
        return _decimal_digits(value)
    if isinstance(value, bool):
        raise UnsupportedValueError(value)
    if isinstance(value, int):
        return _mpz_digits(mpz(value))
    if isinstance(value, float):
        # exact binary value, e.g. 0.1 -> 0.1000000000000000055511151231257827...
        return _decimal_digits(Decimal(value))
    raise UnsupportedValueError(value)


# ---------------------------------------------------------------------------
# Magnitude comparison
# ---------------------------------------------------------------------------

# Any finite double lies strictly between 10**-400 and 10**400.
_DOUBLE_DECADE_LIMIT = 400


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_raw_abs(raw: RawDigits, t) -> int:
    e = to_exp_parts(split(raw))
    if e.special is not None:
        return 1
    if e.exponent > _DOUBLE_DECADE_LIMIT:
        return 1
    if e.exponent < -_DOUBLE_DECADE_LIMIT:
        return -1
    m = mpz(e.lead_digit + e.mantissa_tail)
    shift = e.exponent - len(e.mantissa_tail)
    if shift >= 0:
        return _cmp(mpq(m * mpz(10) ** shift, 1), t)
    return _cmp(mpq(m, mpz(10) ** (-shift)), t)


def compare_abs(value: Any, threshold: float) -> int:
    """Exact comparison of |value| against `threshold` (a binary double).

    Returns -1, 0 or 1. Non-finite values compare as +inf (NaN included), so
    callers that care about NaN must test for it first.
    """
    t = mpq(threshold)
    if isinstance(value, RawDigits):
        return _compare_raw_abs(value, t)
    if isinstance(value, DigitSource):
        return value.compare_abs(threshold)
    if isinstance(value, _MPFR_TYPE):
        if not gmpy2.is_finite(value):
            return 1
        return _cmp(abs(mpq(value)), t)
    if isinstance(value, _MPZ_TYPE):
        return _cmp(abs(mpq(value)), t)
    if isinstance(value, bool):
        raise UnsupportedValueError(value)
    if isinstance(value, int):
        return _cmp(abs(mpq(mpz(value))), t)
    if isinstance(value, (Decimal, float)):
        return _compare_raw_abs(to_raw_digits(value), t)
    raise UnsupportedValueError(value)


__all__ = [
    "DigitSource",
    "to_raw_digits",
    "compare_abs",
]
