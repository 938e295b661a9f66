"""
bigfmt Core Constants
=====================

Defaults for the digit-string formatting engine. Locale-dependent symbols do
not live here; they are carried by `LocaleNumberFormat` in `locale_format.py`.
"""

from typing import Final, FrozenSet

# ---------------------------------------------------------------------------
# Format letters and default precisions
# ---------------------------------------------------------------------------

#: Supported style letters (upper-case canonical form).
SUPPORTED_STYLES: Final[str] = "NFEG"

#: Fraction digits used by N and F when the format spec carries no number.
DEFAULT_GROUPED_PRECISION: Final[int] = 2
DEFAULT_FIXED_PRECISION: Final[int] = 2

#: Mantissa digits used by E (and by G in scientific mode) by default.
DEFAULT_EXP_PRECISION: Final[int] = 6

#: Minimum exponent digits for explicit E formatting ("1.234E+002").
EXP_WIDTH_E: Final[int] = 3

#: Minimum exponent digits when G falls back to scientific ("1.234000e+17").
EXP_WIDTH_G: Final[int] = 2

#: Default fraction digits for currency rendering.
DEFAULT_CURRENCY_PRECISION: Final[int] = 2

#: Largest precision a format spec may carry; longer digit runs count as
#: unparseable and fall back to the style default.
MAX_PRECISION: Final[int] = 2**31 - 1


# ---------------------------------------------------------------------------
# G-style magnitude policy
# ---------------------------------------------------------------------------

# G renders scientific when |value| < G_LOWER_BOUND or |value| > G_UPPER_BOUND.
# Both are compared as exact binary doubles, never via the digit string.
G_LOWER_BOUND: Final[float] = 1e-5
G_UPPER_BOUND: Final[float] = 1e16


# ---------------------------------------------------------------------------
# Digit strings
# ---------------------------------------------------------------------------

#: Characters permitted in a RawDigits digit string.
DIGIT_CHARS: Final[FrozenSet[str]] = frozenset("0123456789")

#: Default group size for grouped rendering.
GROUP_SIZE: Final[int] = 3

#: MPFR's textual markers for non-finite values.
INF_MARKER: Final[str] = "@Inf@"
NAN_MARKER: Final[str] = "@NaN@"

#: Values of `DecimalParts.special` / `ExpParts.special`.
SPECIAL_INF: Final[str] = "inf"
SPECIAL_NAN: Final[str] = "nan"


__all__ = [
    "SUPPORTED_STYLES",
    "DEFAULT_GROUPED_PRECISION",
    "DEFAULT_FIXED_PRECISION",
    "DEFAULT_EXP_PRECISION",
    "EXP_WIDTH_E",
    "EXP_WIDTH_G",
    "DEFAULT_CURRENCY_PRECISION",
    "MAX_PRECISION",
    "G_LOWER_BOUND",
    "G_UPPER_BOUND",
    "DIGIT_CHARS",
    "GROUP_SIZE",
    "INF_MARKER",
    "NAN_MARKER",
    "SPECIAL_INF",
    "SPECIAL_NAN",
]
