# Top-level API for bigfmt.
"""
Top-level API for bigfmt.

Formats arbitrary-precision numbers from their raw base-10 digits:
  - render: value + format spec ("N", "F", "E", "G" with optional digits) + locale
  - BigFormat: plugs any supported value into format() / f-strings
  - to_raw_digits / compare_abs: adapters for int, float, Decimal and gmpy2 types

The digit-string primitives (split, to_exp_parts, the individual renderers)
live under `bigfmt.core`.
"""

from __future__ import annotations

from .dispatch import render, BigFormat
from .bignum import DigitSource, to_raw_digits, compare_abs

from .core import (
    LocaleNumberFormat,
    INVARIANT,
    RawDigits,
    DecimalParts,
    ExpParts,
    InvalidArgument,
    UnsupportedStyleError,
    UnsupportedValueError,
)

__all__ = [
    # formatting entry points
    "render",
    "BigFormat",
    # bignum contract
    "DigitSource",
    "to_raw_digits",
    "compare_abs",
    # core types
    "LocaleNumberFormat",
    "INVARIANT",
    "RawDigits",
    "DecimalParts",
    "ExpParts",
    # exceptions
    "InvalidArgument",
    "UnsupportedStyleError",
    "UnsupportedValueError",
]

__version__ = "0.1.0"
