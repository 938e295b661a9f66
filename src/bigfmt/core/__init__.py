"""
bigfmt Core
===========

Unified exports for the digit-string formatting primitives:
RawDigits -> split -> DecimalParts -> to_exp_parts -> ExpParts, the renderers
that turn those into text, and the format-spec parser.

Nothing in core performs arithmetic on numeric values; it only re-indexes,
trims, truncates and pads digit strings.
"""

# NOTE:
#   Renderers truncate, they never round. "F2" of 12345.6789 is "12345.67".

from .constants import (
    SUPPORTED_STYLES,
    DEFAULT_GROUPED_PRECISION,
    DEFAULT_FIXED_PRECISION,
    DEFAULT_EXP_PRECISION,
    EXP_WIDTH_E,
    EXP_WIDTH_G,
    G_LOWER_BOUND,
    G_UPPER_BOUND,
)

# Locale symbols
from .locale_format import LocaleNumberFormat, INVARIANT

# Digit-string parts and transforms
from .parts import (
    RawDigits,
    DecimalParts,
    ExpParts,
    split,
    to_exp_parts,
)

# Renderers
from .render import (
    format_fixed,
    format_grouped,
    format_full,
    format_currency,
    format_exp,
)

# Format spec parsing
from .spec import (
    Default,
    Fixed,
    Grouped,
    Scientific,
    General,
    FormatSpec,
    parse_format_spec,
)

# Core exceptions
from .exc import (
    InvalidArgument,
    DigitsMissingError,
    MalformedDigitsError,
    MalformedPartsError,
    UnsupportedStyleError,
    UnsupportedValueError,
)

__all__ = [
    # constants
    "SUPPORTED_STYLES",
    "DEFAULT_GROUPED_PRECISION",
    "DEFAULT_FIXED_PRECISION",
    "DEFAULT_EXP_PRECISION",
    "EXP_WIDTH_E",
    "EXP_WIDTH_G",
    "G_LOWER_BOUND",
    "G_UPPER_BOUND",
    # locale
    "LocaleNumberFormat",
    "INVARIANT",
    # parts
    "RawDigits",
    "DecimalParts",
    "ExpParts",
    "split",
    "to_exp_parts",
    # render
    "format_fixed",
    "format_grouped",
    "format_full",
    "format_currency",
    "format_exp",
    # spec
    "Default",
    "Fixed",
    "Grouped",
    "Scientific",
    "General",
    "FormatSpec",
    "parse_format_spec",
    # exceptions
    "InvalidArgument",
    "DigitsMissingError",
    "MalformedDigitsError",
    "MalformedPartsError",
    "UnsupportedStyleError",
    "UnsupportedValueError",
]
