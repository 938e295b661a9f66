"""
Format dispatch: value + format spec + locale -> string.

    render(value, "N2", fmt)  -> grouped fixed-point
    render(value, "F2", fmt)  -> fixed-point
    render(value, "E6", fmt)  -> scientific, exponent width 3, letter as typed
    render(value, "G",  fmt)  -> scientific ('e', width 2) when |value| < 1e-5
                                 or |value| > 1e16, fixed-point otherwise
    render(value, None, fmt)  -> every available digit

The G decision compares the value itself (through `compare_abs`), not its
formatted digits: |value| == 1e16 is fixed-point, anything above is
scientific. Zero is below 1e-5 and therefore scientific under G.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .bignum import compare_abs, to_raw_digits
from .core.constants import (
    DEFAULT_EXP_PRECISION,
    DEFAULT_FIXED_PRECISION,
    EXP_WIDTH_E,
    EXP_WIDTH_G,
    G_LOWER_BOUND,
    G_UPPER_BOUND,
)
from .core.locale_format import INVARIANT, LocaleNumberFormat
from .core.parts import split, to_exp_parts
from .core.render import format_exp, format_fixed, format_full, format_grouped
from .core.spec import (
    Default,
    Fixed,
    FormatSpec,
    General,
    Grouped,
    Scientific,
    parse_format_spec,
)

# Debug printing control (dispatch layer)
DEBUG_DISPATCH = False

def _dbg(msg: str) -> None:
    if DEBUG_DISPATCH:
        print(msg)


_SPEC_TYPES = (Default, Fixed, Grouped, Scientific, General)


def use_scientific_for_general(value: Any) -> bool:
    """True when G should render `value` in scientific notation."""
    return compare_abs(value, G_LOWER_BOUND) < 0 or compare_abs(value, G_UPPER_BOUND) > 0


def render(
    value: Any,
    spec: Union[str, FormatSpec, None] = None,
    fmt: LocaleNumberFormat = INVARIANT,
) -> str:
    """Format `value` according to `spec` using the symbols of `fmt`.

    `value` may be anything `bigfmt.bignum.to_raw_digits` accepts, RawDigits
    included. `spec` is a format string ("N2", "e", ...) or an already parsed
    FormatSpec.
    """
    parsed = spec if isinstance(spec, _SPEC_TYPES) else parse_format_spec(spec)
    parts = split(to_raw_digits(value))
    _dbg(f"render: spec={parsed}, parts={parts}")

    if isinstance(parsed, Default):
        return format_full(parts, fmt)
    if isinstance(parsed, Grouped):
        return format_grouped(parts, parsed.resolved(), fmt)
    if isinstance(parsed, Fixed):
        return format_fixed(parts, parsed.resolved(), fmt)
    if isinstance(parsed, Scientific):
        return format_exp(to_exp_parts(parts), parsed.letter, EXP_WIDTH_E, parsed.resolved(), fmt)

    # General
    precision: Optional[int] = parsed.precision
    if parts.special is None and use_scientific_for_general(value):
        n = DEFAULT_EXP_PRECISION if precision is None else precision
        return format_exp(to_exp_parts(parts), "e", EXP_WIDTH_G, n, fmt)
    n = DEFAULT_FIXED_PRECISION if precision is None else precision
    return format_fixed(parts, n, fmt)


class BigFormat:
    """Adapter that plugs a bignum value into format() and f-strings.

        f"{BigFormat(mpfr('12345.6789')):N2}"  -> '12,345.67'
    """

    __slots__ = ("value", "locale")

    def __init__(self, value: Any, locale: LocaleNumberFormat = INVARIANT):
        self.value = value
        self.locale = locale

    def __format__(self, spec: str) -> str:
        return render(self.value, spec or None, self.locale)

    def __str__(self) -> str:
        return render(self.value, None, self.locale)

    def __repr__(self) -> str:
        return f"BigFormat({self.value!r})"


__all__ = [
    "render",
    "use_scientific_for_general",
    "BigFormat",
]
