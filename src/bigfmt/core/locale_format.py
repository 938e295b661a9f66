"""
Locale symbols for rendering (explicit, immutable).

Every rendering call receives a `LocaleNumberFormat`. There is no ambient or
process-wide formatting state; `INVARIANT` is only a default argument value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .constants import GROUP_SIZE
from .exc import InvalidArgument


@dataclass(frozen=True)
class LocaleNumberFormat:
    """Separators and symbols used by the renderers."""
    decimal_separator: str = "."
    group_separator: str = ","
    group_size: int = GROUP_SIZE
    negative_sign: str = "-"
    positive_sign: str = "+"
    currency_symbol: str = "¤"
    currency_decimal_separator: str = "."
    currency_group_separator: str = ","
    infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"
    nan_symbol: str = "NaN"

    def __post_init__(self):
        if self.group_size <= 0:
            raise InvalidArgument(f"group_size must be positive, got {self.group_size}")

    @classmethod
    def from_localeconv(cls, conv: Mapping[str, Any]) -> "LocaleNumberFormat":
        """Build from a mapping shaped like `locale.localeconv()`.

        The caller obtains the mapping (and owns any setlocale() side effects).
        Missing or empty sign entries fall back to '-' / '+'; an empty
        `grouping` falls back to groups of three.
        """
        grouping = list(conv.get("grouping") or [])
        size = grouping[0] if grouping and grouping[0] > 0 else GROUP_SIZE
        decimal_point = conv.get("decimal_point") or "."
        return cls(
            decimal_separator=decimal_point,
            group_separator=conv.get("thousands_sep", ""),
            group_size=size,
            negative_sign=conv.get("negative_sign") or "-",
            positive_sign=conv.get("positive_sign") or "+",
            currency_symbol=conv.get("currency_symbol") or cls.currency_symbol,
            currency_decimal_separator=conv.get("mon_decimal_point") or decimal_point,
            currency_group_separator=conv.get("mon_thousands_sep", conv.get("thousands_sep", "")),
        )


#: Culture-invariant symbols ('.' decimal, ',' groups of three).
INVARIANT: LocaleNumberFormat = LocaleNumberFormat()


__all__ = [
    "LocaleNumberFormat",
    "INVARIANT",
]
