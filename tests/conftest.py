from __future__ import annotations

import pytest

from bigfmt.core import LocaleNumberFormat, INVARIANT


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def invariant() -> LocaleNumberFormat:
    return INVARIANT


@pytest.fixture()
def comma_locale() -> LocaleNumberFormat:
    """Continental style: ',' decimal separator, '.' groups."""
    return LocaleNumberFormat(
        decimal_separator=",",
        group_separator=".",
        currency_symbol="€",
        currency_decimal_separator=",",
        currency_group_separator=".",
    )


@pytest.fixture()
def c_localeconv() -> dict:
    """What locale.localeconv() returns under the plain C locale."""
    return {
        "decimal_point": ".",
        "thousands_sep": "",
        "grouping": [],
        "currency_symbol": "",
        "mon_decimal_point": "",
        "mon_thousands_sep": "",
        "positive_sign": "",
        "negative_sign": "",
    }
