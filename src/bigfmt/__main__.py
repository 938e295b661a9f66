#!/usr/bin/env python3
"""Command-line front end: format a decimal literal with a bigfmt format spec."""

from __future__ import annotations

import argparse
import locale
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import gmpy2

from .core.exc import InvalidArgument
from .core.locale_format import INVARIANT, LocaleNumberFormat
from .dispatch import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigfmt",
        description="Format an arbitrary-precision decimal literal (N, F, E, G styles; digits are truncated, never rounded).",
    )
    parser.add_argument("value", help="Decimal literal, e.g. 12345.6789 or -1.5e-20")
    parser.add_argument("-f", "--format", default=None, help="Format spec such as N2, F4, E10, G (default: all digits)")
    parser.add_argument(
        "--bits",
        type=int,
        default=None,
        help="Parse the value as a binary MPFR float with this many bits of precision",
    )
    parser.add_argument(
        "--system-locale",
        action="store_true",
        help="Use the separators of the user's locale instead of the invariant ones",
    )
    return parser


def _load_value(text: str, bits: Optional[int]):
    if bits is not None:
        return gmpy2.mpfr(text, bits)
    return Decimal(text)


def _load_locale(use_system: bool) -> LocaleNumberFormat:
    if not use_system:
        return INVARIANT
    locale.setlocale(locale.LC_ALL, "")
    return LocaleNumberFormat.from_localeconv(locale.localeconv())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        value = _load_value(args.value, args.bits)
    except (InvalidOperation, ValueError) as e:
        parser.error(f"cannot parse value {args.value!r}: {e}")
    try:
        print(render(value, args.format, _load_locale(args.system_locale)))
    except InvalidArgument as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
