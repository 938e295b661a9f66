import pytest

from bigfmt.core.parts import RawDigits, DecimalParts, ExpParts, split, to_exp_parts
from bigfmt.core.exc import DigitsMissingError, MalformedDigitsError, InvalidArgument


# -----------------------------
# split
# -----------------------------

@pytest.mark.parametrize(
    "digits,pos,neg,exp_int,exp_frac",
    [
        ("123456", 2, False, "12", "3456"),
        ("123456", 0, False, "0", "123456"),
        ("0", 0, False, "0", ""),
        ("123456", 6, False, "123456", ""),
        ("0012345600", 2, False, "0", "123456"),
        ("000123456000", 6, False, "123", "456"),
        ("7", 4, False, "7000", ""),
        ("123", -2, False, "0", "00123"),
        ("", 0, False, "0", ""),
        ("5", 1, True, "5", ""),
    ],
)
def test_split_table(digits, pos, neg, exp_int, exp_frac):
    print(f"[split] digits={digits!r}, pos={pos}, negative={neg} -> expect ({exp_int!r}, {exp_frac!r})")
    parts = split(RawDigits(digits, pos, neg))
    assert parts == DecimalParts(neg, exp_int, exp_frac)


@pytest.mark.parametrize(
    "signed,pos,neg,exp_int,exp_frac",
    [
        ("-123456", 2, True, "12", "3456"),
        ("-123456", 0, True, "0", "123456"),
        ("-0012345600", 2, True, "0", "123456"),
        ("-000123456000", 6, True, "123", "456"),
        ("42", 1, False, "4", "2"),
    ],
)
def test_split_from_signed_string(signed, pos, neg, exp_int, exp_frac):
    print(f"[split-signed] {signed!r} @ {pos}")
    parts = split(RawDigits.from_signed(signed, pos))
    assert parts.is_negative is neg
    assert (parts.integer_part, parts.fraction_part) == (exp_int, exp_frac)


def test_split_missing_digits_raises():
    print("[split] digits=None -> DigitsMissingError (an InvalidArgument / ValueError)")
    with pytest.raises(DigitsMissingError):
        split(RawDigits(None, 2))
    with pytest.raises(InvalidArgument):
        split(RawDigits.from_signed(None, 2))
    with pytest.raises(ValueError):
        split(RawDigits(None, 0))


@pytest.mark.parametrize("digits", ["12a4", "1.5", "-12", " 1"])
def test_split_non_digit_raises(digits):
    print(f"[split] malformed digits {digits!r} -> MalformedDigitsError")
    with pytest.raises(MalformedDigitsError):
        split(RawDigits(digits, 1))


@pytest.mark.parametrize("pos", [-3, 0, 1, 2, 4, 9])
def test_split_all_zero_canonicalises(pos):
    print(f"[split-zero] '0000' @ {pos} -> ('0', '')")
    parts = split(RawDigits("0000", pos))
    assert (parts.integer_part, parts.fraction_part) == ("0", "")
    assert parts.is_zero()


@pytest.mark.parametrize(
    "raw",
    [
        RawDigits("0012345600", 2),
        RawDigits("000123456000", 6, True),
        RawDigits("7", 4),
        RawDigits("98765", -3),
        RawDigits("0", 0),
    ],
)
def test_split_is_idempotent(raw):
    first = split(raw)
    second = split(first.to_raw())
    print(f"[split-idempotent] {raw} -> {first} -> {second}")
    assert second == first


def test_split_long_digit_strings():
    print("[split-long] 3000 significant digits survive unchanged")
    digits = "9" * 1500 + "1" * 1500
    parts = split(RawDigits(digits, 1500))
    assert parts.integer_part == "9" * 1500
    assert parts.fraction_part == "1" * 1500


@pytest.mark.parametrize(
    "marker,neg,special",
    [
        ("@Inf@", False, "inf"),
        ("-@Inf@", True, "inf"),
        ("@NaN@", False, "nan"),
    ],
)
def test_split_special_markers(marker, neg, special):
    print(f"[split-special] {marker!r} -> special={special}")
    parts = split(RawDigits.from_signed(marker, 0))
    assert parts.special == special
    assert parts.is_negative is neg
    assert not parts.is_zero()


# -----------------------------
# to_exp_parts
# -----------------------------

@pytest.mark.parametrize(
    "parts,expected",
    [
        (DecimalParts(False, "123", "456"), ExpParts(False, "1", "23456", 2)),
        (DecimalParts(True, "0", "00123"), ExpParts(True, "1", "23", -3)),
        (DecimalParts(False, "0", ""), ExpParts(False, "0", "", 0)),
        (DecimalParts(False, "0", "1"), ExpParts(False, "1", "", -1)),
        (DecimalParts(False, "7000", ""), ExpParts(False, "7", "000", 3)),
        (DecimalParts(False, "5", "05"), ExpParts(False, "5", "05", 0)),
    ],
)
def test_to_exp_parts(parts, expected):
    print(f"[to_exp_parts] {parts} -> {expected}")
    assert to_exp_parts(parts) == expected


def test_to_exp_parts_zero_keeps_sign():
    print("[to_exp_parts] negative zero keeps its flag, digits ('0', '', 0)")
    assert to_exp_parts(DecimalParts(True, "0", "")) == ExpParts(True, "0", "", 0)


def test_to_exp_parts_preserves_every_digit():
    print("[to_exp_parts] lead + tail reproduce the significant digits (no rounding)")
    significant = "9" * 19 + "5"
    parts = split(RawDigits("000" + significant, 5))
    e = to_exp_parts(parts)
    assert e.lead_digit + e.mantissa_tail == significant
    assert e.exponent == 1


def test_to_exp_parts_special_passes_through():
    e = to_exp_parts(DecimalParts(True, "0", "", "inf"))
    assert e.special == "inf"
    assert e.is_negative is True
