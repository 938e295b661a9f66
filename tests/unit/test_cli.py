import pytest

from bigfmt.__main__ import main


# -----------------------------
# CLI
# -----------------------------

@pytest.mark.parametrize(
    "argv,expected",
    [
        (["12345.6789", "-f", "N2"], "12,345.67"),
        (["12345.6789", "--format", "F0"], "12345"),
        (["-0.000123"], "-0.000123"),
        (["1e20", "-f", "G"], "1.000000e+20"),
        (["2.5", "--bits", "8", "-f", "F2"], "2.50"),
    ],
)
def test_cli_prints_rendered_value(argv, expected, capsys):
    print(f"[cli] argv={argv}")
    capsys.readouterr()
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert out == expected + "\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["1.5", "-f", "X"],
        ["not-a-number"],
        ["1.5", "--bits", "8", "-f", "C"],
    ],
)
def test_cli_rejects_bad_input(argv, capsys):
    print(f"[cli] argv={argv} -> exit status 2")
    with pytest.raises(SystemExit) as ei:
        main(argv)
    assert ei.value.code == 2
    assert "error" in capsys.readouterr().err
