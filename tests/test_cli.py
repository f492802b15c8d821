import io

import pytest

from unitconvert.cli import build_parser, format_value, main


def test_missing_argument_should_fail(capsys):
    with pytest.raises(SystemExit) as info:
        main(["convert", "--from", "m", "--to", "ft"])
    assert info.value.code == 2
    err = capsys.readouterr().err
    assert "required" in err
    assert "value" in err


def test_valid_conversion_should_work(capsys):
    assert main(["convert", "--from", "m", "--to", "ft", "2"]) == 0
    out = capsys.readouterr().out
    assert "Converting 2 from m to  ft..." in out
    assert "2 m = 6.561679790026246 ft" in out


def test_parse_valid_args():
    args = build_parser().parse_args(["convert", "--from", "m", "--to", "ft", "2"])
    assert args.command == "convert"
    assert args.from_unit == "m"
    assert args.to_unit == "ft"
    assert args.value == 2.0


def test_parse_missing_value_fails():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--from", "m", "--to", "ft"])


def test_cli_expression_works(capsys):
    assert main(["expression", "--expr", "10C -> F"]) == 0
    assert "10 °C = " in capsys.readouterr().out


def test_expression_parse_failure(capsys):
    assert main(["expression", "--expr", "10C into F"]) == 0
    assert "Failed to parse expression" in capsys.readouterr().err


def test_expression_unsupported(capsys):
    assert main(["expression", "-e", "1 m -> kg"]) == 0
    assert "Unsupported conversion" in capsys.readouterr().err


def test_convert_unsupported_exits_with_error(capsys):
    assert main(["convert", "-f", "m", "-t", "kg", "1"]) == 1
    assert "Error: Conversion from 'm' to 'kg' not supported" in capsys.readouterr().out


def test_list_without_category(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert out == "Supported unit types:\n - distance\n - mass\n - temperature\n"


def test_list_temperature(capsys):
    assert main(["list", "--category", "t"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Listing units in category: t", "°C", "°F", "°K"]


def test_list_distance_is_sorted(capsys):
    assert main(["list", "-c", "distance"]) == 0
    units = capsys.readouterr().out.splitlines()[1:]
    assert units == sorted(units)
    assert set(units) == {"m", "km", "ft", "mi", "in", "cm", "mm"}


def test_list_unknown_category(capsys):
    assert main(["list", "-c", "volume"]) == 1
    assert "Unknown unit type: 'volume'" in capsys.readouterr().err


def test_interactive_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("quit\n"))
    assert main(["interactive"]) == 0
    assert "👋 Goodbye!" in capsys.readouterr().out


@pytest.mark.parametrize(
    "value, text",
    [
        (10.0, "10"),
        (6.561679790026246, "6.561679790026246"),
        (0.5, "0.5"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (-0.0, "-0"),
        (float("nan"), "NaN"),
        (float("-inf"), "-inf"),
    ],
)
def test_format_value(value, text):
    assert format_value(value) == text