import pytest

from unitconvert.errors import (
    ConvertError,
    InvalidUnitError,
    ParseError,
    UnsupportedConversionError,
)


def test_invalid_unit_message():
    err = InvalidUnitError("banana")
    assert str(err) == "Invalid unit: 'banana'"
    assert err.unit == "banana"


def test_unsupported_conversion_message():
    err = UnsupportedConversionError("m", "kg")
    assert str(err) == "Conversion from 'm' to 'kg' not supported"
    assert (err.from_unit, err.to_unit) == ("m", "kg")


def test_parse_error_message():
    err = ParseError("Invalid number")
    assert str(err) == "Error parsing an expression: Invalid number"
    assert err.message == "Invalid number"


def test_equality_compares_contents():
    assert InvalidUnitError("x") == InvalidUnitError("x")
    assert not InvalidUnitError("x") == InvalidUnitError("y")
    assert UnsupportedConversionError("a", "b") == UnsupportedConversionError("a", "b")
    assert not UnsupportedConversionError("a", "b") == UnsupportedConversionError("b", "a")
    assert ParseError("m") == ParseError("m")


def test_different_kinds_are_not_equal():
    assert not InvalidUnitError("x") == ParseError("x")


def test_hash_matches_equality():
    assert len({InvalidUnitError("x"), InvalidUnitError("x"), ParseError("x")}) == 2


@pytest.mark.parametrize(
    "err",
    [InvalidUnitError("q"), UnsupportedConversionError("a", "b"), ParseError("bad")],
)
def test_all_caught_as_convert_error(err):
    with pytest.raises(ConvertError) as info:
        raise err
    assert info.value == err