import pytest

from unitconvert.errors import InvalidUnitError
from unitconvert.temperature import TemperatureConverter, TemperatureUnit


@pytest.mark.parametrize(
    ("value", "source", "target", "expected"),
    [
        (0.0, "c", "f", 32.0),
        (0.0, "f", "c", -17.7778),
        (0.0, "c", "k", 273.15),
    ],
)
def test_basic_temperature_conversions(value, source, target, expected):
    result = TemperatureConverter().convert(value, source, target)
    assert result == pytest.approx(expected, abs=1e-4)


def test_invalid_unit():
    with pytest.raises(InvalidUnitError) as info:
        TemperatureConverter().convert(1.0, "c", "rankine")
    assert info.value.unit == "rankine"


def test_unit_parsing():
    assert TemperatureUnit.parse("C") is TemperatureUnit.CELSIUS
    assert TemperatureUnit.parse("Kelvin") is TemperatureUnit.KELVIN
    with pytest.raises(InvalidUnitError):
        TemperatureUnit.parse("x")


def test_every_accepted_string_parses():
    names = TemperatureUnit.accepted_strings()
    assert "fahrenheit" in names
    assert {TemperatureUnit.parse(name) for name in names} == set(TemperatureUnit)


def test_supported_units_keep_declaration_order():
    assert TemperatureConverter().supported_units() == ["°C", "°F", "°K"]


def test_unit_string():
    converter = TemperatureConverter()
    assert converter.unit_string("f") == "°F"
    assert converter.unit_string("meters") == "meters"


@pytest.mark.parametrize("source", ["c", "f", "k"])
@pytest.mark.parametrize("target", ["c", "f", "k"])
def test_round_trip(source, target):
    converter = TemperatureConverter()
    there = converter.convert(-40.0, source, target)
    assert converter.convert(there, target, source) == pytest.approx(-40.0)


def test_minus_forty_is_same_in_both_scales():
    assert TemperatureConverter().convert(-40.0, "c", "f") == pytest.approx(-40.0)