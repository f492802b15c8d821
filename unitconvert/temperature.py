"""Temperature units and conversion between them, via Celsius."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidUnitError


class TemperatureUnit(Enum):
    """A unit of temperature; its value is the display symbol."""

    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "°K"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> TemperatureUnit:
        """Look up a unit by any accepted name, ignoring case."""
        try:
            return _ALIASES[text.lower()]
        except KeyError:
            raise InvalidUnitError(text) from None

    @classmethod
    def accepted_strings(cls) -> list[str]:
        """All names that parse() accepts."""
        return list(_ALIASES)

    def to_celsius(self, value: float) -> float:
        if self is TemperatureUnit.FAHRENHEIT:
            return (value - 32.0) * 5.0 / 9.0
        if self is TemperatureUnit.KELVIN:
            return value - 273.15
        return value

    def from_celsius(self, celsius: float) -> float:
        if self is TemperatureUnit.FAHRENHEIT:
            return (celsius * 9.0 / 5.0) + 32.0
        if self is TemperatureUnit.KELVIN:
            return celsius + 273.15
        return celsius


_ALIASES: dict[str, TemperatureUnit] = {
    "c": TemperatureUnit.CELSIUS,
    "celsius": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.FAHRENHEIT,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
    "k": TemperatureUnit.KELVIN,
    "kelvin": TemperatureUnit.KELVIN,
}


class TemperatureConverter:
    """Converts values between temperature scales."""

    __slots__ = ()

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        source = TemperatureUnit.parse(from_unit)
        target = TemperatureUnit.parse(to_unit)
        return target.from_celsius(source.to_celsius(value))

    def supported_units(self) -> list[str]:
        return [str(unit) for unit in TemperatureUnit]

    def unit_string(self, unit_str: str) -> str:
        """The display symbol for a unit name, or the name itself if unknown."""
        try:
            return str(TemperatureUnit.parse(unit_str))
        except InvalidUnitError:
            return unit_str