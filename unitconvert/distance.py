"""Distance units and conversion between them, via metres."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidUnitError


class DistanceUnit(Enum):
    """A unit of distance; its value is the display symbol."""

    METER = "m"
    KILOMETER = "km"
    FOOT = "ft"
    MILE = "mi"
    INCH = "in"
    CENTIMETER = "cm"
    MILLIMETER = "mm"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> DistanceUnit:
        """Look up a unit by any accepted name, ignoring case."""
        try:
            return _ALIASES[text.lower()]
        except KeyError:
            raise InvalidUnitError(text) from None

    @classmethod
    def accepted_strings(cls) -> list[str]:
        """All names that parse() accepts."""
        return list(_ALIASES)

    def to_meters(self, value: float) -> float:
        factor = _METERS_PER_UNIT.get(self)
        return value if factor is None else value * factor

    def from_meters(self, meters: float) -> float:
        factor = _METERS_PER_UNIT.get(self)
        return meters if factor is None else meters / factor


_METERS_PER_UNIT: dict[DistanceUnit, float] = {
    DistanceUnit.KILOMETER: 1000.0,
    DistanceUnit.FOOT: 0.3048,
    DistanceUnit.MILE: 1609.34,
    DistanceUnit.INCH: 0.0254,
    DistanceUnit.CENTIMETER: 0.01,
    DistanceUnit.MILLIMETER: 0.001,
}

_ALIASES: dict[str, DistanceUnit] = {
    "m": DistanceUnit.METER,
    "meter": DistanceUnit.METER,
    "meters": DistanceUnit.METER,
    "metre": DistanceUnit.METER,
    "metres": DistanceUnit.METER,
    "km": DistanceUnit.KILOMETER,
    "kilometer": DistanceUnit.KILOMETER,
    "kilometers": DistanceUnit.KILOMETER,
    "kilometre": DistanceUnit.KILOMETER,
    "kilometres": DistanceUnit.KILOMETER,
    "ft": DistanceUnit.FOOT,
    "foot": DistanceUnit.FOOT,
    "feet": DistanceUnit.FOOT,
    "mi": DistanceUnit.MILE,
    "mile": DistanceUnit.MILE,
    "miles": DistanceUnit.MILE,
    "in": DistanceUnit.INCH,
    "inch": DistanceUnit.INCH,
    "inches": DistanceUnit.INCH,
    "cm": DistanceUnit.CENTIMETER,
    "centimeter": DistanceUnit.CENTIMETER,
    "centimeters": DistanceUnit.CENTIMETER,
    "centimetre": DistanceUnit.CENTIMETER,
    "centimetres": DistanceUnit.CENTIMETER,
    "mm": DistanceUnit.MILLIMETER,
    "millimeter": DistanceUnit.MILLIMETER,
    "millimeters": DistanceUnit.MILLIMETER,
    "millimetre": DistanceUnit.MILLIMETER,
    "millimetres": DistanceUnit.MILLIMETER,
}


class DistanceConverter:
    """Converts values between distance units."""

    __slots__ = ()

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        source = DistanceUnit.parse(from_unit)
        target = DistanceUnit.parse(to_unit)
        return target.from_meters(source.to_meters(value))

    def supported_units(self) -> list[str]:
        return sorted(str(unit) for unit in DistanceUnit)

    def unit_string(self, unit_str: str) -> str:
        """The display symbol for a unit name, or the name itself if unknown."""
        try:
            return str(DistanceUnit.parse(unit_str))
        except InvalidUnitError:
            return unit_str