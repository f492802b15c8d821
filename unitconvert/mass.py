"""Mass units and conversion between them, via grams."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidUnitError


class MassUnit(Enum):
    """A unit of mass; its value is the display symbol."""

    KILOGRAM = "kg"
    POUND = "lb"
    STONE = "st"
    OUNCE = "oz"
    GRAM = "g"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> MassUnit:
        """Look up a unit by any accepted name, ignoring case."""
        try:
            return _ALIASES[text.lower()]
        except KeyError:
            raise InvalidUnitError(text) from None

    @classmethod
    def accepted_strings(cls) -> list[str]:
        """All names that parse() accepts."""
        return list(_ALIASES)

    def to_grams(self, value: float) -> float:
        factor = _GRAMS_PER_UNIT.get(self)
        return value if factor is None else value * factor

    def from_grams(self, grams: float) -> float:
        factor = _GRAMS_PER_UNIT.get(self)
        return grams if factor is None else grams / factor


_GRAMS_PER_UNIT: dict[MassUnit, float] = {
    MassUnit.KILOGRAM: 1000.0,
    MassUnit.POUND: 453.59291,
    MassUnit.OUNCE: 28.34949,
    MassUnit.STONE: 6350.29497,
}

_ALIASES: dict[str, MassUnit] = {
    "kg": MassUnit.KILOGRAM,
    "kilogram": MassUnit.KILOGRAM,
    "kilograms": MassUnit.KILOGRAM,
    "lb": MassUnit.POUND,
    "pound": MassUnit.POUND,
    "pounds": MassUnit.POUND,
    "st": MassUnit.STONE,
    "stone": MassUnit.STONE,
    "stones": MassUnit.STONE,
    "oz": MassUnit.OUNCE,
    "ounce": MassUnit.OUNCE,
    "ounces": MassUnit.OUNCE,
    "g": MassUnit.GRAM,
    "gram": MassUnit.GRAM,
    "grams": MassUnit.GRAM,
}


class MassConverter:
    """Converts values between mass units."""

    __slots__ = ()

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        source = MassUnit.parse(from_unit)
        target = MassUnit.parse(to_unit)
        return target.from_grams(source.to_grams(value))

    def supported_units(self) -> list[str]:
        return sorted(str(unit) for unit in MassUnit)

    def unit_string(self, unit_str: str) -> str:
        """The display symbol for a unit name, or the name itself if unknown."""
        try:
            return str(MassUnit.parse(unit_str))
        except InvalidUnitError:
            return unit_str