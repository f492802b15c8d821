"""Selection of the right converter for a pair of unit names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .distance import DistanceConverter, DistanceUnit
from .errors import InvalidUnitError, UnsupportedConversionError
from .mass import MassConverter, MassUnit
from .temperature import TemperatureConverter, TemperatureUnit

_Backend = Union[DistanceConverter, MassConverter, TemperatureConverter]

_CATEGORIES = (
    ("distance", DistanceUnit, DistanceConverter),
    ("mass", MassUnit, MassConverter),
    ("temperature", TemperatureUnit, TemperatureConverter),
)


def _recognises(unit_type, text: str) -> bool:
    try:
        unit_type.parse(text)
    except InvalidUnitError:
        return False
    return True


@dataclass(frozen=True)
class UnitConverter:
    """A converter for one category of units (distance, mass or temperature)."""

    category: str
    backend: _Backend

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """Convert ``value`` from one unit of this category to another."""
        return self.backend.convert(value, from_unit, to_unit)

    def supported_units(self) -> list[str]:
        """Display symbols of every unit in this category."""
        return self.backend.supported_units()

    def unit_string(self, unit_str: str) -> str:
        """The display symbol for a unit name, or the name itself if unknown."""
        return self.backend.unit_string(unit_str)


def get_converter(from_unit: str, to_unit: str) -> UnitConverter:
    """Return the converter whose category holds both units."""
    for category, unit_type, backend_type in _CATEGORIES:
        if _recognises(unit_type, from_unit) and _recognises(unit_type, to_unit):
            return UnitConverter(category, backend_type())
    raise UnsupportedConversionError(from_unit, to_unit)


def all_unit_strings() -> list[str]:
    """Every unit name accepted by any category."""
    return [
        name
        for _, unit_type, _ in _CATEGORIES
        for name in unit_type.accepted_strings()
    ]