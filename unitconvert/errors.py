"""Exceptions raised while parsing units, expressions and conversions."""

from __future__ import annotations


class ConvertError(Exception):
    """Base class for every error the converter reports."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConvertError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidUnitError(ConvertError):
    """A unit name that no converter recognises."""

    def __init__(self, unit: str) -> None:
        super().__init__(unit)
        self.unit = unit

    def __str__(self) -> str:
        return f"Invalid unit: '{self.unit}'"


class UnsupportedConversionError(ConvertError):
    """Two units that cannot be converted into one another."""

    def __init__(self, from_unit: str, to_unit: str) -> None:
        super().__init__(from_unit, to_unit)
        self.from_unit = from_unit
        self.to_unit = to_unit

    def __str__(self) -> str:
        return f"Conversion from '{self.from_unit}' to '{self.to_unit}' not supported"


class ParseError(ConvertError):
    """A conversion expression that could not be understood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error parsing an expression: {self.message}"