"""Command-line entry point: convert, expression, interactive and list."""

from __future__ import annotations

import argparse
import math
import sys
from decimal import Decimal
from typing import Optional, Sequence

from .converters import get_converter
from .distance import DistanceConverter
from .errors import ConvertError
from .expression import parse_expression
from .mass import MassConverter
from .temperature import TemperatureConverter

_CATEGORY_CONVERTERS = {
    "distance": DistanceConverter,
    "d": DistanceConverter,
    "mass": MassConverter,
    "m": MassConverter,
    "temperature": TemperatureConverter,
    "t": TemperatureConverter,
}


def format_value(value: float) -> str:
    """Shortest exact decimal form of a float, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the ``unitconvert`` command."""
    parser = argparse.ArgumentParser(
        prog="unitconvert", description="Convert between different unit types"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    convert = commands.add_parser("convert", help="Convert a value between units")
    convert.add_argument("value", type=float, help="Value to convert")
    convert.add_argument(
        "-f", "--from", dest="from_unit", required=True,
        help="Source unit (e.g. m, ft, kg)",
    )
    convert.add_argument(
        "-t", "--to", dest="to_unit", required=True,
        help="Target unit (e.g. m, ft, kg)",
    )

    expression = commands.add_parser("expression", help="Evaluate an expression")
    expression.add_argument("-e", "--expr", required=True)

    commands.add_parser("interactive", help="Start an interactive session")

    listing = commands.add_parser("list", help="List unit types or units")
    listing.add_argument("-c", "--category")
    return parser


def _run_convert(args: argparse.Namespace) -> int:
    value = format_value(args.value)
    print(f"Converting {value} from {args.from_unit} to  {args.to_unit}...")
    try:
        converter = get_converter(args.from_unit, args.to_unit)
    except ConvertError as error:
        print(f"Error: {error}")
        return 1
    try:
        result = converter.convert(args.value, args.from_unit, args.to_unit)
    except ConvertError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(
        f"{value} {converter.unit_string(args.from_unit)} = "
        f"{format_value(result)} {converter.unit_string(args.to_unit)}"
    )
    return 0


def _run_expression(args: argparse.Namespace) -> int:
    try:
        expression = parse_expression(args.expr)
    except ConvertError as error:
        print(f"Failed to parse expression: {error}", file=sys.stderr)
        return 0
    try:
        converter = get_converter(expression.from_unit, expression.to_unit)
    except ConvertError as error:
        print(f"Unsupported conversion: {error}", file=sys.stderr)
        return 0
    try:
        result = converter.convert(
            expression.value, expression.from_unit, expression.to_unit
        )
    except ConvertError as error:
        print(f"Conversion error: {error}", file=sys.stderr)
        return 0
    print(
        f"{format_value(expression.value)} {converter.unit_string(expression.from_unit)}"
        f" = {format_value(result)} {converter.unit_string(expression.to_unit)}"
    )
    return 0


def _run_interactive(args: argparse.Namespace) -> int:
    from .interactive import run_interactive

    try:
        run_interactive()
    except OSError:
        print("An error occurred. The program will now quit", file=sys.stderr)
        return 1
    return 0


def _run_list(args: argparse.Namespace) -> int:
    category = args.category
    if category is None:
        print("Supported unit types:")
        print(" - distance")
        print(" - mass")
        print(" - temperature")
        return 0
    print(f"Listing units in category: {category}")
    converter_type = _CATEGORY_CONVERTERS.get(category)
    if converter_type is None:
        print(f"Unknown unit type: '{category}'", file=sys.stderr)
        return 1
    for unit in converter_type().supported_units():
        print(unit)
    return 0


_HANDLERS = {
    "convert": _run_convert,
    "expression": _run_expression,
    "interactive": _run_interactive,
    "list": _run_list,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    return _HANDLERS[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())