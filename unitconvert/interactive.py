"""The read-convert-print loop behind the ``interactive`` command."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .cli import format_value
from .converters import get_converter
from .errors import ConvertError, ParseError
from .expression import parse_expression


def run_conversion(
    value: float, from_unit: str, to_unit: str, stdout: Optional[TextIO] = None
) -> float:
    """Convert a value, print the result line and return the result."""
    stdout = sys.stdout if stdout is None else stdout
    converter = get_converter(from_unit, to_unit)
    result = converter.convert(value, from_unit, to_unit)
    print(
        f"✅ {format_value(value)} {converter.unit_string(from_unit)} = "
        f"{format_value(result)} {converter.unit_string(to_unit)}",
        file=stdout,
    )
    return result


def _prompt(message: str, stdin: TextIO, stdout: TextIO) -> str:
    print(f"{message} ", end="", file=stdout, flush=True)
    return stdin.readline().strip()


def _parse_number(text: str) -> float:
    if "_" in text:
        raise ParseError("Invalid number")
    try:
        return float(text)
    except ValueError:
        raise ParseError("Invalid number") from None


def _guided(stdin: TextIO, stdout: TextIO) -> None:
    value = _parse_number(_prompt("Enter value to convert:", stdin, stdout))
    from_unit = _prompt("Enter FROM unit (e.g. m, kg, C,...):", stdin, stdout)
    to_unit = _prompt("Enter TO unit (e.g. m, kg, C,...):", stdin, stdout)
    run_conversion(value, from_unit, to_unit, stdout)


def run_interactive(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> None:
    """Read expressions until 'quit' or end of input, printing each conversion."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    print("🔁 Welcome to the Unit Converter! Type 'quit' to exit.", file=stdout)
    print(
        "You can enter expressions (e.g. '10C -> F') or type 'guided' "
        "for step-by-step mode.",
        file=stdout,
    )

    while True:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        command = line.strip()

        if command.lower() == "quit":
            print("👋 Goodbye!", file=stdout)
            break
        if command.lower() == "guided":
            try:
                _guided(stdin, stdout)
            except ConvertError as error:
                print(f"❌ Error: {error}", file=stderr)
            continue

        try:
            expression = parse_expression(command)
        except ConvertError as error:
            print(f"❌ Failed to parse expression: {error}", file=stderr)
            continue
        try:
            run_conversion(
                expression.value, expression.from_unit, expression.to_unit, stdout
            )
        except ConvertError as error:
            print(f"❌ Something went wrong! The error was: {error}", file=stderr)