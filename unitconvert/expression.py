"""Parsing of conversion expressions such as ``10C -> F``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .converters import all_unit_strings
from .errors import ParseError

_SUGGESTION_THRESHOLD = 2

_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedExpression:
    """A value with the unit it is in and the unit it should become."""

    value: float
    from_unit: str
    to_unit: str


def _parse_value_and_unit(text: str) -> tuple[float, str]:
    text = text.strip()
    split = next((i for i, ch in enumerate(text) if ch.isalpha()), None)
    if split is None:
        raise ParseError("Missing unit in expression")
    value_str, unit_str = text[:split].strip(), text[split:]
    if not _NUMBER.fullmatch(value_str):
        raise ParseError("Invalid number")
    return float(value_str), unit_str.strip()


def parse_expression(expr: str) -> ParsedExpression:
    """Parse ``<value><unit> -> <unit>`` (``to`` also works as the arrow)."""
    normalized = expr.replace(" to ", " -> ").replace("TO", "->").replace("To", "->")
    parts = [part.strip() for part in normalized.split("->")]
    if len(parts) != 2:
        raise ParseError("Invalid expression. Use format like: 10C -> F")
    left, right = parts

    value, from_unit = _parse_value_and_unit(left)
    from_unit = from_unit.lower()
    to_unit = right.lower()

    valid_units = all_unit_strings()
    problems = []
    for unit in (from_unit, to_unit):
        if unit in valid_units:
            continue
        suggestion = suggest_unit(unit, valid_units)
        if suggestion is not None:
            problems.append(f"Unknown unit '{unit}'. Did you mean '{suggestion}'?")
    if problems:
        raise ParseError("\n".join(problems))

    return ParsedExpression(value, from_unit, to_unit)


def suggest_unit(text: str, valid_units: Iterable[str]) -> Optional[str]:
    """The closest unit name, if it is within two edits of ``text``."""
    wanted = text.lower()
    scored = [(levenshtein(wanted, unit.lower()), unit) for unit in valid_units]
    if not scored:
        return None
    distance, best = min(scored, key=lambda pair: pair[0])
    return best if distance <= _SUGGESTION_THRESHOLD else None


def levenshtein(a: str, b: str) -> int:
    """Number of single-character edits that turn ``a`` into ``b``."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]