# unitconvert

A small command-line unit converter for distance, mass and temperature.

Supported units:

- **distance**: m, km, cm, mm, ft, in, mi
- **mass**: g, kg, oz, lb, st
- **temperature**: °C, °F, °K (entered as `c`, `f`, `k`)

Long names such as `metres`, `pounds` or `celsius` are also accepted, in any
letter case.

## Installation

```
pip install .
```

## Usage

Convert a value between two units:

```
unitconvert convert --from m --to ft 2
```

```
Converting 2 from m to  ft...
2 m = 6.561679790026246 ft
```

If the two units are not of the same kind, an error is printed and the command
exits with status 1.

Convert using an expression. The arrow may be written as `->` or as `to`:

```
unitconvert expression --expr "10C -> F"
unitconvert expression --expr "5 kg to lb"
```

A misspelt unit gets a suggestion when a known unit name is within two edits
of it, for example `Unknown unit 'metr'. Did you mean 'meter'?`. Problems with
an expression are reported on standard error.

List the unit categories, or the units within one category (`distance`/`d`,
`mass`/`m`, `temperature`/`t`):

```
unitconvert list
unitconvert list --category mass
```

An unknown category is reported and the command exits with status 1.

Start an interactive session in which you type expressions such as `10C -> F`,
type `guided` to be asked for the value and units one at a time, and type
`quit` (or end the input) to leave:

```
unitconvert interactive
```

`unitconvert --version` prints the version.

## Use as a library

```python
from unitconvert.converters import get_converter
from unitconvert.expression import parse_expression

parsed = parse_expression("10C -> F")
converter = get_converter(parsed.from_unit, parsed.to_unit)
print(converter.convert(parsed.value, parsed.from_unit, parsed.to_unit))  # 50.0
```

Each category also has its own converter and unit enum:
`unitconvert.distance.DistanceConverter` / `DistanceUnit`,
`unitconvert.mass.MassConverter` / `MassUnit` and
`unitconvert.temperature.TemperatureConverter` / `TemperatureUnit`. Every
converter offers `convert(value, from_unit, to_unit)`, `supported_units()` and
`unit_string(name)`; every unit enum offers `parse(text)` and
`accepted_strings()`.

Invalid units raise `unitconvert.errors.InvalidUnitError`, units of different
kinds raise `UnsupportedConversionError`, and malformed expressions raise
`ParseError`; all derive from `ConvertError`.

## Limitations

Only the three categories above are known. There are no compound units (such
as speeds or areas), no unit prefixes beyond the listed names, and no way to
add units from a configuration file.

## Running the tests

```
pip install .[test]
pytest
```