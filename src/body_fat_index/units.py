"""Conversion of configured units to pounds and inches."""

from .exceptions import InvalidInput

WEIGHT_UNITS = ("lb", "kg", "st")
LENGTH_UNITS = ("in", "m", "ft")

# Multipliers into the units the formulas are defined in
POUNDS_PER = {
    "st": 14,  # 1 st = 14 lb
    "kg": 2.20462262,
}
INCHES_PER = {
    "m": 39.3700787,
    "ft": 12,
}


def to_pounds(value: float, unit: str) -> float:
    """Return weight in pounds for a value given in `unit`."""
    unit = unit.lower()
    if unit == "lb":
        return value
    if unit not in POUNDS_PER:
        raise InvalidInput(f"Invalid unit for weight: {unit!r}")
    return value * POUNDS_PER[unit]


def to_inches(value: float, unit: str) -> float:
    """Return length in inches for a value given in `unit`."""
    unit = unit.lower()
    if unit == "in":
        return value
    if unit not in INCHES_PER:
        raise InvalidInput(f"Invalid unit for length: {unit!r}")
    return value * INCHES_PER[unit]
