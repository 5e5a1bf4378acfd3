"""Unit conversion for values crossing the package boundary.

The rate engine itself works in mol/L, K, L and h only.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from zieglersim.errors import UnitConversionError


class UnitType(str, Enum):
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"
    MASS = "mass"


# Factors relative to the base unit (bar, kg): value_in_unit = value_in_base * factor.
PRESSURE_FACTORS: Dict[str, float] = {"bar": 1.0, "atm": 1 / 1.01325, "psi": 14.50377}
MASS_FACTORS: Dict[str, float] = {"kg": 1.0, "g": 1000.0, "lbm": 2.20462}

_FACTORS = {
    UnitType.PRESSURE: PRESSURE_FACTORS,
    UnitType.MASS: MASS_FACTORS,
}


def _to_kelvin(value: float, unit: str) -> float:
    if unit == "K":
        return value
    if unit == "C":
        return value + 273.15
    if unit == "F":
        return (value - 32) * (5 / 9) + 273.15
    raise UnitConversionError(f"Unknown 'from' temperature unit: {unit}")


def _from_kelvin(value: float, unit: str) -> float:
    if unit == "K":
        return value
    if unit == "C":
        return value - 273.15
    if unit == "F":
        return (value - 273.15) * (9 / 5) + 32
    raise UnitConversionError(f"Unknown 'to' temperature unit: {unit}")


def convert(value: float, from_unit: str, to_unit: str, unit_type: UnitType | str) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within one unit type."""
    try:
        unit_type = UnitType(unit_type)
    except ValueError:
        raise UnitConversionError(f"Unit type {unit_type!r} not implemented") from None

    if from_unit == to_unit:
        return value

    if unit_type is UnitType.TEMPERATURE:
        return _from_kelvin(_to_kelvin(value, from_unit), to_unit)

    factors = _FACTORS[unit_type]
    try:
        from_factor = factors[from_unit]
        to_factor = factors[to_unit]
    except KeyError:
        raise UnitConversionError(
            f"Invalid units for {unit_type.value}: from {from_unit!r}, to {to_unit!r}"
        ) from None
    return value / from_factor * to_factor
