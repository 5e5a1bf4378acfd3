"""Exception types raised by ZieglerSim."""

from __future__ import annotations


class ZieglerSimError(Exception):
    """Base class for every error raised by the package."""


class InvalidTemperature(ZieglerSimError, ValueError):
    """
    Raised when a temperature is not a finite, strictly positive value in kelvin.
      Checked before any Arrhenius evaluation.
    """

    def __init__(self, temperature: float) -> None:
        super().__init__(f"Temperature must be finite and > 0 K, got {temperature!r}")
        self.temperature = temperature


class UnknownComponent(ZieglerSimError, KeyError):
    """Raised when a component name is missing from the property library."""


class UnitConversionError(ZieglerSimError, ValueError):
    """Raised for unknown units or unit types."""
