"""Pure-component constants and property correlations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple

from zieglersim.thermo.correlations import CorrelationType


@dataclass(frozen=True)
class ComponentConstants:
    name: str
    molecular_weight: float  # g/mol
    critical_temperature: float  # K
    critical_pressure: float  # bar
    acentric_factor: float
    heat_of_formation: float  # J/mol


@dataclass(frozen=True)
class PropertyCorrelation:
    """One property correlation, optionally split into temperature intervals.

    ``coefficients`` holds one 5-tuple per interval. Without intervals a
    single tuple applies at every temperature.
    """

    property_name: str
    correlation_type: CorrelationType
    coefficients: Tuple[Tuple[float, ...], ...]
    t_min: Tuple[float, ...] = ()
    t_max: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.t_min) != len(self.t_max):
            raise ValueError(f"{self.property_name}: t_min and t_max lengths differ")
        if self.t_min and len(self.coefficients) != len(self.t_min):
            raise ValueError(f"{self.property_name}: one coefficient set per interval is required")

    @property
    def has_intervals(self) -> bool:
        return bool(self.t_min)

    def interval_index(self, temperature: float) -> Optional[int]:
        """Index of the first interval containing ``temperature``, or ``None``."""
        if not self.has_intervals:
            return 0
        for index, (low, high) in enumerate(zip(self.t_min, self.t_max)):
            if low <= temperature <= high:
                return index
        return None


@dataclass(frozen=True)
class PureComponent:
    constants: ComponentConstants
    properties: Mapping[str, PropertyCorrelation] = field(default_factory=dict)


def _component(constants: ComponentConstants, correlations: Sequence[PropertyCorrelation]) -> PureComponent:
    return PureComponent(constants, {c.property_name: c for c in correlations})


ETHYLENE = _component(
    ComponentConstants(
        name="ETHYLENE",
        molecular_weight=28.054,
        critical_temperature=282.35,
        critical_pressure=50.40,
        acentric_factor=0.087,
        heat_of_formation=52467.0,
    ),
    [
        PropertyCorrelation(
            "Vapor heat capacity",
            CorrelationType.POLYNOMIAL,
            coefficients=(
                (1.424e4, 7.550e1, -1.800e-2, 0.0, 0.0),
                (5.869e4, -6.650e1, 2.370e-1, -1.280e-4, 2.530e-8),
            ),
            t_min=(200.0, 500.0),
            t_max=(500.0, 1500.0),
        ),
        PropertyCorrelation(
            "Liquid viscosity",
            CorrelationType.ANTOINE,
            coefficients=((-6.4013, 183.56, 0.0, 0.019, 1.0),),
        ),
    ],
)

HEXENE = _component(
    ComponentConstants(
        name="1-HEXENE",
        molecular_weight=84.161,
        critical_temperature=504.0,
        critical_pressure=31.10,
        acentric_factor=0.281,
        heat_of_formation=-41160.0,
    ),
    [
        PropertyCorrelation(
            "Vapor heat capacity",
            CorrelationType.POLYNOMIAL,
            coefficients=((2.579e4, 3.332e2, -8.470e-2, -2.180e-5, 0.0),),
        ),
    ],
)

COMPONENT_LIBRARY: Mapping[str, PureComponent] = {
    component.constants.name: component for component in (ETHYLENE, HEXENE)
}
