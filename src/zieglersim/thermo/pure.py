"""Pure-component property correlator with out-of-range extrapolation."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Mapping

from zieglersim.errors import UnknownComponent
from zieglersim.kinetics import validate_temperature
from zieglersim.thermo.base import PropertyCorrelator
from zieglersim.thermo.components import COMPONENT_LIBRARY, PropertyCorrelation, PureComponent
from zieglersim.thermo.correlations import CorrelationType, antoine_log, evaluate, reduced_power

logger = logging.getLogger(__name__)

_LINEAR_IN_T = (CorrelationType.POLYNOMIAL, CorrelationType.POWER_RATIO, CorrelationType.HYPERBOLIC)


def extrapolate(component: PureComponent, correlation: PropertyCorrelation, temperature: float) -> float:
    """Estimate a property outside every tabulated interval.

    The estimate is anchored just below the upper bound of the first
    interval. Up to ``1.25 * T_max`` it follows the local trend; beyond that
    the value is held at the ``17/16 * T_max`` estimate. Enthalpy
    correlations, and reduced-power correlations above the critical point,
    give 0.
    """
    if not correlation.t_max:
        return 0.0
    t_max = correlation.t_max[0]
    coeffs = correlation.coefficients[0]
    tc = component.constants.critical_temperature
    h_form = component.constants.heat_of_formation

    t1 = t_max - 10
    t2 = t_max - 1
    t3 = t_max * (17 / 16)
    t4 = t_max - 0.01
    target = temperature if temperature < 1.25 * t_max else t3

    kind = correlation.correlation_type
    if kind in _LINEAR_IN_T:
        v1 = evaluate(kind, t1, t1 / tc, coeffs, h_form)
        v2 = evaluate(kind, t2, t2 / tc, coeffs, h_form)
        return (v2 - v1) / (t2 - t1) * (target - t1) + v1
    if kind is CorrelationType.ANTOINE:
        v1 = antoine_log(t1, coeffs)
        v2 = antoine_log(t2, coeffs)
        return math.exp((v2 - v1) / (1 / t2 - 1 / t1) * (1 / target - 1 / t1) + v1)
    if kind is CorrelationType.REDUCED_POWER:
        tr1, tr2, tr4 = t1 / tc, t2 / tc, t4 / tc
        if tr4 > 1:
            return 0.0
        v1 = reduced_power(tr1, coeffs)
        v2 = reduced_power(tr2, coeffs)
        v4 = reduced_power(tr4, coeffs)
        slope = (v2 - v1) / (tr2 - tr1)
        curvature = ((v4 - v1) / (tr4 - tr1) - slope) / (tr4 - tr2)
        dtr = target / tc - tr1
        return curvature * dtr**2 + slope * dtr + v1
    return 0.0


class PureComponentCorrelator(PropertyCorrelator):
    """Evaluates every correlation of a library component at one temperature."""

    def __init__(self, library: Mapping[str, PureComponent] = COMPONENT_LIBRARY):
        self.library = library

    def property_value(self, component: PureComponent, correlation: PropertyCorrelation, temperature: float) -> float:
        index = correlation.interval_index(temperature)
        if index is None:
            logger.info(
                "Temperature %sK is out of range for %s of %s. Extrapolating.",
                temperature,
                correlation.property_name,
                component.constants.name,
            )
            return extrapolate(component, correlation, temperature)
        return evaluate(
            correlation.correlation_type,
            temperature,
            temperature / component.constants.critical_temperature,
            correlation.coefficients[index],
            component.constants.heat_of_formation,
        )

    def properties_at(self, component_name: str, temperature: float) -> Dict[str, float]:
        validate_temperature(temperature)
        component = self.library.get(component_name)
        if component is None:
            raise UnknownComponent(component_name)
        return {
            name: self.property_value(component, correlation, temperature)
            for name, correlation in component.properties.items()
        }

    def properties_for(self, component_names: Iterable[str], temperature: float) -> Dict[str, Dict[str, float]]:
        """Properties for several components; unknown names are skipped."""
        results = {}
        for name in component_names:
            try:
                results[name] = self.properties_at(name, temperature)
            except UnknownComponent:
                logger.warning("Component %r not found in library. Skipping.", name)
        return results
