"""Temperature correlations for pure-component properties.

Coefficients are passed as a 5-sequence ``(c0, c1, c2, c3, c4)``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

from zieglersim.constants import T_REF


class CorrelationType(str, Enum):
    POLYNOMIAL = "polynomial"
    ANTOINE = "antoine"
    POWER_RATIO = "power_ratio"
    HYPERBOLIC = "hyperbolic"
    REDUCED_POWER = "reduced_power"
    ENTHALPY = "enthalpy"


def polynomial(t: float, c: Sequence[float]) -> float:
    return c[0] + c[1] * t + c[2] * t**2 + c[3] * t**3 + c[4] * t**4


def antoine_log(t: float, c: Sequence[float]) -> float:
    """Natural log of the property; :func:`evaluate` exponentiates it."""
    return c[0] + c[1] / t + c[2] * math.log(t) + c[3] * t ** c[4]


def power_ratio(t: float, c: Sequence[float]) -> float:
    return c[0] * t ** c[1] / (1 + c[2] / t + c[3] / t**2)


def _x_over_sinh(x: float) -> float:
    # Limit at x = 0 is 1.
    if x == 0.0:
        return 1.0
    return x / math.sinh(x)


def hyperbolic(t: float, c: Sequence[float]) -> float:
    x2 = c[2] / t
    x4 = c[4] / t
    return c[0] + c[1] * _x_over_sinh(x2) ** 2 + c[3] * (x4 / math.cosh(x4)) ** 2


def reduced_power(tr: float, c: Sequence[float]) -> float:
    """Undefined above the critical point; returns NaN for ``tr > 1``."""
    if tr > 1:
        return math.nan
    exponent = c[1] + c[2] * tr + c[3] * tr**2 + c[4] * tr**3
    return c[0] * (1 - tr) ** exponent


def _coth(x: float) -> float:
    return 1.0 / math.tanh(x)


def enthalpy(t: float, c: Sequence[float], heat_of_formation: float) -> float:
    """Integral of the hyperbolic heat capacity from ``T_REF``, plus formation enthalpy."""
    return (
        heat_of_formation
        + c[0] * (t - T_REF)
        + c[1] * c[2] * (_coth(c[2] / t) - _coth(c[2] / T_REF))
        - c[3] * c[4] * (math.tanh(c[4] / t) - math.tanh(c[4] / T_REF))
    )


def evaluate(
    kind: CorrelationType,
    t: float,
    tr: float,
    c: Sequence[float],
    heat_of_formation: float = 0.0,
) -> float:
    if kind is CorrelationType.POLYNOMIAL:
        return polynomial(t, c)
    if kind is CorrelationType.ANTOINE:
        return math.exp(antoine_log(t, c))
    if kind is CorrelationType.POWER_RATIO:
        return power_ratio(t, c)
    if kind is CorrelationType.HYPERBOLIC:
        return hyperbolic(t, c)
    if kind is CorrelationType.REDUCED_POWER:
        return reduced_power(tr, c)
    if kind is CorrelationType.ENTHALPY:
        return enthalpy(t, c, heat_of_formation)
    raise ValueError(f"Unknown correlation type: {kind}")
