"""ZieglerSim core package."""

from zieglersim.errors import InvalidTemperature
from zieglersim.kinetics import ArrheniusKinetics, KineticConstantTable, StepKind
from zieglersim.mechanism import build_rhs, evaluate_rates
from zieglersim.models import RateVector, ReactorState, SiteState
from zieglersim.parameters import DEFAULT_TABLE

__all__ = [
    "ArrheniusKinetics",
    "KineticConstantTable",
    "StepKind",
    "DEFAULT_TABLE",
    "InvalidTemperature",
    "RateVector",
    "ReactorState",
    "SiteState",
    "build_rhs",
    "evaluate_rates",
]
