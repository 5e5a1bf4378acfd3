"""Arrhenius-form rate constants and the structured kinetic parameter table."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

import numpy as np

from zieglersim.constants import REACTOR_TYPE_CONSTANTS, SITE_SPLIT_1
from zieglersim.errors import InvalidTemperature

logger = logging.getLogger(__name__)

SITES = (1, 2)
MONOMERS = ("1", "2")
MONOMER_PAIRS = ("11", "12", "21", "22")
ACTIVATION_PATHS = ("cocatalyst", "cr6", "hydrogen")


class StepKind(str, Enum):
    ACTIVATION = "activation"
    INITIATION = "initiation"
    PROPAGATION = "propagation"
    MONOMER_TRANSFER = "monomer_transfer"
    HYDROGEN_TRANSFER = "hydrogen_transfer"
    TERMINATION = "termination"
    HYDROGENATION = "hydrogenation"


TableKey = Tuple[StepKind, int, str]


def _required_keys() -> frozenset:
    keys = {(StepKind.ACTIVATION, 0, path) for path in ACTIVATION_PATHS}
    keys.add((StepKind.HYDROGENATION, 0, ""))
    for site in SITES:
        for pair in MONOMER_PAIRS:
            keys.add((StepKind.PROPAGATION, site, pair))
            keys.add((StepKind.MONOMER_TRANSFER, site, pair))
        for monomer in MONOMERS:
            keys.add((StepKind.INITIATION, site, monomer))
            keys.add((StepKind.HYDROGEN_TRANSFER, site, monomer))
            keys.add((StepKind.TERMINATION, site, monomer))
    return frozenset(keys)


REQUIRED_KEYS = _required_keys()


def validate_temperature(temperature: float) -> float:
    """Reject non-positive or non-finite temperatures (K)."""
    if not math.isfinite(temperature) or temperature <= 0.0:
        raise InvalidTemperature(temperature)
    return temperature


@dataclass(frozen=True)
class ArrheniusKinetics:
    """Rate constant of the fitted form ``k = exp(a) * exp(-exp(b) / T)``.

    ``b`` is the logarithm of the activation term, so the temperature
    dependence is a double exponential. The fitted parameters are calibrated
    against this exact form.
    """

    a: float
    b: float

    def rate_constant(self, temperature: float) -> float:
        return float(np.exp(self.a) * np.exp(-np.exp(self.b) / temperature))


@dataclass(frozen=True)
class SiteConstants:
    """Evaluated rate constants of one active-site type.

    Digits after the letter code name the monomer (``ki1``) or the
    end-group/monomer pair (``kp12``: chain ending in 1 adding monomer 2).
    """

    ki1: float
    ki2: float
    kp11: float
    kp12: float
    kp21: float
    kp22: float
    kt11: float
    kt12: float
    kt21: float
    kt22: float
    ktH1: float
    ktH2: float
    kte1: float
    kte2: float


@dataclass(frozen=True)
class RateConstants:
    """Every rate constant of the mechanism at one temperature."""

    values: Mapping[TableKey, float]
    temperature: float

    def k(self, step: StepKind, site: int = 0, index: str = "") -> float:
        return self.values[(step, site, index)]

    def activation(self, path: str) -> float:
        return self.values[(StepKind.ACTIVATION, 0, path)]

    @property
    def hydrogenation(self) -> float:
        return self.values[(StepKind.HYDROGENATION, 0, "")]

    def for_site(self, site: int) -> SiteConstants:
        k = self.values
        return SiteConstants(
            ki1=k[(StepKind.INITIATION, site, "1")],
            ki2=k[(StepKind.INITIATION, site, "2")],
            kp11=k[(StepKind.PROPAGATION, site, "11")],
            kp12=k[(StepKind.PROPAGATION, site, "12")],
            kp21=k[(StepKind.PROPAGATION, site, "21")],
            kp22=k[(StepKind.PROPAGATION, site, "22")],
            kt11=k[(StepKind.MONOMER_TRANSFER, site, "11")],
            kt12=k[(StepKind.MONOMER_TRANSFER, site, "12")],
            kt21=k[(StepKind.MONOMER_TRANSFER, site, "21")],
            kt22=k[(StepKind.MONOMER_TRANSFER, site, "22")],
            ktH1=k[(StepKind.HYDROGEN_TRANSFER, site, "1")],
            ktH2=k[(StepKind.HYDROGEN_TRANSFER, site, "2")],
            kte1=k[(StepKind.TERMINATION, site, "1")],
            kte2=k[(StepKind.TERMINATION, site, "2")],
        )


@dataclass(frozen=True)
class KineticConstantTable:
    """Arrhenius parameters for every elementary step, keyed by ``(step, site, index)``.

    Site-independent steps (activation, hydrogenation) use site ``0``.
    The table also carries the reactor-type hydrogenation constants and the
    split of activation flux between the two site types.
    """

    entries: Mapping[TableKey, ArrheniusKinetics]
    reactor_type_constants: Mapping[int, float] = field(
        default_factory=lambda: MappingProxyType(dict(REACTOR_TYPE_CONSTANTS))
    )
    site_split: float = SITE_SPLIT_1

    def __post_init__(self) -> None:
        missing = REQUIRED_KEYS - set(self.entries)
        if missing:
            names = sorted(f"{step.value}[{site}]{index}" for step, site, index in missing)
            raise ValueError(f"Kinetic table is missing parameters: {names}")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(
            self, "reactor_type_constants", MappingProxyType(dict(self.reactor_type_constants))
        )

    @classmethod
    def from_literals(
        cls,
        literals: Mapping[StepKind, Mapping[int, Mapping[str, Tuple[float, float]]]],
        **kwargs,
    ) -> "KineticConstantTable":
        """Build a table from nested ``{step: {site: {index: (a, b)}}}`` literals."""
        entries = {
            (step, site, index): ArrheniusKinetics(a, b)
            for step, by_site in literals.items()
            for site, by_index in by_site.items()
            for index, (a, b) in by_index.items()
        }
        return cls(entries, **kwargs)

    def get(self, step: StepKind, site: int = 0, index: str = "") -> ArrheniusKinetics:
        return self.entries[(step, site, index)]

    @property
    def site_fractions(self) -> Tuple[float, float]:
        return self.site_split, 1 - self.site_split

    def reactor_constant(self, selector: int) -> float:
        """Hydrogenation constant for a reactor type; unknown selectors give 0."""
        value = self.reactor_type_constants.get(selector)
        if value is None:
            logger.debug("Reactor type %r not recognised, hydrogenation constant set to 0.", selector)
            return 0.0
        return value

    def replace(
        self, overrides: Mapping[TableKey, ArrheniusKinetics] | Iterable[Tuple[TableKey, ArrheniusKinetics]]
    ) -> "KineticConstantTable":
        """Return a copy with some parameter pairs overridden."""
        entries = dict(self.entries)
        for key, kinetics in dict(overrides).items():
            if key not in REQUIRED_KEYS:
                step, site, index = key
                raise KeyError(f"Unknown kinetic parameter {step.value}[{site}]{index}")
            entries[key] = kinetics
        return replace(self, entries=entries)

    def evaluate(self, temperature: float) -> RateConstants:
        validate_temperature(temperature)
        values = {key: kinetics.rate_constant(temperature) for key, kinetics in self.entries.items()}
        return RateConstants(values=MappingProxyType(values), temperature=temperature)
