"""Data structures for reactor states and their rates of change."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field, fields
from typing import Dict, Sequence, Tuple

import numpy as np

# Plant components the rate engine treats as inert; reported with zero rate.
INERT_COMPONENTS = (
    "nitrogen",
    "ethane",
    "propane",
    "butene",
    "isobutane",
    "hexane",
    "water",
    "carbon_monoxide",
    "methane",
    "ethylene_segment",
    "hexene_segment",
)

BULK_FIELDS = ("ethylene", "hexene", "hydrogen", "catalyst", "cr6", "cocatalyst")


@dataclass(frozen=True)
class SiteState:
    """Population of one active-site type (mol/L).

    Attributes:
        active_sites: Active sites with no chain attached.
        living_end_1: Living chains whose last unit is monomer 1.
        living_end_2: Living chains whose last unit is monomer 2.
        living_moment_0: Zeroth moment of the living chain-length distribution.
        living_moment_1: First moment of the living distribution.
        living_moment_2: Second moment of the living distribution.
        dead_moment_0: Zeroth moment of the dead chain-length distribution.
        dead_moment_1: First moment of the dead distribution.
        dead_moment_2: Second moment of the dead distribution.
    """

    active_sites: float = 0.0
    living_end_1: float = 0.0
    living_end_2: float = 0.0
    living_moment_0: float = 0.0
    living_moment_1: float = 0.0
    living_moment_2: float = 0.0
    dead_moment_0: float = 0.0
    dead_moment_1: float = 0.0
    dead_moment_2: float = 0.0


SITE_FIELDS = tuple(f.name for f in fields(SiteState))
STATE_FIELDS = BULK_FIELDS + tuple(
    f"site{site}.{name}" for site in (1, 2) for name in SITE_FIELDS
)


def _two_sites(sites: Sequence) -> tuple:
    sites = tuple(sites)
    if len(sites) != 2:
        raise ValueError(f"Expected exactly two site entries, got {len(sites)}")
    return sites


@dataclass(frozen=True)
class ReactorState:
    """Snapshot of the reactor contents.

    Concentrations are in mol/L, ``volume`` in L and ``temperature`` in K.
    ``reactor_type`` only selects the hydrogenation constant.
    """

    temperature: float
    volume: float
    ethylene: float = 0.0
    hexene: float = 0.0
    hydrogen: float = 0.0
    catalyst: float = 0.0
    cr6: float = 0.0
    cocatalyst: float = 0.0
    sites: Tuple[SiteState, SiteState] = field(default_factory=lambda: (SiteState(), SiteState()))
    reactor_type: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "sites", _two_sites(self.sites))

    def site(self, site: int) -> SiteState:
        return self.sites[site - 1]

    def to_array(self) -> np.ndarray:
        """Flatten the concentrations in :data:`STATE_FIELDS` order."""
        bulk = [getattr(self, name) for name in BULK_FIELDS]
        return np.array(bulk + [value for site in self.sites for value in astuple(site)], dtype=float)

    @classmethod
    def from_array(
        cls,
        values: Sequence[float],
        volume: float,
        temperature: float,
        reactor_type: int = 1,
    ) -> "ReactorState":
        values = np.asarray(values, dtype=float)
        if values.shape != (len(STATE_FIELDS),):
            raise ValueError(f"Expected {len(STATE_FIELDS)} state values, got shape {values.shape}")
        n_bulk = len(BULK_FIELDS)
        n_site = len(SITE_FIELDS)
        bulk = {name: float(values[i]) for i, name in enumerate(BULK_FIELDS)}
        sites = tuple(
            SiteState(*(float(v) for v in values[n_bulk + j * n_site : n_bulk + (j + 1) * n_site]))
            for j in range(2)
        )
        return cls(
            temperature=temperature,
            volume=volume,
            sites=sites,
            reactor_type=reactor_type,
            **bulk,
        )


@dataclass(frozen=True)
class SiteRates:
    """Time derivatives of the :class:`SiteState` fields."""

    active_sites: float
    living_end_1: float
    living_end_2: float
    living_moment_0: float
    living_moment_1: float
    living_moment_2: float
    dead_moment_0: float
    dead_moment_1: float
    dead_moment_2: float

    def scaled(self, factor: float) -> "SiteRates":
        return SiteRates(*(value * factor for value in astuple(self)))


@dataclass(frozen=True)
class SpeciesRates:
    """Time derivatives of every tracked species, on one basis (mol/L/h or mol/h)."""

    ethylene: float
    hexene: float
    hydrogen: float
    catalyst: float
    cr6: float
    cocatalyst: float
    sites: Tuple[SiteRates, SiteRates]

    def __post_init__(self) -> None:
        object.__setattr__(self, "sites", _two_sites(self.sites))

    def site(self, site: int) -> SiteRates:
        return self.sites[site - 1]

    def scaled(self, factor: float) -> "SpeciesRates":
        bulk = {name: getattr(self, name) * factor for name in BULK_FIELDS}
        return SpeciesRates(sites=tuple(site.scaled(factor) for site in self.sites), **bulk)

    def to_array(self) -> np.ndarray:
        bulk = [getattr(self, name) for name in BULK_FIELDS]
        return np.array(bulk + [value for site in self.sites for value in astuple(site)], dtype=float)


@dataclass(frozen=True)
class RateVector:
    """Result of one rate evaluation.

    Attributes:
        concentration: Rates on a concentration basis (mol/L/h).
        absolute: The same rates multiplied by the reactor volume (mol/h).
        polymer_production_rate: Polymer mass formed per hour (g/h).
        volume: Reactor volume used for scaling (L).
    """

    concentration: SpeciesRates
    absolute: SpeciesRates
    polymer_production_rate: float
    volume: float

    @property
    def rate_ethylene(self) -> float:
        return self.absolute.ethylene

    @property
    def rate_hexene(self) -> float:
        return self.absolute.hexene

    @property
    def rate_hydrogen(self) -> float:
        return self.absolute.hydrogen

    def as_dict(self) -> Dict[str, float]:
        """Flatten the absolute rates into the plant-wide output record."""
        rates = self.absolute
        out: Dict[str, float] = {
            "polymer_production_rate": self.polymer_production_rate,
            "rate_polymer_mass": self.polymer_production_rate,
        }
        for name in BULK_FIELDS:
            out[f"rate_{name}"] = getattr(rates, name)
        for name in INERT_COMPONENTS:
            out[f"rate_{name}"] = 0.0
        for index, site in enumerate(rates.sites, start=1):
            for name in SITE_FIELDS:
                out[f"rate_{name}_site_{index}"] = getattr(site, name)
        return out
