"""Monomer mole fractions and living-chain end-group fractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from zieglersim.constants import EPSILON

if TYPE_CHECKING:
    from zieglersim.models import ReactorState


def safe_ratio(numerator: float, denominator: float, epsilon: float = EPSILON) -> float:
    """``numerator / (denominator + epsilon)``; finite when the denominator is 0."""
    return numerator / (denominator + epsilon)


def monomer_fractions(m1: float, m2: float) -> Tuple[float, float]:
    total = m1 + m2
    return safe_ratio(m1, total), safe_ratio(m2, total)


def end_group_fractions(n1: float, n2: float) -> Tuple[float, float]:
    """Fractions of living chains on one site ending in monomer 1 and 2."""
    phi1 = safe_ratio(n1, n1 + n2)
    return phi1, 1 - phi1


@dataclass(frozen=True)
class Composition:
    """Fractions derived from the current reactor state.

    Attributes:
        f1: Mole fraction of monomer 1 in the monomer pool.
        f2: Mole fraction of monomer 2 in the monomer pool.
        total_monomer: ``M1 + M2`` (mol/L).
        phi: Per-site ``(phi1, phi2)`` end-group fractions, site 1 first.
    """

    f1: float
    f2: float
    total_monomer: float
    phi: Tuple[Tuple[float, float], Tuple[float, float]]

    @classmethod
    def from_state(cls, state: "ReactorState") -> "Composition":
        f1, f2 = monomer_fractions(state.ethylene, state.hexene)
        phi = tuple(end_group_fractions(site.living_end_1, site.living_end_2) for site in state.sites)
        return cls(f1=f1, f2=f2, total_monomer=state.ethylene + state.hexene, phi=phi)

    def for_site(self, site: int) -> Tuple[float, float]:
        return self.phi[site - 1]
