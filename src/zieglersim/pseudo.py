"""Pseudo-kinetic constants: copolymer kinetics collapsed per site.

The weights are mechanism specific. Initiation is weighted by monomer
fraction only, propagation and transfer to monomer by both monomer and
end-group fractions, transfer to hydrogen and termination by end-group
fraction only.
"""

from __future__ import annotations

from dataclasses import dataclass

from zieglersim.kinetics import SiteConstants


@dataclass(frozen=True)
class PseudoConstants:
    initiation: float
    propagation: float
    monomer_transfer: float
    hydrogen_transfer: float
    termination: float

    def release_frequency(self, total_monomer: float, hydrogen: float) -> float:
        """First-order rate (1/h) at which living chains become dead chains."""
        return total_monomer * self.monomer_transfer + self.hydrogen_transfer * hydrogen + self.termination


def pseudo_initiation(k: SiteConstants, f1: float, f2: float) -> float:
    return k.ki1 * f1 + k.ki2 * f2


def pseudo_propagation(k: SiteConstants, f1: float, f2: float, phi1: float, phi2: float) -> float:
    return k.kp11 * f1 * phi1 + k.kp21 * f1 * phi2 + k.kp22 * f2 * phi2 + k.kp12 * phi1 * f2


def pseudo_monomer_transfer(k: SiteConstants, f1: float, f2: float, phi1: float, phi2: float) -> float:
    return k.kt11 * f1 * phi1 + k.kt21 * f1 * phi2 + k.kt22 * f2 * phi2 + k.kt12 * phi1 * f2


def pseudo_hydrogen_transfer(k: SiteConstants, phi1: float, phi2: float) -> float:
    return k.ktH1 * phi1 + k.ktH2 * phi2


def pseudo_termination(k: SiteConstants, phi1: float, phi2: float) -> float:
    return k.kte1 * phi1 + k.kte2 * phi2


def pseudo_constants(k: SiteConstants, f1: float, f2: float, phi1: float, phi2: float) -> PseudoConstants:
    return PseudoConstants(
        initiation=pseudo_initiation(k, f1, f2),
        propagation=pseudo_propagation(k, f1, f2, phi1, phi2),
        monomer_transfer=pseudo_monomer_transfer(k, f1, f2, phi1, phi2),
        hydrogen_transfer=pseudo_hydrogen_transfer(k, phi1, phi2),
        termination=pseudo_termination(k, phi1, phi2),
    )
