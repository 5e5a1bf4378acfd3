"""Rate assembly for the dual-site Ziegler-Natta copolymerisation mechanism.

This module turns a :class:`~zieglersim.models.ReactorState` into the rate of
change of every tracked species. The mechanism covers:

- Site activation by cocatalyst, through the second catalyst species, and by hydrogen.
- Chain initiation, propagation and transfer to monomer on two site types.
- Transfer to hydrogen, spontaneous termination and a hydrogen side reaction.

Living and dead chain populations are tracked through their zeroth, first and
second moments; copolymer kinetics enter the moment equations through the
pseudo-kinetic constants of :mod:`zieglersim.pseudo`.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from zieglersim.composition import Composition
from zieglersim.constants import MW_ETHYLENE, MW_HEXENE
from zieglersim.kinetics import KineticConstantTable, RateConstants, SiteConstants
from zieglersim.models import RateVector, ReactorState, SiteRates, SiteState, SpeciesRates
from zieglersim.parameters import DEFAULT_TABLE
from zieglersim.pseudo import PseudoConstants, pseudo_constants

logger = logging.getLogger(__name__)


def _site_rates(
    site: SiteState,
    k: SiteConstants,
    pseudo: PseudoConstants,
    state: ReactorState,
    total_monomer: float,
    activation_flux: float,
    site_fraction: float,
) -> SiteRates:
    m1 = state.ethylene
    m2 = state.hexene
    h2 = state.hydrogen
    mt = total_monomer
    n0 = site.active_sites
    n1 = site.living_end_1
    n2 = site.living_end_2
    y0 = site.living_moment_0
    y1 = site.living_moment_1
    y2 = site.living_moment_2

    initiation_flux = n0 * mt * pseudo.initiation
    growth = mt * y0 * (pseudo.propagation + pseudo.monomer_transfer)
    release = pseudo.release_frequency(mt, h2)

    return SiteRates(
        active_sites=activation_flux * site_fraction - k.ki1 * n0 * m1 - k.ki2 * n0 * m2,
        living_end_1=(
            k.ki1 * m1 * n0
            + k.kp21 * n2 * m1
            + k.kt21 * n2 * m1
            - k.ktH1 * h2 * n1
            - k.kte1 * n1
            - k.kp12 * n1 * m2
            - k.kt12 * n1 * m2
        ),
        living_end_2=(
            k.ki2 * m2 * n0
            + k.kp12 * n1 * m2
            + k.kt12 * n1 * m2
            - k.kp21 * n2 * m1
            - k.kt21 * n2 * m1
            - k.ktH2 * h2 * n2
            - k.kte2 * n2
        ),
        living_moment_0=initiation_flux - y0 * pseudo.termination - y0 * h2 * pseudo.hydrogen_transfer,
        living_moment_1=(
            initiation_flux
            + growth
            - mt * y1 * pseudo.monomer_transfer
            - y1 * (h2 * pseudo.hydrogen_transfer + pseudo.termination)
        ),
        living_moment_2=initiation_flux + growth + 2 * mt * pseudo.propagation * y1 - y2 * release,
        dead_moment_0=y0 * release,
        dead_moment_1=y1 * release,
        dead_moment_2=y2 * release,
    )


def _monomer_uptake(site: SiteState, k: SiteConstants, phi1: float, phi2: float) -> tuple[float, float]:
    """Per unit monomer concentration, consumption of monomer 1 and 2 on one site."""
    n0 = site.active_sites
    y0 = site.living_moment_0
    uptake_1 = n0 * k.ki1 + y0 * (k.kp11 * phi1 + k.kt11 * phi1 + k.kp21 * phi2 + k.kt21 * phi2)
    uptake_2 = n0 * k.ki2 + y0 * (k.kp22 * phi2 + k.kt22 * phi2 + k.kp12 * phi1 + k.kt12 * phi1)
    return uptake_1, uptake_2


def concentration_rates(
    state: ReactorState,
    constants: RateConstants,
    composition: Composition,
    table: KineticConstantTable,
) -> SpeciesRates:
    """Assemble every concentration-basis rate (mol/L/h) from evaluated constants."""
    m1 = state.ethylene
    m2 = state.hexene
    h2 = state.hydrogen
    s = state.catalyst
    s1 = state.cr6
    c = state.cocatalyst

    ka = constants.activation("cocatalyst")
    kaa = constants.activation("cr6")
    kaH = constants.activation("hydrogen")
    hydrogenation = constants.hydrogenation * table.reactor_constant(state.reactor_type)

    activation_flux = ka * s * c + kaH * h2 * s1
    site_fractions = table.site_fractions

    rate_m1 = 0.0
    rate_m2 = 0.0
    rate_h2 = -kaH * h2 * s1 - hydrogenation * h2
    site_rates = []
    for index, site in enumerate(state.sites, start=1):
        k = constants.for_site(index)
        phi1, phi2 = composition.for_site(index)
        pseudo = pseudo_constants(k, composition.f1, composition.f2, phi1, phi2)

        uptake_1, uptake_2 = _monomer_uptake(site, k, phi1, phi2)
        rate_m1 -= m1 * uptake_1
        rate_m2 -= m2 * uptake_2
        rate_h2 -= site.living_moment_0 * h2 * (k.ktH1 + k.ktH2)

        site_rates.append(
            _site_rates(
                site,
                k,
                pseudo,
                state,
                composition.total_monomer,
                activation_flux,
                site_fractions[index - 1],
            )
        )

    catalyst_consumption = ka * s * c + kaa * c * s
    return SpeciesRates(
        ethylene=rate_m1,
        hexene=rate_m2,
        hydrogen=rate_h2,
        catalyst=-catalyst_consumption,
        cr6=-kaH * h2 * s1 + kaa * c * s,
        cocatalyst=-catalyst_consumption,
        sites=tuple(site_rates),
    )


def polymer_production_rate(rates: SpeciesRates, volume: float) -> float:
    """Polymer mass formed (g/h) from concentration-basis monomer consumption."""
    return (-rates.ethylene * MW_ETHYLENE + -rates.hexene * MW_HEXENE) * volume


def evaluate_rates(state: ReactorState, table: KineticConstantTable = DEFAULT_TABLE) -> RateVector:
    """Evaluate every species' rate of change for one reactor state.

    The evaluation is a pure function of ``state`` and ``table``: rate
    constants at ``state.temperature``, then monomer and end-group fractions,
    then per-site pseudo-kinetic constants, then the mechanism rates. Rates are
    returned on a concentration basis and scaled by the reactor volume.

    Args:
        state: Reactor snapshot (mol/L, L, K).
        table: Kinetic parameters; defaults to the fitted mechanism.

    Returns:
        The :class:`RateVector` for ``state``.

    Raises:
        InvalidTemperature: If ``state.temperature`` is not finite and positive.
    """
    constants = table.evaluate(state.temperature)
    composition = Composition.from_state(state)
    rates = concentration_rates(state, constants, composition, table)
    production = polymer_production_rate(rates, state.volume)
    logger.debug(
        "Rates at T=%.2f K: dM1/dt=%.4g, dM2/dt=%.4g mol/L/h, polymer %.4g g/h",
        state.temperature,
        rates.ethylene,
        rates.hexene,
        production,
    )
    return RateVector(
        concentration=rates,
        absolute=rates.scaled(state.volume),
        polymer_production_rate=production,
        volume=state.volume,
    )


def build_rhs(
    volume: float,
    temperature: float,
    reactor_type: int = 1,
    table: KineticConstantTable = DEFAULT_TABLE,
) -> Callable[[float, np.ndarray], np.ndarray]:
    """Build the right-hand side ``rhs(t, y)`` of the reactor ODE system.

    The state vector ``y`` holds the concentrations in
    :data:`zieglersim.models.STATE_FIELDS` order; the returned derivatives are
    on a concentration basis (mol/L/h) in the same order. Temperature, volume
    and reactor type are held fixed. The function is compatible with
    ``scipy.integrate.solve_ivp``; integration itself is left to the caller.
    """

    def rhs(_t: float, y: np.ndarray) -> np.ndarray:
        state = ReactorState.from_array(y, volume=volume, temperature=temperature, reactor_type=reactor_type)
        return evaluate_rates(state, table).concentration.to_array()

    return rhs
