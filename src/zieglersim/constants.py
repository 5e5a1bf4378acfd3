"""Fixed physical constants and mechanism-wide settings."""

from __future__ import annotations

# Molecular weights used for the polymer mass balance (g/mol).
MW_ETHYLENE = 28.0
MW_HEXENE = 84.0

# Additive guard for composition ratios.
EPSILON = 1e-25

# Share of total activation flux that forms type-1 sites.
SITE_SPLIT_1 = 0.624963

# Auxiliary hydrogenation constant, keyed by reactor-type selector.
REACTOR_TYPE_CONSTANTS = {
    1: 5.34329,
    2: 1.13724,
    3: 0.318066,
    4: 0.456617,
}

T_REF = 298.15  # K
