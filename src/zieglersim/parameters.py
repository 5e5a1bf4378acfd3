"""Fitted mechanism parameters for ethylene / 1-hexene copolymerisation.

Each pair is ``(a, b)`` for ``k = exp(a) * exp(-exp(b) / T)``. Indices
follow :mod:`zieglersim.kinetics`: monomer ``"1"``/``"2"`` or the pair
``"ij"`` (chain ending in ``i`` reacting with monomer ``j``).
"""

from __future__ import annotations

from zieglersim.kinetics import KineticConstantTable, StepKind

MECHANISM_LITERALS = {
    # Inactive catalyst -> active sites.
    StepKind.ACTIVATION: {
        0: {
            "cocatalyst": (1.90413, 2.35352),
            "cr6": (42.8061, 2.07067),
            "hydrogen": (43.4913, 1.81544),
        },
    },
    StepKind.INITIATION: {
        1: {"1": (2.72252, 0.00164819), "2": (0.00158295, 75.0948)},
        2: {"1": (0.0190001, 2.76802), "2": (2.49924, 3.86923)},
    },
    StepKind.PROPAGATION: {
        1: {
            "11": (23.5079, 62.7073),
            "12": (7.45487, 570.828),
            "21": (11.7691, 13.1246),
            "22": (0.0506817, 91.5249),
        },
        2: {
            "11": (44.4108489690084, 9.02536689954115),
            "12": (16.6269298831462, 1.34505395511823e-02),
            "21": (13.0385236154171, 7.12672329782542e-02),
            "22": (10.2482861977761, 245.73403529402),
        },
    },
    StepKind.MONOMER_TRANSFER: {
        1: {
            "11": (1.91232, 574.851),
            "12": (2.3086, 598.13),
            "21": (1.88274, 10.4787),
            "22": (1.85856, 15.4026),
        },
        2: {
            "11": (2.12135, 198.691),
            "12": (1.92168, 449.254),
            "21": (1.81545, 50.6018),
            "22": (2.041, 476.019),
        },
    },
    StepKind.HYDROGEN_TRANSFER: {
        1: {"1": (8.24086, 24.0953), "2": (10.4391, 0.00153492)},
        2: {"1": (7.87596, 2.95216), "2": (0.806824, 46.4001)},
    },
    StepKind.TERMINATION: {
        1: {"1": (2.01811, 13.8224), "2": (1.83056, 15.2807)},
        2: {"1": (1.99198, 15.4759), "2": (2.11061, 10.8984)},
    },
    # Hydrogen side reaction to ethane, scaled by the reactor-type constant.
    StepKind.HYDROGENATION: {
        0: {"": (0.0010069, 3.06806)},
    },
}

DEFAULT_TABLE = KineticConstantTable.from_literals(MECHANISM_LITERALS)
