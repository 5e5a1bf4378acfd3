import math
import random
import unittest

from zieglersim.composition import (
    Composition,
    end_group_fractions,
    monomer_fractions,
    safe_ratio,
)
from zieglersim.constants import EPSILON
from zieglersim.models import ReactorState, SiteState


class TestSafeRatio(unittest.TestCase):
    def test_zero_denominator(self):
        self.assertEqual(safe_ratio(0.0, 0.0), 0.0)

    def test_adds_epsilon(self):
        self.assertEqual(safe_ratio(1.0, 1e-25), 1.0 / (1e-25 + EPSILON))

    def test_custom_epsilon(self):
        self.assertEqual(safe_ratio(1.0, 1.0, epsilon=1.0), 0.5)


class TestFractions(unittest.TestCase):
    def test_monomer_fractions(self):
        f1, f2 = monomer_fractions(0.08, 0.02)
        self.assertAlmostEqual(f1, 0.8)
        self.assertAlmostEqual(f2, 0.2)

    def test_all_zero_monomers(self):
        f1, f2 = monomer_fractions(0.0, 0.0)
        self.assertEqual((f1, f2), (0.0, 0.0))

    def test_all_zero_end_groups(self):
        phi1, phi2 = end_group_fractions(0.0, 0.0)
        self.assertEqual(phi1, 0.0)
        self.assertEqual(phi2, 1.0)

    def test_bounds_and_sum(self):
        rng = random.Random(42)
        for _ in range(500):
            a = rng.choice([0.0, rng.uniform(0, 1e-20), rng.uniform(0, 1.0), rng.uniform(0, 1e6)])
            b = rng.uniform(1e-12, 1e3)
            for first, second in (monomer_fractions(a, b), end_group_fractions(a, b)):
                self.assertTrue(0.0 <= first <= 1.0)
                self.assertTrue(0.0 <= second <= 1.0)
                self.assertTrue(math.isclose(first + second, 1.0, rel_tol=1e-12))


class TestComposition(unittest.TestCase):
    def test_from_state(self):
        state = ReactorState(
            temperature=350.0,
            volume=1.0,
            ethylene=0.3,
            hexene=0.1,
            sites=(SiteState(living_end_1=3.0, living_end_2=1.0), SiteState()),
        )
        composition = Composition.from_state(state)
        self.assertAlmostEqual(composition.f1, 0.75)
        self.assertAlmostEqual(composition.f2, 0.25)
        self.assertAlmostEqual(composition.total_monomer, 0.4)
        phi1, phi2 = composition.for_site(1)
        self.assertAlmostEqual(phi1, 0.75)
        self.assertAlmostEqual(phi2, 0.25)
        self.assertEqual(composition.for_site(2), (0.0, 1.0))


if __name__ == '__main__':
    unittest.main()
