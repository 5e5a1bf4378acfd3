import unittest

from zieglersim.kinetics import SiteConstants
from zieglersim.pseudo import (
    PseudoConstants,
    pseudo_constants,
    pseudo_hydrogen_transfer,
    pseudo_initiation,
    pseudo_monomer_transfer,
    pseudo_propagation,
    pseudo_termination,
)

# Distinct primes so a misplaced weight changes the result.
K = SiteConstants(
    ki1=1.0, ki2=2.0,
    kp11=3.0, kp12=5.0, kp21=7.0, kp22=11.0,
    kt11=13.0, kt12=17.0, kt21=19.0, kt22=23.0,
    ktH1=29.0, ktH2=31.0,
    kte1=37.0, kte2=41.0,
)
F1, F2 = 0.8, 0.2
PHI1, PHI2 = 0.75, 0.25


class TestPseudoConstants(unittest.TestCase):
    def test_initiation(self):
        # 1*0.8 + 2*0.2
        self.assertAlmostEqual(pseudo_initiation(K, F1, F2), 1.2)

    def test_propagation(self):
        # 3*0.8*0.75 + 7*0.8*0.25 + 11*0.2*0.25 + 5*0.75*0.2 = 1.8 + 1.4 + 0.55 + 0.75
        self.assertAlmostEqual(pseudo_propagation(K, F1, F2, PHI1, PHI2), 4.5)

    def test_monomer_transfer(self):
        # 13*0.6 + 19*0.2 + 23*0.05 + 17*0.15 = 7.8 + 3.8 + 1.15 + 2.55
        self.assertAlmostEqual(pseudo_monomer_transfer(K, F1, F2, PHI1, PHI2), 15.3)

    def test_hydrogen_transfer(self):
        # 29*0.75 + 31*0.25
        self.assertAlmostEqual(pseudo_hydrogen_transfer(K, PHI1, PHI2), 29.5)

    def test_termination(self):
        # 37*0.75 + 41*0.25
        self.assertAlmostEqual(pseudo_termination(K, PHI1, PHI2), 38.0)

    def test_bundle(self):
        pseudo = pseudo_constants(K, F1, F2, PHI1, PHI2)
        self.assertIsInstance(pseudo, PseudoConstants)
        self.assertAlmostEqual(pseudo.initiation, 1.2)
        self.assertAlmostEqual(pseudo.propagation, 4.5)
        self.assertAlmostEqual(pseudo.monomer_transfer, 15.3)
        self.assertAlmostEqual(pseudo.hydrogen_transfer, 29.5)
        self.assertAlmostEqual(pseudo.termination, 38.0)

    def test_release_frequency(self):
        pseudo = pseudo_constants(K, F1, F2, PHI1, PHI2)
        # 0.5*15.3 + 29.5*0.1 + 38
        self.assertAlmostEqual(pseudo.release_frequency(0.5, 0.1), 48.6)

    def test_pure_homopolymer_limit(self):
        # Only monomer 1 and only chains ending in 1: pseudo constants collapse to the 11 constants.
        pseudo = pseudo_constants(K, 1.0, 0.0, 1.0, 0.0)
        self.assertEqual(pseudo.initiation, K.ki1)
        self.assertEqual(pseudo.propagation, K.kp11)
        self.assertEqual(pseudo.monomer_transfer, K.kt11)
        self.assertEqual(pseudo.hydrogen_transfer, K.ktH1)
        self.assertEqual(pseudo.termination, K.kte1)


if __name__ == '__main__':
    unittest.main()
