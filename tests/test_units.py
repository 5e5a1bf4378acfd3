import unittest

from zieglersim.errors import UnitConversionError
from zieglersim.units import UnitType, convert


class TestConvert(unittest.TestCase):
    def test_identity(self):
        self.assertEqual(convert(12.5, "bar", "bar", UnitType.PRESSURE), 12.5)

    def test_pressure(self):
        self.assertAlmostEqual(convert(10.0, "bar", "psi", UnitType.PRESSURE), 145.0377)
        self.assertAlmostEqual(convert(1.0, "atm", "bar", UnitType.PRESSURE), 1.01325)

    def test_mass(self):
        self.assertAlmostEqual(convert(2500.0, "g", "kg", UnitType.MASS), 2.5)
        self.assertAlmostEqual(convert(1.0, "kg", "lbm", "mass"), 2.20462)

    def test_temperature(self):
        self.assertAlmostEqual(convert(373.15, "K", "C", UnitType.TEMPERATURE), 100.0)
        self.assertAlmostEqual(convert(212.0, "F", "C", UnitType.TEMPERATURE), 100.0)
        self.assertAlmostEqual(convert(90.0, "C", "K", UnitType.TEMPERATURE), 363.15)
        self.assertAlmostEqual(convert(0.0, "C", "F", UnitType.TEMPERATURE), 32.0)

    def test_unknown_units(self):
        with self.assertRaises(UnitConversionError):
            convert(1.0, "bar", "pascal", UnitType.PRESSURE)
        with self.assertRaises(UnitConversionError):
            convert(1.0, "R", "K", UnitType.TEMPERATURE)
        with self.assertRaises(UnitConversionError):
            convert(1.0, "K", "R", UnitType.TEMPERATURE)

    def test_unknown_unit_type(self):
        with self.assertRaises(UnitConversionError):
            convert(1.0, "m", "ft", "length")


if __name__ == '__main__':
    unittest.main()
