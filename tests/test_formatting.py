import unittest

from cashier.client.currency import format_clp, format_number
from cashier.client.units import map_unit_type, spanish_unit_types


class UnitTypeMapperTest(unittest.TestCase):
    def test_english_unit_singular_and_plural(self):
        self.assertEqual(map_unit_type("Unit", 1), "Unidad")
        self.assertEqual(map_unit_type("Unit", 5), "Unidades")
        self.assertEqual(map_unit_type("Unit", 0), "Unidades")

    def test_spanish_values_map_to_themselves(self):
        self.assertEqual(map_unit_type("Caja", 1), "Caja")
        self.assertEqual(map_unit_type("Caja", 3), "Cajas")
        self.assertEqual(map_unit_type("Gramos", 250), "Gramos")
        self.assertEqual(map_unit_type("Gramos", 1), "Gramo")

    def test_missing_unit_defaults_to_unidad(self):
        self.assertEqual(map_unit_type(None, 1), "Unidad")
        self.assertEqual(map_unit_type("", 2), "Unidades")

    def test_unknown_unit_passes_through(self):
        self.assertEqual(map_unit_type("Docena", 2), "Docena")

    def test_spanish_unit_types(self):
        self.assertIn("Unidades", spanish_unit_types())
        self.assertIn("Cajas", spanish_unit_types())


class CurrencyFormatterTest(unittest.TestCase):
    def test_format_clp(self):
        self.assertEqual(format_clp(1200), "$1.200")
        self.assertEqual(format_clp(0), "$0")
        self.assertEqual(format_clp(1234567), "$1.234.567")
        self.assertEqual(format_clp(-1200), "-$1.200")
        self.assertEqual(format_clp(999.5), "$1.000")

    def test_format_clp_non_numeric(self):
        for value in (None, "1200", True, float("nan")):
            self.assertEqual(format_clp(value), "$0")

    def test_format_number(self):
        self.assertEqual(format_number(1200), "1.200")
        self.assertEqual(format_number(1234.5), "1.234,5")
        self.assertEqual(format_number(0.1234), "0,123")
        self.assertEqual(format_number("x"), "0")


if __name__ == "__main__":
    unittest.main()
