import unittest
from datetime import timedelta

from cashier.core.constants import StockOperation
from cashier.core.errors import NotFoundError, ValidationError
from cashier.repositories.products import ProductRepository
from cashier.schemas.product import ProductData
from cashier.services.product_service import ProductService, coerce_operation, compute_new_stock
from helpers import SteppingClock, make_session_factory


def _product(**overrides):
    values = dict(barcode="780001", name="Arroz", description="Grado 1", price=1200, stock=10)
    values.update(overrides)
    return ProductData(**values)


class ProductServiceTest(unittest.TestCase):
    def setUp(self):
        self.clock = SteppingClock()
        self.repository = ProductRepository(make_session_factory(), clock=self.clock)
        self.service = ProductService(self.repository, clock=self.clock)

    def test_create_assigns_id_and_equal_timestamps(self):
        product = _product(id="caller-id")
        saved = self.service.create(product)

        self.assertNotEqual(saved.id, "caller-id")
        self.assertEqual(product.id, saved.id)
        self.assertEqual(saved.creation_date, saved.last_update_date)
        self.assertEqual(self.service.get_by_id(saved.id).name, "Arroz")

    def test_create_rejects_invalid_products(self):
        cases = [
            (None, "Product is required"),
            (_product(name=""), "Product name cannot be empty"),
            (_product(name="   "), "Product name cannot be empty"),
            (_product(price=-1), "Product price cannot be negative"),
            (_product(stock=-5), "Stock cannot be negative"),
        ]
        for product, message in cases:
            with self.assertRaises(ValidationError) as ctx:
                self.service.create(product)
            self.assertEqual(ctx.exception.message, message)
        self.assertEqual(self.repository.count(), 0)

    def test_create_accepts_zero_price(self):
        saved = self.service.create(_product(name="Bolsa", price=0))

        self.assertTrue(saved.id)
        self.assertEqual(self.service.get_by_id(saved.id).price, 0)

    def test_update_preserves_creation_date(self):
        saved = self.service.create(_product())
        original_created = saved.creation_date

        edit = _product(id=saved.id, name="Arroz Premium", price=1500)
        edit.creation_date = original_created - timedelta(days=30)
        stored = self.service.update(edit)

        self.assertEqual(stored.creation_date, original_created)
        self.assertEqual(edit.creation_date, original_created)
        self.assertGreater(stored.last_update_date, original_created)
        self.assertEqual(stored.name, "Arroz Premium")
        self.assertEqual(stored.price, 1500)

    def test_update_unknown_id_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.update(_product(id="missing"))

    def test_update_requires_id(self):
        with self.assertRaises(ValidationError):
            self.service.update(_product())

    def test_adjust_stock_add_and_replace(self):
        saved = self.service.create(_product(stock=10))

        self.assertEqual(self.service.adjust_stock(saved.id, StockOperation.ADD, 5), 15)
        self.assertEqual(self.service.adjust_stock(saved.id, "update", 15), 15)
        self.assertEqual(self.service.adjust_stock(saved.id, "add", 0), 15)
        self.assertEqual(self.service.get_by_id(saved.id).stock, 15)

    def test_adjust_stock_only_touches_stock_and_last_update(self):
        saved = self.service.create(_product(stock=10))
        self.service.adjust_stock(saved.id, StockOperation.ADD, 2)

        stored = self.service.get_by_id(saved.id)
        self.assertEqual(stored.name, saved.name)
        self.assertEqual(stored.price, saved.price)
        self.assertEqual(stored.creation_date, saved.creation_date)
        self.assertGreater(stored.last_update_date, saved.last_update_date)

    def test_adjust_stock_rejects_negative_results(self):
        saved = self.service.create(_product(stock=3))

        with self.assertRaises(ValidationError):
            self.service.adjust_stock(saved.id, StockOperation.REPLACE, -1)
        with self.assertRaises(ValidationError):
            self.service.adjust_stock(saved.id, StockOperation.ADD, -4)
        self.assertEqual(self.service.get_by_id(saved.id).stock, 3)

    def test_adjust_stock_invalid_operation(self):
        saved = self.service.create(_product())
        with self.assertRaises(ValidationError) as ctx:
            self.service.adjust_stock(saved.id, "multiply", 2)
        self.assertEqual(ctx.exception.message, "Invalid operation type")

    def test_adjust_stock_unknown_product(self):
        with self.assertRaises(NotFoundError):
            self.service.adjust_stock("missing", StockOperation.ADD, 1)

    def test_soft_delete_hides_product_from_active_queries(self):
        saved = self.service.create(_product())
        self.service.soft_delete(saved.id)
        self.service.soft_delete(saved.id)

        self.assertEqual(self.service.get_active(), [])
        self.assertIsNone(self.service.get_by_barcode("780001"))
        stored = self.service.get_by_id(saved.id)
        self.assertFalse(stored.is_active)
        self.assertEqual(stored.name, "Arroz")

    def test_soft_delete_unknown_id_is_a_noop(self):
        self.service.soft_delete("missing")
        self.assertEqual(self.repository.count(), 0)

    def test_get_by_barcode_rejects_blank(self):
        for barcode in (None, "", "   "):
            with self.assertRaises(ValidationError):
                self.service.get_by_barcode(barcode)


class StockOperationTest(unittest.TestCase):
    def test_wire_names(self):
        self.assertIs(coerce_operation("update"), StockOperation.REPLACE)
        self.assertIs(coerce_operation(" Replace "), StockOperation.REPLACE)
        self.assertIs(coerce_operation("ADD"), StockOperation.ADD)

    def test_compute_new_stock(self):
        self.assertEqual(compute_new_stock(10, StockOperation.ADD, 5), 15)
        self.assertEqual(compute_new_stock(10, StockOperation.REPLACE, 15), 15)
        self.assertEqual(compute_new_stock(None, StockOperation.ADD, 4), 4)


if __name__ == "__main__":
    unittest.main()
