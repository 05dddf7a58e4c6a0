import unittest

from cashier.client.stock_form import StockAdjustmentForm
from cashier.core.constants import StockOperation
from helpers import product


class StockAdjustmentFormTest(unittest.TestCase):
    def setUp(self):
        self.submitted = []
        self.form = StockAdjustmentForm(
            product(id="p-1", stock=10, unit_type="Unit"),
            on_submit=self.submitted.append,
        )

    def test_new_total_for_each_operation(self):
        self.form.set_operation_type(StockOperation.ADD)
        self.form.set_quantity(5)
        self.assertEqual(self.form.new_total, 15)

        self.form.set_operation_type(StockOperation.REPLACE)
        self.form.set_quantity(15)
        self.assertEqual(self.form.new_total, 15)

    def test_non_positive_quantity_gives_zero_total(self):
        for value in (0, -1, "abc"):
            self.form.set_quantity(value)
            self.assertEqual(self.form.quantity, 0)
            self.assertEqual(self.form.new_total, 0)
            self.assertFalse(self.form.is_valid)

    def test_no_product_is_invalid(self):
        form = StockAdjustmentForm()
        form.set_quantity(4)
        self.assertEqual(form.new_total, 0)
        self.assertFalse(form.is_valid)
        self.assertIsNone(form.submit())

    def test_unit_labels_follow_amounts(self):
        self.assertEqual(self.form.unit_label, "Unidades")
        self.form.set_operation_type(StockOperation.REPLACE)
        self.form.set_quantity(1)
        self.assertEqual(self.form.new_total_unit_label, "Unidad")

    def test_submit_emits_and_keeps_operation(self):
        self.form.set_operation_type(StockOperation.ADD)
        self.form.set_quantity(3)
        data = self.form.submit()

        self.assertEqual(self.submitted, [data])
        self.assertEqual(
            data.to_payload(),
            {"productId": "p-1", "operationType": "add", "quantity": 3, "newTotal": 13},
        )
        self.assertEqual(self.form.quantity, 0)
        self.assertEqual(self.form.operation_type, StockOperation.ADD)

    def test_invalid_submit_is_a_noop(self):
        self.assertIsNone(self.form.submit())
        self.assertEqual(self.submitted, [])

    def test_reset(self):
        self.form.set_operation_type("add")
        self.form.set_quantity(2)
        self.form.reset()
        self.assertEqual(self.form.operation_type, StockOperation.REPLACE)
        self.assertEqual(self.form.quantity, 0)


if __name__ == "__main__":
    unittest.main()
