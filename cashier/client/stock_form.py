from dataclasses import dataclass
from typing import Callable, Optional

from cashier.client.units import map_unit_type
from cashier.core.constants import StockOperation


@dataclass(frozen=True)
class EditStockData:
    product_id: str
    operation_type: StockOperation
    quantity: int
    new_total: int

    def to_payload(self) -> dict:
        return {
            "productId": self.product_id,
            "operationType": self.operation_type.value,
            "quantity": self.quantity,
            "newTotal": self.new_total,
        }


class StockAdjustmentForm:
    """Derived state for the edit-stock dialog. Performs no I/O itself.

    ``submit`` hands an ``EditStockData`` to ``on_submit`` and clears the
    quantity. The operation type is kept for the next adjustment.
    """

    def __init__(
        self,
        product=None,
        *,
        operation_type=StockOperation.REPLACE,
        on_submit: Optional[Callable[[EditStockData], None]] = None,
    ):
        self.product = product
        self.operation_type = StockOperation(operation_type)
        self.quantity = 0
        self._on_submit = on_submit

    @property
    def new_total(self) -> int:
        if self.product is None or self.quantity <= 0:
            return 0
        if self.operation_type is StockOperation.REPLACE:
            return self.quantity
        return (self.product.stock or 0) + self.quantity

    @property
    def is_valid(self) -> bool:
        return self.quantity > 0 and self.product is not None

    @property
    def unit_label(self) -> str:
        unit_type = getattr(self.product, "unit_type", None)
        stock = getattr(self.product, "stock", 0) or 0
        return map_unit_type(unit_type, stock)

    @property
    def new_total_unit_label(self) -> str:
        return map_unit_type(getattr(self.product, "unit_type", None), self.new_total)

    def set_operation_type(self, operation_type) -> None:
        self.operation_type = StockOperation(operation_type)

    def set_quantity(self, value) -> None:
        try:
            quantity = int(value)
        except (TypeError, ValueError):
            quantity = 0
        self.quantity = max(0, quantity)

    def get_edit_stock_data(self) -> Optional[EditStockData]:
        if not self.is_valid:
            return None
        return EditStockData(
            product_id=self.product.id,
            operation_type=self.operation_type,
            quantity=self.quantity,
            new_total=self.new_total,
        )

    def submit(self) -> Optional[EditStockData]:
        data = self.get_edit_stock_data()
        if data is None:
            return None
        if self._on_submit is not None:
            self._on_submit(data)
        self.quantity = 0
        return data

    def reset(self) -> None:
        self.operation_type = StockOperation.REPLACE
        self.quantity = 0
