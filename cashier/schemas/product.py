from datetime import datetime
from typing import Optional

from pydantic import Field

from cashier.core.constants import ProductTypes, StockOperation, UnitTypes
from cashier.core.errors import ValidationError
from cashier.schemas.base import ApiResult, CamelModel


class ProductBase(CamelModel):
    barcode: str = Field(default="", alias="barCode")
    name: str = ""
    description: str = ""
    price: int = 0
    stock: int = 0
    product_type: str = ProductTypes.ALIMENTOS
    unit_type: str = UnitTypes.UNIT
    is_active: bool = True


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    id: Optional[str] = None


class ProductData(ProductBase):
    id: Optional[str] = None
    creation_date: Optional[datetime] = None
    last_update_date: Optional[datetime] = None


class ProductSaved(ApiResult):
    id: Optional[str] = None


class StockUpdateRequest(CamelModel):
    """Body of ``PUT /api/products/{id}/stock``.

    Accepts ``{operationType, quantity}`` or the older ``{newStock}`` form.
    ``newTotal`` may be sent by the client but is never trusted.
    """

    operation_type: Optional[StockOperation] = None
    quantity: Optional[int] = None
    new_stock: Optional[int] = None
    new_total: Optional[int] = None

    def to_adjustment(self) -> tuple[StockOperation, int]:
        if self.operation_type is not None:
            if self.quantity is None:
                raise ValidationError("Quantity is required")
            return self.operation_type, self.quantity
        if self.new_stock is not None:
            return StockOperation.REPLACE, self.new_stock
        raise ValidationError("Provide operationType and quantity, or newStock")


class StockUpdated(ApiResult):
    new_stock: int


__all__ = [
    "ProductBase",
    "ProductCreate",
    "ProductData",
    "ProductSaved",
    "ProductUpdate",
    "StockUpdateRequest",
    "StockUpdated",
]
