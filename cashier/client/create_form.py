import math
from dataclasses import dataclass, fields, replace

from cashier.schemas.product import ProductCreate


@dataclass
class CreateFormData:
    barcode: str = ""
    name: str = ""
    description: str = ""
    price: int = 0
    stock: int = 0
    product_type: str = ""
    unit_type: str = ""
    is_active: bool = True
    purchase_price: int = 0
    profit_percentage: float = 0


INITIAL_CREATE_FORM_DATA = CreateFormData()
_FORM_FIELDS = frozenset(field.name for field in fields(CreateFormData))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ProductCreateForm:
    def __init__(self):
        self.data = replace(INITIAL_CREATE_FORM_DATA)

    def update_field(self, field: str, value) -> None:
        if field not in _FORM_FIELDS:
            raise KeyError(field)
        setattr(self.data, field, value)

    def reset(self) -> None:
        self.data = replace(INITIAL_CREATE_FORM_DATA)

    def calculate_sale_price(self) -> int:
        """price = purchase price plus profit percentage, rounded half up."""
        purchase = self.data.purchase_price
        percentage = self.data.profit_percentage
        if purchase and percentage:
            profit = (purchase * percentage) / 100
            self.data.price = round_half_up(purchase + profit)
        else:
            self.data.price = 0
        return self.data.price

    def to_product(self) -> ProductCreate:
        return ProductCreate(
            barcode=self.data.barcode.strip(),
            name=self.data.name.strip(),
            description=self.data.description.strip(),
            price=self.data.price,
            stock=self.data.stock,
            product_type=self.data.product_type,
            unit_type=self.data.unit_type,
            is_active=self.data.is_active,
        )
