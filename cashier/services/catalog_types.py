from typing import Iterable, Optional

from cashier.core.constants import ProductTypes, UnitTypes


class CatalogEnumeration:
    """Open set of product categories and unit types.

    Injected wherever the valid values are needed so the set can grow
    without touching the product table.
    """

    def __init__(
        self,
        categories: Optional[Iterable[str]] = None,
        unit_types: Optional[Iterable[str]] = None,
    ):
        self._categories = tuple(categories if categories is not None else ProductTypes.ALL)
        self._unit_types = tuple(unit_types if unit_types is not None else UnitTypes.ALL)

    def list_categories(self) -> list[str]:
        return list(self._categories)

    def list_unit_types(self) -> list[str]:
        return list(self._unit_types)
