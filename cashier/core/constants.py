from enum import Enum


PRODUCTS_TABLE = "products"
ACTIVATION_TABLE = "activation"
MESSAGES_TABLE = "messages"
BARCODE_INDEX = "idx_products_barcode"


class ProductTypes:
    ARTICULOS_DE_ASEO = "Articulos de aseo"
    ALIMENTOS = "Alimentos"
    BEBIDAS = "Bebidas"

    ALL = (ARTICULOS_DE_ASEO, ALIMENTOS, BEBIDAS)


class UnitTypes:
    UNIT = "Unidad"
    BOX = "Caja"
    GRAMS = "Gramos"

    ALL = (UNIT, BOX, GRAMS)


class StockOperation(str, Enum):
    """Stock adjustment mode. "update" is the wire name of replace mode."""

    REPLACE = "update"
    ADD = "add"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "replace":
                return cls.REPLACE
            for member in cls:
                if member.value == normalized:
                    return member
        return None


PUBLIC_PAGE_PATHS = frozenset({"/health", "/docs", "/openapi.json", "/redoc"})
