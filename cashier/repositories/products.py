import logging
from typing import Iterable, Optional

from sqlalchemy import func, select, update

from cashier.core.dates import ensure_utc
from cashier.database.engine import ensure_barcode_index
from cashier.models.product import Product
from cashier.repositories.base import SqlRepository
from cashier.schemas.product import ProductData

logger = logging.getLogger(__name__)

# Fields copied from the caller on update. id and creation_date are never written.
_MUTABLE_FIELDS = (
    "barcode",
    "name",
    "description",
    "price",
    "stock",
    "product_type",
    "unit_type",
    "is_active",
)


def _to_data(row: Product) -> ProductData:
    data = ProductData.model_validate(row)
    data.creation_date = ensure_utc(data.creation_date)
    data.last_update_date = ensure_utc(data.last_update_date)
    return data


def _to_row(product: ProductData) -> Product:
    row = Product(id=product.id)
    for field in _MUTABLE_FIELDS:
        setattr(row, field, getattr(product, field))
    row.creation_date = product.creation_date
    row.last_update_date = product.last_update_date
    return row


class ProductRepository(SqlRepository):
    """Persistence boundary for products. No business validation here."""

    resource = "products"

    def list_active(self) -> list[ProductData]:
        # Ordinal ordering (SQLite BINARY collation): "Zeta" sorts before "apple".
        with self._session() as db:
            rows = (
                db.execute(
                    select(Product)
                    .where(Product.is_active.is_(True))
                    .order_by(Product.name, Product.id)
                )
                .scalars()
                .all()
            )
            return [_to_data(row) for row in rows]

    def get_by_id(self, product_id: str) -> Optional[ProductData]:
        with self._session() as db:
            row = db.get(Product, product_id)
            return _to_data(row) if row is not None else None

    def get_by_barcode(self, barcode: str) -> Optional[ProductData]:
        with self._session() as db:
            ensure_barcode_index(db.connection())
            row = (
                db.execute(
                    select(Product)
                    .where(Product.barcode == barcode, Product.is_active.is_(True))
                    .order_by(Product.creation_date)
                )
                .scalars()
                .first()
            )
            return _to_data(row) if row is not None else None

    def insert(self, product: ProductData) -> ProductData:
        with self._session() as db:
            row = _to_row(product)
            db.add(row)
            db.commit()
            return _to_data(row)

    def insert_many(self, products: Iterable[ProductData]) -> int:
        with self._session() as db:
            rows = [_to_row(product) for product in products]
            db.add_all(rows)
            db.commit()
            return len(rows)

    def update(self, product: ProductData) -> Optional[ProductData]:
        """Write all mutable fields; returns None when the id is unknown.

        The stored creation_date always wins over whatever the caller holds.
        """
        with self._session() as db:
            row = db.get(Product, product.id)
            if row is None:
                return None
            for field in _MUTABLE_FIELDS:
                setattr(row, field, getattr(product, field))
            row.last_update_date = product.last_update_date or self._clock()
            db.commit()
            return _to_data(row)

    def update_stock(self, product_id: str, new_stock: int) -> bool:
        with self._session() as db:
            result = db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(stock=new_stock, last_update_date=self._clock())
            )
            db.commit()
            return result.rowcount > 0

    def soft_delete(self, product_id: str) -> bool:
        # Single UPDATE patching two fields, so a concurrent update of other
        # columns is not clobbered.
        with self._session() as db:
            result = db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(is_active=False, last_update_date=self._clock())
            )
            db.commit()
            return result.rowcount > 0

    def count(self) -> int:
        with self._session() as db:
            return db.execute(select(func.count(Product.id))).scalar_one()


__all__ = ["ProductRepository"]
