import logging
import uuid
from typing import Optional

from cashier.core.constants import StockOperation
from cashier.core.dates import utc_now
from cashier.core.errors import NotFoundError, ValidationError
from cashier.repositories.products import ProductRepository
from cashier.schemas.product import ProductData

logger = logging.getLogger(__name__)


def coerce_operation(operation) -> StockOperation:
    if isinstance(operation, StockOperation):
        return operation
    try:
        return StockOperation(operation)
    except ValueError as exc:
        raise ValidationError("Invalid operation type") from exc


def compute_new_stock(current_stock: int, operation: StockOperation, quantity: int) -> int:
    if operation is StockOperation.REPLACE:
        return quantity
    return (current_stock or 0) + quantity


def _validate_product(product: Optional[ProductData]) -> None:
    if product is None:
        raise ValidationError("Product is required")
    if not (product.name or "").strip():
        raise ValidationError("Product name cannot be empty")
    if product.price is None or product.price < 0:
        raise ValidationError("Product price cannot be negative")
    if product.stock is None or product.stock < 0:
        raise ValidationError("Stock cannot be negative")


class ProductService:
    """Business rules for products.

    Every write is validated here before the repository sees it, so the
    repository never has to defend against invalid data. The server is the
    source of truth for derived values: stock adjustments are recomputed
    from the stored stock and creation timestamps are never taken from the
    caller on update.
    """

    def __init__(self, repository: Optional[ProductRepository] = None, *, clock=utc_now):
        self._repository = repository or ProductRepository()
        self._clock = clock

    def get_active(self) -> list[ProductData]:
        return self._repository.list_active()

    def get_by_id(self, product_id: str) -> Optional[ProductData]:
        return self._repository.get_by_id(product_id)

    def get_by_barcode(self, barcode: Optional[str]) -> Optional[ProductData]:
        if barcode is None or not barcode.strip():
            raise ValidationError("Barcode cannot be empty")
        return self._repository.get_by_barcode(barcode)

    def create(self, product: Optional[ProductData]) -> ProductData:
        """Assign identity and timestamps, then insert.

        The caller's object is updated in place with the new id.
        """
        _validate_product(product)
        now = self._clock()
        product.id = str(uuid.uuid4())
        product.creation_date = now
        product.last_update_date = now

        saved = self._repository.insert(product)
        logger.info("Product created: %s (%s)", saved.id, saved.name)
        return saved

    def update(self, product: Optional[ProductData]) -> ProductData:
        _validate_product(product)
        if not product.id:
            raise ValidationError("Product id is required")

        product.last_update_date = self._clock()
        stored = self._repository.update(product)
        if stored is None:
            raise NotFoundError("Product not found")

        product.creation_date = stored.creation_date
        logger.info("Product updated: %s", stored.id)
        return stored

    def adjust_stock(self, product_id: str, operation, quantity: Optional[int]) -> int:
        """Apply a replace/add adjustment and return the stored stock."""
        operation = coerce_operation(operation)
        if quantity is None:
            raise ValidationError("Quantity is required")
        if operation is StockOperation.REPLACE and quantity < 0:
            raise ValidationError("Stock cannot be negative")

        current = self._repository.get_by_id(product_id)
        if current is None:
            raise NotFoundError("Product not found")

        new_stock = compute_new_stock(current.stock, operation, quantity)
        if new_stock < 0:
            raise ValidationError("Stock cannot be negative")

        self._repository.update_stock(product_id, new_stock)
        logger.info(
            "Stock for %s: %s %s -> %s",
            product_id,
            operation.value,
            quantity,
            new_stock,
        )
        return new_stock

    def soft_delete(self, product_id: str) -> None:
        if self._repository.soft_delete(product_id):
            logger.info("Product deactivated: %s", product_id)
        else:
            logger.debug("Delete ignored, no product with id %s", product_id)


__all__ = ["ProductService", "coerce_operation", "compute_new_stock"]
