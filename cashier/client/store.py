import logging
import threading
from typing import Optional

from cashier.client.api import ApiError, CashierApiClient
from cashier.schemas.product import ProductBase, ProductData

logger = logging.getLogger(__name__)


class ProductsStore:
    """Client-side product cache loaded from the API.

    Each ``load_products`` call takes a new request number; a response is
    applied only if no newer load started meanwhile. After every mutation
    the list is reloaded from the server.
    """

    def __init__(self, api: Optional[CashierApiClient] = None):
        self._api = api or CashierApiClient()
        self._lock = threading.Lock()
        self._request_seq = 0
        self.products: list[ProductData] = []
        self.loading = False
        self.error = ""

    # Getters

    @property
    def active_products(self) -> list[ProductData]:
        return [product for product in self.products if product.is_active]

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def active_product_count(self) -> int:
        return len(self.active_products)

    def find_by_id(self, product_id: str) -> Optional[ProductData]:
        return next((p for p in self.products if p.id == product_id), None)

    def find_by_barcode(self, barcode: str) -> Optional[ProductData]:
        return next((p for p in self.products if p.barcode == barcode), None)

    # Actions

    def load_products(self) -> bool:
        with self._lock:
            self._request_seq += 1
            seq = self._request_seq
            self.loading = True
            self.error = ""

        try:
            products = self._api.list_products()
        except ApiError as exc:
            with self._lock:
                if seq == self._request_seq:
                    self.error = exc.message or "Error loading products"
                    self.loading = False
            logger.error("Error loading products: %s", exc.message)
            return False

        with self._lock:
            if seq != self._request_seq:
                logger.debug("Discarding stale product list (request %s)", seq)
                return False
            self.products = products
            self.loading = False
        return True

    def fetch_by_id(self, product_id: str) -> Optional[ProductData]:
        try:
            return self._api.get_product(product_id)
        except ApiError as exc:
            logger.error("Error getting product: %s", exc.message)
            return None

    def fetch_by_barcode(self, barcode: str) -> Optional[ProductData]:
        try:
            return self._api.get_product_by_barcode(barcode)
        except ApiError as exc:
            logger.error("Error getting product by barcode: %s", exc.message)
            return None

    def create_product(self, product: ProductBase) -> bool:
        return self._mutate("creating product", self._api.create_product, product)

    def update_product(self, product: ProductData) -> bool:
        return self._mutate("updating product", self._api.update_product, product)

    def delete_product(self, product_id: str) -> bool:
        return self._mutate("deleting product", self._api.delete_product, product_id)

    def adjust_stock(self, product_id: str, operation_type, quantity: int) -> bool:
        return self._mutate(
            "updating stock", self._api.update_stock, product_id, operation_type, quantity
        )

    def _mutate(self, action: str, call, *args) -> bool:
        self.error = ""
        try:
            call(*args)
        except ApiError as exc:
            self.error = exc.message or "Error {}".format(action)
            logger.error("Error %s: %s", action, exc.message)
            return False
        return self.load_products()


__all__ = ["ProductsStore"]
