import json
import logging
from typing import Optional
from urllib import error, request
from urllib.parse import quote, urlparse

from cashier.config import get_settings
from cashier.core.constants import StockOperation
from cashier.schemas.activation import ActivationStatusResponse
from cashier.schemas.product import ProductBase, ProductData

logger = logging.getLogger(__name__)

_ALLOWED_HTTP_SCHEMES = {"http", "https"}


class ApiError(RuntimeError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


def _validate_base_url(base_url: str) -> str:
    parsed = urlparse(base_url)
    if parsed.scheme.lower() not in _ALLOWED_HTTP_SCHEMES or not parsed.netloc:
        raise ValueError("API_BASE_URL must be an absolute HTTP(S) URL")
    return base_url.rstrip("/")


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _error_message(exc: error.HTTPError) -> str:
    try:
        body = exc.read()
    except (OSError, ValueError):
        body = b""
    if body:
        try:
            payload = json.loads(body.decode("utf-8", errors="replace"))
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            return str(payload.get("error") or payload.get("message") or "HTTP {}".format(exc.code))
    return "HTTP {}".format(exc.code)


class CashierApiClient:
    """JSON client for the back-office HTTP API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        settings = get_settings()
        self._base_url = _validate_base_url(base_url or settings.API_BASE_URL)
        self._timeout = timeout or settings.API_TIMEOUT_SECONDS

    def _request(self, method: str, path: str, payload=None):
        data = None
        headers = {"Accept": "application/json"}
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        req = request.Request(self._base_url + path, data=data, method=method, headers=headers)
        try:
            with request.urlopen(req, timeout=self._timeout) as response:  # nosec B310
                body = response.read()
        except error.HTTPError as exc:
            raise ApiError(_error_message(exc), status=exc.code) from exc
        except error.URLError as exc:
            raise ApiError("API unreachable: {}".format(exc.reason)) from exc

        if not body:
            return None
        return json.loads(body.decode("utf-8"))

    def _get_optional(self, path: str):
        try:
            return self._request("GET", path)
        except ApiError as exc:
            if exc.status == 404:
                return None
            raise

    # Products

    def list_products(self) -> list[ProductData]:
        return [ProductData.model_validate(item) for item in self._request("GET", "/api/products") or []]

    def get_product(self, product_id: str) -> Optional[ProductData]:
        payload = self._get_optional("/api/products/{}".format(_segment(product_id)))
        return ProductData.model_validate(payload) if payload else None

    def get_product_by_barcode(self, barcode: str) -> Optional[ProductData]:
        payload = self._get_optional("/api/products/barcode/{}".format(_segment(barcode)))
        return ProductData.model_validate(payload) if payload else None

    def create_product(self, product: ProductBase) -> Optional[str]:
        body = product.model_dump(mode="json", by_alias=True, exclude={"id", "creation_date", "last_update_date"})
        result = self._request("POST", "/api/products", body) or {}
        return result.get("id")

    def update_product(self, product: ProductData) -> None:
        body = product.model_dump(mode="json", by_alias=True, exclude={"creation_date", "last_update_date"})
        self._request("PUT", "/api/products/{}".format(_segment(product.id)), body)

    def update_stock(self, product_id: str, operation_type, quantity: int) -> Optional[int]:
        body = {"operationType": StockOperation(operation_type).value, "quantity": quantity}
        result = self._request("PUT", "/api/products/{}/stock".format(_segment(product_id)), body) or {}
        return result.get("newStock")

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", "/api/products/{}".format(_segment(product_id)))

    def list_product_types(self) -> list[str]:
        return list(self._request("GET", "/api/producttypes") or [])

    def list_unit_types(self) -> list[str]:
        return list(self._request("GET", "/api/unittypes") or [])

    # Activation

    def activation_status(self) -> ActivationStatusResponse:
        return ActivationStatusResponse.model_validate(self._request("GET", "/api/activation/status"))

    def activate(self, activation_key: str, computer_fingerprint: str = "") -> dict:
        body = {"activationKey": activation_key, "computerFingerprint": computer_fingerprint}
        return self._request("POST", "/api/activation/activate", body) or {}

    def deactivate(self) -> None:
        self._request("DELETE", "/api/activation/deactivate")


__all__ = ["ApiError", "CashierApiClient"]
