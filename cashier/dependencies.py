from functools import lru_cache

from cashier.core.activation_gate import ActivationGate
from cashier.services.activation_service import ActivationService
from cashier.services.catalog_types import CatalogEnumeration
from cashier.services.message_service import MessageService
from cashier.services.product_service import ProductService


def get_product_service() -> ProductService:
    return ProductService()


def get_message_service() -> MessageService:
    return MessageService()


def get_activation_service() -> ActivationService:
    return ActivationService()


@lru_cache
def get_catalog_enumeration() -> CatalogEnumeration:
    return CatalogEnumeration()


@lru_cache
def get_activation_gate() -> ActivationGate:
    return ActivationGate(get_activation_service().is_license_valid)


__all__ = [
    "get_activation_gate",
    "get_activation_service",
    "get_catalog_enumeration",
    "get_message_service",
    "get_product_service",
]
