from cashier.services.activation_service import ActivationService
from cashier.services.catalog_types import CatalogEnumeration
from cashier.services.message_service import MessageService
from cashier.services.product_service import ProductService
from cashier.services.seed_service import SeedDataService

__all__ = [
    "ActivationService",
    "CatalogEnumeration",
    "MessageService",
    "ProductService",
    "SeedDataService",
]
