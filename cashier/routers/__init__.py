from cashier.routers.activation import router as activation_router
from cashier.routers.catalog_types import router as catalog_types_router
from cashier.routers.health import router as health_router
from cashier.routers.messages import router as messages_router
from cashier.routers.products import router as products_router

__all__ = [
    "activation_router",
    "catalog_types_router",
    "health_router",
    "messages_router",
    "products_router",
]
