import importlib

from cashier.models.activation import ActivationRecord
from cashier.models.message import Message
from cashier.models.product import Product


def import_all_models() -> None:
    for module_name in (
        "cashier.models.activation",
        "cashier.models.message",
        "cashier.models.product",
    ):
        importlib.import_module(module_name)


__all__ = [
    "ActivationRecord",
    "Message",
    "Product",
    "import_all_models",
]
