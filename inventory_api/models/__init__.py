import importlib

from inventory_api.models.product import Product
from inventory_api.models.setting import Setting


def import_all_models() -> None:
    for module_name in (
        "inventory_api.models.product",
        "inventory_api.models.setting",
    ):
        importlib.import_module(module_name)


__all__ = ["Product", "Setting", "import_all_models"]
