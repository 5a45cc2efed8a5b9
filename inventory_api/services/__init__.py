from inventory_api.services.exceptions import (
    InventoryServiceError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from inventory_api.services.image_service import ImageStore
from inventory_api.services.product_service import ProductService, resolve_image_url
from inventory_api.services.settings_service import SettingsService

__all__ = [
    "ImageStore",
    "InventoryServiceError",
    "NotFoundError",
    "ProductService",
    "SettingsService",
    "StoreError",
    "ValidationError",
    "resolve_image_url",
]
