from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from inventory_api.config import get_settings
from inventory_api.database.session import get_db
from inventory_api.services.image_service import ImageStore
from inventory_api.services.product_service import ProductService
from inventory_api.services.settings_service import SettingsService


@lru_cache
def get_image_store() -> ImageStore:
    settings = get_settings()
    return ImageStore(settings.UPLOAD_DIR, extension=settings.IMAGE_EXTENSION)


def get_product_service(
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
) -> ProductService:
    return ProductService(
        db,
        image_store=image_store,
        encode_on_update=get_settings().ENCODE_PRICES_ON_UPDATE,
    )


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(db)


__all__ = ["get_db", "get_image_store", "get_product_service", "get_settings_service"]
