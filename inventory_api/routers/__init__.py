from inventory_api.routers.encoding import router as encoding_router
from inventory_api.routers.health import router as health_router
from inventory_api.routers.images import router as images_router
from inventory_api.routers.products import router as products_router
from inventory_api.routers.settings import router as settings_router

__all__ = [
    "encoding_router",
    "health_router",
    "images_router",
    "products_router",
    "settings_router",
]
