import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inventory_api.config import Settings, get_settings
from inventory_api.core.constants import UPLOADS_MOUNT_PATH
from inventory_api.core.errors import install_error_handlers
from inventory_api.core.logging import setup_logging
from inventory_api.database import Base, engine
from inventory_api.dependencies import get_image_store
from inventory_api.models import import_all_models
from inventory_api.routers import (
    encoding_router,
    health_router,
    images_router,
    products_router,
    settings_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)

import_all_models()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    upload_dir = get_image_store().ensure_dir()
    logger.info("%s ready, uploads in %s", settings.APP_NAME, upload_dir.resolve())
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount(
    UPLOADS_MOUNT_PATH,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)
install_error_handlers(app)

app.include_router(health_router)
app.include_router(products_router)
app.include_router(settings_router)
app.include_router(images_router)
app.include_router(encoding_router)


__all__ = ["app"]
