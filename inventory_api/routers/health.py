from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from inventory_api.config import get_settings
from inventory_api.database.session import database_reachable
from inventory_api.dependencies import get_db, get_image_store
from inventory_api.services.image_service import ImageStore

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(
    db: Session = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
):
    settings = get_settings()
    database_ok = database_reachable(db)
    uploads_ok = image_store.upload_dir.is_dir()
    healthy = database_ok and uploads_ok
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "ok" if healthy else "degraded",
            "app": settings.APP_NAME,
            "database": "ok" if database_ok else "unreachable",
            "uploads": {
                "path": str(image_store.upload_dir),
                "ready": uploads_ok,
            },
        },
    )
