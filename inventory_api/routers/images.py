from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse

from inventory_api.dependencies import get_image_store
from inventory_api.schemas.image import ImageUploaded
from inventory_api.services.exceptions import InventoryServiceError
from inventory_api.services.image_service import ImageStore

router = APIRouter(prefix="/api/images", tags=["Images"])


@router.post("", response_model=ImageUploaded, status_code=201)
def upload_image(
    image: Optional[UploadFile] = File(None),
    store: ImageStore = Depends(get_image_store),
):
    if image is None:
        raise HTTPException(status_code=400, detail="Image file is required")
    try:
        reference = store.save(image.file.read(), slot="image")
    except InventoryServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return ImageUploaded(imagePath=reference)


@router.get("/{image_id}")
def serve_image(image_id: str, store: ImageStore = Depends(get_image_store)):
    try:
        path = store.resolve(image_id)
    except InventoryServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return FileResponse(path)


__all__ = ["router"]
