from fastapi import APIRouter, Depends, HTTPException

from inventory_api.dependencies import get_settings_service
from inventory_api.schemas.product import MessageResponse
from inventory_api.schemas.setting import SettingsPayload
from inventory_api.services.exceptions import InventoryServiceError
from inventory_api.services.settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.post("", response_model=MessageResponse)
def save_settings(
    payload: SettingsPayload,
    service: SettingsService = Depends(get_settings_service),
):
    try:
        service.save(payload.codes)
    except InventoryServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return MessageResponse(message="Settings saved successfully")


@router.get("")
def read_settings(service: SettingsService = Depends(get_settings_service)):
    try:
        return service.get()
    except InventoryServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.delete("/price-codes", response_model=MessageResponse)
def delete_price_codes(service: SettingsService = Depends(get_settings_service)):
    try:
        service.delete()
    except InventoryServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return MessageResponse(message="All price codes deleted successfully")


__all__ = ["router"]
