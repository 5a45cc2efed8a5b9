from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile

from inventory_api.dependencies import get_product_service
from inventory_api.schemas.product import (
    MessageResponse,
    ProductCreated,
    ProductRead,
    ProductUpdate,
    ProductUpdated,
)
from inventory_api.services.exceptions import InventoryServiceError
from inventory_api.services.product_service import ProductService, resolve_image_url

router = APIRouter(prefix="/api/products", tags=["Products"])


def _raise_http(exc: InventoryServiceError):
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("", response_model=ProductCreated, status_code=201)
def create_product(
    productName: Optional[str] = Form(None),
    purchasePrice: Optional[str] = Form(None),
    retailPrice: Optional[str] = Form(None),
    wholesalePrice: Optional[str] = Form(None),
    productImage: Optional[UploadFile] = File(None),
    service: ProductService = Depends(get_product_service),
):
    image_data = productImage.file.read() if productImage is not None else None
    try:
        product = service.create_with_upload(
            productName,
            purchasePrice,
            retailPrice,
            wholesalePrice,
            image_data,
        )
    except InventoryServiceError as exc:
        _raise_http(exc)
    return ProductCreated(
        message="Product saved successfully",
        product=ProductRead.model_validate(product),
    )


@router.put("/{product_id}", response_model=ProductUpdated)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.update(
            product_id,
            payload.productName,
            payload.purchasePrice,
            payload.retailPrice,
            payload.wholesalePrice,
        )
    except InventoryServiceError as exc:
        _raise_http(exc)
    return ProductUpdated(
        message="Product updated successfully",
        updated_product=ProductRead.model_validate(product),
    )


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    try:
        service.delete(product_id)
    except InventoryServiceError as exc:
        _raise_http(exc)
    return MessageResponse(message="Product deleted successfully")


@router.get("", response_model=List[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)):
    try:
        products = service.list_all()
    except InventoryServiceError as exc:
        _raise_http(exc)
    return [ProductRead.model_validate(product) for product in products]


# Registered before /{product_id} so "search" is not read as an id.
@router.get("/search", response_model=List[ProductRead])
def search_products(
    query: Optional[str] = Query(None, description="Substring of the name or purchase price"),
    service: ProductService = Depends(get_product_service),
):
    try:
        products = service.search(query)
    except InventoryServiceError as exc:
        _raise_http(exc)
    return [ProductRead.model_validate(product) for product in products]


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.get(product_id)
    except InventoryServiceError as exc:
        _raise_http(exc)
    item = ProductRead.model_validate(product)
    return item.model_copy(
        update={"image": resolve_image_url(product.image, str(request.base_url))}
    )


__all__ = ["router"]
