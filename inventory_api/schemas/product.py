from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductRead(CamelModel):
    id: str
    name: str
    purchase_price: str
    retail_price: str
    wholesale_price: str
    image: str
    barcode: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProductUpdate(BaseModel):
    """Update payload; fields stay optional so blanks surface as a 400."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    productName: Optional[str] = None
    purchasePrice: Optional[str] = None
    retailPrice: Optional[str] = None
    wholesalePrice: Optional[str] = None


class ProductCreated(BaseModel):
    message: str
    product: ProductRead


class ProductUpdated(CamelModel):
    message: str
    updated_product: ProductRead


class MessageResponse(BaseModel):
    message: str


ProductList = List[ProductRead]
