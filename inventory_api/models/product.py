import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String

from inventory_api.database.base import Base


def _new_product_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=_new_product_id)

    name = Column(String, nullable=False)
    purchase_price = Column(String, nullable=False)
    # Stored encoded on create.
    retail_price = Column(String, nullable=False)
    wholesale_price = Column(String, nullable=False)

    image = Column(String, nullable=False)
    barcode = Column(String, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_products_name", "name"),
        Index("idx_products_barcode", "barcode"),
    )


__all__ = ["Product"]
