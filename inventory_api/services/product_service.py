import logging
from typing import Optional
from urllib.parse import urljoin

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.barcode import generate_barcode
from inventory_api.core.clock import Clock, system_clock
from inventory_api.core.encoding import encode_price
from inventory_api.models.product import Product
from inventory_api.services.exceptions import NotFoundError, StoreError, ValidationError
from inventory_api.services.image_service import ImageStore

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def resolve_image_url(image: str, base_url: str) -> str:
    """Join a stored relative image path onto ``scheme://host/``."""
    base = str(base_url).rstrip("/") + "/"
    return urljoin(base, str(image).replace("\\", "/").lstrip("/"))


class ProductService:
    def __init__(
        self,
        db: Session,
        *,
        image_store: Optional[ImageStore] = None,
        clock: Clock = system_clock,
        encode_on_update: bool = False,
    ):
        self.db = db
        self.image_store = image_store
        self.clock = clock
        self.encode_on_update = encode_on_update

    def create(
        self,
        name: Optional[str],
        purchase_price: Optional[str],
        retail_price: Optional[str],
        wholesale_price: Optional[str],
        image: Optional[str],
    ) -> Product:
        if any(
            _is_blank(value)
            for value in (name, purchase_price, retail_price, wholesale_price, image)
        ):
            raise ValidationError("All fields and product image are required")

        product = Product(
            name=name,
            purchase_price=purchase_price,
            retail_price=encode_price(retail_price),
            wholesale_price=encode_price(wholesale_price),
            image=image,
            barcode=generate_barcode(self.clock()),
        )
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to save product %r", name)
            raise StoreError("Failed to save product") from exc

        logger.info(
            "Created product %s (%s)", product.id, product.barcode, extra={"product_id": product.id}
        )
        return product

    def create_with_upload(
        self,
        name: Optional[str],
        purchase_price: Optional[str],
        retail_price: Optional[str],
        wholesale_price: Optional[str],
        image_data: Optional[bytes],
    ) -> Product:
        """Store the uploaded image, then create the product pointing at it.

        Fields are checked before anything is written. A stored image whose
        product insert then fails is left in place.
        """
        if not image_data or any(
            _is_blank(value)
            for value in (name, purchase_price, retail_price, wholesale_price)
        ):
            raise ValidationError("All fields and product image are required")
        if self.image_store is None:
            raise StoreError("Failed to save product")

        try:
            image = self.image_store.save(image_data, slot="productImage")
        except StoreError as exc:
            raise StoreError("Failed to save product") from exc
        try:
            return self.create(name, purchase_price, retail_price, wholesale_price, image)
        except StoreError:
            logger.warning("Image %s left without a product", image)
            raise

    def update(
        self,
        product_id: str,
        name: Optional[str],
        purchase_price: Optional[str],
        retail_price: Optional[str],
        wholesale_price: Optional[str],
    ) -> Product:
        if any(
            _is_blank(value)
            for value in (name, purchase_price, retail_price, wholesale_price)
        ):
            raise ValidationError("All fields are required")

        try:
            product = self.db.get(Product, product_id)
            if product is None:
                raise NotFoundError(PRODUCT_NOT_FOUND)

            if self.encode_on_update:
                retail_price = encode_price(retail_price)
                wholesale_price = encode_price(wholesale_price)

            product.name = name
            product.purchase_price = purchase_price
            product.retail_price = retail_price
            product.wholesale_price = wholesale_price
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to update product %s", product_id)
            raise StoreError("Failed to update product") from exc

        logger.info("Updated product %s", product_id, extra={"product_id": product_id})
        return product

    def delete(self, product_id: str) -> None:
        try:
            product = self.db.get(Product, product_id)
            if product is None:
                raise NotFoundError(PRODUCT_NOT_FOUND)
            self.db.delete(product)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to delete product %s", product_id)
            raise StoreError("Failed to delete product") from exc

        logger.info("Deleted product %s", product_id, extra={"product_id": product_id})

    def list_all(self) -> list[Product]:
        try:
            products = (
                self.db.execute(select(Product).order_by(Product.created_at, Product.id))
                .scalars()
                .all()
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch products")
            raise StoreError("Failed to fetch products") from exc
        return list(products)

    def search(self, query: Optional[str]) -> list[Product]:
        if not query:
            try:
                return self.list_all()
            except StoreError as exc:
                raise StoreError("Failed to search products") from exc

        term = str(query)
        stmt = (
            select(Product)
            .where(
                or_(
                    Product.name.icontains(term, autoescape=True),
                    Product.purchase_price.icontains(term, autoescape=True),
                )
            )
            .order_by(Product.created_at, Product.id)
        )
        try:
            products = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to search products for %r", term)
            raise StoreError("Failed to search products") from exc
        return list(products)

    def get(self, product_id: str) -> Product:
        try:
            product = self.db.get(Product, product_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch product %s", product_id)
            raise StoreError("Failed to fetch product") from exc
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product


__all__ = ["PRODUCT_NOT_FOUND", "ProductService", "resolve_image_url"]
