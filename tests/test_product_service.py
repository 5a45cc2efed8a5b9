import tempfile
import unittest
from itertools import count
from pathlib import Path
from unittest.mock import patch

from sqlalchemy import create_engine, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from inventory_api.database.base import Base
from inventory_api.models.product import Product
from inventory_api.services.exceptions import NotFoundError, StoreError, ValidationError
from inventory_api.services.image_service import ImageStore
from inventory_api.services.product_service import ProductService, resolve_image_url


def _clock():
    ticks = count(1700000000000)
    return lambda: next(ticks)


class ProductServiceTest(unittest.TestCase):
    def setUp(self):
        engine = create_engine("sqlite:///:memory:")
        Base.metadata.create_all(bind=engine)
        self.db = sessionmaker(bind=engine, expire_on_commit=False)()
        self.service = ProductService(self.db, clock=_clock())

    def tearDown(self):
        self.db.close()

    def _create(self, name="Pen", purchase="10", retail="120", wholesale="95"):
        return self.service.create(name, purchase, retail, wholesale, "uploads/1.jpg")

    def _count(self):
        return len(self.db.execute(select(Product)).scalars().all())

    def test_create_encodes_retail_and_wholesale(self):
        product = self._create(retail="120", wholesale="95")

        self.assertTrue(product.id)
        self.assertEqual(product.name, "Pen")
        self.assertEqual(product.purchase_price, "10")
        self.assertEqual(product.retail_price, "021")
        self.assertEqual(product.wholesale_price, "59")
        self.assertEqual(product.image, "uploads/1.jpg")
        self.assertEqual(product.barcode, "BARCODE-1700000000000")

    def test_barcode_follows_injected_clock(self):
        first = self._create()
        second = self._create(name="Pencil")
        self.assertEqual(first.barcode, "BARCODE-1700000000000")
        self.assertEqual(second.barcode, "BARCODE-1700000000001")
        self.assertNotEqual(first.id, second.id)

    def test_create_requires_every_field(self):
        complete = {
            "name": "Pen",
            "purchase_price": "10",
            "retail_price": "12",
            "wholesale_price": "11",
            "image": "uploads/1.jpg",
        }
        for field in complete:
            for blank in (None, "", "  "):
                with self.subTest(field=field, blank=blank):
                    values = dict(complete, **{field: blank})
                    with self.assertRaises(ValidationError):
                        self.service.create(**values)
        self.assertEqual(self._count(), 0)

    def test_create_wraps_database_failure(self):
        with patch.object(self.db, "commit", side_effect=OperationalError("INSERT", {}, Exception("down"))):
            with self.assertRaises(StoreError) as ctx:
                self._create()
        self.assertEqual(str(ctx.exception), "Failed to save product")

    def test_update_overwrites_fields_verbatim(self):
        product = self._create()

        updated = self.service.update(product.id, "Blue Pen", "11", "130", "100")

        self.assertEqual(updated.name, "Blue Pen")
        self.assertEqual(updated.purchase_price, "11")
        self.assertEqual(updated.retail_price, "130")
        self.assertEqual(updated.wholesale_price, "100")
        self.assertEqual(updated.image, product.image)
        self.assertEqual(updated.barcode, product.barcode)

    def test_update_can_encode_prices(self):
        service = ProductService(self.db, clock=_clock(), encode_on_update=True)
        product = service.create("Pen", "10", "120", "95", "uploads/1.jpg")

        updated = service.update(product.id, "Pen", "10", "130", "100")

        self.assertEqual(updated.retail_price, "031")
        self.assertEqual(updated.wholesale_price, "001")

    def test_update_missing_product(self):
        with self.assertRaises(NotFoundError):
            self.service.update("does-not-exist", "Pen", "1", "2", "3")

    def test_update_requires_every_field(self):
        product = self._create()
        with self.assertRaises(ValidationError):
            self.service.update(product.id, "Pen", "", "2", "3")
        self.assertEqual(self.service.get(product.id).purchase_price, "10")

    def test_delete_removes_product(self):
        product = self._create()

        self.service.delete(product.id)

        with self.assertRaises(NotFoundError):
            self.service.get(product.id)
        with self.assertRaises(NotFoundError):
            self.service.delete(product.id)

    def test_list_returns_all_products(self):
        self._create(name="Pen")
        self._create(name="Pencil")
        names = [product.name for product in self.service.list_all()]
        self.assertCountEqual(names, ["Pen", "Pencil"])

    def test_search_matches_name_or_purchase_price_ignoring_case(self):
        self._create(name="Pen", purchase="10")
        self._create(name="Pencil", purchase="10")
        self._create(name="Notebook", purchase="250")
        self._create(name="Stapler", purchase="PEN-7")

        self.assertCountEqual(
            [p.name for p in self.service.search("pen")],
            ["Pen", "Pencil", "Stapler"],
        )
        self.assertEqual([p.name for p in self.service.search("25")], ["Notebook"])
        self.assertEqual([p.name for p in self.service.search("NOTE")], ["Notebook"])
        self.assertEqual(self.service.search("eraser"), [])

    def test_search_treats_query_literally(self):
        self._create(name="Pen")
        self._create(name="100% cotton bag")
        self.assertEqual([p.name for p in self.service.search("%")], ["100% cotton bag"])
        self.assertEqual(self.service.search("_"), [])

    def test_search_without_query_returns_everything(self):
        self._create(name="Pen")
        self._create(name="Pencil")
        self.assertEqual(len(self.service.search(None)), 2)
        self.assertEqual(len(self.service.search("")), 2)

    def test_get_missing_product(self):
        with self.assertRaises(NotFoundError):
            self.service.get("missing")


class CreateWithUploadTest(unittest.TestCase):
    def setUp(self):
        engine = create_engine("sqlite:///:memory:")
        Base.metadata.create_all(bind=engine)
        self.db = sessionmaker(bind=engine, expire_on_commit=False)()
        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = Path(self._tmp.name)
        self.store = ImageStore(self.upload_dir, clock=lambda: 1700000000500)
        self.service = ProductService(self.db, image_store=self.store, clock=_clock())

    def tearDown(self):
        self.db.close()
        self._tmp.cleanup()

    def test_stores_image_and_links_product(self):
        product = self.service.create_with_upload("Pen", "10", "120", "95", b"jpeg-bytes")

        self.assertEqual(product.image, "uploads/1700000000500.jpg")
        self.assertEqual((self.upload_dir / "1700000000500.jpg").read_bytes(), b"jpeg-bytes")
        self.assertEqual(product.retail_price, "021")

    def test_missing_image_stores_nothing(self):
        with self.assertRaises(ValidationError):
            self.service.create_with_upload("Pen", "10", "120", "95", None)
        with self.assertRaises(ValidationError):
            self.service.create_with_upload("", "10", "120", "95", b"jpeg-bytes")

        self.assertEqual(list(self.upload_dir.iterdir()), [])
        self.assertEqual(self.service.list_all(), [])

    def test_database_failure_leaves_stored_image(self):
        failure = OperationalError("INSERT", {}, Exception("db down"))
        with patch.object(self.db, "commit", side_effect=failure):
            with self.assertLogs("inventory_api.services.product_service", level="WARNING") as logs:
                with self.assertRaises(StoreError) as ctx:
                    self.service.create_with_upload("Pen", "10", "120", "95", b"jpeg-bytes")

        self.assertEqual(str(ctx.exception), "Failed to save product")
        self.assertEqual((self.upload_dir / "1700000000500.jpg").read_bytes(), b"jpeg-bytes")
        self.assertTrue(any("1700000000500.jpg" in line for line in logs.output))
        self.assertEqual(self.service.list_all(), [])

    def test_image_storage_failure_reported_as_save_failure(self):
        with patch.object(self.store, "_write_new_file", side_effect=OSError("disk full")):
            with self.assertRaises(StoreError) as ctx:
                self.service.create_with_upload("Pen", "10", "120", "95", b"jpeg-bytes")

        self.assertEqual(str(ctx.exception), "Failed to save product")
        self.assertEqual(self.service.list_all(), [])


class ResolveImageUrlTest(unittest.TestCase):
    def test_joins_base_url_and_relative_path(self):
        self.assertEqual(
            resolve_image_url("uploads/1.jpg", "http://localhost:3000/"),
            "http://localhost:3000/uploads/1.jpg",
        )

    def test_normalizes_separators_and_leading_slash(self):
        self.assertEqual(
            resolve_image_url("\\uploads\\1.jpg", "https://shop.example.com"),
            "https://shop.example.com/uploads/1.jpg",
        )


if __name__ == "__main__":
    unittest.main()
