import tempfile
import unittest
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from inventory_api.services.exceptions import NotFoundError, ValidationError
from inventory_api.services.image_service import ImageStore


class ImageStoreTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = Path(self._tmp.name) / "uploads"
        self.store = ImageStore(self.upload_dir, clock=lambda: 1700000000000)

    def tearDown(self):
        self._tmp.cleanup()

    def test_save_writes_time_named_file(self):
        reference = self.store.save(b"\xff\xd8jpeg", slot="image")

        self.assertEqual(reference, "uploads/1700000000000.jpg")
        self.assertEqual((self.upload_dir / "1700000000000.jpg").read_bytes(), b"\xff\xd8jpeg")

    def test_save_does_not_overwrite_existing_file(self):
        first = self.store.save(b"one")
        second = self.store.save(b"two")

        self.assertEqual(first, "uploads/1700000000000.jpg")
        self.assertEqual(second, "uploads/1700000000001.jpg")
        self.assertEqual((self.upload_dir / "1700000000000.jpg").read_bytes(), b"one")

    def test_concurrent_saves_in_same_millisecond_get_distinct_files(self):
        payloads = [f"image-{idx}".encode() for idx in range(16)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            references = list(pool.map(self.store.save, payloads))

        self.assertEqual(len(set(references)), len(payloads))
        for reference, payload in zip(references, payloads):
            with self.subTest(reference=reference):
                self.assertEqual((self.upload_dir / Path(reference).name).read_bytes(), payload)

    def test_save_keeps_existing_file_written_by_someone_else(self):
        self.store.ensure_dir()
        (self.upload_dir / "1700000000000.jpg").write_bytes(b"external")

        reference = self.store.save(b"mine")

        self.assertEqual(reference, "uploads/1700000000001.jpg")
        self.assertEqual((self.upload_dir / "1700000000000.jpg").read_bytes(), b"external")

    def test_save_rejects_empty_payload(self):
        with self.assertRaises(ValidationError):
            self.store.save(b"")

    def test_custom_extension(self):
        store = ImageStore(self.upload_dir, extension="png", clock=lambda: 5)
        self.assertEqual(store.save(b"png"), "uploads/5.png")

    def test_resolve_returns_stored_path(self):
        self.store.save(b"data")
        path = self.store.resolve("1700000000000.jpg")
        self.assertEqual(path.read_bytes(), b"data")

    def test_resolve_missing_file(self):
        self.store.ensure_dir()
        with self.assertRaises(NotFoundError):
            self.store.resolve("missing.jpg")

    def test_resolve_rejects_paths_outside_upload_dir(self):
        (Path(self._tmp.name) / "secret.txt").write_text("nope")
        self.store.ensure_dir()
        for name in ("../secret.txt", "..", "sub/file.jpg", "..\\secret.txt", ""):
            with self.subTest(name=name):
                with self.assertRaises(NotFoundError):
                    self.store.resolve(name)


if __name__ == "__main__":
    unittest.main()
