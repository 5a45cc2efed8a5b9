import logging
from pathlib import Path

from inventory_api.core.clock import Clock, system_clock
from inventory_api.core.constants import UPLOADS_MOUNT_PATH
from inventory_api.services.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

IMAGE_NOT_FOUND = "Image not found"


class ImageStore:
    """Stores uploaded images on disk under time-based names."""

    def __init__(
        self,
        upload_dir,
        *,
        extension: str = ".jpg",
        clock: Clock = system_clock,
        reference_prefix: str = UPLOADS_MOUNT_PATH,
    ):
        self.upload_dir = Path(upload_dir)
        self.reference_prefix = reference_prefix.strip("/")
        self.extension = extension if extension.startswith(".") else f".{extension}"
        self.clock = clock

    def ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def reference_for(self, filename: str) -> str:
        return f"{self.reference_prefix}/{filename}"

    def _write_new_file(self, data: bytes) -> str:
        # Exclusive create; a taken name raises FileExistsError.
        stamp = int(self.clock())
        while True:
            filename = f"{stamp}{self.extension}"
            try:
                with open(self.upload_dir / filename, "xb") as handle:
                    handle.write(data)
            except FileExistsError:
                stamp += 1
                continue
            return filename

    def save(self, data: bytes, slot: str = "image") -> str:
        if not data:
            raise ValidationError("Image file is required")

        try:
            self.ensure_dir()
            filename = self._write_new_file(data)
        except OSError as exc:
            logger.exception("Failed to store %s upload", slot)
            raise StoreError("Failed to store image") from exc

        reference = self.reference_for(filename)
        logger.info(
            "Stored %s upload as %s (%d bytes)",
            slot,
            reference,
            len(data),
            extra={"image": reference, "slot": slot},
        )
        return reference

    def resolve(self, image_id: str) -> Path:
        name = str(image_id or "").strip()
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise NotFoundError(IMAGE_NOT_FOUND)

        root = self.upload_dir.resolve()
        path = (root / name).resolve()
        if path.parent != root or not path.is_file():
            raise NotFoundError(IMAGE_NOT_FOUND)
        return path

