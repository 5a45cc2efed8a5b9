from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_DIR.parent

API_PREFIX = "/api"
UPLOADS_MOUNT_PATH = "/uploads"

SETTINGS_DOCUMENT_ID = "price-codes"
BARCODE_PREFIX = "BARCODE-"
