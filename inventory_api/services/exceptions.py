"""Domain-specific exceptions for inventory services."""


class InventoryServiceError(Exception):
    """Base exception for inventory services."""
    status_code = 500


class ValidationError(InventoryServiceError):
    """Raised when a required field is missing or malformed."""
    status_code = 400


class NotFoundError(InventoryServiceError):
    """Raised when a referenced product, image or document does not exist."""
    status_code = 404


class StoreError(InventoryServiceError):
    """Raised when the database or image storage fails."""
    status_code = 500
