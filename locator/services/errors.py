"""Error taxonomy raised by services and rendered by routers."""
from __future__ import annotations


class LocatorError(Exception):
    def __init__(self, message: str, code: str = "error", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class InvalidInputError(LocatorError):
    """Client data failed validation; raised before any storage access."""

    def __init__(self, message: str = "Invalid data. Make sure code, x and y are provided."):
        super().__init__(message, "invalid_input", 400)


class ServiceUnavailableError(LocatorError):
    """The persisted dataset is missing, unreadable or malformed."""

    def __init__(self, message: str = "Database could not be read"):
        super().__init__(message, "storage_unreadable", 500)


class StorageWriteError(LocatorError):
    """The dataset was changed in memory but could not be written back."""

    def __init__(self, message: str = "Failed to save database"):
        super().__init__(message, "storage_write_failed", 500)
