"""
Custom exceptions for the record store.

These exceptions represent repository-level errors and are independent
of the concrete codec or storage backend.
"""

import gettext
from typing import Optional

_ = gettext.gettext


class RecordStoreException(Exception):
    """Base exception for all record store errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RecordNotFoundException(RecordStoreException):
    """Raised when no record exists for an identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        message = _("Record not found with ID: {identifier}").format(identifier=identifier)
        super().__init__(message=message, details={"identifier": identifier})


class EncodeException(RecordStoreException):
    """Raised when a value cannot be serialized."""

    def __init__(self, reason: Optional[str] = None):
        message = "Failed to encode value"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"reason": reason})


class DecodeException(RecordStoreException):
    """Raised when stored bytes cannot be deserialized into the expected type."""

    def __init__(self, reason: Optional[str] = None):
        message = "Failed to decode record"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"reason": reason})


class StoreException(RecordStoreException):
    """Raised when the key-value backend fails at the I/O level."""

    def __init__(self, operation: str, key: Optional[str] = None, reason: Optional[str] = None):
        message = f"Store {operation} failed"
        if key is not None:
            message += f" for key '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            details={"operation": operation, "key": key, "reason": reason},
        )
