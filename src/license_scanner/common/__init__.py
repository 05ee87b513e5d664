"""Common utilities for License Scanner."""

from .aws_clients import get_dynamodb_resource, get_scan_sessions_table
from .config import Settings, get_settings
from .models import (
    CustomerDraft,
    DecodeOutcome,
    DecodeStrategy,
    FailureReason,
    LicenseRecord,
)
from .exceptions import (
    DecodeError,
    InvalidRequestError,
    LicenseScanError,
    StorageError,
    ValidationError,
)

__all__ = [
    "get_dynamodb_resource",
    "get_scan_sessions_table",
    "Settings",
    "get_settings",
    "CustomerDraft",
    "DecodeOutcome",
    "DecodeStrategy",
    "FailureReason",
    "LicenseRecord",
    "DecodeError",
    "InvalidRequestError",
    "LicenseScanError",
    "StorageError",
    "ValidationError",
]
