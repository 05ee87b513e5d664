"""Data models for License Scanner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from ..schemas.field_codes import RECORD_FIELDS
from .exceptions import DecodeError


class DecodeStrategy(str, Enum):
    """Decode strategies, in the order they are tried."""
    LINE_ORIENTED = "lineOriented"
    CODE_SEGMENTED = "codeSegmented"
    BEST_EFFORT = "bestEffort"


class FailureReason(str, Enum):
    """Why a decode attempt produced no record."""
    NO_HEADER_AND_NO_FIELDS = "NoBarcodeHeaderAndNoFieldsFound"
    ALL_STRATEGIES_EMPTY = "AllStrategiesEmpty"


class ScanStatus(str, Enum):
    """Status of a scan session."""
    COMPLETE = "complete"
    PROCESSING = "processing"
    FAILED = "failed"


class ConfidenceLevel(str, Enum):
    """Confidence level for decode outcomes."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_score(cls, score: float) -> "ConfidenceLevel":
        if score >= 0.9:
            return cls.HIGH
        if score >= 0.7:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class LicenseRecord:
    """Normalized identity fields decoded from a license barcode.

    Every attribute is optional; absent fields stay None and are omitted from
    the serialized form.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    date_of_birth: Optional[str] = None  # YYYY-MM-DD when resolvable
    license_number: Optional[str] = None
    expiration_date: Optional[str] = None  # YYYY-MM-DD when resolvable
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    gender: Optional[str] = None
    document_discriminator: Optional[str] = None
    country: Optional[str] = None
    name_suffix: Optional[str] = None

    def __len__(self) -> int:
        return len(self.to_dict())

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a field by its record (camelCase) name."""
        value = getattr(self, _ATTRIBUTE_NAMES[name])
        return default if value is None else value

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        result = {}
        for name in RECORD_FIELDS:
            value = getattr(self, _ATTRIBUTE_NAMES[name])
            if value is not None:
                result[name] = value
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LicenseRecord":
        """Create from a record-name keyed mapping, skipping None values."""
        kwargs = {}
        for name, value in data.items():
            if name not in _ATTRIBUTE_NAMES:
                raise ValueError(f"Unknown record field: {name}")
            if value is not None:
                kwargs[_ATTRIBUTE_NAMES[name]] = value
        return cls(**kwargs)

    def fill_gaps(self, other: "LicenseRecord") -> "LicenseRecord":
        """Return a record with missing fields taken from other; present fields win."""
        merged = dict(other.to_dict())
        merged.update(self.to_dict())
        return LicenseRecord.from_dict(merged)


def _to_snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


_ATTRIBUTE_NAMES = {name: _to_snake(name) for name in RECORD_FIELDS}


@dataclass(frozen=True)
class DecodeOutcome:
    """Result of one decode attempt: a record plus confidence, or a failure reason."""

    success: bool
    record: Optional[LicenseRecord] = None
    confidence: float = 0.0
    strategy: Optional[DecodeStrategy] = None
    reason: Optional[FailureReason] = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def succeeded(
        cls,
        record: LicenseRecord,
        confidence: float,
        strategy: DecodeStrategy,
        warnings: tuple[str, ...] = (),
    ) -> "DecodeOutcome":
        return cls(
            success=True,
            record=record,
            confidence=confidence,
            strategy=strategy,
            warnings=tuple(warnings),
        )

    @classmethod
    def failed(cls, reason: FailureReason) -> "DecodeOutcome":
        return cls(success=False, reason=reason)

    @property
    def confidence_level(self) -> ConfidenceLevel:
        return ConfidenceLevel.from_score(self.confidence)

    @property
    def error_message(self) -> Optional[str]:
        if self.success:
            return None
        return _FAILURE_MESSAGES[self.reason]

    def unwrap(self) -> LicenseRecord:
        """Return the record, raising DecodeError on a failed outcome."""
        if not self.success:
            raise DecodeError(self.error_message, reason=self.reason.value)
        return self.record

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "data": self.record.to_dict() if self.record is not None else None,
            "confidence": self.confidence,
            "confidenceLevel": self.confidence_level.value,
            "strategy": self.strategy.value if self.strategy else None,
            "error": self.error_message,
            "reason": self.reason.value if self.reason else None,
            "warnings": list(self.warnings),
        }


_FAILURE_MESSAGES = {
    FailureReason.NO_HEADER_AND_NO_FIELDS: (
        "No DL/ID subfile header and no AAMVA field codes found in barcode data"
    ),
    FailureReason.ALL_STRATEGIES_EMPTY: (
        "Barcode data could not be parsed into any license fields"
    ),
}


@dataclass(frozen=True)
class CustomerDraft:
    """Customer entity fields assembled from a decoded record plus human edits."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    license_number: Optional[str] = None
    license_state: Optional[str] = None
    license_expiration: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "middleName": self.middle_name,
            "dateOfBirth": self.date_of_birth,
            "licenseNumber": self.license_number,
            "licenseState": self.license_state,
            "licenseExpiration": self.license_expiration,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zipCode": self.zip_code,
        }
