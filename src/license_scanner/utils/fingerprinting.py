"""Payload fingerprinting utilities.

A barcode payload is nothing but PII, so it is never logged or stored as-is.
Logs and the scan-session audit trail identify a payload by its SHA-256
fingerprint instead, which also lets repeated scans of the same card be
correlated.
"""

import hashlib
from dataclasses import dataclass
from datetime import datetime


@dataclass
class PayloadFingerprint:
    """Represents a raw payload's unique fingerprint."""

    content_hash: str  # SHA-256 hash of the UTF-8 encoded payload
    length: int  # Payload length in characters
    created_at: str  # ISO timestamp when fingerprint was created

    @property
    def short_hash(self) -> str:
        return self.content_hash[:12]

    def to_dict(self) -> dict:
        """Convert to dictionary for DynamoDB storage."""
        return {
            "contentHash": self.content_hash,
            "length": self.length,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PayloadFingerprint":
        """Create from DynamoDB item."""
        return cls(
            content_hash=data["contentHash"],
            length=int(data["length"]),
            created_at=data["createdAt"],
        )


def calculate_content_hash(content: bytes) -> str:
    """Calculate the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(content).hexdigest()


def calculate_payload_hash(raw_payload: str) -> PayloadFingerprint:
    """Calculate a unique fingerprint for a decoded barcode payload.

    Unencodable characters (lone surrogates from a bad decode) are replaced
    so the fingerprint never fails.

    Args:
        raw_payload: Text recovered from the barcode symbol

    Returns:
        PayloadFingerprint with hash and metadata
    """
    content = raw_payload.encode("utf-8", errors="replace")

    return PayloadFingerprint(
        content_hash=calculate_content_hash(content),
        length=len(raw_payload),
        created_at=datetime.utcnow().isoformat() + "Z",
    )
