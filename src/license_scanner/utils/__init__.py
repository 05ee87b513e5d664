"""Utility modules for license payload processing."""

from .fingerprinting import (
    calculate_payload_hash,
    calculate_content_hash,
    PayloadFingerprint,
)
from .normalization import (
    normalize_date,
    normalize_fields,
    normalize_gender,
    normalize_license_number,
    normalize_name,
    normalize_region_code,
    normalize_zip_code,
)
from .validation import (
    check_record_plausibility,
    merge_customer_edits,
    validate_customer_draft,
    ValidationResult,
)

__all__ = [
    # Fingerprinting
    "calculate_payload_hash",
    "calculate_content_hash",
    "PayloadFingerprint",
    # Normalization
    "normalize_date",
    "normalize_fields",
    "normalize_gender",
    "normalize_license_number",
    "normalize_name",
    "normalize_region_code",
    "normalize_zip_code",
    # Validation
    "check_record_plausibility",
    "merge_customer_edits",
    "validate_customer_draft",
    "ValidationResult",
]
