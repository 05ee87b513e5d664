"""Validation utilities for decoded records and customer drafts.

Plausibility checks never change a value: the date heuristic in the
normalizer is kept exactly as it is, and anything suspicious is reported as a
warning for the human reviewer instead.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from ..common.exceptions import ValidationError
from ..common.models import CustomerDraft, LicenseRecord
from .normalization import (
    normalize_date,
    normalize_license_number,
    normalize_name,
    normalize_region_code,
    normalize_text,
    normalize_zip_code,
)

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_REGION_CODE = re.compile(r"[A-Z]{2}")

# Customer fields that must be present before a customer can be stored
REQUIRED_CUSTOMER_FIELDS = (
    "firstName",
    "lastName",
    "dateOfBirth",
    "licenseNumber",
    "licenseState",
    "licenseExpiration",
)


@dataclass
class ValidationResult:
    """Result of customer draft validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "isValid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None when it is not a real date."""
    if not value:
        return None
    match = _ISO_DATE.fullmatch(value)
    if not match:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def check_record_plausibility(record: LicenseRecord, today: Optional[date] = None) -> list[str]:
    """Cross-check a decoded record and describe anything implausible.

    Args:
        record: Normalized record
        today: Reference date (default: today)

    Returns:
        List of human-readable warnings, empty when nothing looks off
    """
    today = today or date.today()
    warnings: list[str] = []
    parsed: dict[str, Optional[date]] = {}

    for name in ("dateOfBirth", "expirationDate"):
        value = record.get(name)
        if value is None:
            continue
        parsed[name] = parse_iso_date(value)
        if parsed[name] is None:
            warnings.append(f"{name} is not a valid calendar date: {value}")

    dob = parsed.get("dateOfBirth")
    expiration = parsed.get("expirationDate")

    if dob and dob > today:
        warnings.append("dateOfBirth is in the future")
    if dob and expiration and expiration <= dob:
        warnings.append("expirationDate is not after dateOfBirth")

    return warnings


def _clean_edit(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def merge_customer_edits(
    record: Optional[LicenseRecord],
    edits: Optional[Mapping[str, Any]] = None,
) -> CustomerDraft:
    """Overlay human edits on a decoded record.

    Edits use customer field names (camelCase). Blank edits leave the decoded
    value in place; non-blank edits win and go through the same normalizers
    as decoded values.

    Args:
        record: Decoded (possibly partial) record, or None after a failed scan
        edits: Field name -> value typed by the reviewer

    Returns:
        CustomerDraft ready for validation
    """
    record = record or LicenseRecord()
    edits = edits or {}

    draft = {
        "firstName": record.first_name,
        "lastName": record.last_name,
        "middleName": record.middle_name,
        "dateOfBirth": record.date_of_birth,
        "licenseNumber": record.license_number,
        "licenseState": record.state,
        "licenseExpiration": record.expiration_date,
        "address": record.address,
        "city": record.city,
        "state": record.state,
        "zipCode": record.zip_code,
    }

    normalizers = {
        "firstName": normalize_name,
        "lastName": normalize_name,
        "middleName": normalize_name,
        "dateOfBirth": normalize_date,
        "licenseNumber": normalize_license_number,
        "licenseState": normalize_region_code,
        "licenseExpiration": normalize_date,
        "address": normalize_text,
        "city": normalize_text,
        "state": normalize_region_code,
        "zipCode": normalize_zip_code,
    }

    for name, value in edits.items():
        if name not in normalizers:
            raise ValidationError(f"Unknown customer field: {name}", field_name=name)
        cleaned = _clean_edit(value)
        if cleaned is not None:
            draft[name] = normalizers[name](cleaned) or None

    return CustomerDraft(
        first_name=draft["firstName"],
        last_name=draft["lastName"],
        middle_name=draft["middleName"],
        date_of_birth=draft["dateOfBirth"],
        license_number=draft["licenseNumber"],
        license_state=draft["licenseState"],
        license_expiration=draft["licenseExpiration"],
        address=draft["address"],
        city=draft["city"],
        state=draft["state"],
        zip_code=draft["zipCode"],
    )


def validate_customer_draft(draft: CustomerDraft) -> ValidationResult:
    """Validate a customer draft before it is stored.

    Args:
        draft: Merged customer draft

    Returns:
        ValidationResult with errors (blocking) and warnings (informational)
    """
    errors: list[str] = []
    warnings: list[str] = []
    values = draft.to_dict()

    for name in REQUIRED_CUSTOMER_FIELDS:
        if not values.get(name):
            errors.append(f"Required field '{name}' is missing")

    for name in ("dateOfBirth", "licenseExpiration"):
        value = values.get(name)
        if value and parse_iso_date(value) is None:
            errors.append(f"Invalid date for '{name}': {value}")

    for name in ("licenseState", "state"):
        value = values.get(name)
        if value and not _REGION_CODE.fullmatch(value):
            errors.append(f"Invalid state code for '{name}': {value}")

    zip_code = values.get("zipCode")
    if zip_code and len(zip_code) not in (5, 9):
        warnings.append(f"Zip code may be invalid: {zip_code}")

    return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)


def ensure_valid_customer_draft(draft: CustomerDraft) -> CustomerDraft:
    """Return the draft unchanged, raising ValidationError on the first error."""
    result = validate_customer_draft(draft)
    if not result.is_valid:
        raise ValidationError(result.errors[0], actual_value="; ".join(result.errors))
    return draft
