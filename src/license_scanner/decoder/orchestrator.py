"""Decode orchestration.

Tries each decode strategy in order and accepts the first one that yields a
non-empty record. Confidence is a fixed heuristic scale keyed on the kind of
strategy that produced the record (structured parse vs. pattern guess); it is
not a calibrated probability.
"""

from typing import Optional, Sequence

from ..common.config import Settings, get_settings
from ..common.models import DecodeOutcome, FailureReason, LicenseRecord
from ..common.safe_log import safe_log
from ..schemas.field_codes import DEFAULT_FIELD_TABLE, FieldTable
from ..utils.fingerprinting import PayloadFingerprint, calculate_payload_hash
from ..utils.validation import check_record_plausibility
from .header import has_subfile_header
from .strategies import DEFAULT_STRATEGIES, Strategy


def decode_payload(
    raw_payload: str,
    table: Optional[FieldTable] = None,
    settings: Optional[Settings] = None,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    fingerprint: Optional[PayloadFingerprint] = None,
) -> DecodeOutcome:
    """Decode a raw AAMVA barcode payload into a license record.

    Args:
        raw_payload: Text recovered from the PDF417 (or QR) symbol
        table: Field table to decode with (default: AAMVA DL/ID fields)
        settings: Decoder settings (default: global settings)
        strategies: Strategies to try, in order
        fingerprint: Precomputed payload fingerprint (default: computed here)

    Returns:
        DecodeOutcome; a failure only when no strategy found any field

    Raises:
        TypeError: If raw_payload is not a string
        ValueError: If settings are inconsistent (e.g. best-effort confidence
            above the ceiling)
    """
    if not isinstance(raw_payload, str):
        raise TypeError(f"raw_payload must be a string, got {type(raw_payload).__name__}")

    table = table or DEFAULT_FIELD_TABLE
    settings = settings or get_settings()
    settings.validate()
    fingerprint = fingerprint or calculate_payload_hash(raw_payload)

    record = LicenseRecord()
    for strategy in strategies:
        if not strategy.structured and not settings.enable_best_effort:
            continue

        # Later strategies only fill gaps; they never override a populated field
        record = record.fill_gaps(strategy.parse(raw_payload, table))
        if record.is_empty:
            continue

        confidence = (
            settings.structured_confidence if strategy.structured
            else settings.best_effort_confidence
        )
        warnings = check_record_plausibility(record)

        safe_log(
            "Decoded barcode payload",
            payload_hash=fingerprint.short_hash,
            strategy=strategy.name.value,
            confidence=confidence,
            fields=sorted(record.to_dict()),
            warnings=len(warnings),
        )
        return DecodeOutcome.succeeded(record, confidence, strategy.name, tuple(warnings))

    if raw_payload.strip() and not has_subfile_header(raw_payload, table):
        reason = FailureReason.NO_HEADER_AND_NO_FIELDS
    else:
        reason = FailureReason.ALL_STRATEGIES_EMPTY

    safe_log(
        "Barcode payload decode failed",
        payload_hash=fingerprint.short_hash,
        payload_length=fingerprint.length,
        reason=reason.value,
    )
    return DecodeOutcome.failed(reason)
