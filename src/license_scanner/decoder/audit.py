"""Scan-session audit trail.

One DynamoDB item per decode attempt. Items reference the payload by its
fingerprint only; decoded values are never written here.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..common.aws_clients import get_scan_sessions_table
from ..common.config import Settings, get_settings
from ..common.exceptions import StorageError
from ..common.models import DecodeOutcome, ScanStatus
from ..common.safe_log import safe_log
from ..utils.fingerprinting import PayloadFingerprint


def build_scan_session_item(
    outcome: DecodeOutcome,
    fingerprint: PayloadFingerprint,
    session_id: Optional[str] = None,
) -> dict[str, Any]:
    """Build the DynamoDB item for a decode attempt."""
    item = {
        "sessionId": session_id or str(uuid.uuid4()),
        "payloadHash": fingerprint.content_hash,
        "payloadLength": fingerprint.length,
        "status": (ScanStatus.COMPLETE if outcome.success else ScanStatus.FAILED).value,
        # DynamoDB rejects floats
        "confidence": Decimal(str(outcome.confidence)),
        "fieldsFound": sorted(outcome.record.to_dict()) if outcome.record else [],
        "scanDate": datetime.utcnow().isoformat() + "Z",
    }
    if outcome.strategy:
        item["strategy"] = outcome.strategy.value
    if outcome.reason:
        item["failureReason"] = outcome.reason.value
        item["errorMessage"] = outcome.error_message
    if outcome.warnings:
        item["warnings"] = list(outcome.warnings)
    return item


def record_scan_session(
    outcome: DecodeOutcome,
    fingerprint: PayloadFingerprint,
    table: Any = None,
    settings: Optional[Settings] = None,
) -> str:
    """Write a scan-session audit record.

    Args:
        outcome: Decode outcome to record
        fingerprint: Fingerprint of the decoded payload
        table: DynamoDB Table resource (default: table named in settings)
        settings: Settings (default: global settings)

    Returns:
        The new session ID

    Raises:
        StorageError: If the item could not be written
    """
    settings = settings or get_settings()
    item = build_scan_session_item(outcome, fingerprint)

    try:
        if table is None:
            table = get_scan_sessions_table(settings.table_name)
        table.put_item(Item=item)
    except (ClientError, BotoCoreError) as e:
        raise StorageError(
            f"Failed to record scan session: {e}",
            session_id=item["sessionId"],
            storage_type="dynamodb",
            cause=e,
        ) from e

    safe_log(
        "Recorded scan session",
        session_id=item["sessionId"],
        status=item["status"],
    )
    return item["sessionId"]
