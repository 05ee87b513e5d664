"""PII-safe logging for the decoder.

Every value logged under a license field name is masked before it reaches
CloudWatch Logs. Names flagged as PII in the AAMVA field table are masked
entirely; a date of birth keeps its year and a license number keeps its last
four characters, so a scan can still be matched to a reviewer's report. A raw
payload is reduced to its length.

Usage:
    from license_scanner.common.safe_log import safe_log
    safe_log("Decoded barcode payload", strategy="codeSegmented", data=outcome.to_dict())
"""

import json
import re
from datetime import datetime
from decimal import Decimal
from typing import Any

from ..schemas.field_codes import get_pii_fields

MAX_LOG_DATA_CHARS = 10240

_YEAR = re.compile(r"(19|20)\d{2}")


def _mask_dob(value: Any) -> str:
    match = _YEAR.search(str(value))
    return f"****-**-** ({match.group()})" if match else "****-**-**"


def _mask_license_number(value: Any) -> str:
    text = str(value)
    return f"****{text[-4:]}" if len(text) >= 4 else "****"


def _mask_payload(value: Any) -> str:
    return f"<payload: {len(str(value))} chars>"


def _mask(value: Any) -> str:
    return "***REDACTED***"


_MASKS = {name: _mask for name in get_pii_fields()}
_MASKS.update({
    "dateOfBirth": _mask_dob,
    "date_of_birth": _mask_dob,
    "licenseNumber": _mask_license_number,
    "license_number": _mask_license_number,
    "documentDiscriminator": _mask_license_number,
    "rawPayload": _mask_payload,
    "raw_payload": _mask_payload,
})


def redact_pii(data: Any) -> Any:
    """Return a copy of data with every PII-named value masked."""
    if isinstance(data, dict):
        return {
            key: _MASKS[key](value) if key in _MASKS and value is not None else redact_pii(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [redact_pii(item) for item in data]
    return data


def _to_json(data: Any) -> str:
    # DynamoDB items carry Decimal confidences
    return json.dumps(
        redact_pii(data),
        default=lambda obj: float(obj) if isinstance(obj, Decimal) else str(obj),
    )


def safe_log(message: str, data: Any = None, **kwargs) -> None:
    """Print a timestamped log line with PII masked.

    Args:
        message: Log message
        data: Optional structure appended as JSON (truncated when large)
        **kwargs: Appended as key=value; PII-named keys are masked
    """
    timestamp = datetime.utcnow().strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    parts = [f"[{timestamp}]", message]

    for key, value in kwargs.items():
        if isinstance(value, (dict, list, tuple)):
            parts.append(f"{key}={_to_json(value)}")
        elif key in _MASKS and value is not None:
            parts.append(f"{key}={_MASKS[key](value)}")
        else:
            parts.append(f"{key}={value}")

    if data is not None:
        data_str = _to_json(data)
        if len(data_str) > MAX_LOG_DATA_CHARS:
            data_str = data_str[:MAX_LOG_DATA_CHARS] + "... [TRUNCATED]"
        parts.append(data_str)

    print(" ".join(parts), flush=True)
