"""Decoder Lambda - AAMVA barcode payload decoding.

This Lambda function receives the text a client-side PDF417 reader recovered
from the back of a license and returns the structured record:
1. Validates the request (API Gateway proxy event or direct invocation)
2. Decodes the payload with the multi-strategy AAMVA decoder
3. Records a scan-session audit item (payload fingerprint only) if enabled
4. Returns the decode outcome as JSON

A failed decode is still a 200 response with success=false, so the client
can fall back to manual data entry.
"""

import json
from typing import Any

from license_scanner.common.config import get_settings
from license_scanner.common.exceptions import InvalidRequestError, StorageError
from license_scanner.common.safe_log import safe_log
from license_scanner.decoder import decode_payload
from license_scanner.decoder.audit import record_scan_session
from license_scanner.utils.fingerprinting import calculate_payload_hash

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "POST,OPTIONS",
}


def response(status_code: int, body: Any) -> dict:
    """Create API Gateway response."""
    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": json.dumps(body, default=str),
    }


def parse_request(event: dict) -> str:
    """Pull the raw payload out of an API Gateway or direct invocation event.

    Raises:
        InvalidRequestError: If the body is not JSON or rawPayload is missing
    """
    if "body" in event:
        body = event.get("body") or "{}"
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except json.JSONDecodeError as e:
                raise InvalidRequestError("Request body is not valid JSON", cause=e) from e
    else:
        body = event

    if not isinstance(body, dict) or "rawPayload" not in body:
        raise InvalidRequestError("rawPayload is required")

    raw_payload = body["rawPayload"]
    if not isinstance(raw_payload, str):
        raise InvalidRequestError("rawPayload must be a string")
    return raw_payload


def lambda_handler(event, context):
    """Decode a barcode payload.

    Args:
        event: API Gateway proxy event with a JSON body, or {"rawPayload": ...}
        context: Lambda context object

    Returns:
        dict: API Gateway response with the decode outcome
    """
    # The body is the raw payload itself, so only request metadata is logged
    safe_log(
        "Decoder Lambda received event",
        http_method=event.get("httpMethod"),
        path=event.get("path"),
    )

    if event.get("httpMethod") == "OPTIONS":
        return response(200, {})

    try:
        raw_payload = parse_request(event)
    except InvalidRequestError as e:
        safe_log("Rejected decode request", error=e.message)
        return response(400, e.to_dict())

    settings = get_settings()
    fingerprint = calculate_payload_hash(raw_payload)
    outcome = decode_payload(raw_payload, settings=settings, fingerprint=fingerprint)
    body = outcome.to_dict()

    if settings.enable_audit_trail:
        try:
            body["sessionId"] = record_scan_session(outcome, fingerprint, settings=settings)
        except StorageError as e:
            # The decode result is still useful to the client
            safe_log("Audit trail write failed", error=e.to_dict())
            body["sessionId"] = None

    return response(200, body)
