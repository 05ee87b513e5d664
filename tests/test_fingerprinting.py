"""Tests for payload fingerprinting."""

import hashlib

from license_scanner.utils.fingerprinting import (
    PayloadFingerprint,
    calculate_content_hash,
    calculate_payload_hash,
)


class TestPayloadFingerprint:
    def test_hash_matches_sha256(self):
        fingerprint = calculate_payload_hash("DAQABC123")

        assert fingerprint.content_hash == hashlib.sha256(b"DAQABC123").hexdigest()
        assert fingerprint.length == 9
        assert fingerprint.short_hash == fingerprint.content_hash[:12]

    def test_same_payload_same_hash(self):
        assert (
            calculate_payload_hash("DAQABC123").content_hash
            == calculate_payload_hash("DAQABC123").content_hash
        )
        assert (
            calculate_payload_hash("DAQABC123").content_hash
            != calculate_payload_hash("DAQABC124").content_hash
        )

    def test_unencodable_payload(self):
        fingerprint = calculate_payload_hash("DAQ\ud800")

        assert fingerprint.length == 4

    def test_round_trip_dict(self):
        fingerprint = calculate_payload_hash("")

        assert PayloadFingerprint.from_dict(fingerprint.to_dict()) == fingerprint

    def test_content_hash_is_sha256(self):
        assert calculate_content_hash(b"x") == hashlib.sha256(b"x").hexdigest()
