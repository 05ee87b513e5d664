"""Tests for plausibility checks and customer drafts."""

from datetime import date

import pytest
from license_scanner.common.exceptions import ValidationError
from license_scanner.common.models import CustomerDraft, LicenseRecord
from license_scanner.utils.validation import (
    check_record_plausibility,
    ensure_valid_customer_draft,
    merge_customer_edits,
    parse_iso_date,
    validate_customer_draft,
)

TODAY = date(2026, 1, 15)

FULL_RECORD = LicenseRecord(
    first_name="JOHN",
    last_name="DOE",
    date_of_birth="1985-06-15",
    license_number="D12345678",
    expiration_date="2027-06-15",
    address="123 MAIN STREET",
    city="SACRAMENTO",
    state="CA",
    zip_code="94105",
)


class TestParseIsoDate:
    def test_valid(self):
        assert parse_iso_date("1985-06-15") == date(1985, 6, 15)

    @pytest.mark.parametrize("value", [None, "", "ABCDEFGH", "2001-19-85", "1985-02-30"])
    def test_invalid(self, value):
        assert parse_iso_date(value) is None


class TestRecordPlausibility:
    """Tests for warnings on decoded records."""

    def test_plausible_record(self):
        assert check_record_plausibility(FULL_RECORD, today=TODAY) == []

    def test_unparsed_date(self):
        record = LicenseRecord(date_of_birth="ABCDEFGH")

        warnings = check_record_plausibility(record, today=TODAY)

        assert warnings == ["dateOfBirth is not a valid calendar date: ABCDEFGH"]

    def test_prefix_heuristic_misread(self):
        """Test an impossible YYYYMMDD reading is reported, not corrected."""
        record = LicenseRecord(date_of_birth="2001-19-85")

        warnings = check_record_plausibility(record, today=TODAY)

        assert len(warnings) == 1
        assert record.date_of_birth == "2001-19-85"

    def test_birth_date_in_future(self):
        record = LicenseRecord(date_of_birth="2030-01-01")

        assert check_record_plausibility(record, today=TODAY) == ["dateOfBirth is in the future"]

    def test_expiration_before_birth(self):
        record = LicenseRecord(date_of_birth="1985-06-15", expiration_date="1980-01-01")

        assert check_record_plausibility(record, today=TODAY) == [
            "expirationDate is not after dateOfBirth"
        ]

    def test_empty_record(self):
        assert check_record_plausibility(LicenseRecord(), today=TODAY) == []


class TestMergeCustomerEdits:
    """Tests for overlaying reviewer edits on a decoded record."""

    def test_record_only(self):
        draft = merge_customer_edits(FULL_RECORD)

        assert draft.license_state == "CA"
        assert draft.state == "CA"
        assert draft.license_expiration == "2027-06-15"
        assert draft.license_number == "D12345678"

    def test_edits_win_and_are_normalized(self):
        draft = merge_customer_edits(
            FULL_RECORD,
            {"firstName": " Jonathan ", "licenseState": "nv", "dateOfBirth": "06151986"},
        )

        assert draft.first_name == "Jonathan"
        assert draft.license_state == "NV"
        assert draft.state == "CA"
        assert draft.date_of_birth == "1986-06-15"

    def test_blank_edits_keep_decoded_values(self):
        draft = merge_customer_edits(FULL_RECORD, {"lastName": "  ", "city": None})

        assert draft.last_name == "DOE"
        assert draft.city == "SACRAMENTO"

    def test_failed_scan_manual_entry(self):
        draft = merge_customer_edits(None, {"firstName": "JANE", "zipCode": "94105-1234"})

        assert draft.first_name == "JANE"
        assert draft.zip_code == "941051234"
        assert draft.license_number is None

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            merge_customer_edits(FULL_RECORD, {"eyeColor": "BRO"})

        assert exc_info.value.field_name == "eyeColor"


class TestValidateCustomerDraft:
    """Tests for customer draft validation."""

    def test_complete_draft(self):
        result = validate_customer_draft(merge_customer_edits(FULL_RECORD))

        assert result.is_valid
        assert result.errors == []

    def test_missing_required_fields(self):
        result = validate_customer_draft(CustomerDraft(first_name="JOHN"))

        assert not result.is_valid
        assert "Required field 'lastName' is missing" in result.errors
        assert "Required field 'licenseExpiration' is missing" in result.errors
        assert "Required field 'firstName' is missing" not in result.errors

    def test_unparsed_date_is_an_error(self):
        draft = merge_customer_edits(LicenseRecord(date_of_birth="ABCDEFGH"))

        result = validate_customer_draft(draft)

        assert "Invalid date for 'dateOfBirth': ABCDEFGH" in result.errors

    def test_state_must_be_two_letters(self):
        draft = merge_customer_edits(FULL_RECORD, {"licenseState": "Calif"})

        result = validate_customer_draft(draft)

        assert "Invalid state code for 'licenseState': CALIF" in result.errors

    def test_odd_zip_is_a_warning(self):
        draft = merge_customer_edits(FULL_RECORD, {"zipCode": "9410"})

        result = validate_customer_draft(draft)

        assert result.is_valid
        assert result.warnings == ["Zip code may be invalid: 9410"]
        assert result.to_dict()["isValid"] is True

    def test_ensure_valid_raises(self):
        with pytest.raises(ValidationError, match="Required field"):
            ensure_valid_customer_draft(CustomerDraft())

    def test_ensure_valid_returns_draft(self):
        draft = merge_customer_edits(FULL_RECORD)

        assert ensure_valid_customer_draft(draft) is draft
