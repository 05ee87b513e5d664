"""Tests for header location and field segmentation."""

import pytest
from license_scanner.decoder.header import has_subfile_header, locate_header
from license_scanner.decoder.segmenter import extract_code_value, extract_fields
from license_scanner.schemas.field_codes import DEFAULT_FIELD_TABLE, AamvaField, FieldTable, FieldType

ANSI_HEADER = "@\n\x1e\rANSI 636014040002DL00410278ZC03190024"


class TestLocateHeader:
    """Tests for subfile header location."""

    def test_skips_file_header_and_directory(self):
        payload = ANSI_HEADER + "DLDAQD1234562\nDCSDOE"

        assert locate_header(payload) == "DLDAQD1234562\nDCSDOE"

    def test_identification_card_subfile(self):
        assert locate_header("garbageIDDAQ123DCSDOE") == "IDDAQ123DCSDOE"

    def test_driver_license_preferred_over_id(self):
        assert locate_header("IDDAQ1DLDCSDOE") == "DLDCSDOE"

    @pytest.mark.parametrize(
        "payload",
        ["DAQABC123", "DAQX1DCSMIDDLETON", "DAQX1DAIIDAHO FALLS", "no header here", ""],
    )
    def test_without_header_returns_input_unchanged(self, payload):
        assert locate_header(payload) == payload

    def test_has_subfile_header(self):
        assert has_subfile_header("xxDLDAQ1")
        assert has_subfile_header("IDDCS")
        assert not has_subfile_header("DL004102")
        assert not has_subfile_header("")


class TestExtractCodeValue:
    """Tests for next-code-as-terminator extraction."""

    def test_value_runs_to_next_code(self):
        codes = DEFAULT_FIELD_TABLE.codes

        assert extract_code_value("DAQD123DCSDOE", "DAQ", codes) == "D123"

    def test_value_runs_to_end_without_next_code(self):
        assert extract_code_value("DAQABC123", "DAQ", DEFAULT_FIELD_TABLE.codes) == "ABC123"

    def test_absent_code(self):
        assert extract_code_value("DCSDOE", "DAQ", DEFAULT_FIELD_TABLE.codes) is None

    def test_empty_value_is_absent(self):
        assert extract_code_value("DAQ \n DCSDOE", "DAQ", DEFAULT_FIELD_TABLE.codes) is None

    def test_first_occurrence_wins(self):
        codes = DEFAULT_FIELD_TABLE.codes

        assert extract_code_value("DCSDOEDAQ1DCSROE", "DCS", codes) == "DOE"


class TestExtractFields:
    """Tests for table-driven field extraction."""

    def test_sequential_codes(self):
        fields = extract_fields("DAQD12345678DCSDOEDACJOHN")

        assert fields == {
            "licenseNumber": "D12345678",
            "lastName": "DOE",
            "firstName": "JOHN",
        }

    def test_codes_in_any_order(self):
        fields = extract_fields("DBB19850615DACJOHNDCSDOEDAQ123")

        assert fields == {
            "dateOfBirth": "19850615",
            "firstName": "JOHN",
            "lastName": "DOE",
            "licenseNumber": "123",
        }

    def test_values_are_trimmed(self):
        fields = extract_fields("DAQABC123\n\x1eDCS DOE \r")

        assert fields == {"licenseNumber": "ABC123", "lastName": "DOE"}

    def test_empty_value_omitted(self):
        assert extract_fields("DAQ   DCSDOE") == {"lastName": "DOE"}

    @pytest.mark.parametrize(
        "payload",
        ["DCTOLDNAMEDCSNEWNAME", "DCSNEWNAMEDCTOLDNAME", "DAQ1DCTOLDNAMEDACJOHNDCSNEWNAME"],
    )
    def test_primary_code_beats_alias(self, payload):
        assert extract_fields(payload)["lastName"] == "NEWNAME"

    def test_alias_used_when_primary_absent(self):
        assert extract_fields("DCTSMITHDACJOHN") == {"lastName": "SMITH", "firstName": "JOHN"}

    def test_alias_used_when_primary_empty(self):
        assert extract_fields("DCS DCTSMITH")["lastName"] == "SMITH"

    def test_raw_values_are_not_normalized(self):
        assert extract_fields("DBB06151985DAKca")["dateOfBirth"] == "06151985"

    def test_alternate_table(self):
        """Test only codes of the supplied table terminate values."""
        table = FieldTable([AamvaField("licenseNumber", FieldType.LICENSE_NUMBER, ("ZZZ",))])

        assert extract_fields("ZZZ12DAQ34", table) == {"licenseNumber": "12DAQ34"}

    def test_nothing_found(self):
        assert extract_fields("") == {}
        assert extract_fields("hello world") == {}
