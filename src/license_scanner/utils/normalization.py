"""Field normalization utilities for decoded barcode values.

Each normalizer is total: it accepts any string (including garbage from a
partial scan) and returns a string without raising. Values that cannot be
interpreted are passed through so a human reviewer can correct them.
"""

import re
from typing import Any, Callable, Mapping

from ..schemas.field_codes import DEFAULT_FIELD_TABLE, FieldTable, FieldType

_EIGHT_DIGITS = re.compile(r"[0-9]{8}")
_NAME_ILLEGAL = re.compile(r"[^\w\s'-]|_")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_NON_DIGIT = re.compile(r"[^0-9]")


def normalize_date(value: Any) -> str:
    """Normalize an AAMVA date to YYYY-MM-DD.

    Barcodes carry MMDDYYYY (US) or YYYYMMDD (Canada, older layouts). A value
    starting with "19" or "20" is read as YYYYMMDD, anything else as MMDDYYYY.
    Values that are not exactly eight digits are returned unchanged.
    """
    date_str = str(value)
    if not _EIGHT_DIGITS.fullmatch(date_str):
        return date_str

    if date_str.startswith(("19", "20")):
        year, month, day = date_str[:4], date_str[4:6], date_str[6:]
    else:
        month, day, year = date_str[:2], date_str[2:4], date_str[4:]

    return f"{year}-{month}-{day}"


def normalize_name(value: Any) -> str:
    """Strip everything but letters, digits, whitespace, hyphens and apostrophes."""
    return _NAME_ILLEGAL.sub("", str(value).strip()).strip()


def normalize_license_number(value: Any) -> str:
    return _NON_ALPHANUMERIC.sub("", str(value))


def normalize_region_code(value: Any) -> str:
    """Normalize a state or country code."""
    return str(value).strip().upper()


def normalize_zip_code(value: Any) -> str:
    return _NON_DIGIT.sub("", str(value))


def normalize_gender(value: Any) -> str:
    """Collapse gender values to M / F where possible."""
    gender = str(value).strip().upper()
    if gender.startswith("M"):
        return "M"
    if gender.startswith("F"):
        return "F"
    return gender


def normalize_text(value: Any) -> str:
    return str(value).strip()


_NORMALIZERS: dict[FieldType, Callable[[Any], str]] = {
    FieldType.NAME: normalize_name,
    FieldType.DATE: normalize_date,
    FieldType.LICENSE_NUMBER: normalize_license_number,
    FieldType.REGION_CODE: normalize_region_code,
    FieldType.ZIP_CODE: normalize_zip_code,
    FieldType.GENDER: normalize_gender,
    FieldType.TEXT: normalize_text,
}


def get_normalizer(field_type: FieldType) -> Callable[[Any], str]:
    """Get the normalizer for a field type."""
    return _NORMALIZERS[field_type]


def normalize_fields(
    raw_fields: Mapping[str, str],
    table: FieldTable = DEFAULT_FIELD_TABLE,
) -> dict[str, str]:
    """Normalize extracted values by their field definitions.

    Args:
        raw_fields: Dictionary of field name -> raw extracted value
        table: Field table the values were extracted with

    Returns:
        Dictionary of field name -> normalized value. Fields unknown to the
        table, and values that normalize to an empty string, are dropped.
    """
    normalized = {}

    for name, value in raw_fields.items():
        aamva_field = table.get(name)
        if aamva_field is None:
            continue

        result = get_normalizer(aamva_field.field_type)(value)
        if result:
            normalized[name] = result

    return normalized
