"""AAMVA field code schemas."""

from .field_codes import (
    AamvaField,
    DEFAULT_FIELD_TABLE,
    FieldTable,
    FieldType,
    RECORD_FIELDS,
    get_field_table,
    get_pii_fields,
)

__all__ = [
    "AamvaField",
    "DEFAULT_FIELD_TABLE",
    "FieldTable",
    "FieldType",
    "RECORD_FIELDS",
    "get_field_table",
    "get_pii_fields",
]
