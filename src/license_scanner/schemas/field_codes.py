"""AAMVA field code definitions.

This module defines the three-letter element identifiers of the AAMVA
driver's license / ID card subfile that we extract, which record field each
one populates, and which normalizer applies to the extracted value.

A record field may be fed by more than one code (a legacy alias). Codes are
listed in precedence order: the first code present with a non-empty value
wins, later codes are only consulted when earlier ones are absent.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Optional


class FieldType(str, Enum):
    """Normalization families for extracted values."""

    NAME = "name"
    DATE = "date"
    LICENSE_NUMBER = "license_number"
    REGION_CODE = "region_code"  # state / country
    ZIP_CODE = "zip_code"
    GENDER = "gender"
    TEXT = "text"


# Closed set of record field names, in output order
RECORD_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "middleName",
    "dateOfBirth",
    "licenseNumber",
    "expirationDate",
    "address",
    "city",
    "state",
    "zipCode",
    "gender",
    "documentDiscriminator",
    "country",
    "nameSuffix",
)


@dataclass(frozen=True)
class AamvaField:
    """Definition of a single record field and the codes that carry it."""

    name: str  # Record field name (camelCase)
    field_type: FieldType
    codes: tuple[str, ...]  # Precedence order, primary first
    description: str = ""
    pii: bool = False  # Contains PII - should be masked in logs

    @property
    def primary_code(self) -> str:
        return self.codes[0]


class FieldTable:
    """Immutable, ordered mapping between AAMVA codes and record fields.

    Tables are plain values: the decoder takes one as an argument, so tests
    and future AAMVA revisions can supply an alternate or extended table.
    """

    def __init__(self, fields: Iterable[AamvaField]):
        self._fields = tuple(fields)

        by_code: dict[str, AamvaField] = {}
        by_name: dict[str, AamvaField] = {}
        for aamva_field in self._fields:
            if aamva_field.name not in RECORD_FIELDS:
                raise ValueError(f"Unknown record field: {aamva_field.name}")
            if aamva_field.name in by_name:
                raise ValueError(f"Record field '{aamva_field.name}' defined twice")
            if not aamva_field.codes:
                raise ValueError(f"Record field '{aamva_field.name}' has no field codes")
            for code in aamva_field.codes:
                if len(code) != 3 or not code.isalpha() or not code.isupper():
                    raise ValueError(f"Field code must be three uppercase letters: {code!r}")
                if code in by_code:
                    raise ValueError(
                        f"Field code {code} maps to both '{by_code[code].name}' "
                        f"and '{aamva_field.name}'"
                    )
                by_code[code] = aamva_field
            by_name[aamva_field.name] = aamva_field

        self._by_code = MappingProxyType(by_code)
        self._by_name = MappingProxyType(by_name)

    def __iter__(self) -> Iterator[AamvaField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"FieldTable({[f.name for f in self._fields]!r})"

    @property
    def codes(self) -> tuple[str, ...]:
        """All known codes, in table order."""
        return tuple(self._by_code)

    def field_for_code(self, code: str) -> Optional[AamvaField]:
        return self._by_code.get(code)

    def get(self, name: str) -> Optional[AamvaField]:
        return self._by_name.get(name)

    def entries(self) -> list[tuple[str, str, int]]:
        """Flatten to (code, field name, precedence rank) tuples; rank 0 is primary."""
        return [
            (code, aamva_field.name, rank)
            for aamva_field in self._fields
            for rank, code in enumerate(aamva_field.codes)
        ]

    def extend(self, *fields: AamvaField) -> "FieldTable":
        """Return a new table with extra fields, or with fields replaced by name."""
        replaced = {f.name: f for f in fields}
        merged = [replaced.pop(f.name, f) for f in self._fields]
        merged.extend(replaced.values())
        return FieldTable(merged)


# ============================================================
# AAMVA DL/ID SUBFILE FIELDS
# ============================================================

DEFAULT_FIELD_TABLE = FieldTable(
    [
        AamvaField(
            name="firstName",
            field_type=FieldType.NAME,
            codes=("DAC",),
            description="Customer first name",
            pii=True,
        ),
        AamvaField(
            name="lastName",
            field_type=FieldType.NAME,
            codes=("DCS", "DCT"),  # DCT: pre-2009 layouts
            description="Customer family name",
            pii=True,
        ),
        AamvaField(
            name="middleName",
            field_type=FieldType.NAME,
            codes=("DAD",),
            description="Customer middle name(s)",
            pii=True,
        ),
        AamvaField(
            name="dateOfBirth",
            field_type=FieldType.DATE,
            codes=("DBB",),
            description="Date of birth",
            pii=True,
        ),
        AamvaField(
            name="licenseNumber",
            field_type=FieldType.LICENSE_NUMBER,
            codes=("DAQ",),
            description="Customer ID number (license number)",
            pii=True,
        ),
        AamvaField(
            name="expirationDate",
            field_type=FieldType.DATE,
            codes=("DBA",),
            description="Document expiration date",
        ),
        AamvaField(
            name="address",
            field_type=FieldType.TEXT,
            codes=("DAG",),
            description="Address - street 1",
            pii=True,
        ),
        AamvaField(
            name="city",
            field_type=FieldType.TEXT,
            codes=("DAI",),
            description="Address - city",
        ),
        AamvaField(
            name="state",
            field_type=FieldType.REGION_CODE,
            codes=("DAJ",),
            description="Address - jurisdiction code",
        ),
        AamvaField(
            name="zipCode",
            field_type=FieldType.ZIP_CODE,
            codes=("DAK",),
            description="Address - postal code",
            pii=True,
        ),
        AamvaField(
            name="gender",
            field_type=FieldType.GENDER,
            codes=("DBC",),
            description="Physical description - sex",
        ),
        AamvaField(
            name="documentDiscriminator",
            field_type=FieldType.TEXT,
            codes=("DCF",),
            description="Document discriminator",
            pii=True,
        ),
        AamvaField(
            name="country",
            field_type=FieldType.REGION_CODE,
            codes=("DCG",),
            description="Country identification",
        ),
        AamvaField(
            name="nameSuffix",
            field_type=FieldType.NAME,
            codes=("DCU", "DDE"),
            description="Name suffix",
        ),
    ]
)


def get_field_table() -> FieldTable:
    """Get the default AAMVA field table."""
    return DEFAULT_FIELD_TABLE


def get_pii_fields(table: FieldTable = DEFAULT_FIELD_TABLE) -> list[str]:
    """Get names of fields flagged as PII."""
    return [f.name for f in table if f.pii]
