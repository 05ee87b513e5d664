"""Decode strategies.

Every strategy shares one signature, ``(raw_payload, table) -> LicenseRecord``,
and returns an already-normalized (possibly empty) record. The orchestrator
tries them in order:

1. LINE_ORIENTED: one element per line, the layout a clean scan produces.
2. CODE_SEGMENTED: next-code-as-terminator segmentation from the subfile
   header on, for captures whose separators were dropped.
3. BEST_EFFORT: regex guesses over the raw text for a few common shapes,
   for payloads in which no field code survived at all.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.models import DecodeStrategy, LicenseRecord
from ..schemas.field_codes import DEFAULT_FIELD_TABLE, FieldTable
from ..utils.normalization import normalize_fields
from .header import SUBFILE_DESIGNATORS, find_subfile_start, locate_header
from .segmenter import CODE_LENGTH, extract_fields

StrategyFunc = Callable[[str, FieldTable], LicenseRecord]

_LINE_BREAK = re.compile(r"[\r\n]+")

# Best-effort shapes
_DATE_RUN = re.compile(r"(?<![A-Za-z0-9])[0-9]{8}(?![A-Za-z0-9])")
_STATE_ZIP = re.compile(r"(?<![A-Za-z0-9])([A-Z]{2})\s*([0-9]{5}(?:-?[0-9]{4})?)(?![A-Za-z0-9])")
_LICENSE_RUN = re.compile(r"(?<![A-Za-z0-9])[A-Z](?=[A-Z]*[0-9])[A-Z0-9]{4,19}(?![A-Za-z0-9])")


@dataclass(frozen=True)
class Strategy:
    """A named decode strategy."""

    name: DecodeStrategy
    parse: StrategyFunc
    structured: bool  # Parsed from field codes rather than guessed


def _build_record(raw_fields: dict[str, str], table: FieldTable) -> LicenseRecord:
    return LicenseRecord.from_dict(normalize_fields(raw_fields, table))


def _element_start(line: str, table: FieldTable) -> Optional[int]:
    """Index of the field code a line carries, or None."""
    if line[:CODE_LENGTH] in table:
        return 0

    # The header line carries the first element right after the subfile designator
    for designator in SUBFILE_DESIGNATORS:
        index = find_subfile_start(line, designator, table)
        if index != -1:
            return index + len(designator)
    return None


def parse_lines(raw_payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> LicenseRecord:
    """Parse one ``<code><value>`` element per line.

    Only applies to payloads with a line break. A line's value runs to the end
    of the line, so a run-together data line yields a single element.
    """
    if not _LINE_BREAK.search(raw_payload):
        return LicenseRecord()

    values_by_code: dict[str, str] = {}
    for line in _LINE_BREAK.split(raw_payload):
        line = line.strip()
        start = _element_start(line, table)
        if start is None:
            continue

        code = line[start:start + CODE_LENGTH]
        value = line[start + CODE_LENGTH:].strip()
        if value:
            values_by_code.setdefault(code, value)

    raw_fields = {}
    for aamva_field in table:
        for code in aamva_field.codes:
            if code in values_by_code:
                raw_fields[aamva_field.name] = values_by_code[code]
                break

    return _build_record(raw_fields, table)


def parse_segments(raw_payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> LicenseRecord:
    """Segment the payload on field codes, starting at the subfile header."""
    payload = locate_header(raw_payload, table)
    return _build_record(extract_fields(payload, table), table)


def guess_patterns(raw_payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> LicenseRecord:
    """Guess a few fields from common value shapes.

    - first standalone 8-digit run: date of birth
    - two capitals followed by a 5 (or 9) digit run: state and zip code
    - capital letter followed by 4-19 capitals/digits, containing a digit and
      not part of the state/zip match: license number
    """
    raw_fields: dict[str, str] = {}

    date_match = _DATE_RUN.search(raw_payload)
    if date_match:
        raw_fields["dateOfBirth"] = date_match.group()

    state_zip = _STATE_ZIP.search(raw_payload)
    if state_zip:
        raw_fields["state"] = state_zip.group(1)
        raw_fields["zipCode"] = state_zip.group(2)

    for match in _LICENSE_RUN.finditer(raw_payload):
        if state_zip and match.start() < state_zip.end() and state_zip.start() < match.end():
            continue
        raw_fields["licenseNumber"] = match.group()
        break

    return _build_record(raw_fields, table)


LINE_ORIENTED = Strategy(DecodeStrategy.LINE_ORIENTED, parse_lines, structured=True)
CODE_SEGMENTED = Strategy(DecodeStrategy.CODE_SEGMENTED, parse_segments, structured=True)
BEST_EFFORT = Strategy(DecodeStrategy.BEST_EFFORT, guess_patterns, structured=False)

DEFAULT_STRATEGIES: tuple[Strategy, ...] = (LINE_ORIENTED, CODE_SEGMENTED, BEST_EFFORT)
