"""Field segmentation by next-code-as-terminator.

Real captures include or drop the LF / RS / CR separators of the AAMVA
layout inconsistently, so element boundaries are found from the field codes
themselves: a value runs from the end of its code to the start of whichever
other known code comes next.
"""

from typing import Iterable, Optional

from ..schemas.field_codes import DEFAULT_FIELD_TABLE, FieldTable

CODE_LENGTH = 3


def extract_code_value(payload: str, code: str, codes: Iterable[str]) -> Optional[str]:
    """Extract the trimmed value following the first occurrence of code.

    Args:
        payload: Text to search
        code: Field code whose value we want
        codes: Every known field code (terminator candidates)

    Returns:
        Trimmed value, or None when the code is absent or its value is empty
    """
    position = payload.find(code)
    if position == -1:
        return None

    start = position + CODE_LENGTH
    end = len(payload)
    for other in codes:
        if other == code:
            continue
        index = payload.find(other, start)
        if index != -1 and index < end:
            end = index

    value = payload[start:end].strip()
    return value or None


def extract_fields(payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> dict[str, str]:
    """Extract raw values for every field of the table found in payload.

    Codes of a field are tried in precedence order; an alias is only used
    when every earlier code is absent or empty.

    Returns:
        Dictionary of field name -> raw trimmed value, found fields only
    """
    codes = table.codes
    fields: dict[str, str] = {}

    for aamva_field in table:
        for code in aamva_field.codes:
            value = extract_code_value(payload, code, codes)
            if value is not None:
                fields[aamva_field.name] = value
                break

    return fields
