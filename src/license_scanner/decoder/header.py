"""Subfile header location.

Scanners hand us the whole symbol text: an optional compliance indicator,
the "ANSI " file header with its subfile directory, and only then the DL or
ID subfile carrying the data elements. Some readers also prepend noise. The
decoder only cares about where the data elements begin.
"""

from ..schemas.field_codes import DEFAULT_FIELD_TABLE, FieldTable

# Driver's license subfile first, identification card second
SUBFILE_DESIGNATORS = ("DL", "ID")


def find_subfile_start(
    raw_payload: str,
    designator: str,
    table: FieldTable = DEFAULT_FIELD_TABLE,
) -> int:
    """Find a subfile designator that is immediately followed by a known field code.

    The directory entries of the file header ("DL00410278") and letters inside
    field values ("MIDDLETON", "IDAHO") also contain the designator text, so a
    bare substring match is not enough.

    Returns:
        Index of the designator, or -1 when absent
    """
    index = raw_payload.find(designator)
    while index != -1:
        code_start = index + len(designator)
        if raw_payload[code_start:code_start + 3] in table:
            return index
        index = raw_payload.find(designator, index + 1)
    return -1


def has_subfile_header(raw_payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> bool:
    return any(find_subfile_start(raw_payload, d, table) != -1 for d in SUBFILE_DESIGNATORS)


def locate_header(raw_payload: str, table: FieldTable = DEFAULT_FIELD_TABLE) -> str:
    """Return the payload starting at the DL (preferred) or ID subfile.

    Without a recognizable header the whole string is returned unchanged;
    the segmenter copes with leading noise on its own.
    """
    for designator in SUBFILE_DESIGNATORS:
        index = find_subfile_start(raw_payload, designator, table)
        if index != -1:
            return raw_payload[index:]
    return raw_payload
