"""AAMVA barcode payload decoder."""

from .header import locate_header
from .segmenter import extract_fields
from .strategies import (
    BEST_EFFORT,
    CODE_SEGMENTED,
    DEFAULT_STRATEGIES,
    LINE_ORIENTED,
    Strategy,
    guess_patterns,
    parse_lines,
    parse_segments,
)
from .orchestrator import decode_payload

__all__ = [
    "decode_payload",
    "locate_header",
    "extract_fields",
    # Strategies
    "Strategy",
    "LINE_ORIENTED",
    "CODE_SEGMENTED",
    "BEST_EFFORT",
    "DEFAULT_STRATEGIES",
    "parse_lines",
    "parse_segments",
    "guess_patterns",
]
