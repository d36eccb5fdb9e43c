"""Decoder for seven-segment displays with scrambled wiring."""

from .errors import SegmentDecoderError, FormatError, DecodeError
from .segments import SEGMENT_NAMES, DIGIT_PATTERNS, UNIQUE_LENGTHS
from .patterns import SegmentPattern, intersect_all
from .parser import InputLine, parse_pattern, parse_line, parse_lines
from .decoder import WireMapping, WiringDecoder, decode_wirings, decode_digits, decode_outputs
from .sat import solve_wiring_sat, count_wiring_solutions
from .verify import verify_mapping, check_line
from .aggregate import PuzzleResult, count_unique_length_outputs, sum_decoded_outputs, solve

__all__ = [
    "SegmentDecoderError",
    "FormatError",
    "DecodeError",
    "SEGMENT_NAMES",
    "DIGIT_PATTERNS",
    "UNIQUE_LENGTHS",
    "SegmentPattern",
    "intersect_all",
    "InputLine",
    "parse_pattern",
    "parse_line",
    "parse_lines",
    "WireMapping",
    "WiringDecoder",
    "decode_wirings",
    "decode_digits",
    "decode_outputs",
    "solve_wiring_sat",
    "count_wiring_solutions",
    "verify_mapping",
    "check_line",
    "PuzzleResult",
    "count_unique_length_outputs",
    "sum_decoded_outputs",
    "solve",
]
__version__ = "0.1.0"
