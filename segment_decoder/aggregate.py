"""Totals over a batch of records."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .decoder import WireMapping, WiringDecoder, decode_digits, digits_to_number
from .parser import InputLine
from .segments import UNIQUE_LENGTHS
from .verify import check_line

logger = logging.getLogger(__name__)


@dataclass
class DecodedLine:
    """Decoding of a single record."""

    line: InputLine
    mapping: WireMapping
    digits: list[int]

    @property
    def value(self) -> int:
        return digits_to_number(self.digits)


@dataclass
class PuzzleResult:
    """Both answers for a batch, plus the per-record decodings."""

    unique_length_count: int
    decoded_sum: int
    decoded: list[DecodedLine] = field(default_factory=list)


def count_unique_length_outputs(lines: Iterable[InputLine]) -> int:
    """Count output patterns showing 1, 7, 4 or 8 (2, 3, 4 or 7 segments)."""
    return sum(
        1
        for line in lines
        for pattern in line.outputs
        if len(pattern) in UNIQUE_LENGTHS
    )


def decode_lines(
    lines: Iterable[InputLine],
    method: str = "deduce",
    verify: bool = False,
) -> list[DecodedLine]:
    """
    Decode every record, stopping at the first DecodeError.

    Args:
        lines: Parsed records
        method: Wiring method, "deduce" or "sat"
        verify: Check every wiring against all ten sample patterns and
            require it to be the only consistent wiring
    """
    decoder = WiringDecoder(method)
    decoded = []

    for index, line in enumerate(lines):
        mapping = decoder.wirings(line)
        if verify:
            check_line(line, mapping)
        digits = decode_digits(line, mapping)
        logger.debug("Record %d decoded to %s", index + 1, digits)
        decoded.append(DecodedLine(line=line, mapping=mapping, digits=digits))

    return decoded


def sum_decoded_outputs(lines: Iterable[InputLine], method: str = "deduce", verify: bool = False) -> int:
    """Sum the decoded four-digit values of every record."""
    return sum(d.value for d in decode_lines(lines, method, verify))


def solve(lines: list[InputLine], method: str = "deduce", verify: bool = False) -> PuzzleResult:
    """Compute both answers for a batch of records."""
    decoded = decode_lines(lines, method, verify)
    result = PuzzleResult(
        unique_length_count=count_unique_length_outputs(lines),
        decoded_sum=sum(d.value for d in decoded),
        decoded=decoded,
    )
    logger.info(
        "Solved %d record(s): %d unique-length outputs, sum %d",
        len(lines), result.unique_length_count, result.decoded_sum,
    )
    return result
