"""
Parser for scrambled display records.

Each record reads `P1 P2 ... P10 | O1 O2 O3 O4`: ten unique signal patterns,
a literal ` | ` separator, then the four output patterns to decode.

Only the separator and the label alphabet are checked here. Pattern counts,
duplicates and digit coverage are preconditions of the decoder, which fails
with DecodeError when they do not hold.
"""

from dataclasses import dataclass
from typing import Iterable

from .errors import FormatError
from .patterns import SegmentPattern

SEPARATOR = " | "


@dataclass(frozen=True)
class InputLine:
    """One puzzle record: sample patterns plus output patterns."""

    patterns: tuple[SegmentPattern, ...]
    outputs: tuple[SegmentPattern, ...]

    def patterns_by_length(self) -> dict[int, list[SegmentPattern]]:
        """Group the sample patterns by segment count."""
        groups: dict[int, list[SegmentPattern]] = {}
        for pattern in self.patterns:
            groups.setdefault(len(pattern), []).append(pattern)
        return groups

    def __str__(self) -> str:
        return (
            " ".join(str(p) for p in self.patterns)
            + SEPARATOR
            + " ".join(str(p) for p in self.outputs)
        )


def parse_pattern(token: str) -> SegmentPattern:
    """Normalize one token into a pattern; character order is ignored."""
    return SegmentPattern.from_string(token)


def parse_line(line: str) -> InputLine:
    """
    Parse a single record.

    Raises:
        FormatError: if the ` | ` separator is absent or a token holds a
            character outside a..g
    """
    text = line.rstrip("\r\n")
    patterns, sep, outputs = text.partition(SEPARATOR)
    if not sep:
        raise FormatError(f"Malformed input {text!r}: missing {SEPARATOR.strip()!r} separator")

    return InputLine(
        patterns=tuple(parse_pattern(t) for t in patterns.split()),
        outputs=tuple(parse_pattern(t) for t in outputs.split()),
    )


def parse_lines(lines: Iterable[str]) -> list[InputLine]:
    """
    Parse every record from a line source, stopping at the first bad one.

    Blank lines are skipped. Errors are re-raised with the 1-based line number.
    """
    records = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_line(line))
        except FormatError as e:
            raise FormatError(f"line {number}: {e}") from e
    return records
