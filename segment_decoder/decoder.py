"""
Wiring decoder for scrambled seven-segment displays.

Deduces which scrambled wire drives which canonical segment using only pattern
lengths and set algebra:

    Known patterns: 1 (2 segments), 7 (3), 4 (4), 8 (7)
    7 difference 1              => a
    intersect all 5-segment     => adg
    adg intersect 4             => d
    adg difference ad           => g
    4 difference 1              => bd
    bd difference d             => b
    8 difference abdg           => cef
    cef difference 1            => e
    intersect all 6-segment     => abfg
    abfg difference abg         => f
    1 difference f              => c

Every intermediate must have exactly the expected size; anything else means
the record is unsolvable and DecodeError is raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import DecodeError
from .parser import InputLine
from .patterns import SegmentPattern, intersect_all
from .segments import SEGMENT_NAMES, digit_for_mask

logger = logging.getLogger(__name__)

METHODS = ("deduce", "sat")


@dataclass(frozen=True)
class WireMapping:
    """
    Bijection from scrambled wire label to canonical segment label.

    Stored as sorted (wire, segment) pairs so instances are immutable and
    compare equal regardless of construction order.
    """

    pairs: tuple[tuple[str, str], ...]

    @classmethod
    def from_dict(cls, table: dict[str, str]) -> "WireMapping":
        return cls(tuple(sorted(table.items())))

    def as_dict(self) -> dict[str, str]:
        return dict(self.pairs)

    def __getitem__(self, wire: str) -> str:
        for w, segment in self.pairs:
            if w == wire:
                return segment
        raise KeyError(wire)

    def __len__(self) -> int:
        return len(self.pairs)

    def is_bijection(self) -> bool:
        """True if every canonical segment is driven by exactly one wire."""
        wires = [w for w, _ in self.pairs]
        segments = [s for _, s in self.pairs]
        return (
            sorted(wires) == SEGMENT_NAMES
            and sorted(segments) == SEGMENT_NAMES
        )

    def translate(self, pattern: SegmentPattern) -> SegmentPattern:
        """Map a scrambled pattern onto canonical segment labels."""
        table = self.as_dict()
        labels = []
        for wire in pattern:
            if wire not in table:
                raise DecodeError(
                    f"Failed to decode pattern {str(pattern)!r} with wiring {self}"
                )
            labels.append(table[wire])
        return SegmentPattern.from_labels(labels)

    def __str__(self) -> str:
        return " ".join(f"{w}->{s}" for w, s in self.pairs)


def _only(groups: dict[int, list[SegmentPattern]], length: int) -> SegmentPattern:
    """The unique sample pattern with the given segment count."""
    found = groups.get(length, [])
    if len(found) != 1:
        raise DecodeError(
            f"Expected exactly one {length}-segment pattern, found {len(found)}"
        )
    return found[0]


def _group(groups: dict[int, list[SegmentPattern]], length: int) -> list[SegmentPattern]:
    """The three sample patterns sharing a segment count of 5 or 6."""
    found = groups.get(length, [])
    if len(found) != 3:
        raise DecodeError(
            f"Expected three {length}-segment patterns, found {len(found)}"
        )
    return found


def _expect(pattern: SegmentPattern, size: int, name: str) -> SegmentPattern:
    if len(pattern) != size:
        raise DecodeError(
            f"Deduction of {name} expected {size} segment(s), got {str(pattern)!r}"
        )
    return pattern


def _single(pattern: SegmentPattern, name: str) -> SegmentPattern:
    return _expect(pattern, 1, name)


def decode_wirings(line: InputLine) -> WireMapping:
    """
    Deduce the wire-to-segment mapping for one record.

    Args:
        line: A parsed record holding the ten sample patterns

    Returns:
        The complete WireMapping for this record

    Raises:
        DecodeError: if any deduction step does not isolate its segment
    """
    groups = line.patterns_by_length()

    # Known patterns for 1, 7, 4, 8
    cf = _only(groups, 2)
    acf = _only(groups, 3)
    bcdf = _only(groups, 4)
    abcdefg = _only(groups, 7)

    a = _single(acf - cf, "a")

    adg = _expect(intersect_all(_group(groups, 5)), 3, "adg")
    d = _single(adg & bcdf, "d")
    g = _single(adg - (a | d), "g")

    bd = _expect(bcdf - cf, 2, "bd")
    b = _single(bd - d, "b")

    cef = _expect(abcdefg - (a | b | d | g), 3, "cef")
    e = _single(cef - cf, "e")

    abfg = _expect(intersect_all(_group(groups, 6)), 4, "abfg")
    f = _single(abfg - (a | b | g), "f")

    c = _single(cf - f, "c")

    solution = {}
    for wire, segment in ((a, 'a'), (b, 'b'), (c, 'c'), (d, 'd'), (e, 'e'), (f, 'f'), (g, 'g')):
        solution[str(wire)] = segment

    mapping = WireMapping.from_dict(solution)
    if not mapping.is_bijection():
        raise DecodeError(f"Deduced wiring is not a bijection: {mapping}")

    logger.debug("Deduced wiring %s for %s", mapping, line)
    return mapping


def decode_digits(line: InputLine, mapping: Optional[WireMapping] = None) -> list[int]:
    """Decode each output pattern of a record into its digit."""
    if mapping is None:
        mapping = decode_wirings(line)

    digits = []
    for pattern in line.outputs:
        canonical = mapping.translate(pattern)
        digit = digit_for_mask(canonical.mask)
        if digit is None:
            raise DecodeError(
                f"Bad decoded pattern {str(canonical)!r} (from {str(pattern)!r})"
            )
        digits.append(digit)
    return digits


def digits_to_number(digits: list[int]) -> int:
    """Concatenate decimal digits, most significant first."""
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value


def decode_outputs(line: InputLine, mapping: Optional[WireMapping] = None) -> int:
    """Decode the output patterns of a record into a single number."""
    return digits_to_number(decode_digits(line, mapping))


class WiringDecoder:
    """
    Decodes records with a selectable wiring method.

    Methods:
    1. deduce: closed-form set deduction (default)
    2. sat: SAT encoding solved with python-sat, used as a cross-check
    """

    def __init__(self, method: str = "deduce"):
        if method not in METHODS:
            raise ValueError(f"Unknown method {method!r}, expected one of {METHODS}")
        self.method = method

    def wirings(self, line: InputLine) -> WireMapping:
        if self.method == "sat":
            from .sat import solve_wiring_sat
            return solve_wiring_sat(line)
        return decode_wirings(line)

    def decode(self, line: InputLine) -> int:
        return decode_outputs(line, self.wirings(line))
