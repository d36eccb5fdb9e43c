"""
Signal patterns as 7-bit sets.

A pattern is the set of wire labels lit for one digit. Character order in the
input is irrelevant: "acedgfb" and "bfcagde" are the same pattern.
"""

from dataclasses import dataclass
from typing import Iterator

from .errors import FormatError
from .segments import FULL_MASK, segment_bit, mask_to_labels


@dataclass(frozen=True)
class SegmentPattern:
    """
    An unordered set of labels drawn from a..g.

    Represented by a mask:
    - Bit 0 = a
    - Bit 6 = g

    Equality, intersection and difference are single integer operations.
    """

    mask: int

    @classmethod
    def from_string(cls, token: str) -> "SegmentPattern":
        """Build a pattern from a token such as "cdfbe"."""
        mask = 0
        for char in token:
            bit = segment_bit(char)
            if bit < 0:
                raise FormatError(f"Invalid segment label {char!r} in {token!r}")
            mask |= bit
        return cls(mask)

    @classmethod
    def from_labels(cls, labels) -> "SegmentPattern":
        return cls.from_string("".join(labels))

    def __len__(self) -> int:
        return bin(self.mask).count('1')

    def __iter__(self) -> Iterator[str]:
        return iter(mask_to_labels(self.mask))

    def __contains__(self, label: str) -> bool:
        bit = segment_bit(label)
        return bit > 0 and bool(self.mask & bit)

    def __and__(self, other: "SegmentPattern") -> "SegmentPattern":
        return SegmentPattern(self.mask & other.mask)

    def __or__(self, other: "SegmentPattern") -> "SegmentPattern":
        return SegmentPattern(self.mask | other.mask)

    def __sub__(self, other: "SegmentPattern") -> "SegmentPattern":
        return SegmentPattern(self.mask & ~other.mask & FULL_MASK)

    def __str__(self) -> str:
        return mask_to_labels(self.mask)

    def __repr__(self):
        return f"SegmentPattern({str(self)!r})"


EMPTY = SegmentPattern(0)

ALL_SEGMENTS = SegmentPattern(FULL_MASK)


def intersect_all(patterns) -> SegmentPattern:
    """Fold-intersect a group of patterns. An empty group yields the empty set."""
    patterns = list(patterns)
    if not patterns:
        return EMPTY

    result = patterns[0]
    for pattern in patterns[1:]:
        result = result & pattern
    return result
