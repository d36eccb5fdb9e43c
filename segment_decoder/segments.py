"""
Canonical seven-segment tables.

7-segment display layout (canonical labels):
     aaaa
    b    c
    b    c
     dddd
    e    f
    e    f
     gggg

Segments are stored as a 7-bit mask, bit 0 = a ... bit 6 = g.
"""

from typing import Optional

SEGMENT_NAMES = ['a', 'b', 'c', 'd', 'e', 'f', 'g']

FULL_MASK = (1 << len(SEGMENT_NAMES)) - 1

# Canonical lit segments for each digit
DIGIT_PATTERNS = {
    0: "abcefg",
    1: "cf",
    2: "acdeg",
    3: "acdfg",
    4: "bcdf",
    5: "abdfg",
    6: "abdefg",
    7: "acf",
    8: "abcdefg",
    9: "abcdfg",
}


def segment_bit(label: str) -> int:
    """Bit for a single segment label, or -1 if it is not one of a..g."""
    if len(label) != 1 or label not in SEGMENT_NAMES:
        return -1
    return 1 << (ord(label) - ord('a'))


def labels_to_mask(labels: str) -> int:
    """Convert canonical labels to a mask. Caller guarantees labels are a..g."""
    mask = 0
    for label in labels:
        mask |= segment_bit(label)
    return mask


def mask_to_labels(mask: int) -> str:
    """Sorted labels for the bits set in mask."""
    return "".join(s for i, s in enumerate(SEGMENT_NAMES) if mask & (1 << i))


# Canonical mask -> digit, built once and never mutated
MASK_TO_DIGIT = {labels_to_mask(p): d for d, p in DIGIT_PATTERNS.items()}

DIGIT_TO_MASK = {d: m for m, d in MASK_TO_DIGIT.items()}

# Segment counts shared by no other digit: 1, 7, 4, 8
UNIQUE_LENGTHS = {
    len(p): d
    for d, p in DIGIT_PATTERNS.items()
    if sum(len(q) == len(p) for q in DIGIT_PATTERNS.values()) == 1
}


def digit_for_mask(mask: int) -> Optional[int]:
    """Look up a canonical mask in the digit table."""
    return MASK_TO_DIGIT.get(mask)


def print_digit_table():
    """Print the canonical digit table."""
    print("Canonical 7-Segment Digit Table")
    print("=" * 40)
    print(f"{'Digit':>5} | {'Count':>5} | ", end="")
    print(" ".join(SEGMENT_NAMES))
    print("-" * 40)

    for digit, pattern in DIGIT_PATTERNS.items():
        segments = " ".join(
            "1" if s in pattern else "0" for s in SEGMENT_NAMES
        )
        print(f"{digit:>5} | {len(pattern):>5} | {segments}")


if __name__ == "__main__":
    print_digit_table()
