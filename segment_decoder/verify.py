"""
Verification of deduced wirings.

Decoding the four outputs only exercises part of a wiring. These checks apply
the wiring to all ten sample patterns and require each digit 0-9 exactly once.
"""

from typing import Optional

from .decoder import WireMapping, decode_wirings
from .errors import DecodeError
from .parser import InputLine
from .sat import count_wiring_solutions
from .segments import digit_for_mask


def verify_mapping(line: InputLine, mapping: WireMapping) -> tuple[bool, list[str]]:
    """
    Verify that a wiring decodes the sample patterns to the digits 0-9.

    Args:
        line: The record the wiring was deduced from
        mapping: The wiring to check

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    errors = []

    if not mapping.is_bijection():
        errors.append(f"Wiring {mapping} is not a bijection over a..g")

    seen: dict[int, str] = {}
    for pattern in line.patterns:
        try:
            canonical = mapping.translate(pattern)
        except DecodeError as e:
            errors.append(str(e))
            continue

        digit = digit_for_mask(canonical.mask)
        if digit is None:
            errors.append(
                f"Pattern {str(pattern)!r}: decoded to {str(canonical)!r}, not a digit"
            )
        elif digit in seen:
            errors.append(
                f"Pattern {str(pattern)!r}: digit {digit} already shown by {seen[digit]!r}"
            )
        else:
            seen[digit] = str(pattern)

    missing = sorted(set(range(10)) - set(seen))
    if missing:
        errors.append(f"Digits never shown: {missing}")

    return len(errors) == 0, errors


def check_line(line: InputLine, mapping: Optional[WireMapping] = None, unique: bool = True) -> WireMapping:
    """
    Deduce (if needed) and verify the wiring of a record.

    With `unique`, the SAT solver must also report that no other wiring is
    consistent with the sample patterns.

    Raises:
        DecodeError: listing every failed check
    """
    if mapping is None:
        mapping = decode_wirings(line)

    _, errors = verify_mapping(line, mapping)

    if unique:
        solutions = count_wiring_solutions(line, limit=2)
        if solutions != 1:
            errors.append(f"Expected exactly one consistent wiring, SAT found {solutions}")

    if errors:
        raise DecodeError(f"Verification failed for {line}: " + "; ".join(errors))
    return mapping
