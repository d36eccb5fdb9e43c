"""
Text rendering of decoded displays and results.
"""

from .aggregate import DecodedLine, PuzzleResult
from .segments import DIGIT_PATTERNS

DIGIT_HEIGHT = 5


def _digit_cells(digit: int) -> list[str]:
    """Rows of one digit, 4 columns wide, in the canonical layout."""
    lit = DIGIT_PATTERNS[digit]

    def seg(label, char):
        return char if label in lit else " " * len(char)

    return [
        f" {seg('a', '--')} ",
        f"{seg('b', '|')}  {seg('c', '|')}",
        f" {seg('d', '--')} ",
        f"{seg('e', '|')}  {seg('f', '|')}",
        f" {seg('g', '--')} ",
    ]


def render_digits(digits: list[int]) -> str:
    """Draw digits side by side as seven-segment art."""
    columns = [_digit_cells(d) for d in digits]
    rows = [" ".join(cells[r] for cells in columns) for r in range(DIGIT_HEIGHT)]
    return "\n".join(row.rstrip() for row in rows)


def format_decoded(decoded: DecodedLine) -> str:
    """Describe one decoded record: value, wiring and art."""
    return "\n".join([
        f"{decoded.value:04d}  wiring: {decoded.mapping}",
        render_digits(decoded.digits),
    ])


def format_result(result: PuzzleResult) -> str:
    """The two solution lines."""
    return "\n".join([
        f"Part 1 solution {result.unique_length_count}",
        f"Part 2 solution {result.decoded_sum}",
    ])
