"""Records for a known wiring, for checking the decoders."""

import random

from .parser import InputLine
from .patterns import SegmentPattern
from .segments import SEGMENT_NAMES, DIGIT_PATTERNS


def scrambled_line(perm, outputs=(5, 3, 5, 3), seed=0) -> InputLine:
    """
    Build the record a display would show with wire perm[i] driving
    canonical segment SEGMENT_NAMES[i].

    The ten samples are shuffled with `seed`; `outputs` are the digits shown.
    """
    to_wire = dict(zip(SEGMENT_NAMES, perm))

    def scramble(digit):
        return SegmentPattern.from_labels(to_wire[s] for s in DIGIT_PATTERNS[digit])

    digits = list(range(10))
    random.Random(seed).shuffle(digits)
    return InputLine(
        patterns=tuple(scramble(d) for d in digits),
        outputs=tuple(scramble(d) for d in outputs),
    )
