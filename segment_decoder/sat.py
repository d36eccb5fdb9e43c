"""
SAT encoding of the wiring problem.

Solves the same problem as the set deduction in decoder.py, independently,
so the two can be cross-checked. Encoding:

- x[w][s]: wire w drives canonical segment s
- Each wire drives exactly one segment, each segment has exactly one wire
- y[p][k]: sample pattern p displays digit k (only digits of the same length)
- Each sample pattern displays at least one candidate digit
- y[p][k] => every wire of p drives a segment of digit k

With a bijection and equal lengths, the image of p is exactly digit k.
"""

import logging

from pysat.formula import CNF
from pysat.solvers import Solver

from .decoder import WireMapping
from .errors import DecodeError
from .parser import InputLine
from .segments import SEGMENT_NAMES, DIGIT_PATTERNS

logger = logging.getLogger(__name__)


def _build_cnf(line: InputLine):
    """
    Encode a record as CNF.

    Returns:
        Tuple of (cnf, x) where x[w][s] is the SAT variable for wire w
        driving segment s, or (None, x) if some pattern has no candidate digit
    """
    n = len(SEGMENT_NAMES)
    cnf = CNF()
    var_counter = [1]

    def new_var():
        v = var_counter[0]
        var_counter[0] += 1
        return v

    x = {w: {s: new_var() for s in SEGMENT_NAMES} for w in SEGMENT_NAMES}

    # Constraint 1: each wire drives exactly one segment
    for w in SEGMENT_NAMES:
        cnf.append([x[w][s] for s in SEGMENT_NAMES])
        for i in range(n):
            for j in range(i + 1, n):
                cnf.append([-x[w][SEGMENT_NAMES[i]], -x[w][SEGMENT_NAMES[j]]])

    # Constraint 2: each segment is driven by exactly one wire
    for s in SEGMENT_NAMES:
        cnf.append([x[w][s] for w in SEGMENT_NAMES])
        for i in range(n):
            for j in range(i + 1, n):
                cnf.append([-x[SEGMENT_NAMES[i]][s], -x[SEGMENT_NAMES[j]][s]])

    # Constraint 3: every sample pattern shows some digit of its length
    for pattern in line.patterns:
        candidates = [d for d, p in DIGIT_PATTERNS.items() if len(p) == len(pattern)]
        if not candidates:
            return None, x

        y = {d: new_var() for d in candidates}
        cnf.append([y[d] for d in candidates])

        for d in candidates:
            for wire in pattern:
                cnf.append([-y[d]] + [x[wire][s] for s in DIGIT_PATTERNS[d]])

    return cnf, x


def _decode_model(model: set[int], x) -> WireMapping:
    table = {}
    for w in SEGMENT_NAMES:
        for s in SEGMENT_NAMES:
            if x[w][s] in model:
                table[w] = s
    return WireMapping.from_dict(table)


def enumerate_wirings(line: InputLine, limit: int = 2) -> list[WireMapping]:
    """
    Find up to `limit` distinct wirings consistent with the sample patterns.

    Each solution found is blocked before solving again.
    """
    cnf, x = _build_cnf(line)
    if cnf is None:
        return []

    found = []
    with Solver(bootstrap_with=cnf) as solver:
        while len(found) < limit and solver.solve():
            model = set(solver.get_model())
            found.append(_decode_model(model, x))

            # Block this exact assignment of wires
            chosen = [x[w][s] for w in SEGMENT_NAMES for s in SEGMENT_NAMES if x[w][s] in model]
            solver.add_clause([-v for v in chosen])

    logger.debug("SAT found %d wiring(s) for %s", len(found), line)
    return found


def solve_wiring_sat(line: InputLine) -> WireMapping:
    """
    Solve a record's wiring with a SAT solver.

    Raises:
        DecodeError: unless exactly one wiring is consistent with the
            sample patterns
    """
    solutions = enumerate_wirings(line, limit=2)
    if not solutions:
        raise DecodeError(f"SAT solver found no wiring for {line}")
    if len(solutions) > 1:
        raise DecodeError(f"Sample patterns do not determine a single wiring for {line}")
    return solutions[0]


def count_wiring_solutions(line: InputLine, limit: int = 2) -> int:
    """Number of consistent wirings, capped at `limit`."""
    return len(enumerate_wirings(line, limit))
