#!/usr/bin/env python3
"""
Check the wiring deduction against every possible scrambling.

Scrambles the canonical digit patterns with each of the 7! = 5040 wire
permutations, deduces the wiring, and compares it with the permutation used.
Chunks of permutations are checked in parallel processes.
"""

import argparse
import itertools
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed

from segment_decoder.decoder import WireMapping, decode_outputs, decode_wirings
from segment_decoder.errors import DecodeError
from segment_decoder.sat import solve_wiring_sat
from segment_decoder.scramble import scrambled_line
from segment_decoder.segments import SEGMENT_NAMES


def check_chunk(args):
    """Check a chunk of permutations. Run in separate process."""
    perms, use_sat = args
    failures = []

    for perm in perms:
        line = scrambled_line(perm, seed="".join(perm))
        expected = WireMapping.from_dict(dict(zip(perm, SEGMENT_NAMES)))
        try:
            mapping = decode_wirings(line)
            if mapping != expected:
                failures.append(f"{''.join(perm)}: deduced {mapping}, expected {expected}")
                continue
            if decode_outputs(line, mapping) != 5353:
                failures.append(f"{''.join(perm)}: wrong output value")
            if use_sat and solve_wiring_sat(line) != expected:
                failures.append(f"{''.join(perm)}: SAT wiring differs")
        except DecodeError as e:
            failures.append(f"{''.join(perm)}: {e}")

    return len(perms), failures


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--sat", action="store_true", help="Also cross-check with the SAT solver")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default: CPU count)")
    parser.add_argument("--chunk", type=int, default=252, help="Permutations per task (default: 252)")
    args = parser.parse_args()

    perms = list(itertools.permutations(SEGMENT_NAMES))
    chunks = [perms[i:i + args.chunk] for i in range(0, len(perms), args.chunk)]

    print("=" * 60)
    print(f"Checking {len(perms)} wire permutations in {len(chunks)} chunks")
    print("=" * 60)

    start = time.time()
    checked = 0
    failures = []

    with ProcessPoolExecutor(max_workers=args.workers) as executor:
        futures = [executor.submit(check_chunk, (chunk, args.sat)) for chunk in chunks]
        for future in as_completed(futures):
            n, chunk_failures = future.result()
            checked += n
            failures.extend(chunk_failures)
            print(f"  {checked}/{len(perms)} checked, {len(failures)} failure(s)", flush=True)

    print()
    print(f"Done in {time.time() - start:.1f}s")
    for failure in failures[:20]:
        print(f"  FAIL {failure}")

    return 0 if not failures else 1


if __name__ == "__main__":
    sys.exit(main())
