"""Command-line interface for decoding scrambled seven-segment displays."""

import argparse
import logging
import sys

from .aggregate import solve
from .decoder import METHODS
from .errors import SegmentDecoderError
from .parser import parse_lines
from .render import format_decoded, format_result
from .segments import print_digit_table


def read_records(path: str):
    """Parse records from a file, or from standard input for "-"."""
    if path == "-":
        return parse_lines(sys.stdin)
    with open(path) as f:
        return parse_lines(f)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Decode seven-segment displays with scrambled wiring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  segment-decode < input.txt          Read records from standard input
  segment-decode input.txt            Read records from a file
  segment-decode --method sat FILE    Solve wirings with a SAT solver
  segment-decode --verify FILE        Cross-check every deduced wiring
  segment-decode --show FILE          Draw each decoded value
  segment-decode --digit-table        Show the canonical digit table
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file, one record per line (default: standard input)",
    )
    parser.add_argument(
        "--method", "-m",
        choices=METHODS,
        default="deduce",
        help="Wiring method (default: deduce)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check each wiring decodes all ten samples and is unique",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print each decoded value as seven-segment art",
    )
    parser.add_argument(
        "--digit-table",
        action="store_true",
        help="Print the canonical digit table and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.digit_table:
        print_digit_table()
        return 0

    try:
        records = read_records(args.input)
        result = solve(records, method=args.method, verify=args.verify)
    except (SegmentDecoderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if args.show:
        for decoded in result.decoded:
            print(format_decoded(decoded))
            print()

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
