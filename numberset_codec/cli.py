import argparse
import logging
import sys
from typing import List, Optional

from .engine import deserialize, serialize
from .report import measure


logger = logging.getLogger(__name__)


def parse_numbers(text: str) -> List[int]:
    """Parse "1, 2,3" into ints; empty tokens are skipped."""
    numbers = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            numbers.append(int(token, 10))
        except ValueError:
            raise ValueError(f"Invalid number: {token}") from None
    return numbers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numberset-codec",
        description="Compact serialization of integer sets in [1, 300].",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    encode = subparsers.add_parser("encode", help='encode numbers, e.g. "1,2,3,300"')
    encode.add_argument("numbers")

    decode = subparsers.add_parser("decode", help='decode a payload, e.g. "B1:..."')
    decode.add_argument("payload")

    stats = subparsers.add_parser("stats", help="show compression metrics for numbers")
    stats.add_argument("numbers")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "encode":
            print(serialize(parse_numbers(args.numbers)))
        elif args.command == "decode":
            print(",".join(str(n) for n in deserialize(args.payload)))
        else:
            stats = measure(parse_numbers(args.numbers))
            print(f"Numbers count: {stats.count}")
            print(f"Simple serialization length: {stats.plain_length} chars")
            print(f"Compressed length: {stats.encoded_length} chars ({stats.marker})")
            print(f"Compression ratio: {stats.ratio:.2f}x")
            print(f"Meets requirement (>=2x): {'YES' if stats.meets_target else 'NO'}")
            print(f"Correctness: {'PASS' if stats.round_trip_ok else 'FAIL'}")
    except ValueError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
