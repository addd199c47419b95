"""Command-line walkthrough of the output root message hash.

Prints the inputs, every intermediate buffer and the final digest. With no
arguments it runs the reference root followed by a few sample inputs.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .core import to_hex
from .eip191 import EIP191_PREFIX, encode_length
from .message import U64_MAX, OutputRootMessage

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ORHASH_LOG_LEVEL"

DEFAULT_ROOT = "0xd2cbe8c185b69c0312229a23d8f4ed6c4c18b778af61ce3f755c9c2c1e6c23ee"
DEFAULT_BLOCK = 30624374
DEFAULT_LEAVES = 2

SAMPLE_CASES: List[Tuple[bytes, int, int, str]] = [
    (bytes(32), 0, 0, "All zeros"),
    (b"\xff" * 32, U64_MAX, U64_MAX, "All max values"),
    (b"\xde\xad\xbe\xef" + bytes(28), 1000000, 50, "Custom values"),
]


def _parse_u64(value: str) -> int:
    try:
        number = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if not 0 <= number <= U64_MAX:
        raise argparse.ArgumentTypeError(f"out of uint64 range: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orhash",
        description="Compute the EIP-191 Keccak-256 hash of an output root message.",
    )
    parser.add_argument("--root", help="32-byte output root as hex (0x optional)")
    parser.add_argument("--block", type=_parse_u64, help="base block number")
    parser.add_argument("--leaves", type=_parse_u64, help="total leaf count")
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-q", "--quiet", action="store_true", help="print only the digest"
    )
    output.add_argument(
        "--json", action="store_true", help="print inputs and buffers as JSON"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def describe(msg: OutputRootMessage) -> dict:
    """Collect every intermediate value of the hash as hex strings."""
    block_be = msg.base_block_number.to_bytes(8, "big")
    leaves_be = msg.total_leaf_count.to_bytes(8, "big")
    message = msg.to_bytes()
    length = encode_length(message)
    prefixed = msg.personal_message()
    return {
        "output_root": to_hex(msg.output_root),
        "base_block_number": msg.base_block_number,
        "total_leaf_count": msg.total_leaf_count,
        "block_number_be": to_hex(block_be),
        "leaf_count_be": to_hex(leaves_be),
        "message": to_hex(message),
        "prefix": to_hex(EIP191_PREFIX),
        "message_length": length.decode("ascii"),
        "message_length_bytes": to_hex(length),
        "prefixed_length": len(prefixed),
        "prefixed_message": to_hex(prefixed),
        "hash": to_hex(msg.hash()),
    }


def print_walkthrough(msg: OutputRootMessage) -> None:
    info = describe(msg)
    block = msg.base_block_number
    leaves = msg.total_leaf_count

    print("Input Parameters:")
    print(f"  Output Root:       {info['output_root']}")
    print(f"  Base Block Number: {block} (0x{block:016x})")
    print(f"  Total Leaf Count:  {leaves} (0x{leaves:016x})")
    print()

    print("Intermediate Steps:")
    print(f"1. Original message bytes ({len(msg.to_bytes())} bytes total):")
    print(f"   - Output Root (32 bytes):       {info['output_root']}")
    print(f"   - Block Number BE (8 bytes):    {info['block_number_be']}")
    print(f"   - Leaf Count BE (8 bytes):      {info['leaf_count_be']}")
    print(f"   - Combined message:             {info['message']}")
    print()

    print("2. EIP-191 Ethereum Signed Message prefix:")
    print(f"   - Prefix bytes:                 {EIP191_PREFIX.decode('ascii')!r}")
    print(f"   - Prefix hex:                   {info['prefix']}")
    print(f"   - Message length (decimal):     \"{info['message_length']}\"")
    print(f"   - Message length bytes:         {info['message_length_bytes']}")
    print()

    print("3. Constructing prefixed message:")
    print(f"   - Total prefixed length:        {info['prefixed_length']} bytes")
    print("   - Prefixed message (hex):")
    print(f"     {info['prefixed_message']}")
    print()

    print("4. Computing keccak256 hash:")
    print(f"   Final Hash: {info['hash']}")
    print()


def print_samples() -> None:
    print("=== Testing with different inputs ===")
    print()
    for i, (root, block, leaves, desc) in enumerate(SAMPLE_CASES, start=1):
        msg = OutputRootMessage(root, block, leaves)
        print(f"Test Case {i}: {desc}")
        print(f"  Output Root: {to_hex(root)}")
        print(f"  Block: {block}, Leaf Count: {leaves}")
        print(f"  Hash: {to_hex(msg.hash())}")
        print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, str(args.log_level).upper(), None)
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    custom = any(v is not None for v in (args.root, args.block, args.leaves))
    try:
        msg = OutputRootMessage.from_hex(
            args.root if args.root is not None else DEFAULT_ROOT,
            args.block if args.block is not None else DEFAULT_BLOCK,
            args.leaves if args.leaves is not None else DEFAULT_LEAVES,
        )
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))
    logger.debug("hashing %s", msg)

    if args.quiet:
        print(to_hex(msg.hash()))
    elif args.json:
        print(json.dumps(describe(msg), indent=2))
    else:
        print("=== Compute Output Root Message Hash Demo ===")
        print()
        print_walkthrough(msg)
        if not custom:
            print_samples()
    return 0


if __name__ == "__main__":
    sys.exit(main())
