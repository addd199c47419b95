"""Output root message hashing.

The canonical message binds an output root to the block range it covers:

    message = output_root (32) || uint64_be(base_block_number) || uint64_be(total_leaf_count)

and the signed digest is the EIP-191 personal-message hash of those 48 bytes:

    digest = Keccak256(0x19 || "Ethereum Signed Message:\\n" || "48" || message)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .core import from_hex
from .eip191 import hash_personal_message, personal_message

logger = logging.getLogger(__name__)

OUTPUT_ROOT_SIZE = 32
U64_SIZE = 8
U64_MAX = 2**64 - 1
CANONICAL_MESSAGE_SIZE = OUTPUT_ROOT_SIZE + 2 * U64_SIZE

BytesLike = Union[bytes, bytearray, memoryview]


def _check_root(output_root: BytesLike) -> bytes:
    if not isinstance(output_root, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"output_root must be bytes, got {type(output_root).__name__}"
        )
    root = bytes(output_root)
    if len(root) != OUTPUT_ROOT_SIZE:
        raise ValueError(
            f"output_root must be {OUTPUT_ROOT_SIZE} bytes, got {len(root)}"
        )
    return root


def _check_u64(name: str, value: int) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} out of uint64 range: {value}")
    return value


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 big-endian bytes.

    Raises:
        TypeError: If value is not an int
        ValueError: If value is outside [0, 2**64 - 1]
    """
    return _check_u64("value", value).to_bytes(U64_SIZE, "big")


def canonical_message(
    output_root: BytesLike,
    base_block_number: int,
    total_leaf_count: int,
) -> bytes:
    """Build the 48-byte canonical message.

    Args:
        output_root: 32-byte output root
        base_block_number: First block covered by the root (uint64)
        total_leaf_count: Number of leaves under the root (uint64)

    Returns:
        output_root || be64(base_block_number) || be64(total_leaf_count)

    Raises:
        TypeError: If an argument has the wrong type
        ValueError: If the root is not 32 bytes or an integer is out of range
    """
    root = _check_root(output_root)
    block = _check_u64("base_block_number", base_block_number)
    count = _check_u64("total_leaf_count", total_leaf_count)
    return root + block.to_bytes(U64_SIZE, "big") + count.to_bytes(U64_SIZE, "big")


def compute_hash(
    output_root: BytesLike,
    base_block_number: int,
    total_leaf_count: int,
) -> bytes:
    """Compute the EIP-191 Keccak-256 digest of an output root message.

    Args:
        output_root: 32-byte output root
        base_block_number: First block covered by the root (uint64)
        total_leaf_count: Number of leaves under the root (uint64)

    Returns:
        32-byte digest

    Raises:
        TypeError: If an argument has the wrong type
        ValueError: If the root is not 32 bytes or an integer is out of range
    """
    message = canonical_message(output_root, base_block_number, total_leaf_count)
    digest = hash_personal_message(message)
    logger.debug(
        "output root message hash block=%d leaves=%d digest=%s",
        base_block_number,
        total_leaf_count,
        digest.hex(),
    )
    return digest


@dataclass(frozen=True)
class OutputRootMessage:
    """Immutable (output_root, base_block_number, total_leaf_count) triple."""

    output_root: bytes
    base_block_number: int
    total_leaf_count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_root", _check_root(self.output_root))
        _check_u64("base_block_number", self.base_block_number)
        _check_u64("total_leaf_count", self.total_leaf_count)

    @classmethod
    def from_hex(
        cls,
        output_root: str,
        base_block_number: int,
        total_leaf_count: int,
    ) -> "OutputRootMessage":
        """Build from a hex-encoded output root (0x prefix optional)."""
        return cls(from_hex(output_root), base_block_number, total_leaf_count)

    def to_bytes(self) -> bytes:
        """Canonical 48-byte message."""
        return canonical_message(
            self.output_root, self.base_block_number, self.total_leaf_count
        )

    def personal_message(self) -> bytes:
        """EIP-191 framed preimage."""
        return personal_message(self.to_bytes())

    def hash(self) -> bytes:
        return compute_hash(
            self.output_root, self.base_block_number, self.total_leaf_count
        )


__all__ = [
    "OUTPUT_ROOT_SIZE",
    "U64_SIZE",
    "U64_MAX",
    "CANONICAL_MESSAGE_SIZE",
    "encode_u64",
    "canonical_message",
    "compute_hash",
    "OutputRootMessage",
]
