"""Hash primitives and hex helpers.

Keccak-256 here is the original Keccak submission (padding byte 0x01) used by
Ethereum, not the NIST SHA3-256 standard (padding byte 0x06). The two produce
different digests for the same input.
"""
from __future__ import annotations

import hashlib

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Compute the Ethereum-style Keccak-256 digest.

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def sha256(data: bytes) -> bytes:
    """Compute SHA-256 digest."""
    return hashlib.sha256(data).digest()


def to_hex(data: bytes, prefix: bool = True) -> str:
    """Encode bytes as lower-case hex, 0x-prefixed unless prefix=False."""
    encoded = bytes(data).hex()
    return "0x" + encoded if prefix else encoded


def from_hex(value: str) -> bytes:
    """Decode a hex string, with or without a 0x prefix.

    Raises:
        ValueError: If the string is not valid hex
    """
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise ValueError(f"Invalid hex string: {value!r}") from exc


__all__ = [
    "keccak256",
    "sha256",
    "to_hex",
    "from_hex",
]
