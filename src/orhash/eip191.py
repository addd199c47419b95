"""EIP-191 personal message framing (version byte 0x45, "E").

    personal_message(m) = 0x19 || "Ethereum Signed Message:\\n" || str(len(m)) || m

The length is written as ASCII decimal digits of the message byte length.
"""
from __future__ import annotations

from .core import keccak256

EIP191_PREFIX = b"\x19Ethereum Signed Message:\n"


def encode_length(message: bytes) -> bytes:
    """Return the ASCII decimal digits of len(message)."""
    return str(len(message)).encode("ascii")


def personal_message(message: bytes) -> bytes:
    """Frame a message as an EIP-191 personal message.

    Args:
        message: Raw message bytes

    Returns:
        Prefix, decimal length and message concatenated
    """
    return EIP191_PREFIX + encode_length(message) + bytes(message)


def hash_personal_message(message: bytes) -> bytes:
    """Keccak-256 of the EIP-191 framed message."""
    return keccak256(personal_message(message))


__all__ = [
    "EIP191_PREFIX",
    "encode_length",
    "personal_message",
    "hash_personal_message",
]
