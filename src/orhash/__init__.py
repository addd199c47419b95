"""orhash: EIP-191 Keccak-256 hashing of output root messages.

Binds a 32-byte output root, a base block number and a total leaf count into
one digest suitable for Ethereum personal-message signature checks.
"""
from __future__ import annotations

__version__ = "0.1.0"

from orhash.core import keccak256, sha256, to_hex, from_hex
from orhash.eip191 import (
    EIP191_PREFIX,
    encode_length,
    personal_message,
    hash_personal_message,
)
from orhash.message import (
    OUTPUT_ROOT_SIZE,
    U64_MAX,
    CANONICAL_MESSAGE_SIZE,
    encode_u64,
    canonical_message,
    compute_hash,
    OutputRootMessage,
)

__all__ = [
    "__version__",
    "keccak256",
    "sha256",
    "to_hex",
    "from_hex",
    "EIP191_PREFIX",
    "encode_length",
    "personal_message",
    "hash_personal_message",
    "OUTPUT_ROOT_SIZE",
    "U64_MAX",
    "CANONICAL_MESSAGE_SIZE",
    "encode_u64",
    "canonical_message",
    "compute_hash",
    "OutputRootMessage",
]
