"""Tests for output root message hashing."""
import threading

import pytest

REFERENCE_ROOT = bytes.fromhex(
    "d2cbe8c185b69c0312229a23d8f4ed6c4c18b778af61ce3f755c9c2c1e6c23ee"
)
U64_MAX = 2**64 - 1

GOLDEN = [
    (
        REFERENCE_ROOT,
        30624374,
        2,
        "30cd7c7b9743dbc342e5251d13d0631a6ca2feb2536a58307db780bd15e373d7",
    ),
    (
        bytes(32),
        0,
        0,
        "1744927072a444377e1fc1e1da71a46e163d301f6bc0501a27de3be902a0b448",
    ),
    (
        b"\xff" * 32,
        U64_MAX,
        U64_MAX,
        "a73bb889690244d2f5de2e9683dd74ce55945bb996793f30868ef5cec660afb0",
    ),
    (
        b"\xde\xad\xbe\xef" + bytes(28),
        1000000,
        50,
        "ff767461084c03cada5e96a4cfbf441e7e520a43f678816236dba542c9d2d8a4",
    ),
]


@pytest.mark.parametrize("root,block,leaves,expected", GOLDEN)
def test_compute_hash_golden_vectors(root, block, leaves, expected):
    """Pinned digests catch byte-order, prefix or primitive regressions."""
    from orhash.message import compute_hash

    assert compute_hash(root, block, leaves).hex() == expected


def test_compute_hash_is_deterministic():
    from orhash.message import compute_hash

    first = compute_hash(REFERENCE_ROOT, 30624374, 2)
    assert all(compute_hash(REFERENCE_ROOT, 30624374, 2) == first for _ in range(5))


def test_compute_hash_accepts_bytearray_and_memoryview():
    from orhash.message import compute_hash

    expected = compute_hash(REFERENCE_ROOT, 30624374, 2)
    assert compute_hash(bytearray(REFERENCE_ROOT), 30624374, 2) == expected
    assert compute_hash(memoryview(REFERENCE_ROOT), 30624374, 2) == expected


def test_canonical_message_layout():
    """Root, then big-endian block, then big-endian leaf count."""
    from orhash.message import CANONICAL_MESSAGE_SIZE, canonical_message

    msg = canonical_message(REFERENCE_ROOT, 30624374, 2)
    assert len(msg) == CANONICAL_MESSAGE_SIZE == 48
    assert msg[:32] == REFERENCE_ROOT
    assert msg[32:40] == bytes.fromhex("0000000001d34a76")
    assert msg[40:48] == bytes.fromhex("0000000000000002")


def test_reference_preimage_bytes():
    from orhash.message import OutputRootMessage

    preimage = OutputRootMessage(REFERENCE_ROOT, 30624374, 2).personal_message()
    assert preimage.hex() == (
        "19457468657265756d205369676e6564204d6573736167653a0a"
        "3438"
        "d2cbe8c185b69c0312229a23d8f4ed6c4c18b778af61ce3f755c9c2c1e6c23ee"
        "0000000001d34a76"
        "0000000000000002"
    )


@pytest.mark.parametrize("root,block,leaves,expected", GOLDEN)
def test_preimage_length_is_constant(root, block, leaves, expected):
    """Prefix (26) + "48" (2) + message (48) for every input."""
    from orhash.message import OutputRootMessage

    preimage = OutputRootMessage(root, block, leaves).personal_message()
    assert len(preimage) == 76
    assert preimage[26:28] == b"48"


def test_little_endian_serialization_changes_digest():
    from orhash.core import keccak256
    from orhash.eip191 import personal_message
    from orhash.message import compute_hash

    le = REFERENCE_ROOT + (30624374).to_bytes(8, "little") + (2).to_bytes(8, "little")
    assert keccak256(personal_message(le)) != compute_hash(REFERENCE_ROOT, 30624374, 2)


@pytest.mark.parametrize("bit", [0, 7, 100, 255])
def test_root_bit_flip_changes_digest(bit):
    from orhash.message import compute_hash

    flipped = bytearray(REFERENCE_ROOT)
    flipped[bit // 8] ^= 1 << (bit % 8)
    assert compute_hash(bytes(flipped), 30624374, 2) != compute_hash(
        REFERENCE_ROOT, 30624374, 2
    )


def test_integer_changes_digest():
    from orhash.message import compute_hash

    base = compute_hash(REFERENCE_ROOT, 30624374, 2)
    assert compute_hash(REFERENCE_ROOT, 30624375, 2) != base
    assert compute_hash(REFERENCE_ROOT, 30624374, 3) != base
    # swapping the two integers is not the same message
    assert compute_hash(REFERENCE_ROOT, 2, 30624374) != base


def test_encode_u64_big_endian():
    from orhash.message import encode_u64

    assert encode_u64(0) == bytes(8)
    assert encode_u64(1) == b"\x00" * 7 + b"\x01"
    assert encode_u64(U64_MAX) == b"\xff" * 8


@pytest.mark.parametrize("value", [-1, 2**64])
def test_encode_u64_rejects_out_of_range(value):
    from orhash.message import encode_u64

    with pytest.raises(ValueError, match="uint64"):
        encode_u64(value)


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_wrong_root_size_rejected(size):
    from orhash.message import compute_hash

    with pytest.raises(ValueError, match="32 bytes"):
        compute_hash(bytes(size), 0, 0)


@pytest.mark.parametrize(
    "root,block,leaves",
    [
        ("00" * 32, 0, 0),
        (bytes(32), 1.0, 0),
        (bytes(32), 0, True),
        (bytes(32), "1", 0),
    ],
)
def test_wrong_types_rejected(root, block, leaves):
    from orhash.message import compute_hash

    with pytest.raises(TypeError):
        compute_hash(root, block, leaves)


def test_output_root_message_is_immutable():
    from dataclasses import FrozenInstanceError

    from orhash.message import OutputRootMessage

    msg = OutputRootMessage(bytearray(REFERENCE_ROOT), 30624374, 2)
    assert isinstance(msg.output_root, bytes)
    with pytest.raises(FrozenInstanceError):
        msg.base_block_number = 1


def test_output_root_message_from_hex_matches_compute_hash():
    from orhash.message import OutputRootMessage, compute_hash

    msg = OutputRootMessage.from_hex("0x" + REFERENCE_ROOT.hex(), 30624374, 2)
    assert msg.output_root == REFERENCE_ROOT
    assert msg.to_bytes()[:32] == REFERENCE_ROOT
    assert msg.hash() == compute_hash(REFERENCE_ROOT, 30624374, 2)


def test_output_root_message_validates_on_construction():
    from orhash.message import OutputRootMessage

    with pytest.raises(ValueError):
        OutputRootMessage(bytes(31), 0, 0)
    with pytest.raises(ValueError):
        OutputRootMessage(bytes(32), -1, 0)


def test_compute_hash_concurrent_calls_agree():
    """Stateless hashing gives identical results across threads."""
    from orhash.message import compute_hash

    results = []
    lock = threading.Lock()

    def worker():
        digest = compute_hash(REFERENCE_ROOT, 30624374, 2)
        with lock:
            results.append(digest)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert len(set(results)) == 1


def test_package_reexports():
    import orhash

    assert orhash.compute_hash is orhash.message.compute_hash
    assert orhash.OUTPUT_ROOT_SIZE == 32
