"""FNV-1a digests and bucket index reduction."""

import numpy as np
import pytest

from bucketstore import InvalidCapacityError, InvalidKeyError
from bucketstore.hashing import bucket_index, bucket_indices, fnv1a_32, key_hash


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"", 0x811C9DC5),
        (b"a", 0xE40C292C),
        (b"foobar", 0xBF9CF968),
    ],
)
def test_fnv1a_32_reference_vectors(data, expected):
    assert fnv1a_32(data) == expected


def test_key_hash_uses_utf8_bytes():
    assert key_hash("foobar") == fnv1a_32(b"foobar")
    assert key_hash("é") == fnv1a_32("é".encode("utf-8"))


def test_key_hash_is_32_bit():
    for key in ("", "x", "a much longer key than usual " * 20, "日本語"):
        assert 0 <= key_hash(key) <= 0xFFFFFFFF


def test_lone_surrogate_hashes():
    """Any str must hash, including ones that are not valid UTF-8."""
    key = "\ud800"
    assert key_hash(key) == key_hash(key)


@pytest.mark.parametrize("capacity", [1, 2, 7, 16, 1000])
def test_bucket_index_in_range(capacity):
    for i in range(200):
        assert 0 <= bucket_index(f"k{i}", capacity) < capacity


def test_bucket_index_deterministic():
    assert bucket_index("stable", 13) == bucket_index("stable", 13)
    assert bucket_index("", 13) == 0x811C9DC5 % 13


def test_bucket_index_capacity_one():
    assert bucket_index("anything", 1) == 0


def test_bucket_index_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        bucket_index("a", 0)


def test_bucket_index_rejects_non_int_capacity():
    with pytest.raises(InvalidCapacityError):
        bucket_index("a", 2.0)


@pytest.mark.parametrize("key", [1, b"bytes", None, ("t",)])
def test_non_text_keys_rejected(key):
    with pytest.raises(InvalidKeyError) as excinfo:
        key_hash(key)
    assert excinfo.value.key is key
    assert isinstance(excinfo.value, TypeError)


def test_bucket_indices_matches_scalar():
    keys = [f"key{i}" for i in range(50)]
    indices = bucket_indices(keys, 7)
    assert isinstance(indices, np.ndarray)
    assert indices.tolist() == [bucket_index(k, 7) for k in keys]


def test_bucket_indices_empty():
    assert bucket_indices([], 4).shape == (0,)


def test_bucket_indices_spread():
    """Keys differing only in their last digit land in distinct buckets."""
    counts = np.bincount(bucket_indices((f"user:{i}" for i in range(1000)), 16), minlength=16)
    assert counts.sum() == 1000
    assert np.count_nonzero(counts) >= 10


def test_numpy_integer_capacity():
    assert bucket_index("a", np.int64(7)) == bucket_index("a", 7)
    expected = [bucket_index("a", 7), bucket_index("b", 7)]
    assert bucket_indices(["a", "b"], np.uint32(7)).tolist() == expected
