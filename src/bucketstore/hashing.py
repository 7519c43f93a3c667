"""hashing.py - FNV-1a key hashing and bucket index reduction

Keys are text; they are hashed over their UTF-8 bytes with the 32-bit
FNV-1a function and reduced modulo the bucket count. The result is pure
and deterministic: the same key and capacity always give the same index.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from .constants import (
    FNV32_OFFSET_BASIS,
    FNV32_PRIME,
    KEY_ENCODING,
    KEY_ENCODING_ERRORS,
    UINT32_MASK,
)
from .utils import assume_capacity, assume_key


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a digest of ``data``.

    >>> hex(fnv1a_32(b"a"))
    '0xe40c292c'
    """
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & UINT32_MASK
    return h


def key_bytes(key: str) -> bytes:
    return assume_key(key).encode(KEY_ENCODING, KEY_ENCODING_ERRORS)


def key_hash(key: str) -> int:
    """Unsigned 32-bit hash of a text key."""
    return fnv1a_32(key_bytes(key))


def bucket_index(key: str, capacity: int) -> int:
    """Bucket index in ``[0, capacity)`` for ``key``.

    ``capacity`` must already be positive; the store normalizes it at
    construction.
    """
    capacity = assume_capacity(capacity)
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return key_hash(key) % capacity


def bucket_indices(keys: Iterable[str], capacity: int) -> NDArray[np.intp]:
    """Bucket index for each key, in input order.

    Useful for predicting how a key set will spread over ``capacity``
    buckets before loading it:
    ``np.bincount(bucket_indices(keys, c), minlength=c)``.
    """
    capacity = assume_capacity(capacity)
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    hashes = np.fromiter((key_hash(k) for k in keys), dtype=np.uint64)
    return (hashes % np.uint64(capacity)).astype(np.intp)
