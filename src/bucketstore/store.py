"""store.py - KeyedBucketStore, a fixed-size separate-chaining hash table"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, NamedTuple, TypeVar

import numpy as np
from numpy.typing import NDArray

from .config import StoreConfig
from .constants import DEFAULT_CAPACITY
from .exceptions import StoreInvariantError
from .hashing import bucket_index
from .logger import get_logger
from .utils import assume_capacity, assume_key, assume_precision

logger = get_logger(__name__)

V = TypeVar("V")


class Pair(NamedTuple, Generic[V]):
    """Immutable snapshot of a stored entry."""

    key: str
    value: V


class _Entry(Generic[V]):
    # The key is fixed once stored; the value is replaced in place on update.
    __slots__ = ("key", "value")

    def __init__(self, key: str, value: V) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"[{self.key}: {self.value}]"


class KeyedBucketStore(Generic[V]):
    """
    KeyedBucketStore: hash table over text keys with separate chaining.

    - The bucket array is allocated once; its length never changes.
    - Each bucket is a list of entries that hashed to the same index,
      searched linearly and kept in insertion order.
    - A missing key is reported through a boolean, never an exception.
    - Not safe for concurrent mutation; callers sharing a store across
      threads must guard every call with one lock.
    """

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, *, load_factor_precision: int = 2
    ) -> None:
        capacity = assume_capacity(capacity)
        if capacity <= 0:
            logger.debug(
                f"[KeyedBucketStore.__init__] Requested {capacity=} is not positive, "
                f"using {DEFAULT_CAPACITY}"
            )
            capacity = DEFAULT_CAPACITY
        self._capacity: int = capacity
        "Number of buckets, fixed for the lifetime of the store"
        self._buckets: list[list[_Entry[V]]] = [[] for _ in range(capacity)]
        "Array of buckets, each a chain of entries"
        self._size: int = 0
        "Number of entries across all buckets"
        self._load_factor_precision: int = assume_precision(load_factor_precision)
        "Decimal places of the load factor in describe()"
        logger.debug(f"[KeyedBucketStore.__init__] Created with {capacity=}")

    @classmethod
    def from_config(cls, config: StoreConfig) -> KeyedBucketStore[Any]:
        """Build a store from a ``StoreConfig``."""
        return cls(config.capacity, load_factor_precision=config.load_factor_precision)

    @property
    def load_factor_precision(self) -> int:
        return self._load_factor_precision

    @load_factor_precision.setter
    def load_factor_precision(self, precision: int) -> None:
        self._load_factor_precision = assume_precision(precision)

    # Hashing

    @property
    def capacity(self) -> int:
        return self._capacity

    def index_of(self, key: str) -> int:
        """Bucket index for ``key`` in this store."""
        return bucket_index(key, self._capacity)

    def _locate(self, key: str) -> tuple[list[_Entry[V]], int]:
        """Return the bucket for ``key`` and the entry's position in it, or -1."""
        bucket = self._buckets[self.index_of(key)]
        for i, entry in enumerate(bucket):
            if entry.key == key:
                return bucket, i
        return bucket, -1

    # Core operations

    def put(self, key: str, value: V) -> bool:
        """Insert or update ``key``. Returns True if the key was new."""
        bucket, i = self._locate(key)
        if i >= 0:
            bucket[i].value = value
            logger.debug(f"[KeyedBucketStore.put] Updated {key=}")
            return False
        bucket.append(_Entry(key, value))
        self._size += 1
        logger.debug(f"[KeyedBucketStore.put] Inserted {key=}, size={self._size}")
        return True

    def get(self, key: str) -> tuple[V | None, bool]:
        """Return ``(value, True)`` for a stored key, ``(None, False)`` otherwise.

        Check the flag before trusting the value: ``None`` is also a valid
        stored value.
        """
        bucket, i = self._locate(key)
        if i < 0:
            return None, False
        return bucket[i].value, True

    def contains(self, key: str) -> bool:
        return self._locate(key)[1] >= 0

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False, with no change, if it was absent."""
        bucket, i = self._locate(key)
        if i < 0:
            return False
        del bucket[i]
        self._size -= 1
        logger.debug(f"[KeyedBucketStore.delete] Removed {key=}, size={self._size}")
        return True

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Empty every bucket. The bucket array itself is kept."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0
        logger.debug("[KeyedBucketStore.clear] Cleared all buckets")

    # Bulk extraction. Order follows bucket layout and is not part of the contract.

    def keys(self) -> list[str]:
        return [entry.key for bucket in self._buckets for entry in bucket]

    def values(self) -> list[V]:
        return [entry.value for bucket in self._buckets for entry in bucket]

    def pairs(self) -> list[Pair[V]]:
        return [
            Pair(entry.key, entry.value) for bucket in self._buckets for entry in bucket
        ]

    # Introspection

    def load_factor(self) -> float:
        if self._capacity == 0:
            return 0.0
        return self._size / self._capacity

    def bucket_lengths(self) -> NDArray[np.intp]:
        """Occupancy of every bucket, indexed by bucket number."""
        return np.fromiter(
            (len(bucket) for bucket in self._buckets),
            dtype=np.intp,
            count=self._capacity,
        )

    def bucket_distribution(self) -> dict[int, int]:
        """Map each bucket length to the number of buckets with that length.

        Empty buckets are counted under length 0.
        """
        lengths, counts = np.unique(self.bucket_lengths(), return_counts=True)
        return {int(length): int(count) for length, count in zip(lengths, counts)}

    def describe(self) -> str:
        """Return debug information about the store and its non-empty buckets."""
        output = [
            f"KeyedBucketStore{{size: {self._size}, capacity: {self._capacity}, "
            f"loadFactor: {self.load_factor():.{self.load_factor_precision}f}}}"
        ]
        output.extend(
            f"Bucket {i}: " + " -> ".join(repr(entry) for entry in bucket)
            for i, bucket in enumerate(self._buckets)
            if bucket
        )
        return "\n".join(output) + "\n"

    def validate(self) -> bool:
        """Check structural invariants; raise StoreInvariantError on the first break."""
        if len(self._buckets) != self._capacity:
            raise StoreInvariantError(
                "fixed capacity",
                f"{len(self._buckets)} buckets for capacity {self._capacity}",
            )
        total = int(self.bucket_lengths().sum())
        if total != self._size:
            raise StoreInvariantError(
                "size consistency", f"size is {self._size} but buckets hold {total}"
            )
        seen: set[str] = set()
        for i, bucket in enumerate(self._buckets):
            for entry in bucket:
                if entry.key in seen:
                    raise StoreInvariantError(
                        "uniqueness", f"key {entry.key!r} stored twice"
                    )
                seen.add(entry.key)
                home = self.index_of(entry.key)
                if home != i:
                    raise StoreInvariantError(
                        "placement",
                        f"key {entry.key!r} in bucket {i}, hashes to {home}",
                    )
        return True

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __contains__(self, key: object) -> bool:
        return self.contains(assume_key(key))

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"KeyedBucketStore(capacity={self._capacity}, size={self._size})"

    def __str__(self) -> str:
        return self.describe()


def create(capacity: int = DEFAULT_CAPACITY) -> KeyedBucketStore[Any]:
    """Create a store with ``capacity`` buckets; non-positive values fall back to 16."""
    return KeyedBucketStore(capacity)
