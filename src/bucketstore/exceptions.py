"""exceptions.py - Exception hierarchy for bucketstore.

A missing key is never an error: lookups and deletes report absence
through their boolean result. The exceptions here cover programming
errors only:

- Arguments of the wrong type (non-text keys, non-integer capacities)
- Broken structural invariants detected by ``KeyedBucketStore.validate``
"""

from __future__ import annotations

from typing import Any


class BucketStoreError(Exception):
    """Base exception for all bucketstore errors."""

    pass


class InvalidKeyError(BucketStoreError, TypeError):
    """Raised when a key is not a ``str``."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(
            f"Keys must be str, instead got {type(key).__name__} (value: {key!r})"
        )


class InvalidCapacityError(BucketStoreError, TypeError):
    """Raised when a capacity is not an ``int``.

    Non-positive integers are accepted and replaced by the default
    capacity; only values of the wrong type end up here.
    """

    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(
            f"Capacity must be int, instead got {type(capacity).__name__} "
            f"(value: {capacity!r})"
        )


class StoreInvariantError(BucketStoreError):
    """Raised by ``validate()`` when the store's internal structure is inconsistent."""

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Invariant '{invariant}' violated: {detail}")
