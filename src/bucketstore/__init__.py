"""bucketstore - fixed-capacity hash table with separate chaining and FNV-1a hashing"""

import logging

from .config import StoreConfig
from .constants import DEFAULT_CAPACITY
from .exceptions import (
    BucketStoreError,
    InvalidCapacityError,
    InvalidKeyError,
    StoreInvariantError,
)
from .hashing import bucket_index, bucket_indices, fnv1a_32, key_hash
from .logger import configure_logging, get_logger
from .store import KeyedBucketStore, Pair, create

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CAPACITY",
    "BucketStoreError",
    "InvalidCapacityError",
    "InvalidKeyError",
    "KeyedBucketStore",
    "Pair",
    "StoreConfig",
    "StoreInvariantError",
    "bucket_index",
    "bucket_indices",
    "configure_logging",
    "create",
    "fnv1a_32",
    "get_logger",
    "key_hash",
]
