"""config.py - Store configuration"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import DEFAULT_CAPACITY
from .utils import assume_capacity, assume_precision


@dataclass(frozen=True)
class StoreConfig:
    """Settings for building a KeyedBucketStore.

    Immutable; use the ``with_*`` helpers to derive variants.
    """

    capacity: int = DEFAULT_CAPACITY  # buckets; <= 0 falls back to DEFAULT_CAPACITY
    load_factor_precision: int = 2  # decimal places in describe()
    log_level: str = "WARNING"  # applied by the CLI

    def __post_init__(self) -> None:
        assume_capacity(self.capacity)
        assume_precision(self.load_factor_precision)

    @property
    def effective_capacity(self) -> int:
        return self.capacity if self.capacity > 0 else DEFAULT_CAPACITY

    def with_capacity(self, capacity: int) -> StoreConfig:
        return replace(self, capacity=capacity)

    def with_log_level(self, log_level: str) -> StoreConfig:
        return replace(self, log_level=log_level)
