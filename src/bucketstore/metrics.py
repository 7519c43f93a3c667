"""metrics.py - Hit/miss accounting around a KeyedBucketStore

``InstrumentedStore`` forwards every call to the wrapped store and records
lookups, writes and deletes as Prometheus counters. Each wrapper owns its
own ``CollectorRegistry`` unless one is passed in, so several wrappers can
live in one process without metric name clashes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import NDArray
from prometheus_client import CollectorRegistry, Counter, Gauge

from .logger import get_logger
from .store import KeyedBucketStore, Pair

logger = get_logger(__name__)

V = TypeVar("V")


class InstrumentedStore(Generic[V]):
    """KeyedBucketStore wrapper that counts cache hits and misses."""

    def __init__(
        self,
        store: KeyedBucketStore[V],
        registry: CollectorRegistry | None = None,
        namespace: str = "bucketstore",
    ) -> None:
        self.store = store
        self.registry = registry if registry is not None else CollectorRegistry()
        self.namespace = namespace

        self._lookups = Counter(
            f"{namespace}_lookups",
            "Key lookups by outcome",
            ["result"],
            registry=self.registry,
        )
        self._writes = Counter(
            f"{namespace}_writes",
            "Put calls by whether the key was new",
            ["kind"],
            registry=self.registry,
        )
        self._deletes = Counter(
            f"{namespace}_deletes",
            "Delete calls by outcome",
            ["result"],
            registry=self.registry,
        )
        self._entries = Gauge(
            f"{namespace}_entries", "Entries currently stored", registry=self.registry
        )
        self._buckets = Gauge(
            f"{namespace}_buckets", "Number of buckets", registry=self.registry
        )
        self._load_factor = Gauge(
            f"{namespace}_load_factor", "Entries per bucket", registry=self.registry
        )
        # Touch every label so all series report 0 before the first event
        for result in ("hit", "miss"):
            self._lookups.labels(result=result)
        for kind in ("insert", "update"):
            self._writes.labels(kind=kind)
        for result in ("removed", "absent"):
            self._deletes.labels(result=result)
        self._buckets.set(store.capacity)
        self._refresh_gauges()
        logger.debug(
            f"[InstrumentedStore.__init__] Registered metrics under {namespace=}"
        )

    def _refresh_gauges(self) -> None:
        self._entries.set(self.store.size())
        self._load_factor.set(self.store.load_factor())

    def _sample(self, name: str, labels: dict[str, str]) -> float:
        value = self.registry.get_sample_value(f"{self.namespace}_{name}_total", labels)
        return value if value is not None else 0.0

    # Forwarded operations

    def put(self, key: str, value: V) -> bool:
        is_new = self.store.put(key, value)
        self._writes.labels(kind="insert" if is_new else "update").inc()
        self._refresh_gauges()
        return is_new

    def get(self, key: str) -> tuple[V | None, bool]:
        value, found = self.store.get(key)
        self._lookups.labels(result="hit" if found else "miss").inc()
        return value, found

    def contains(self, key: str) -> bool:
        found = self.store.contains(key)
        self._lookups.labels(result="hit" if found else "miss").inc()
        return found

    def delete(self, key: str) -> bool:
        removed = self.store.delete(key)
        self._deletes.labels(result="removed" if removed else "absent").inc()
        self._refresh_gauges()
        return removed

    def clear(self) -> None:
        self.store.clear()
        self._refresh_gauges()

    def size(self) -> int:
        return self.store.size()

    def is_empty(self) -> bool:
        return self.store.is_empty()

    def keys(self) -> list[str]:
        return self.store.keys()

    def values(self) -> list[V]:
        return self.store.values()

    def pairs(self) -> list[Pair[V]]:
        return self.store.pairs()

    def load_factor(self) -> float:
        return self.store.load_factor()

    def bucket_distribution(self) -> dict[int, int]:
        return self.store.bucket_distribution()

    @property
    def capacity(self) -> int:
        return self.store.capacity

    def index_of(self, key: str) -> int:
        return self.store.index_of(key)

    def bucket_lengths(self) -> NDArray[np.intp]:
        return self.store.bucket_lengths()

    def validate(self) -> bool:
        return self.store.validate()

    def describe(self) -> str:
        return self.store.describe()

    # Accounting

    @property
    def hits(self) -> int:
        return int(self._sample("lookups", {"result": "hit"}))

    @property
    def misses(self) -> int:
        return int(self._sample("lookups", {"result": "miss"}))

    def hit_ratio(self) -> float:
        """Fraction of lookups that found their key; 0.0 before any lookup."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total

    def get_metrics(self) -> dict[str, Any]:
        """Get current metrics snapshot."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_ratio": self.hit_ratio(),
            "inserts": int(self._sample("writes", {"kind": "insert"})),
            "updates": int(self._sample("writes", {"kind": "update"})),
            "deletes": int(self._sample("deletes", {"result": "removed"})),
            "delete_misses": int(self._sample("deletes", {"result": "absent"})),
            "size": self.store.size(),
            "capacity": self.store.capacity,
            "load_factor": self.store.load_factor(),
        }

    def __len__(self) -> int:
        return len(self.store)

    def __bool__(self) -> bool:
        return bool(self.store)

    def __contains__(self, key: object) -> bool:
        found = key in self.store
        self._lookups.labels(result="hit" if found else "miss").inc()
        return found

    def __iter__(self) -> Iterator[str]:
        return iter(self.store)

    def __str__(self) -> str:
        return self.store.describe()

    def __repr__(self) -> str:
        return (
            f"InstrumentedStore({self.store!r}, hits={self.hits}, misses={self.misses})"
        )
