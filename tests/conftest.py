import logging

import pytest

from bucketstore import KeyedBucketStore
from bucketstore import logger as logger_module


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop any console handler a test installed via configure_logging()."""
    yield
    root = logging.getLogger(logger_module.PACKAGE_LOGGER)
    if logger_module._handler is not None:
        root.removeHandler(logger_module._handler)
        logger_module._handler = None
    root.setLevel(logging.NOTSET)


@pytest.fixture
def store():
    """Store with a handful of buckets, the size used by most scenarios."""
    return KeyedBucketStore(5)


@pytest.fixture
def tiny_store():
    """Two buckets, so any realistic key set collides."""
    return KeyedBucketStore(2)


@pytest.fixture
def populated_store():
    store = KeyedBucketStore(10)
    for i in range(10):
        store.put(f"key{i}", f"value{i}")
    return store
