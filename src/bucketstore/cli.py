"""
bucketstore diagnostic CLI

Usage:
    python -m bucketstore.cli describe [--capacity N] KEY=VALUE...
    python -m bucketstore.cli distribution [--capacity N] KEY...

Commands:
    describe      - Load the pairs into a store and print its bucket dump
    distribution  - Load the keys and print how many buckets hold each chain length
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .config import StoreConfig
from .logger import configure_logging, get_logger
from .store import KeyedBucketStore

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_pair(item: str) -> tuple[str, str]:
    key, sep, value = item.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {item!r}")
    return key, value


def _parse_key(item: str) -> tuple[str, str]:
    key, sep, value = item.partition("=")
    return key, value if sep else key


def load(
    config: StoreConfig, items: Sequence[tuple[str, str]]
) -> KeyedBucketStore[str]:
    """Build a store from ``config`` and put ``items`` into it in order."""
    store: KeyedBucketStore[str] = KeyedBucketStore.from_config(config)
    for key, value in items:
        store.put(key, value)
    logger.info(f"[cli.load] Loaded {store.size()} keys into {store.capacity} buckets")
    return store


def describe(config: StoreConfig, items: Sequence[tuple[str, str]]) -> None:
    """Print the bucket dump of a store loaded with ``items``."""
    print(load(config, items).describe(), end="")


def distribution(config: StoreConfig, items: Sequence[tuple[str, str]]) -> None:
    """Print ``length: buckets`` lines by ascending length, then the load factor."""
    store = load(config, items)
    for length, count in sorted(store.bucket_distribution().items()):
        print(f"{length}: {count}")
    print(f"load factor: {store.load_factor():.{config.load_factor_precision}f}")


def main(argv: Sequence[str] | None = None) -> int:
    defaults = StoreConfig()
    parser = argparse.ArgumentParser(
        prog="bucketstore", description="bucketstore diagnostic tools"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=defaults.log_level,
        help=f"Logging level (default: {defaults.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command")

    describe_parser = subparsers.add_parser("describe", help="Dump buckets")
    describe_parser.add_argument(
        "--capacity", type=int, default=defaults.capacity, help="Number of buckets"
    )
    describe_parser.add_argument(
        "items", nargs="*", type=_parse_pair, metavar="KEY=VALUE"
    )

    distribution_parser = subparsers.add_parser(
        "distribution", help="Show bucket occupancy histogram"
    )
    distribution_parser.add_argument(
        "--capacity", type=int, default=defaults.capacity, help="Number of buckets"
    )
    distribution_parser.add_argument("items", nargs="*", type=_parse_key, metavar="KEY")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    config = defaults.with_capacity(args.capacity).with_log_level(args.log_level)
    configure_logging(config.log_level)
    if args.command == "describe":
        describe(config, args.items)
    elif args.command == "distribution":
        distribution(config, args.items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
