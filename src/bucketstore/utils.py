"""utils.py - Argument checks shared by the hashing, store and config modules"""

from __future__ import annotations

from numbers import Integral
from typing import Any

from .exceptions import InvalidCapacityError, InvalidKeyError


def assume_key(key: Any) -> str:
    """Return ``key`` unchanged if it is text, else raise InvalidKeyError"""
    if not isinstance(key, str):
        raise InvalidKeyError(key)
    return key


def assume_capacity(capacity: Any) -> int:
    # bool is an int subclass but never a meaningful bucket count;
    # numpy integer scalars are Integral and accepted
    if isinstance(capacity, bool) or not isinstance(capacity, Integral):
        raise InvalidCapacityError(capacity)
    return int(capacity)


def assume_precision(precision: Any) -> int:
    """Return ``precision`` as an int number of decimal places (>= 0)."""
    if isinstance(precision, bool) or not isinstance(precision, Integral):
        raise TypeError(
            f"load_factor_precision must be int, instead got "
            f"{type(precision).__name__} (value: {precision!r})"
        )
    if precision < 0:
        raise ValueError(f"load_factor_precision must be >= 0, got {precision}")
    return int(precision)
