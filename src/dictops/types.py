"""Type aliases shared by the dictops operations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias, TypeVar

from dictops._internal.frozen import FrozenDict

V = TypeVar("V")
R = TypeVar("R")

Dict: TypeAlias = FrozenDict[str, V]
"""An immutable string-keyed dictionary, as returned by every combinator."""

DictLike: TypeAlias = Mapping[str, V]
"""Any string-keyed mapping accepted as input (plain ``dict`` included)."""

Entry: TypeAlias = tuple[str, V]
"""A ``(key, value)`` pair."""

# Callbacks may accept any prefix of the documented positional arguments,
# plus a leading receiver when a context is supplied.
ValueCallback: TypeAlias = Callable[..., R]
"""Invoked as ``fn(value, key, dict)``."""

KeyCallback: TypeAlias = Callable[..., str]
"""Invoked as ``fn(key, value, dict)``; used only by ``map_keys``."""

Reducer: TypeAlias = Callable[..., Any]
"""Invoked as ``fn(accumulator, value, key, dict)``."""

KeyMapper: TypeAlias = Callable[..., V]
"""Invoked as ``fn(key, index, keys)``; used only by ``from_keys``."""

__all__ = [
    "Dict",
    "DictLike",
    "Entry",
    "KeyCallback",
    "KeyMapper",
    "R",
    "Reducer",
    "V",
    "ValueCallback",
]
