"""Enumeration and accessor primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from dictops._internal.frozen import FrozenDict

if TYPE_CHECKING:
    from dictops.types import Dict, DictLike, Entry

V = TypeVar("V")

EMPTY: FrozenDict[str, object] = FrozenDict()
"""The canonical empty dictionary. Safe to share: it can never change."""


def count(d: DictLike[object]) -> int:
    """Number of keys in ``d``."""
    return len(d)


def keys(d: DictLike[V]) -> tuple[str, ...]:
    """Keys of ``d`` in iteration order."""
    return tuple(d)


def values(d: DictLike[V]) -> tuple[V, ...]:
    """Values of ``d`` in the same order as :func:`keys`."""
    return tuple(d.values())


def entries(d: DictLike[V]) -> tuple[Entry[V], ...]:
    """``(key, value)`` pairs of ``d`` in iteration order.

    ``from_entries(entries(d)) == d`` holds for every ``d``.
    """
    return tuple(d.items())


def get(d: DictLike[V], key: str, default: V | None = None) -> V | None:
    """Value at ``key``, or ``default`` when ``key`` is absent."""
    if key in d:
        return d[key]
    return default


def has(d: DictLike[object], key: str) -> bool:
    return key in d


def is_empty(d: DictLike[object]) -> bool:
    return len(d) == 0


def empty() -> Dict[V]:
    """Return the shared empty dictionary."""
    return EMPTY  # type: ignore[return-value]
