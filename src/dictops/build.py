"""Construction and combination primitives.

Each function returns a new :class:`~dictops._internal.frozen.FrozenDict`;
inputs are copied, never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeVar

from dictops._internal.frozen import FrozenDict
from dictops._internal.invoke import prepare
from dictops._internal.pairs import unpack_pair

if TYPE_CHECKING:
    from dictops.types import Dict, DictLike, Entry, KeyMapper

V = TypeVar("V")


def from_entries(pairs: Iterable[Entry[V]]) -> Dict[V]:
    """Build a dictionary from ``(key, value)`` pairs.

    Later duplicates overwrite earlier ones but keep the first position.
    """
    result: dict[str, V] = {}
    for index, pair in enumerate(pairs):
        key, value = unpack_pair(pair, index)
        result[key] = value
    return FrozenDict(result)


from_ = from_entries


def from_keys(
    keys: Iterable[str], mapper: KeyMapper[V], context: object | None = None
) -> Dict[V]:
    """Build a dictionary mapping each key to ``mapper(key, index, keys)``.

    Duplicate keys: the last occurrence's value wins.
    """
    call = prepare(mapper, context, name="mapper")
    seq: Sequence[str] = keys if isinstance(keys, Sequence) else tuple(keys)
    return FrozenDict({key: call(key, index, seq) for index, key in enumerate(seq)})


def set(d: DictLike[V], key: str, value: V) -> Dict[V]:  # noqa: A001
    """Copy of ``d`` with ``key`` bound to ``value``."""
    result = dict(d)
    result[key] = value
    return FrozenDict(result)


def remove(d: DictLike[V], key: str) -> Dict[V]:
    """Copy of ``d`` without ``key``. Absent keys are not an error."""
    result = dict(d)
    result.pop(key, None)
    return FrozenDict(result)


def update(d: DictLike[V], other: DictLike[V]) -> Dict[V]:
    """Shallow merge: keys in both take ``other``'s value."""
    return FrozenDict({**d, **other})
