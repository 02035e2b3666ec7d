"""The immutable mapping every dictops combinator returns."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, NoReturn, TypeVar

KT = TypeVar("KT")
VT = TypeVar("VT")

_UNHASHED = object()


class FrozenDict(Mapping[KT, VT], Generic[KT, VT]):
    """An immutable, insertion-ordered mapping.

    The backing ``dict`` is built once in ``__init__`` and never handed out,
    so an instance observed by one caller can never change under another.
    Instances are hashable when all of their values are.
    """

    __slots__ = ("_data", "_hash")

    _data: dict[KT, VT]
    _hash: Any

    def __init__(
        self,
        mapping: Mapping[KT, VT] | Iterable[tuple[KT, VT]] = (),
        /,
        **kwargs: VT,
    ) -> None:
        object.__setattr__(self, "_data", dict(mapping, **kwargs))
        object.__setattr__(self, "_hash", _UNHASHED)

    def __getitem__(self, key: KT) -> VT:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[KT]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is _UNHASHED:
            object.__setattr__(self, "_hash", hash(frozenset(self._data.items())))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrozenDict):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __or__(self, other: Mapping[KT, VT]) -> FrozenDict[KT, VT]:
        if not isinstance(other, Mapping):
            return NotImplemented
        return FrozenDict({**self._data, **other})

    def __ror__(self, other: Mapping[KT, VT]) -> FrozenDict[KT, VT]:
        if not isinstance(other, Mapping):
            return NotImplemented
        return FrozenDict({**other, **self._data})

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __setitem__(self, key: KT, value: VT) -> NoReturn:
        msg = f"{type(self).__name__} does not support item assignment"
        raise TypeError(msg)

    def __delitem__(self, key: KT) -> NoReturn:
        msg = f"{type(self).__name__} does not support item deletion"
        raise TypeError(msg)

    def __reduce__(self) -> tuple[type[FrozenDict[KT, VT]], tuple[dict[KT, VT]]]:
        return (type(self), (dict(self._data),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def copy(self) -> FrozenDict[KT, VT]:
        """Return ``self``; there is nothing a copy could protect."""
        return self

    def to_dict(self) -> dict[KT, VT]:
        """Convert to a plain dict (useful for JSON serialization)."""
        return dict(self._data)
