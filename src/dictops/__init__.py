"""dictops: pure functions over immutable string-keyed dictionaries.

Every operation is a single pass that returns a new value and never
mutates its input. Dictionaries returned by the library are
:class:`FrozenDict` instances.

Example:
    >>> import dictops
    >>> d = dictops.from_entries([("foo", 1), ("bar", 2)])
    >>> dictops.reduce(d, lambda acc, v: acc + v)
    3
    >>> dictops.map_keys(d, lambda k: k.upper())
    FrozenDict({'FOO': 1, 'BAR': 2})
    >>> dictops.update(d, {"foo": 10})
    FrozenDict({'foo': 10, 'bar': 2})
"""

from __future__ import annotations

from dictops._internal.frozen import FrozenDict
from dictops.access import EMPTY, count, empty, entries, get, has, is_empty, keys, values
from dictops.build import from_, from_entries, from_keys, remove, set, update
from dictops.errors import DictOpsError, InvalidArgumentError
from dictops.transform import (
    every,
    filter,
    for_each,
    map,
    map_entries,
    map_keys,
    map_values,
    reduce,
    some,
)
from dictops.types import Dict, Entry

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "Dict",
    "DictOpsError",
    "Entry",
    "FrozenDict",
    "InvalidArgumentError",
    "__version__",
    "count",
    "empty",
    "entries",
    "every",
    "filter",
    "for_each",
    "from_",
    "from_entries",
    "from_keys",
    "get",
    "has",
    "is_empty",
    "keys",
    "map",
    "map_entries",
    "map_keys",
    "map_values",
    "reduce",
    "remove",
    "set",
    "some",
    "update",
    "values",
]
