"""Transformation primitives.

Every function here walks the input once in iteration order and never
mutates it. Callbacks receive ``(value, key, dict)`` except in
:func:`map_keys`, which passes ``(key, value, dict)``. That order is kept
for compatibility with existing callers and must not be "fixed".

When ``context`` is given, the callback is bound to it as a method and
receives it as its first positional argument.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import structlog

from dictops._internal.frozen import FrozenDict
from dictops._internal.invoke import prepare
from dictops._internal.pairs import unpack_pair
from dictops.errors import InvalidArgumentError

if TYPE_CHECKING:
    from dictops.types import Dict, DictLike, Entry, KeyCallback, Reducer, ValueCallback

# Routed through stdlib logging so nothing is emitted unless the host
# application enables the "dictops" logger.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)

V = TypeVar("V")
R = TypeVar("R")

_MISSING: Any = object()


def for_each(d: DictLike[V], fn: ValueCallback[object], context: object | None = None) -> None:
    """Call ``fn`` once per entry for its side effects."""
    call = prepare(fn, context, name="fn")
    for key, value in d.items():
        call(value, key, d)


def every(d: DictLike[V], predicate: ValueCallback[bool], context: object | None = None) -> bool:
    """True unless ``predicate`` fails for some entry. Stops at the first failure."""
    call = prepare(predicate, context, name="predicate")
    return all(call(value, key, d) for key, value in d.items())


def some(d: DictLike[V], predicate: ValueCallback[bool], context: object | None = None) -> bool:
    """True if ``predicate`` holds for some entry. Stops at the first success."""
    call = prepare(predicate, context, name="predicate")
    return any(call(value, key, d) for key, value in d.items())


def filter(  # noqa: A001
    d: DictLike[V], predicate: ValueCallback[bool], context: object | None = None
) -> Dict[V]:
    """New dictionary with the entries for which ``predicate`` holds."""
    call = prepare(predicate, context, name="predicate")
    return FrozenDict({key: value for key, value in d.items() if call(value, key, d)})


def map(  # noqa: A001
    d: DictLike[V], fn: ValueCallback[R], context: object | None = None
) -> tuple[R, ...]:
    """One result per entry, in iteration order."""
    call = prepare(fn, context, name="fn")
    return tuple(call(value, key, d) for key, value in d.items())


def map_values(d: DictLike[V], fn: ValueCallback[R], context: object | None = None) -> Dict[R]:
    """Same keys, values replaced by ``fn(value, key, dict)``."""
    call = prepare(fn, context, name="fn")
    return FrozenDict({key: call(value, key, d) for key, value in d.items()})


def _collect(pairs: list[Entry[R]], source: str) -> Dict[R]:
    result: dict[str, R] = {}
    for key, value in pairs:
        if key in result:
            logger.debug("key_collision", operation=source, key=key)
        result[key] = value
    return FrozenDict(result)


def map_keys(d: DictLike[V], fn: KeyCallback, context: object | None = None) -> Dict[V]:
    """Same values, keys replaced by ``fn(key, value, dict)``.

    Note the argument order: key first, unlike every other callback here.
    When two keys map to the same new key the later entry wins.
    """
    call = prepare(fn, context, name="fn")
    return _collect([(call(key, value, d), value) for key, value in d.items()], "map_keys")


def map_entries(
    d: DictLike[V], fn: ValueCallback[Entry[R]], context: object | None = None
) -> Dict[R]:
    """Entries replaced by the ``(key, value)`` pair ``fn`` returns.

    When two entries map to the same new key the later one wins.
    """
    call = prepare(fn, context, name="fn")
    pairs: list[Entry[R]] = []
    for index, (key, value) in enumerate(d.items()):
        new_key, new_value = unpack_pair(call(value, key, d), index, source="mapped entry")
        pairs.append((new_key, new_value))
    return _collect(pairs, "map_entries")


def reduce(
    d: DictLike[V],
    fn: Reducer,
    initial: Any = _MISSING,
    context: object | None = None,
) -> Any:
    """Fold ``fn(accumulator, value, key, dict)`` over ``d`` left to right.

    Without ``initial`` the first value seeds the accumulator and folding
    starts at the second entry. Reducing an empty dictionary without
    ``initial`` raises :class:`InvalidArgumentError`.
    """
    call = prepare(fn, context, name="fn")
    items = iter(d.items())
    if initial is _MISSING:
        first = next(items, None)
        if first is None:
            logger.debug("reduce_rejected", reason="empty dictionary without initial value")
            msg = "reduce of an empty dictionary with no initial value"
            raise InvalidArgumentError(msg)
        accumulator = first[1]
    else:
        accumulator = initial

    for key, value in items:
        accumulator = call(accumulator, value, key, d)
    return accumulator
