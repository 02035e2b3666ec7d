"""Callback preparation: context binding and positional-arity trimming."""

from __future__ import annotations

import inspect
import types
from typing import TYPE_CHECKING, Any

from dictops.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_OPAQUE_CAPACITY = 1


def _positional_capacity(func: Callable[..., object]) -> int | None:
    """Return how many positional arguments ``func`` accepts.

    ``None`` means unbounded: the callable takes ``*args``. Builtin types
    (``str``, ``int``, ``bool``) and callables whose signature cannot be read
    get only the primary argument.
    """
    if isinstance(func, type) and func.__module__ == "builtins":
        return _OPAQUE_CAPACITY
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return _OPAQUE_CAPACITY

    capacity = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            capacity += 1
    return capacity


def prepare(
    func: Callable[..., Any] | None,
    context: object | None = None,
    *,
    name: str = "callback",
) -> Callable[..., Any]:
    """Return a callable that invokes ``func`` the way dictops documents.

    When ``context`` is not ``None``, ``func`` is bound to it as a method,
    so the context arrives as the first positional parameter. The returned
    callable drops trailing arguments ``func`` has no room for, which lets
    callers write ``lambda v: v > 1`` where ``(value, key, dict)`` is offered.
    """
    if func is None:
        msg = f"{name} is required"
        raise InvalidArgumentError(msg)
    if not callable(func):
        msg = f"{name} must be callable, got {type(func).__name__}"
        raise InvalidArgumentError(msg)

    target: Callable[..., Any] = func
    if context is not None:
        target = types.MethodType(func, context)

    capacity = _positional_capacity(target)
    if capacity is None:
        return target

    def call(*args: Any) -> Any:
        return target(*args[:capacity])

    return call
