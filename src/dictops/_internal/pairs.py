"""Validation of ``(key, value)`` pairs supplied by callers."""

from __future__ import annotations

from typing import Any

from dictops.errors import InvalidArgumentError


def unpack_pair(pair: Any, position: int, *, source: str = "entry") -> tuple[Any, Any]:
    """Split ``pair`` into key and value, or raise InvalidArgumentError."""
    try:
        key, value = pair
    except (TypeError, ValueError) as exc:
        msg = f"{source} {position} is not a (key, value) pair: {pair!r}"
        raise InvalidArgumentError(msg) from exc
    return key, value
