"""Errors raised by dictops operations."""

from __future__ import annotations


class DictOpsError(ValueError):
    """Base class for errors raised by dictops."""


class InvalidArgumentError(DictOpsError):
    """Raised when an operation is called with arguments it cannot honour.

    Examples: reducing an empty dictionary without an initial value, or
    passing ``None`` where a callback is required.
    """
