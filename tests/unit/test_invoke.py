"""Tests for callback preparation."""

from __future__ import annotations

import functools
import operator
from typing import Any

import pytest

from dictops._internal.invoke import prepare
from dictops.errors import DictOpsError, InvalidArgumentError


class TestArity:
    """Arguments beyond the callback's positional capacity are dropped."""

    def test_zero_parameters(self) -> None:
        assert prepare(lambda: "ok")(1, "a", {}) == "ok"

    def test_prefix(self) -> None:
        assert prepare(lambda v, k: (v, k))(1, "a", {}) == (1, "a")

    def test_var_positional_receives_everything(self) -> None:
        assert prepare(lambda *args: args)(1, "a", None) == (1, "a", None)

    def test_keyword_only_parameters_not_counted(self) -> None:
        def fn(v: int, *, scale: int = 10) -> int:
            return v * scale

        assert prepare(fn)(2, "a", {}) == 20

    @pytest.mark.parametrize(("func", "expected"), [(str, "1"), (int, 1), (bool, True)])
    def test_builtin_types_get_primary_argument(self, func: Any, expected: object) -> None:
        assert prepare(func)(1, "a", {"a": 1}) == expected

    def test_unreadable_signature_gets_primary_argument(self) -> None:
        """Callables without a readable signature get only the first argument."""

        class Opaque:
            @property
            def __signature__(self) -> object:
                raise ValueError("no signature")

            def __call__(self, *args: Any) -> tuple[Any, ...]:
                return args

        assert prepare(Opaque())(1, "a", {}) == (1,)

    def test_partial(self) -> None:
        add = functools.partial(operator.add, 100)
        assert prepare(add)(1, "a", {}) == 101


class TestContext:
    """A context is bound as the callback's receiver."""

    def test_bound_as_first_argument(self) -> None:
        assert prepare(lambda self, v: (self, v), "ctx")(1, "a", {}) == ("ctx", 1)

    def test_method_style(self) -> None:
        class Scale:
            factor = 3

            def apply(self, value: int) -> int:
                return value * self.factor

        assert prepare(Scale.apply, Scale())(2, "a", {}) == 6

    def test_none_means_no_context(self) -> None:
        assert prepare(lambda v: v, None)(1, "a", {}) == 1


class TestValidation:
    """Tests for missing or non-callable callbacks."""

    def test_none(self) -> None:
        with pytest.raises(InvalidArgumentError, match="predicate is required"):
            prepare(None, name="predicate")

    @pytest.mark.parametrize("value", [1, "text", [1]])
    def test_not_callable(self, value: Any) -> None:
        with pytest.raises(InvalidArgumentError, match="must be callable"):
            prepare(value)

    def test_error_hierarchy(self) -> None:
        """InvalidArgumentError is a DictOpsError and a ValueError."""
        assert issubclass(InvalidArgumentError, DictOpsError)
        assert issubclass(InvalidArgumentError, ValueError)
