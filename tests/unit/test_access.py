"""Tests for enumeration and accessor primitives."""

from __future__ import annotations

import dictops
from dictops import FrozenDict


class TestEnumeration:
    """Tests for count, keys, values and entries."""

    def test_single_entry(self) -> None:
        """A one-entry dict enumerates to one item everywhere."""
        d = FrozenDict({"foo": 1})

        assert dictops.count(d) == 1
        assert dictops.keys(d) == ("foo",)
        assert dictops.values(d) == (1,)
        assert dictops.entries(d) == (("foo", 1),)

    def test_order_follows_insertion(self) -> None:
        d = {"b": 1, "a": 2, "c": 3}

        assert dictops.keys(d) == ("b", "a", "c")
        assert dictops.values(d) == (1, 2, 3)
        assert dictops.entries(d) == (("b", 1), ("a", 2), ("c", 3))

    def test_sequences_are_detached(self) -> None:
        """Returned sequences are tuples that do not track the source."""
        source = {"foo": 1}
        ks = dictops.keys(source)
        source["bar"] = 2

        assert isinstance(ks, tuple)
        assert ks == ("foo",)

    def test_empty(self) -> None:
        assert dictops.count({}) == 0
        assert dictops.keys({}) == ()
        assert dictops.entries({}) == ()


class TestGet:
    """Tests for get."""

    def test_present_key(self) -> None:
        assert dictops.get({"foo": 1}, "foo") == 1

    def test_default(self) -> None:
        """A default is returned for missing keys."""
        assert dictops.get({"foo": 1}, "bar", 2) == 2

    def test_missing_without_default(self) -> None:
        assert dictops.get({"foo": 1}, "bar") is None

    def test_stored_none_is_returned(self) -> None:
        """A present key with a None value beats the default."""
        assert dictops.get({"foo": None}, "foo", 5) is None


class TestHas:
    """Tests for has."""

    def test_own_key(self) -> None:
        assert dictops.has({"foo": 1}, "foo") is True

    def test_absent_key(self) -> None:
        assert dictops.has({"foo": 1}, "bar") is False

    def test_ignores_attributes(self) -> None:
        """Methods and dunder attributes of the container are not keys."""
        d = FrozenDict({"foo": 1})

        assert dictops.has(d, "keys") is False
        assert dictops.has(d, "__len__") is False
        assert dictops.get(d, "items") is None


class TestIsEmpty:
    """Tests for is_empty and empty."""

    def test_is_empty(self) -> None:
        assert dictops.is_empty({"foo": 1}) is False
        assert dictops.is_empty({}) is True

    def test_empty_is_shared(self) -> None:
        """empty() always returns the same canonical instance."""
        assert dictops.empty() is dictops.empty()
        assert dictops.empty() is dictops.EMPTY

    def test_empty_is_frozen(self) -> None:
        e = dictops.empty()

        assert isinstance(e, FrozenDict)
        assert dictops.is_empty(e)
