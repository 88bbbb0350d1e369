# topmark:header:start
#
#   project      : flagenum
#   file         : test_holders.py
#   file_relpath : tests/test_holders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Holder state machines, exercised directly without a Click command."""

from __future__ import annotations

import pytest

from flagenum import Cell, identity
from flagenum.errors import ConversionError, DuplicateValueError, NotAllowedError
from flagenum.holders import MultipleValues, SingleValue


def _multiple(defaults: list[str], allowed: list[str]) -> MultipleValues[str]:
    holder = MultipleValues("val", [], defaults, allowed, set(allowed), identity, identity)
    holder.reset()
    return holder


def _single(value: str | None, allowed: list[str]) -> SingleValue[str]:
    return SingleValue("val", Cell(value), allowed, set(allowed), identity, identity)


def test_multiple_starts_with_defaults() -> None:
    """It should expose the defaults until the first accepted value."""
    holder = _multiple(["a", "b"], ["a", "b", "c"])

    assert holder.get() == ["a", "b"]
    assert holder.is_default
    assert str(holder) == "a,b"


def test_multiple_first_set_replaces_defaults() -> None:
    """It should drop all defaults on the first accepted value, then append."""
    holder = _multiple(["a", "b"], ["a", "b", "c"])
    exposed = holder.get()

    holder.set("c")
    assert exposed == ["c"]
    assert not holder.is_default

    holder.set("a")
    assert exposed == ["c", "a"]
    assert holder.defaults == ["a", "b"]


def test_multiple_rejected_value_keeps_state() -> None:
    """It should leave the exposed list and the state untouched on rejection."""
    holder = _multiple(["a"], ["a", "b"])

    with pytest.raises(NotAllowedError):
        holder.set("z")

    assert holder.get() == ["a"]
    assert holder.is_default

    holder.set("b")
    with pytest.raises(DuplicateValueError):
        holder.set("b")
    assert holder.get() == ["b"]


def test_multiple_rejected_value_is_not_remembered() -> None:
    """It should not count a rejected value as seen."""
    holder = MultipleValues("n", [], [], [1, 2], {1, 2}, int, str)

    with pytest.raises(NotAllowedError):
        holder.set("3")
    holder.set("1")

    assert holder.get() == [1]


def test_multiple_conversion_error() -> None:
    """It should wrap converter failures in a conversion error."""
    holder = MultipleValues("n", [], [], [], set(), int, str)

    with pytest.raises(ConversionError) as excinfo:
        holder.set("one")

    assert str(excinfo.value).startswith('cannot convert "one": ')
    assert holder.get() == []


def test_multiple_empty_rendering() -> None:
    """It should render an empty string without values."""
    assert str(_multiple([], [])) == ""


def test_single_overwrites() -> None:
    """It should keep only the last accepted value."""
    holder = _single(None, [])

    assert holder.get() is None
    assert str(holder) == ""

    holder.set("x")
    holder.set("y")
    holder.set("y")

    assert holder.get() == "y"
    assert holder.cell.value == "y"
    assert str(holder) == "y"


def test_single_rejected_value_keeps_previous() -> None:
    """It should not touch the stored value when rejecting input."""
    holder = _single("a", ["a", "b"])

    with pytest.raises(NotAllowedError) as excinfo:
        holder.set("c")

    assert str(excinfo.value) == "must be one of a,b"
    assert holder.get() == "a"


def test_allowed_texts_keep_order() -> None:
    """It should render allowed values in the caller's order."""
    holder = SingleValue("n", Cell(), [3, 1, 2], {1, 2, 3}, int, str)

    assert holder.allowed_texts() == ["3", "1", "2"]


def test_multiple_reset_restores_defaults() -> None:
    """It should restore the defaults and forget previously accepted values."""
    holder = _multiple(["a"], ["a", "b"])
    exposed = holder.get()
    holder.set("b")

    holder.reset()

    assert exposed == ["a"]
    assert holder.is_default
    holder.set("b")
    assert exposed == ["b"]
