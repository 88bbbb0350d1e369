# topmark:header:start
#
#   project      : flagenum
#   file         : validation.py
#   file_relpath : src/flagenum/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation helpers for enumerated flags.

The helpers are shared by both holder kinds and by the registration
functions:

- `build_unique_set` / `add_unique`: duplicate detection.
- `check_allowed` / `check_default`: allow-list membership.
- `join_values` / `usage_suffix`: rendering for messages and help text.

An empty allow-list means the flag is unrestricted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from flagenum.errors import DuplicateValueError, InvalidDefaultError, NotAllowedError
from flagenum.values import V

if TYPE_CHECKING:
    from flagenum.values import ToText


def add_unique(label: str, name: str, value: V, seen: set[V], to_text: ToText[V] = str) -> None:
    """Insert ``value`` into ``seen``.

    Args:
        label (str): ``"allowed"`` / ``"default"`` at definition time, ``""`` for
            command-line input.
        name (str): Flag name used in the error message.
        value (V): Value to insert.
        seen (set[V]): Set of values accepted so far; updated in place.
        to_text (ToText[V]): Renders ``value`` for the error message.

    Raises:
        DuplicateValueError: If ``value`` is already in ``seen``.
    """
    if value in seen:
        raise DuplicateValueError(label, name, to_text(value))
    seen.add(value)


def build_unique_set(
    label: str,
    name: str,
    values: Iterable[V],
    to_text: ToText[V] = str,
) -> set[V]:
    """Return the set of ``values``, failing on the first repeated value.

    Args:
        label (str): Wording for the error message (see `add_unique`).
        name (str): Flag name used in the error message.
        values (Iterable[V]): Values in caller order.
        to_text (ToText[V]): Renders a value for the error message.

    Returns:
        set[V]: The distinct values.

    Raises:
        DuplicateValueError: For the first value seen twice, in iteration order.
    """
    uniques: set[V] = set()
    for value in values:
        add_unique(label, name, value, uniques, to_text)
    return uniques


def join_values(values: Iterable[V], to_text: ToText[V] = str) -> str:
    """Render ``values`` comma-separated, without spaces."""
    return ",".join(to_text(v) for v in values)


def check_allowed(
    value: V,
    allowed: Sequence[V],
    allowed_set: set[V] | frozenset[V],
    to_text: ToText[V] = str,
) -> None:
    """Raise `NotAllowedError` unless ``value`` is permitted.

    Membership is tested against ``allowed_set``; ``allowed`` is only kept to
    render the error message in the caller's order.
    """
    if allowed and value not in allowed_set:
        raise NotAllowedError(to_text(value), [to_text(v) for v in allowed])


def check_default(
    name: str,
    value: V,
    allowed: Sequence[V],
    allowed_set: set[V] | frozenset[V],
    to_text: ToText[V] = str,
) -> None:
    """Validate a default value, wrapping failures in `InvalidDefaultError`."""
    try:
        check_allowed(value, allowed, allowed_set, to_text)
    except NotAllowedError as err:
        raise InvalidDefaultError(name, to_text(value), err) from err


def usage_suffix(
    usage: str,
    quantifier: str,
    allowed: Sequence[V],
    to_text: ToText[V] = str,
) -> str:
    """Return the help-text suffix listing the allowed values.

    Examples:
        >>> usage_suffix("level", "one of", ["a", "b"])
        ' (allowed one of a,b)'
        >>> usage_suffix("", "any of", ["a"])
        '(allowed any of a)'
        >>> usage_suffix("level", "one of", [])
        ''
    """
    if not allowed:
        return ""
    suffix = f"(allowed {quantifier} {join_values(allowed, to_text)})"
    if usage:
        suffix = " " + suffix
    return suffix
