# topmark:header:start
#
#   project      : flagenum
#   file         : holders.py
#   file_relpath : src/flagenum/holders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stateful value holders bound to enumerated flags.

A holder is the mutable target of one flag. The host parser calls
``set(text)`` once per occurrence of the flag on the command line; the caller
reads the result through the handle returned at registration time.

Holder state machine (`MultipleValues`):

- *unset*: the exposed list equals the defaults.
- *accumulating*: entered on the first accepted ``set``; the defaults are
  dropped and every further accepted value is appended.

A rejected ``set`` never changes the visible state. `SingleValue` has no
accumulation state: every accepted ``set`` overwrites the stored value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Sequence

from flagenum.config.logging import get_logger
from flagenum.errors import ConversionError
from flagenum.validation import add_unique, check_allowed, join_values
from flagenum.values import Cell, V

if TYPE_CHECKING:
    from flagenum.config.logging import FlagenumLogger
    from flagenum.values import ToText, ToValue

logger: FlagenumLogger = get_logger(__name__)


class _Holder(Generic[V]):
    """State common to both holder kinds."""

    def __init__(
        self,
        name: str,
        allowed: Sequence[V],
        allowed_set: set[V],
        to_value: ToValue[V],
        to_text: ToText[V],
    ) -> None:
        self.name = name
        self.allowed: list[V] = list(allowed)
        self._allowed_set: frozenset[V] = frozenset(allowed_set)
        self.to_value = to_value
        self.to_text = to_text

    def _convert(self, text: str) -> V:
        try:
            return self.to_value(text)
        except (ValueError, TypeError, KeyError) as err:
            raise ConversionError(text, err) from err

    def _check_allowed(self, value: V) -> None:
        check_allowed(value, self.allowed, self._allowed_set, self.to_text)

    def allowed_texts(self) -> list[str]:
        """Return the allowed values rendered as text, in caller order."""
        return [self.to_text(v) for v in self.allowed]


class SingleValue(_Holder[V]):
    """Holder for a flag that keeps the last accepted value."""

    def __init__(
        self,
        name: str,
        cell: Cell[V],
        allowed: Sequence[V],
        allowed_set: set[V],
        to_value: ToValue[V],
        to_text: ToText[V],
    ) -> None:
        super().__init__(name, allowed, allowed_set, to_value, to_text)
        self.cell = cell

    def set(self, text: str) -> None:
        """Convert ``text``, validate it and store it.

        Raises:
            ConversionError: If the converter rejects ``text``.
            NotAllowedError: If the value is not in the allow-list.
        """
        value = self._convert(text)
        self._check_allowed(value)
        self.cell.value = value
        logger.trace("flag -%s set to %r", self.name, value)

    def get(self) -> V | None:
        """Return the current value (``None`` when never set)."""
        return self.cell.value

    def __str__(self) -> str:
        value = self.cell.value
        if value is None:
            return ""
        return self.to_text(value)

    def __repr__(self) -> str:
        return f"SingleValue(name={self.name!r}, value={self.cell.value!r})"


class MultipleValues(_Holder[V]):
    """Holder for a flag that accumulates distinct values.

    ``values`` is the exposed list. It is mutated in place so the reference
    handed out at registration stays valid: after `reset` it holds the defaults
    until the first accepted ``set``, then the command-line values only.
    """

    def __init__(
        self,
        name: str,
        values: list[V],
        defaults: Sequence[V],
        allowed: Sequence[V],
        allowed_set: set[V],
        to_value: ToValue[V],
        to_text: ToText[V],
    ) -> None:
        super().__init__(name, allowed, allowed_set, to_value, to_text)
        self._defaults: tuple[V, ...] = tuple(defaults)
        self._seen: set[V] = set()
        self._defaults_cleared = False
        self.values = values

    def reset(self) -> None:
        """Put the defaults back into the exposed list and forget seen values."""
        self.values[:] = self._defaults
        self._seen.clear()
        self._defaults_cleared = False

    @property
    def defaults(self) -> list[V]:
        """Return a copy of the default values."""
        return list(self._defaults)

    @property
    def is_default(self) -> bool:
        """Whether no command-line value has been accepted yet."""
        return not self._defaults_cleared

    def set(self, text: str) -> None:
        """Convert ``text``, validate it and append it.

        The first accepted value replaces the defaults wholesale.

        Raises:
            ConversionError: If the converter rejects ``text``.
            DuplicateValueError: If the value was already given on this command line.
            NotAllowedError: If the value is not in the allow-list.
        """
        value = self._convert(text)
        # Only accepted values reach the seen set, so a disallowed value is never a duplicate.
        self._check_allowed(value)
        add_unique("", self.name, value, self._seen, self.to_text)

        if not self._defaults_cleared:
            self.values.clear()
            self._defaults_cleared = True
        self.values.append(value)
        logger.trace("flag -%s appended %r", self.name, value)

    def get(self) -> list[V]:
        """Return the exposed list."""
        return self.values

    def __str__(self) -> str:
        return join_values(self.values, self.to_text)

    def __repr__(self) -> str:
        return f"MultipleValues(name={self.name!r}, values={self.values!r})"
