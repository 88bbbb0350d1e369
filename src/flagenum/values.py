# topmark:header:start
#
#   project      : flagenum
#   file         : values.py
#   file_relpath : src/flagenum/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value contract shared by enumerated flags.

Every value stored by a flag must be hashable (so it can key the allowed set
and the duplicate-detection set) and ordered. The generic holders, the
validation helpers and the registration functions are all parameterised over
the same type variable ``V``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar


class EnumValue(Protocol):
    """Structural type for values usable in an enumerated flag."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: object, /) -> bool: ...

    def __lt__(self, other: Any, /) -> bool: ...


V = TypeVar("V", bound=EnumValue)

ToValue = Callable[[str], V]
ToText = Callable[[V], str]


@dataclass
class Cell(Generic[V]):
    """Mutable reference to the current value of a single-value flag.

    ``value`` is ``None`` until a default is supplied or the flag is set.
    """

    value: V | None = None


def identity(text: str) -> str:
    """Converter used by string-typed flags in both directions."""
    return text
