# topmark:header:start
#
#   project      : flagenum
#   file         : extension.py
#   file_relpath : src/flagenum/extension.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String-typed convenience API over a Click command.

Allowed values and defaults of string flags are normally literals in the
program, so a definition error is a programming error: the wrapper logs it and
raises `FlagDefinitionError`, which Click reports with exit code 78 when it
escapes a running command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from flagenum.config.logging import get_logger
from flagenum.errors import FlagDefinitionError, FlagSetupError
from flagenum.registration import multiple_var, single_var
from flagenum.values import Cell, identity

if TYPE_CHECKING:
    import click

    from flagenum.config.logging import FlagenumLogger

logger: FlagenumLogger = get_logger(__name__)


class FlagSetExtension:
    """Wraps a Click command to define enumerated string options on it."""

    def __init__(self, command: click.Command) -> None:
        self.command = command

    def single_string(
        self,
        name: str,
        value: str | None = None,
        allowed: Sequence[str] = (),
        usage: str = "",
        **option_attrs: Any,
    ) -> Cell[str]:
        """Define a string option that keeps the last value given.

        Returns:
            Cell[str]: Live storage for the flag value.

        Raises:
            FlagDefinitionError: If the allowed values or the default are invalid.
        """
        cell: Cell[str] = Cell()
        self.single_string_var(cell, name, value, allowed, usage, **option_attrs)
        return cell

    def single_string_var(
        self,
        target: Cell[str],
        name: str,
        value: str | None = None,
        allowed: Sequence[str] = (),
        usage: str = "",
        **option_attrs: Any,
    ) -> None:
        """Like `single_string`, storing the value in ``target``."""
        try:
            single_var(
                self.command,
                target,
                name,
                value,
                allowed,
                identity,
                identity,
                usage,
                **option_attrs,
            )
        except FlagSetupError as err:
            logger.error("cannot define flag -%s: %s", name, err)
            raise FlagDefinitionError(err) from err

    def multiple_strings(
        self,
        name: str,
        defaults: Sequence[str] = (),
        allowed: Sequence[str] = (),
        usage: str = "",
        **option_attrs: Any,
    ) -> list[str]:
        """Define a string option that collects one value per occurrence.

        Returns:
            list[str]: Live storage for the flag values.

        Raises:
            FlagDefinitionError: If the allowed values or the defaults are invalid.
        """
        values: list[str] = []
        self.multiple_strings_var(values, name, defaults, allowed, usage, **option_attrs)
        return values

    def multiple_strings_var(
        self,
        target: list[str],
        name: str,
        defaults: Sequence[str] = (),
        allowed: Sequence[str] = (),
        usage: str = "",
        **option_attrs: Any,
    ) -> None:
        """Like `multiple_strings`, storing the values in ``target``."""
        try:
            multiple_var(
                self.command,
                target,
                name,
                defaults,
                allowed,
                identity,
                identity,
                usage,
                **option_attrs,
            )
        except FlagSetupError as err:
            logger.error("cannot define flag -%s: %s", name, err)
            raise FlagDefinitionError(err) from err


def new(command: click.Command) -> FlagSetExtension:
    """Return a `FlagSetExtension` wrapping ``command``."""
    return FlagSetExtension(command)
