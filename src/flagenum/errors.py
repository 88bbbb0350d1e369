# topmark:header:start
#
#   project      : flagenum
#   file         : errors.py
#   file_relpath : src/flagenum/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by enumerated flags.

Two families exist:

- Setup errors (`FlagSetupError`) are raised synchronously while a flag is
  being defined: duplicate allowed values, duplicate or disallowed defaults,
  or a flag name declared twice on the same command.
- Value errors (`FlagValueError`) are raised by a holder while the command
  line is parsed. `EnumOption` re-raises them as `InvalidFlagValue` so Click
  reports them like any other usage error.

The message texts are part of the public contract and are kept stable.
"""

from __future__ import annotations

from typing import Sequence

import click

from flagenum.exit_codes import ExitCode


class FlagError(ValueError):
    """Base class for all enumerated flag errors."""


class FlagSetupError(FlagError):
    """Invalid flag definition (allowed values, defaults or name)."""


class FlagValueError(FlagError):
    """Rejected command-line value."""


class DuplicateValueError(FlagSetupError, FlagValueError):
    """A value occurs more than once where values must be distinct.

    ``label`` is ``"allowed"`` or ``"default"`` for definition checks, and
    empty when a repeated command-line value is detected during parsing.
    """

    def __init__(self, label: str, name: str, value: str) -> None:
        self.label = label
        self.name = name
        self.value = value
        prefix = f"{label} " if label else ""
        super().__init__(f'duplicated {prefix}value "{value}" for flag -{name}')


class NotAllowedError(FlagValueError):
    """A value is not a member of the allow-list."""

    def __init__(self, value: str, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"must be one of {','.join(self.allowed)}")


class ConversionError(FlagValueError):
    """The text-to-value converter rejected the input."""

    def __init__(self, text: str, reason: object) -> None:
        self.text = text
        super().__init__(f'cannot convert "{text}": {reason}')


class InvalidDefaultError(FlagSetupError):
    """A default value is not a member of the allow-list."""

    def __init__(self, name: str, value: str, cause: NotAllowedError) -> None:
        self.name = name
        self.value = value
        self.cause = cause
        super().__init__(f'unexpected default value "{value}" for flag -{name}: {cause}')


# --- Click-facing errors ---


class InvalidFlagValue(click.BadParameter):
    """Usage error wrapping a `FlagValueError` raised during parsing."""

    def __init__(
        self,
        text: str,
        name: str,
        cause: FlagError,
        ctx: click.Context | None = None,
        param: click.Parameter | None = None,
    ) -> None:
        super().__init__(str(cause), ctx=ctx, param=param)
        self.text = text
        self.name = name
        self.cause = cause

    def format_message(self) -> str:
        """Return ``invalid value "<input>" for flag -<name>: <reason>``."""
        return f'invalid value "{self.text}" for flag -{self.name}: {self.message}'


class FlagDefinitionError(click.ClickException):
    """Fatal flag definition failure raised by the convenience layer."""

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, cause: FlagSetupError) -> None:
        super().__init__(str(cause))
        self.cause = cause
