# topmark:header:start
#
#   project      : flagenum
#   file         : options.py
#   file_relpath : src/flagenum/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click option type that binds a holder into a command.

`EnumOption` is the extension point between Click's parser and the holders:

- Click collects every occurrence of the option (the option is declared with
  ``multiple=True`` at the Click layer), and `EnumOption.process_value` feeds
  each raw string to ``holder.set`` in command-line order.
- Holder errors are re-raised as `InvalidFlagValue`, so Click prints usage and
  exits like for any other bad parameter.
- A ``callback`` runs on the holder's value after every occurrence was fed.
- The help default reflects the holder's current value(s), comma-joined.
- Attributes the holder owns (``default``, ``type``, ...) are refused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence, Union

import click
from click.core import ParameterSource

from flagenum.errors import FlagError, FlagSetupError, InvalidFlagValue

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem
    from click.types import OptionHelpExtra

    from flagenum.holders import MultipleValues, SingleValue

    Holder = Union[SingleValue[Any], MultipleValues[Any]]

# Sources whose values are fed to the holder; defaults stay with the holder itself.
_INPUT_SOURCES = (
    ParameterSource.COMMANDLINE,
    ParameterSource.ENVIRONMENT,
    ParameterSource.DEFAULT_MAP,
)

# Option attributes whose job is done by the holder.
RESERVED_ATTRS = ("default", "show_default", "type", "multiple", "nargs", "is_flag", "count")


class EnumOption(click.Option):
    """A Click option whose values are validated and stored by a holder."""

    holder: Holder

    def __init__(self, param_decls: Sequence[str], *, holder: Holder, **attrs: Any) -> None:
        reserved = [key for key in RESERVED_ATTRS if key in attrs]
        if reserved:
            raise FlagSetupError(
                f"unsupported option attribute \"{reserved[0]}\" for flag -{holder.name}"
            )
        attrs.setdefault("metavar", "VALUE")
        attrs["multiple"] = True
        attrs["show_default"] = False
        super().__init__(list(param_decls), **attrs)
        self.holder = holder

    def process_value(self, ctx: click.Context, value: Any) -> Any:
        """Feed each parsed occurrence to the holder and expose its value.

        Values from the command line, the environment and ``ctx.default_map``
        all go through ``holder.set``. A ``callback`` receives the holder's value
        and its result becomes the parameter value.

        Args:
            ctx (click.Context): Current Click context.
            value (Any): Raw strings collected by Click for this option.

        Returns:
            Any: The holder's current value (``V | None`` or ``list[V]``), or the
                callback's result.

        Raises:
            InvalidFlagValue: If the holder rejects an occurrence.
            click.MissingParameter: If the option is required and has no value.
        """
        source = ctx.get_parameter_source(self.name) if self.name else None
        if source in _INPUT_SOURCES and isinstance(value, (str, list, tuple)):
            # A default_map entry may hold a single value instead of a list.
            texts = [value] if isinstance(value, str) else value
            for item in texts:
                text = str(item)
                try:
                    self.holder.set(text)
                except FlagError as err:
                    raise InvalidFlagValue(
                        text, self.holder.name, err, ctx=ctx, param=self
                    ) from err

        current = self.holder.get()
        if self.required and (current is None or current == []):
            raise click.MissingParameter(ctx=ctx, param=self)
        if self.callback is not None:
            current = self.callback(ctx, self, current)
        return current

    def get_help_extra(self, ctx: click.Context) -> OptionHelpExtra:
        """Add the holder's current value(s) as the ``default`` help entry."""
        extra = super().get_help_extra(ctx)
        rendered = str(self.holder)
        if rendered:
            extra["default"] = rendered
        return extra

    def shell_complete(self, ctx: click.Context, incomplete: str) -> list[CompletionItem]:
        """Complete from the allowed values, when the flag has any.

        Bash: `eval "$(_PROG_COMPLETE=bash_source prog)"`
        """
        allowed = self.holder.allowed_texts()
        if not allowed:
            return super().shell_complete(ctx, incomplete)

        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        return [RuntimeCompletionItem(text) for text in allowed if text.startswith(incomplete)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumOption({self.name!r}, holder={self.holder!r})"
