# topmark:header:start
#
#   project      : flagenum
#   file         : registration.py
#   file_relpath : src/flagenum/registration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Define enumerated options on a Click command.

Each function validates the static inputs once (allowed values, defaults),
builds a holder, attaches it to ``command`` as an `EnumOption` named
``--<name>``, and hands back the live storage:

- `single` / `single_var`: a `Cell` holding the last accepted value.
- `multiple` / `multiple_var`: a list holding the defaults, replaced by the
  command-line values once the flag is given.

Definition problems raise `FlagSetupError` subclasses immediately; command
line problems are reported by Click while parsing.

Example:
    ```python
    @click.command()
    def main(**params): ...

    level = single(main, "level", "info", ["debug", "info"], str, str, "log level")
    main.main(["--level", "debug"], standalone_mode=False)
    assert level.value == "debug"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from flagenum.config.logging import get_logger
from flagenum.errors import FlagSetupError
from flagenum.holders import MultipleValues, SingleValue
from flagenum.options import EnumOption
from flagenum.validation import build_unique_set, check_default, usage_suffix
from flagenum.values import Cell, V

if TYPE_CHECKING:
    import click

    from flagenum.config.logging import FlagenumLogger
    from flagenum.holders import _Holder
    from flagenum.values import ToText, ToValue

logger: FlagenumLogger = get_logger(__name__)

SINGLE_QUANTIFIER = "one of"
MULTIPLE_QUANTIFIER = "any of"


def single(
    command: click.Command,
    name: str,
    value: V | None,
    allowed: Sequence[V],
    to_value: ToValue[V],
    to_text: ToText[V],
    usage: str = "",
    **option_attrs: Any,
) -> Cell[V]:
    """Define a single-value enumerated option.

    Args:
        command (click.Command): Command the option is added to.
        name (str): Flag name; the option is declared as ``--<name>``.
        value (V | None): Default value, or None for no default.
        allowed (Sequence[V]): Allowed values; empty means unrestricted.
        to_value (ToValue[V]): Converts command-line text to a value.
        to_text (ToText[V]): Renders a value for help and messages.
        usage (str): Help text; the allowed values are appended to it.
        **option_attrs (Any): Extra `click.Option` attributes (``envvar``,
            ``hidden``, ``required``, ``callback``, ``aliases`` for extra
            declarations).

    Returns:
        Cell[V]: Live storage for the flag value.

    Raises:
        DuplicateValueError: If ``allowed`` contains duplicates.
        InvalidDefaultError: If ``value`` is not allowed.
        FlagSetupError: If ``command`` already declares ``name``, or if
            ``option_attrs`` holds an attribute the holder owns (``default``, ``type``).
    """
    cell: Cell[V] = Cell()
    single_var(command, cell, name, value, allowed, to_value, to_text, usage, **option_attrs)
    return cell


def single_var(
    command: click.Command,
    target: Cell[V],
    name: str,
    value: V | None,
    allowed: Sequence[V],
    to_value: ToValue[V],
    to_text: ToText[V],
    usage: str = "",
    **option_attrs: Any,
) -> None:
    """Like `single`, storing the value in the caller-provided ``target``."""
    allowed_set = build_unique_set("allowed", name, allowed, to_text)
    if value is not None:
        check_default(name, value, allowed, allowed_set, to_text)

    decls = _declarations(command, name, option_attrs)
    holder = SingleValue(name, target, allowed, allowed_set, to_value, to_text)
    help_text = usage + usage_suffix(usage, SINGLE_QUANTIFIER, allowed, to_text)
    option = _new_option(decls, holder, help_text, option_attrs)
    target.value = value
    _bind(command, option)


def multiple(
    command: click.Command,
    name: str,
    defaults: Sequence[V],
    allowed: Sequence[V],
    to_value: ToValue[V],
    to_text: ToText[V],
    usage: str = "",
    **option_attrs: Any,
) -> list[V]:
    """Define a multi-value enumerated option.

    Every occurrence of ``--<name>`` appends one value; repeating a value is
    an error. The defaults are used only if the flag is never given.

    Args:
        command (click.Command): Command the option is added to.
        name (str): Flag name; the option is declared as ``--<name>``.
        defaults (Sequence[V]): Default values, pairwise distinct.
        allowed (Sequence[V]): Allowed values; empty means unrestricted.
        to_value (ToValue[V]): Converts command-line text to a value.
        to_text (ToText[V]): Renders a value for help and messages.
        usage (str): Help text; the allowed values are appended to it.
        **option_attrs (Any): Extra `click.Option` attributes.

    Returns:
        list[V]: Live storage for the flag values.

    Raises:
        DuplicateValueError: If ``allowed`` or ``defaults`` contain duplicates.
        InvalidDefaultError: If a default is not allowed.
        FlagSetupError: If ``command`` already declares ``name``, or if
            ``option_attrs`` holds an attribute the holder owns (``default``, ``type``).
    """
    values: list[V] = []
    multiple_var(command, values, name, defaults, allowed, to_value, to_text, usage, **option_attrs)
    return values


def multiple_var(
    command: click.Command,
    target: list[V],
    name: str,
    defaults: Sequence[V],
    allowed: Sequence[V],
    to_value: ToValue[V],
    to_text: ToText[V],
    usage: str = "",
    **option_attrs: Any,
) -> None:
    """Like `multiple`, storing the values in the caller-provided ``target`` list.

    ``target`` is overwritten with ``defaults``.
    """
    allowed_set = build_unique_set("allowed", name, allowed, to_text)
    build_unique_set("default", name, defaults, to_text)
    if allowed:
        for default in defaults:
            check_default(name, default, allowed, allowed_set, to_text)

    decls = _declarations(command, name, option_attrs)
    holder = MultipleValues(name, target, defaults, allowed, allowed_set, to_value, to_text)
    help_text = usage + usage_suffix(usage, MULTIPLE_QUANTIFIER, allowed, to_text)
    option = _new_option(decls, holder, help_text, option_attrs)
    holder.reset()
    _bind(command, option)


def _declarations(command: click.Command, name: str, option_attrs: dict[str, Any]) -> list[str]:
    """Return the option declarations for ``name``, rejecting redefinitions."""
    decls = [f"--{name}", *option_attrs.pop("aliases", ())]
    param_name = name.replace("-", "_").lower()
    for param in command.params:
        if param.name == param_name or set(param.opts) & set(decls):
            raise FlagSetupError(f"flag redefined: -{name}")
    return decls


def _new_option(
    decls: list[str],
    holder: _Holder[Any],
    help_text: str,
    option_attrs: dict[str, Any],
) -> EnumOption:
    """Build the `EnumOption` for ``holder`` without touching any command."""
    return EnumOption(decls, holder=holder, help=help_text, **option_attrs)


def _bind(command: click.Command, option: EnumOption) -> None:
    """Attach ``option`` to ``command``."""
    command.params.append(option)
    logger.debug("defined flag -%s on command %r", option.holder.name, command.name)
