# topmark:header:start
#
#   project      : flagenum
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the flagenum test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides small helpers to build a throwaway Click command, define flags on it and
parse an argument vector the way the command would at runtime.

Notes:
    Holders keep state for the lifetime of the command they are bound to. Tests must
    build a fresh command (see `new_command`) for every command line they parse.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import click
import pytest

from flagenum.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterable

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_flagenum_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("FLAGENUM_DEMO_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level so holder activity shows up in captured logs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def new_command(name: str = "test") -> click.Command:
    """Return an empty Click command that accepts any defined option.

    Args:
        name (str): Command name shown in usage text.

    Returns:
        click.Command: A command whose callback ignores its parameters.
    """

    def _callback(**_params: Any) -> None:
        return None

    return click.Command(name, callback=_callback)


def flag_args(name: str, values: Iterable[str]) -> list[str]:
    """Return ``["--<name>", v1, "--<name>", v2, ...]`` for ``values``.

    Args:
        name (str): Flag name without dashes.
        values (Iterable[str]): One command-line value per occurrence.

    Returns:
        list[str]: The argument vector.
    """
    args: list[str] = []
    for value in values:
        args.extend([f"--{name}", value])
    return args


def parse(
    command: click.Command, args: list[str], default_map: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Parse ``args`` with ``command`` without invoking its callback.

    Args:
        command (click.Command): Command to parse with.
        args (list[str]): Argument vector.
        default_map (dict[str, Any] | None): Values Click looks up for options
            missing from ``args`` and the environment.

    Returns:
        dict[str, Any]: The parameters Click collected into the context.

    Raises:
        click.ClickException: Whatever Click raises for invalid input.
    """
    ctx: click.Context = command.make_context(
        command.name or "test", args, default_map=default_map
    )
    return ctx.params


def render_help(command: click.Command) -> str:
    """Return the help page of ``command`` without line wrapping.

    Args:
        command (click.Command): Command to render.

    Returns:
        str: The formatted help text.
    """
    ctx = click.Context(command, info_name=command.name, terminal_width=200)
    return command.get_help(ctx)
