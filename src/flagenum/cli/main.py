# topmark:header:start
#
#   project      : flagenum
#   file         : main.py
#   file_relpath : src/flagenum/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Demo CLI showing enumerated options on a Click command.

``--api`` collects any of the supported API engines (defaults are replaced,
not merged, once the flag is given) and ``--log-level`` picks exactly one
level, which also configures logging for the run.

Holders keep their state for the life of the command, so a command is meant
to parse a single command line. `build_cli` returns a fresh command for
callers (such as tests) that parse several.
"""

from __future__ import annotations

import click

from flagenum.config.logging import get_logger, level_from_name, setup_logging
from flagenum.extension import new

logger = get_logger(__name__)

API_ENGINES = ["rest", "grpc", "soap"]
DEFAULT_API_ENGINES = ["rest", "grpc"]
LOG_LEVELS = ["debug", "info", "warn", "error"]


def build_cli() -> click.Command:
    """Return the demo command with its enumerated options defined."""

    @click.command(
        "flagenum",
        context_settings={"help_option_names": ["-h", "--help"]},
        help="Print the enabled API engines and the logger level.",
    )
    @click.option("--color/--no-color", default=True, help="Colorize log output.")
    @click.pass_context
    def command(ctx: click.Context, color: bool, api: list[str], log_level: str) -> None:
        setup_logging(level=level_from_name(log_level), color=color)
        logger.info("parsed %d flag(s)", len(ctx.params))

        click.echo(f"enabled apis: {','.join(api)}")
        click.echo(f"log level:    {log_level}")

    flags = new(command)
    flags.multiple_strings("api", DEFAULT_API_ENGINES, API_ENGINES, "enabled api engine")
    flags.single_string(
        "log-level",
        "info",
        LOG_LEVELS,
        "logger level",
        envvar="FLAGENUM_DEMO_LOG_LEVEL",
        show_envvar=True,
    )
    return command


cli = build_cli()


if __name__ == "__main__":
    cli()
