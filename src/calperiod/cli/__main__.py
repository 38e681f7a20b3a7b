#!/usr/bin/env python3
"""Main CLI module for calperiod."""

from __future__ import annotations

import sys

import click

from ..config.settings import ConfigError, generate_example_env, get_settings
from ..observability import configure_loguru
from .calperiod_calendar import names_command, zones_command
from .calperiod_period import granularities_command, interval_command, lookback_command
from .cli_common import ExitCode

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
EPILOG = """
Examples:
  calperiod interval day                          # Today in the default zone
  calperiod interval quarter --at 2024-06-10T00:00:00Z
  calperiod interval week --shift -1 --locale fr_FR
  calperiod lookback hour --count 12 --json
  calperiod names weekdays --locale en_US
  calperiod zones --filter europe
""".strip()


@click.group(
    context_settings=CONTEXT_SETTINGS,
    help="calperiod - calendar period and lookback computations",
    epilog=EPILOG,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Root CLI command."""
    try:
        settings = get_settings()
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(int(ExitCode.CONFIG_ERROR))
    configure_loguru(level=settings.log_level, log_file=settings.log_file)


@cli.command("env-example")
def env_example() -> None:
    """Print an example .env file with every setting."""
    click.echo(generate_example_env())


cli.add_command(interval_command, "interval")
cli.add_command(lookback_command, "lookback")
cli.add_command(granularities_command, "granularities")
cli.add_command(zones_command, "zones")
cli.add_command(names_command, "names")


def main(args: list[str] | None = None) -> int:
    """Main CLI function."""

    try:
        normalized_args = list(args) if args is not None else None
        result = cli.main(args=normalized_args, standalone_mode=False)
        return int(result) if isinstance(result, int) else 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        return 1
    except SystemExit as exc:  # pragma: no cover - click normalizes the exit code
        return int(exc.code) if exc.code is not None else 0


if __name__ == "__main__":  # pragma: no cover - executable module
    sys.exit(main())
