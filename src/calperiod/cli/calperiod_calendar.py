"""CLI commands for zones and locale names."""

from __future__ import annotations

import click

from ..core.time import available_timezones
from ..periods.names import NAME_WIDTHS, month_names, weekday_names
from .cli_common import CLIContext, cli_command, handle_cli_error, handle_cli_success

__all__ = ["names_command", "zones_command"]


@click.command(name="zones")
@click.option("--filter", "pattern", help="Only zones whose id contains this text (case-insensitive)")
@cli_command
def zones_command(ctx: CLIContext, pattern: str | None) -> int:
    """List available time zones."""
    try:
        zone_ids = [str(zone) for zone in available_timezones()]
        if pattern:
            zone_ids = [zone_id for zone_id in zone_ids if pattern.lower() in zone_id.lower()]
        return handle_cli_success(ctx, zone_ids, meta={"count": len(zone_ids)} if ctx.json_output else None)
    except Exception as exc:
        return handle_cli_error(ctx, exc, "zones")


@click.command(name="names")
@click.argument("kind", type=click.Choice(["weekdays", "months"]))
@click.option("--locale", help="Locale id, e.g. fr_FR (default: CALPERIOD_DEFAULT_LOCALE)")
@click.option("--width", type=click.Choice(NAME_WIDTHS), default="wide", show_default=True)
@cli_command
def names_command(ctx: CLIContext, kind: str, locale: str | None, width: str) -> int:
    """List weekday names (from the locale's first day) or month names."""
    try:
        names = weekday_names(locale, width) if kind == "weekdays" else month_names(locale, width)
        return handle_cli_success(ctx, names)
    except Exception as exc:
        return handle_cli_error(ctx, exc, "names")
