"""CLI commands for period intervals and lookbacks.

Examples:
    calperiod interval quarter --at 2024-06-10T00:00:00Z --tz UTC
    calperiod interval week --shift -1 --locale fr_FR --json
    calperiod lookback month --count 3
    calperiod granularities
"""

from __future__ import annotations

from datetime import datetime

import click

from ..core.time import parse_utc_iso8601
from ..periods import (
    DEFAULT_LOOKBACK_COUNTS,
    PeriodOptions,
    lookback,
    period_interval_with_formatter,
    resolve_lookback_count,
    time_intervals,
)
from .cli_common import CLIContext, cli_command, handle_cli_error, handle_cli_success

__all__ = ["granularities_command", "interval_command", "lookback_command"]


def _parse_at(at: str | None) -> datetime | None:
    return parse_utc_iso8601(at) if at else None


@click.command(name="interval")
@click.argument("granularity")
@click.option("--shift", type=int, default=0, show_default=True, help="Units to move forward (negative: back)")
@click.option("--day-offset", type=int, default=0, help="Extra days for week, month and year starts")
@click.option("--month-offset", type=int, default=0, help="Extra months for year starts")
@click.option("--at", "at", help="Reference moment, ISO-8601 (default: now)")
@click.option("--tz", "timezone", help="Time zone id (default: CALPERIOD_DEFAULT_TZ)")
@click.option("--locale", help="Locale id, e.g. en_US (default: CALPERIOD_DEFAULT_LOCALE)")
@cli_command
def interval_command(
    ctx: CLIContext,
    granularity: str,
    shift: int,
    day_offset: int,
    month_offset: int,
    at: str | None,
    timezone: str | None,
    locale: str | None,
) -> int:
    """Show begin, end and label of the unit containing a moment."""
    try:
        options = PeriodOptions(
            shift=shift,
            day_offset=day_offset,
            month_offset=month_offset,
            timezone=timezone,
            locale=locale,
        )
        interval = period_interval_with_formatter(granularity, _parse_at(at), options)
        return handle_cli_success(ctx, interval.to_dict())
    except Exception as exc:
        return handle_cli_error(ctx, exc, "interval")


@click.command(name="lookback")
@click.argument("granularity")
@click.option("--count", type=int, help="Units to cover including the current one (default: per granularity)")
@click.option("--at", "at", help="Reference moment, ISO-8601 (default: now)")
@click.option("--tz", "timezone", help="Time zone id (default: CALPERIOD_DEFAULT_TZ)")
@click.option("--locale", help="Locale id, e.g. en_US (default: CALPERIOD_DEFAULT_LOCALE)")
@cli_command
def lookback_command(
    ctx: CLIContext,
    granularity: str,
    count: int | None,
    at: str | None,
    timezone: str | None,
    locale: str | None,
) -> int:
    """Show the start moment of a "last N units" window."""
    try:
        moment = lookback(granularity, count, _parse_at(at), PeriodOptions(timezone=timezone, locale=locale))
        data = {
            "granularity": granularity,
            "count": resolve_lookback_count(granularity, count),
            "moment": moment.isoformat(),
        }
        return handle_cli_success(ctx, data)
    except Exception as exc:
        return handle_cli_error(ctx, exc, "lookback")


@click.command(name="granularities")
@cli_command
def granularities_command(ctx: CLIContext) -> int:
    """List supported granularities with their default lookback counts."""
    if ctx.json_output:
        data = [{"name": g.value, "default_lookback": count} for g, count in DEFAULT_LOOKBACK_COUNTS.items()]
        return handle_cli_success(ctx, data)
    return handle_cli_success(ctx, time_intervals())
