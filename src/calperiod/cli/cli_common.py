"""Common CLI utilities: JSON output and stable exit codes."""

from __future__ import annotations

import functools
import json
import traceback
import uuid
from enum import IntEnum
from typing import Any

import click

from ..config.settings import ConfigError
from ..core.errors import CalperiodError, InvalidGranularityError, UnsupportedOperationError
from ..observability import get_logger

__all__ = ["CLIContext", "ExitCode", "cli_command", "handle_cli_error", "handle_cli_success"]

log = get_logger("cli")


class ExitCode(IntEnum):
    """Stable exit codes for CLI commands."""

    SUCCESS = 0  # Successful execution
    INVALID_GRANULARITY = 2  # Unknown granularity name
    INVALID_ARGUMENT = 3  # Bad zone, locale, offset or moment
    UNSUPPORTED = 4  # Operation not available for the unit
    CONFIG_ERROR = 6  # Configuration error
    UNKNOWN_ERROR = 7  # Unknown/unexpected error


class CLIContext:
    """Context for CLI execution with JSON output and trace ID."""

    def __init__(self, json_output: bool = False, trace_id: str | None = None, verbose: bool = False):
        self.json_output = json_output
        self.trace_id = trace_id or f"trace-{uuid.uuid4().hex[:12]}"
        self.verbose = verbose

    def output(
        self, data: Any, status: str = "success", error: str | None = None, meta: dict[str, Any] | None = None
    ) -> None:
        """Output result in appropriate format.

        Parameters
        ----------
        data
            Result data
        status
            ``"success"`` or ``"error"``
        error
            Error message if status is error
        meta
            Additional metadata
        """
        if self.json_output:
            result: dict[str, Any] = {"status": status, "trace_id": self.trace_id}

            if error:
                result["error"] = error
            else:
                result["data"] = data

            if meta:
                result["meta"] = meta

            click.echo(json.dumps(result, ensure_ascii=False, indent=2))
            return

        if status == "error":
            click.echo(f"Error: {error}", err=True)
        elif isinstance(data, dict):
            for key, value in data.items():
                click.echo(f"{key}: {value}")
        elif isinstance(data, list):
            for item in data:
                click.echo(item)
        else:
            click.echo(data)


def cli_command(func):
    """Decorator adding ``--json``, ``--trace-id`` and ``--verbose`` to a command.

    The wrapped function receives a :class:`CLIContext` as first argument and
    its return value becomes the process exit code.
    """

    @click.option("--json", "json_output", is_flag=True, help="Output as JSON (machine-readable)")
    @click.option("--trace-id", type=str, help="Trace ID for correlation")
    @click.option("--verbose", "-v", is_flag=True, help="Verbose output")
    @functools.wraps(func)
    def wrapper(json_output: bool, trace_id: str | None, verbose: bool, *args: Any, **kwargs: Any) -> Any:
        ctx = CLIContext(json_output=json_output, trace_id=trace_id, verbose=verbose)
        code = func(ctx, *args, **kwargs)
        if code:
            click.get_current_context().exit(int(code))
        return code

    return wrapper


def _exit_code_for(exc: Exception) -> ExitCode:
    if isinstance(exc, InvalidGranularityError):
        return ExitCode.INVALID_GRANULARITY
    if isinstance(exc, UnsupportedOperationError):
        return ExitCode.UNSUPPORTED
    if isinstance(exc, ConfigError):
        return ExitCode.CONFIG_ERROR
    if isinstance(exc, CalperiodError | ValueError):
        return ExitCode.INVALID_ARGUMENT
    return ExitCode.UNKNOWN_ERROR


def handle_cli_error(ctx: CLIContext, exc: Exception, cmd: str) -> int:
    """Report an error and return the matching exit code."""
    exit_code = _exit_code_for(exc)
    log.debug("Command failed", command=cmd, error_type=type(exc).__name__, exit_code=int(exit_code))

    ctx.output(None, status="error", error=str(exc), meta={"exit_code": int(exit_code)})

    if ctx.verbose and not ctx.json_output:
        click.echo("\nTraceback:", err=True)
        click.echo(traceback.format_exc(), err=True)

    return int(exit_code)


def handle_cli_success(ctx: CLIContext, data: Any, meta: dict[str, Any] | None = None) -> int:
    """Output a result and return the success code."""
    ctx.output(data, status="success", meta=meta)
    return int(ExitCode.SUCCESS)
