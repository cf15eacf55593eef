"""Click command line interface for rendering and previewing log lines.

Purpose
-------
Offer a small CLI so the renderer can be tried from a shell: print the
metadata banner, render a single line from arguments, or run the demo log
sequence.

Contents
--------
* :func:`cli` - root group handling ``--traceback`` and ``--use-dotenv``.
* :func:`cli_info`, :func:`cli_render`, :func:`cli_demo` - subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only; every rendering decision is taken by the adapters
and the runtime façade.
"""

from __future__ import annotations

from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from . import runtime
from .adapters.console.stream_console import StreamConsoleAdapter
from .adapters.hook_registry import HookRegistry
from .adapters.logging_bridge import ColumnFormatter
from .application.use_cases.emit_event import create_emit_event
from .domain import FormatterConfig, LogEvent, LogLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.severity for level in LogLevel]


def _parse_value(raw: str) -> object:
    """Return ``raw`` as ``int`` when it looks like one, else unchanged.

    Examples
    --------
    >>> _parse_value("0"), _parse_value("-2"), _parse_value("ls -al")
    (0, -2, 'ls -al')
    """

    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_fields(
    ctx: click.Context, param: click.Parameter, values: Sequence[str]
) -> list[tuple[str, object]]:
    pairs: list[tuple[str, object]] = []
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", ctx=ctx, param=param)
        pairs.append((key, _parse_value(raw)))
    return pairs


def _resolve_config(
    *,
    fields_column: int | None,
    time_format: str | None,
    color: bool | None,
) -> FormatterConfig:
    try:
        resolved = log_config.formatter_config_from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if fields_column is not None:
        resolved.fields_column = fields_column
    if time_format is not None:
        resolved.time_format = time_format
    if color is not None:
        resolved.use_color = color
    return resolved


def _force_color(color: bool | None) -> bool:
    if color:
        return True
    return log_config.force_color_from_env()


def _formatting_options(command: click.Command) -> click.Command:
    command = click.option(
        "--color/--no-color",
        default=None,
        help="Force coloured output or disable it (default: colour on terminals only).",
    )(command)
    command = click.option(
        "--time-format",
        default=None,
        help="strftime layout for the timestamp; an empty string hides it.",
    )(command)
    command = click.option(
        "--fields-column",
        type=click.IntRange(min=0),
        default=None,
        help="Column the field separator is aligned to (0 disables padding).",
    )(command)
    return command


@click.group(
    help="Render column-aligned, colourised log lines.",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=None,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading LOG_* variables (env: {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool | None, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    if traceback is not None:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback

    if use_dotenv is None:
        try:
            use_dotenv = log_config.dotenv_requested()
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
    if use_dotenv:
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(runtime.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(runtime.summary_info(), nl=False)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message", required=False, default="")
@click.option(
    "--level",
    "-l",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="info",
    show_default=True,
    help="Severity deciding the message colour.",
)
@click.option(
    "--field",
    "-f",
    "fields",
    multiple=True,
    metavar="KEY=VALUE",
    callback=_parse_fields,
    help="Field to append; repeatable, order is kept. Integer values become numbers.",
)
@_formatting_options
def cli_render(
    message: str,
    level: str,
    fields: list[tuple[str, object]],
    fields_column: int | None,
    time_format: str | None,
    color: bool | None,
) -> None:
    """Render MESSAGE with its fields as one line on stdout."""

    formatter = ColumnFormatter(
        _resolve_config(fields_column=fields_column, time_format=time_format, color=color),
        HookRegistry(),
    )
    console = StreamConsoleAdapter(
        click.get_text_stream("stdout"),
        force_terminal=True if _force_color(color) else None,
    )
    emit = create_emit_event(console=console, render=formatter.render_event)
    emit(LogEvent.create(LogLevel.from_name(level), message, fields))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_formatting_options
def cli_demo(fields_column: int | None, time_format: str | None, color: bool | None) -> None:
    """Log the example sequence at TRACE level to stdout."""

    runtime.logdemo(
        stream=click.get_text_stream("stdout"),
        config=_resolve_config(fields_column=fields_column, time_format=time_format, color=color),
        force_color=_force_color(color),
    )


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI and return the exit code.

    Parameters
    ----------
    argv:
        Arguments without the program name; ``sys.argv[1:]`` when omitted.
    restore_traceback:
        Reset the traceback preferences of :mod:`lib_cli_exit_tools` after the
        run so embedding applications keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
