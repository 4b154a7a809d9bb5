"""Click-based command line interface.

Purpose
-------
Expose ``info``, ``logdemo``, and ``fail`` commands for smoke tests and
operators, with traceback handling delegated to ``lib_cli_exit_tools``.

Contents
--------
* :data:`cli` - root click group.
* :func:`main` - entry point used by ``python -m`` and the console script.
"""

from __future__ import annotations

from typing import Any, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .adapters import CONSOLE_STYLE_THEMES
from .domain.levels import Severity
from .lib_log_dispatch import i_should_fail, logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_logdemo = logdemo


@click.group(
    help=__init__conf__.title,
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
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load LOG_* variables from the nearest .env file (defaults to {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing the traceback preference and loading ``.env``."""

    if log_config.should_use_dotenv(use_dotenv):
        log_config.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger the intentional failure helper to test error handling."""

    i_should_fail()


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    type=click.Choice(sorted(CONSOLE_STYLE_THEMES)),
    default="classic",
    show_default=True,
    help="Console palette used for the demo records.",
)
@click.option(
    "--minimum-severity",
    type=click.Choice([level.name.lower() for level in Severity], case_sensitive=False),
    default="debug",
    show_default=True,
    help="Records below this severity are discarded before dispatch.",
)
@click.option(
    "--fail-backend",
    is_flag=True,
    default=False,
    help="Register a backend that always fails to show delivery isolation.",
)
def cli_logdemo(theme: str, minimum_severity: str, fail_backend: bool) -> None:
    """Emit one record per severity through the console backend."""

    click.echo(f"=== Theme: {theme} ===")
    result: dict[str, Any] = _logdemo(theme=theme, minimum_severity=minimum_severity, fail_backend=fail_backend)
    click.echo(f"emitted {result['emitted']} records (minimum severity {result['minimum_severity']})")
    failures = result["backend_failures"]
    if failures:
        names = sorted({str(item["backend"]) for item in failures})
        click.echo(f"backend failures reported: {len(failures)} ({', '.join(names)})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI through ``lib_cli_exit_tools`` and restore traceback settings.

    Parameters
    ----------
    argv:
        Optional argument list; ``None`` consumes ``sys.argv``.

    Returns
    -------
    int
        Exit code reported by the command.
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
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
