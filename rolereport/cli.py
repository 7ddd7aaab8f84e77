from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import RoleReportError, __version__
from .errors import InputValidationError
from .exit_codes import ExitCode
from .models import ReportType, Role, User
from .orchestration import handle_domain_error, run_report
from .reporting import ReportGenerator

APP_NAME = "rolereport"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = False) -> None:
    """Initialise application-wide logging."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _validate_user_name(name: str) -> str:
    """Ensure the viewer name is non-empty."""

    value = (name or "").strip()
    if not value:
        raise InputValidationError(
            message="User name cannot be empty.",
            remediation="Pass the viewer's display name using --user.",
        )
    return value


def _is_quiet_mode() -> bool:
    return getattr(configure_logging, "_level", logging.INFO) == logging.WARNING


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Reduce log output to warnings and errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the rolereport version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("render")
def render(
    items: Path = typer.Option(
        ...,
        "--items",
        "-i",
        help="JSON or YAML file with the item records to report on.",
    ),
    user: str = typer.Option(
        ...,
        "--user",
        "-u",
        help="Display name of the viewer.",
    ),
    role: str = typer.Option(
        Role.USER.value,
        "--role",
        "-r",
        help="Viewer role, exactly ADMIN or USER; any other value sees no items.",
        show_default=True,
    ),
    report_type: str = typer.Option(
        ReportType.CSV.value,
        "--format",
        "-f",
        help="Registered report type to render.",
        show_default=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of standard output.",
    ),
) -> None:
    """Render a role-aware report for the items in a file."""

    try:
        viewer = User(name=_validate_user_name(user), role=Role.parse(role))
    except RoleReportError as exc:
        outcome = handle_domain_error(exc)
        raise typer.Exit(code=int(outcome.exit_code)) from exc

    outcome = run_report(
        items,
        user=viewer,
        report_type=report_type.strip(),
        output_path=output,
    )

    if outcome.exit_code != ExitCode.SUCCESS:
        raise typer.Exit(code=int(outcome.exit_code))

    if outcome.output_path is not None:
        if outcome.message and not _is_quiet_mode():
            typer.echo(outcome.message)
    elif outcome.report is not None:
        typer.echo(outcome.report)

    raise typer.Exit(code=int(outcome.exit_code))


@app.command("formats")
def formats() -> None:
    """List the registered report types."""

    for name in ReportGenerator().available_formats():
        typer.echo(name)
    raise typer.Exit(code=int(ExitCode.SUCCESS))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
