"""Execution orchestrator for rolereport CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rolereport.datasource import FileItemSource
from rolereport.errors import (
    FormatNotImplementedError,
    InputValidationError,
    RoleReportError,
    UnknownReportTypeError,
)
from rolereport.exit_codes import ExitCode
from rolereport.models import User
from rolereport.reporting import ReportGenerator
from rolereport.utils import write_text_document

logger = logging.getLogger("rolereport.orchestration.runner")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of a single report run."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    report: str | None = None
    output_path: Path | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[RoleReportError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the items file and the user options.",
    ),
    (
        UnknownReportTypeError,
        ExitCode.UNKNOWN_REPORT_TYPE,
        "The requested report type is not registered.",
        "Run `rolereport formats` to list the available report types.",
    ),
    (
        FormatNotImplementedError,
        ExitCode.FORMAT_ERROR,
        "The selected report format is incomplete.",
        "Register a format that implements header, row and footer rendering.",
    ),
)


def run_report(
    items_path: Path,
    *,
    user: User,
    report_type: str,
    output_path: Path | None = None,
    generator: ReportGenerator | None = None,
) -> ExecutionOutcome:
    """Load items, render the report for *user* and optionally write it to disk."""

    source = FileItemSource(items_path)
    engine = generator or ReportGenerator(source)

    try:
        engine.get_format(report_type)
        dataset = source.load()
        report = engine.generate_report(report_type, user, dataset.items)
        written = write_text_document(output_path, report) if output_path else None
    except RoleReportError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover - defensive
        logger.exception("Unexpected error occurred while rendering the report.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred while rendering the report.",
            remediation="Re-run without --quiet and inspect the logs before retrying.",
        )

    logger.info(
        "Rendered report",
        extra={
            "report_type": report_type,
            "user": user.name,
            "role": user.role.value,
            "items_file": dataset.display_name,
            "input_items": len(dataset.items),
            "encoding": dataset.encoding,
            "output": str(written) if written else "stdout",
        },
    )

    message = None
    if written is not None:
        message = f"{report_type} report for {user.name} written to {written}."

    return ExecutionOutcome(
        exit_code=ExitCode.SUCCESS,
        status="success",
        message=message,
        report=report,
        output_path=written,
    )


def handle_domain_error(error: RoleReportError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: RoleReportError) -> tuple[ExitCode, str, str | None]:
    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred while rendering the report.",
        "Enable logging (drop --quiet) and retry.",
    )


__all__ = ["ExecutionOutcome", "handle_domain_error", "run_report"]
