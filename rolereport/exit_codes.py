"""Shared exit code definitions for rolereport CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic exit codes returned by the CLI."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    UNKNOWN_REPORT_TYPE = 3
    FORMAT_ERROR = 4


__all__ = ["ExitCode"]
