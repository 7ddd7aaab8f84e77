"""Domain-specific exception hierarchy for rolereport."""
from __future__ import annotations

from dataclasses import dataclass

NOT_IMPLEMENTED_MESSAGE = "Method not implemented"


@dataclass
class RoleReportError(Exception):
    """Base exception for rolereport errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(RoleReportError):
    """Raised when the CLI or the item source receives invalid input."""


class UnknownReportTypeError(RoleReportError):
    """Raised when no report format is registered for the requested type."""


class FormatNotImplementedError(RoleReportError, NotImplementedError):
    """Raised when the abstract report format contract is invoked directly."""


__all__ = [
    "NOT_IMPLEMENTED_MESSAGE",
    "RoleReportError",
    "InputValidationError",
    "UnknownReportTypeError",
    "FormatNotImplementedError",
]
