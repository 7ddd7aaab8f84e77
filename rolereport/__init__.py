"""Role-aware report rendering package."""
from __future__ import annotations

from .errors import RoleReportError

__all__ = ("__version__", "RoleReportError")

__version__ = "0.1.0"
