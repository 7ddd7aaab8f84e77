"""Report formats and the role-aware report builder."""
from __future__ import annotations

from .builder import ReportGenerator, build_report, default_formats
from .formats import CsvReportFormat, HtmlReportFormat, ReportFormat, format_number

__all__ = [
    "CsvReportFormat",
    "HtmlReportFormat",
    "ReportFormat",
    "ReportGenerator",
    "build_report",
    "default_formats",
    "format_number",
]
