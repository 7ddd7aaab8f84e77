"""Report assembly: resolve a format, filter items for the viewer, render."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from rolereport.access import filter_items
from rolereport.errors import UnknownReportTypeError
from rolereport.models import Item, Number, ReportType, User
from rolereport.reporting.formats import CsvReportFormat, HtmlReportFormat, ReportFormat


def default_formats() -> dict[str, ReportFormat]:
    """Return a fresh mapping of the built-in report formats."""

    return {
        ReportType.CSV.value: CsvReportFormat(),
        ReportType.HTML.value: HtmlReportFormat(),
    }


class ReportGenerator:
    """Renders item reports whose content depends on the viewer's role.

    The format registry is fixed at construction time. ``database`` is the
    item source the caller fetched *items* from; it is kept for reference and
    never queried here.
    """

    def __init__(
        self,
        database: object | None = None,
        formats: Mapping[str, ReportFormat] | None = None,
    ) -> None:
        self.database = database
        registry = default_formats() if formats is None else dict(formats)
        self._formats: Mapping[str, ReportFormat] = MappingProxyType(registry)

    @property
    def formats(self) -> Mapping[str, ReportFormat]:
        """Read-only view of the registered formats."""

        return self._formats

    def available_formats(self) -> tuple[str, ...]:
        """Return the registered report type keys in registration order."""

        return tuple(self._formats)

    def get_format(self, report_type: ReportType | str) -> ReportFormat:
        """Resolve the format registered for *report_type*."""

        key = report_type.value if isinstance(report_type, ReportType) else report_type
        strategy = self._formats.get(key)
        if strategy is None:
            available = ", ".join(self._formats) or "none"
            raise UnknownReportTypeError(
                message=f"Report type '{key}' is not supported.",
                remediation=f"Choose one of the registered report types: {available}.",
            )
        return strategy

    def generate_report(
        self,
        report_type: ReportType | str,
        user: User,
        items: Iterable[Item],
    ) -> str:
        """Render *items* as seen by *user* in the requested format."""

        strategy = self.get_format(report_type)
        visible = filter_items(user, items)
        return build_report(strategy, user, visible)


def build_report(strategy: ReportFormat, user: User, items: Sequence[Item]) -> str:
    """Concatenate header, one row per item and the footer carrying the total."""

    header = strategy.generate_header(user.name)
    rows: list[str] = []
    total: Number = 0
    for item in items:
        rows.append(strategy.generate_row(item, user.name, item.priority))
        total += item.value

    footer = strategy.generate_footer(total)
    return (header + "".join(rows) + footer).strip()


__all__ = ["ReportGenerator", "build_report", "default_formats"]
