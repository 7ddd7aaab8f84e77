"""Output formats producing header, row and footer fragments of a report."""
from __future__ import annotations

import csv
import io
from html import escape

from rolereport.errors import NOT_IMPLEMENTED_MESSAGE, FormatNotImplementedError
from rolereport.models import Item, Number

_CSV_COLUMNS = ("ID", "NOME", "VALOR", "USUARIO")
_HTML_TITLE = "Relatório"
_HTML_USER_LABEL = "Usuário"
_HTML_COLUMNS = ("ID", "Nome", "Valor")
_PRIORITY_STYLE = ' style="font-weight:bold;"'


class ReportFormat:
    """Formatting contract shared by every report type.

    Subclasses override all three fragment methods; the builder concatenates
    ``header + rows + footer``. Calling the base implementation is a
    programming error.
    """

    def generate_header(self, user_name: str) -> str:
        raise FormatNotImplementedError(NOT_IMPLEMENTED_MESSAGE)

    def generate_row(self, item: Item, user_name: str, is_priority: bool = False) -> str:
        raise FormatNotImplementedError(NOT_IMPLEMENTED_MESSAGE)

    def generate_footer(self, total: Number) -> str:
        raise FormatNotImplementedError(NOT_IMPLEMENTED_MESSAGE)


class CsvReportFormat(ReportFormat):
    """Comma-separated layout; the viewer's name is repeated on every row."""

    def generate_header(self, user_name: str) -> str:
        return _csv_line(_CSV_COLUMNS)

    def generate_row(self, item: Item, user_name: str, is_priority: bool = False) -> str:
        return _csv_line((item.id, item.name, format_number(item.value), user_name))

    def generate_footer(self, total: Number) -> str:
        # Label and amount sit on separate lines, padded to three columns.
        return f"\nTotal,,\n{format_number(total)},,\n"


class HtmlReportFormat(ReportFormat):
    """Standalone HTML document with one table row per item."""

    def generate_header(self, user_name: str) -> str:
        headings = "".join(f"<th>{column}</th>" for column in _HTML_COLUMNS)
        return (
            "<html><body>\n"
            f"<h1>{_HTML_TITLE}</h1>\n"
            f"<h2>{_HTML_USER_LABEL}: {_html_text(user_name)}</h2>\n"
            "<table>\n"
            f"<tr>{headings}</tr>\n"
        )

    def generate_row(self, item: Item, user_name: str, is_priority: bool = False) -> str:
        style = _PRIORITY_STYLE if is_priority else ""
        cells = "".join(
            f"<td>{_html_text(value)}</td>"
            for value in (item.id, item.name, format_number(item.value))
        )
        return f"<tr{style}>{cells}</tr>\n"

    def generate_footer(self, total: Number) -> str:
        return (
            "</table>\n"
            f"<h3>Total: {format_number(total)}</h3>\n"
            "</body></html>\n"
        )


def format_number(value: Number) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _csv_line(fields: tuple[object, ...]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(fields)
    return buffer.getvalue()


def _html_text(value: object) -> str:
    return escape(str(value), quote=False)


__all__ = [
    "CsvReportFormat",
    "HtmlReportFormat",
    "ReportFormat",
    "format_number",
]
