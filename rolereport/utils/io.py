"""Filesystem helpers for rendered reports."""

from __future__ import annotations

from pathlib import Path

from rolereport.errors import InputValidationError


def format_display_path(path: Path) -> str:
    """Return the file name, quoted when it contains spaces."""

    name = path.name
    if " " in name:
        return f'"{name}"'
    return name


def write_text_document(path: Path, text: str, description: str = "report") -> Path:
    """Write *text* as UTF-8 with ``\\n`` line endings, creating parent directories."""

    target = path.expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to write the {description} file {format_display_path(target)}.",
            remediation="Choose a writable output location.",
        ) from exc
    return target


__all__ = ["format_display_path", "write_text_document"]
