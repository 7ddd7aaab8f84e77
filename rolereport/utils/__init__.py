"""Utility helpers for rolereport."""

from __future__ import annotations

from .io import format_display_path, write_text_document

__all__ = ["format_display_path", "write_text_document"]
