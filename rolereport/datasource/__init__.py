"""Item sources feeding the report generator."""
from __future__ import annotations

from .items import FileItemSource, ItemDataset, load_items

__all__ = ["FileItemSource", "ItemDataset", "load_items"]
