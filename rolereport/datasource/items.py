"""Item file loading and record validation."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from rolereport.errors import InputValidationError
from rolereport.models import Item, ItemId, Number
from rolereport.utils import format_display_path

logger = logging.getLogger("rolereport.datasource.items")

_REQUIRED_FIELDS = ("id", "name", "value")
_ITEM_FILE_ENCODINGS = ("utf-8-sig", "cp1252")


@dataclass(frozen=True)
class ItemDataset:
    """Items loaded from a single file."""

    source: Path
    items: tuple[Item, ...]
    encoding: str

    @property
    def display_name(self) -> str:
        return format_display_path(self.source)


class FileItemSource:
    """Item source backed by a JSON or YAML file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> ItemDataset:
        return load_items(self.path)

    def __repr__(self) -> str:
        return f"FileItemSource({str(self.path)!r})"


def load_items(path: Path) -> ItemDataset:
    """Load item records from *path*; JSON is accepted as a subset of YAML."""

    resolved = _resolve_path(path)
    display = format_display_path(resolved)
    text, encoding = _read_item_file(resolved, display)

    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Items file {display} contains invalid JSON or YAML.",
            remediation="Fix the syntax error reported by your editor and retry.",
        ) from exc

    records = _extract_records(payload, display)
    items = tuple(_parse_record(record, index, display) for index, record in enumerate(records))
    logger.info(
        "Loaded items",
        extra={"items_file": display, "item_count": len(items), "encoding": encoding},
    )
    return ItemDataset(source=resolved, items=items, encoding=encoding)


def _read_item_file(path: Path, display: str) -> tuple[str, str]:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read items file {display}.",
            remediation="Check file permissions and retry.",
        ) from exc

    for encoding in _ITEM_FILE_ENCODINGS:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            continue

    raise InputValidationError(
        message=f"Items file {display} is neither UTF-8 nor Windows-1252 text.",
        remediation="Re-save the items file as UTF-8 and retry.",
    )


def _resolve_path(path: Path) -> Path:
    candidate = path.expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise InputValidationError(
            message=f"Items file {resolved} does not exist or is not a file.",
            remediation="Pass the path of a JSON or YAML items file via --items.",
        )
    return resolved


def _extract_records(payload: object, display: str) -> Sequence[object]:
    if payload is None:
        return ()
    if isinstance(payload, Mapping):
        payload = payload.get("items", ())
        if payload is None:
            return ()
    if not isinstance(payload, Sequence) or isinstance(payload, str | bytes):
        raise InputValidationError(
            message=f"Items file {display} must contain a list of item records.",
            remediation="Provide a top-level list, or a mapping with an 'items' list.",
        )
    return payload


def _parse_record(record: object, index: int, display: str) -> Item:
    if not isinstance(record, Mapping):
        raise InputValidationError(
            message=f"Item #{index} in {display} must be a mapping.",
            remediation="Write each item as {id: ..., name: ..., value: ...}.",
        )

    missing = [field for field in _REQUIRED_FIELDS if field not in record]
    if missing:
        raise InputValidationError(
            message=f"Item #{index} in {display} is missing: {', '.join(missing)}.",
            remediation="Every item needs 'id', 'name' and 'value' keys.",
        )

    return Item(
        id=_normalize_id(record["id"], index, display),
        name=_normalize_name(record["name"], index, display),
        value=_normalize_value(record["value"], index, display),
    )


def _normalize_id(value: object, index: int, display: str) -> ItemId:
    if isinstance(value, bool) or not isinstance(value, int | str):
        raise InputValidationError(
            message=f"Item #{index} in {display} has an invalid id.",
            remediation="Use an integer or a non-empty string as the item id.",
        )
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InputValidationError(
                message=f"Item #{index} in {display} has an empty id.",
                remediation="Use an integer or a non-empty string as the item id.",
            )
    return value


def _normalize_name(value: object, index: int, display: str) -> str:
    if not isinstance(value, str):
        raise InputValidationError(
            message=f"Item #{index} in {display} must have a text name.",
            remediation="Quote item names in the items file.",
        )
    return value


def _normalize_value(value: object, index: int, display: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InputValidationError(
            message=f"Item #{index} in {display} must have a numeric value.",
            remediation="Write item values as plain numbers, without quotes.",
        )
    return value


__all__ = ["FileItemSource", "ItemDataset", "load_items"]
