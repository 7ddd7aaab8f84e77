from __future__ import annotations

import json
from pathlib import Path

import pytest

from rolereport.datasource import FileItemSource, load_items
from rolereport.errors import InputValidationError
from rolereport.models import Item


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_items_from_json_list(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "items.json",
        json.dumps([{"id": 1, "name": "A", "value": 100}, {"id": "x-2", "name": "B", "value": 60.5}]),
    )

    dataset = load_items(path)

    assert dataset.items == (Item(id=1, name="A", value=100), Item(id="x-2", name="B", value=60.5))
    assert dataset.display_name == "items.json"
    assert dataset.source == path.resolve()


def test_load_items_from_yaml_mapping(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "items.yaml",
        "items:\n  - id: 1\n    name: Cadeira\n    value: 120\n",
    )

    dataset = load_items(path)

    assert dataset.items == (Item(id=1, name="Cadeira", value=120),)


def test_load_items_ignores_supplied_priority(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "items.json",
        json.dumps([{"id": 1, "name": "A", "value": 10, "priority": True}]),
    )

    (item,) = load_items(path).items

    assert item.priority is False


def test_load_items_accepts_empty_documents(tmp_path: Path) -> None:
    assert load_items(_write(tmp_path, "empty.yaml", "")).items == ()
    assert load_items(_write(tmp_path, "none.yaml", "items:\n")).items == ()


def test_load_items_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError) as exc:
        load_items(tmp_path / "absent.json")

    assert "does not exist" in exc.value.message


def test_load_items_invalid_syntax(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.json", '[{"id": 1, "name": "A",')

    with pytest.raises(InputValidationError) as exc:
        load_items(path)

    assert "invalid JSON or YAML" in exc.value.message


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ('"just text"', "list of item records"),
        ("[1, 2]", "must be a mapping"),
        ('[{"id": 1, "name": "A"}]', "missing: value"),
        ('[{"id": 1, "name": "A", "value": "100"}]', "numeric value"),
        ('[{"id": 1, "name": "A", "value": true}]', "numeric value"),
        ('[{"id": [1], "name": "A", "value": 1}]', "invalid id"),
        ('[{"id": " ", "name": "A", "value": 1}]', "empty id"),
        ('[{"id": 1, "name": 5, "value": 1}]', "text name"),
    ],
)
def test_load_items_rejects_malformed_records(tmp_path: Path, payload: str, fragment: str) -> None:
    path = _write(tmp_path, "items.json", payload)

    with pytest.raises(InputValidationError) as exc:
        load_items(path)

    assert fragment in exc.value.message
    assert exc.value.remediation


def test_file_item_source_loads_dataset(tmp_path: Path) -> None:
    path = _write(tmp_path, "items.json", json.dumps([{"id": 1, "name": "A", "value": 1}]))

    source = FileItemSource(path)
    dataset = source.load()

    assert dataset.items == (Item(id=1, name="A", value=1),)
    assert dataset.encoding == "utf-8-sig"
    assert "items.json" in repr(source)


def test_load_items_decodes_utf8_with_bom_and_crlf(tmp_path: Path) -> None:
    path = tmp_path / "items.yaml"
    path.write_bytes("- id: 1\r\n  name: Relógio\r\n  value: 10\r\n".encode("utf-8-sig"))

    dataset = load_items(path)

    assert dataset.items == (Item(id=1, name="Relógio", value=10),)
    assert dataset.encoding == "utf-8-sig"


def test_load_items_falls_back_to_cp1252(tmp_path: Path) -> None:
    path = tmp_path / "items.yaml"
    path.write_bytes("- id: 1\n  name: Relógio\n  value: 10\n".encode("cp1252"))

    dataset = load_items(path)

    assert dataset.items == (Item(id=1, name="Relógio", value=10),)
    assert dataset.encoding == "cp1252"


def test_load_items_rejects_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "items.yaml"
    path.write_bytes(bytes([0x81, 0x8D, 0x8F]))

    with pytest.raises(InputValidationError) as exc:
        load_items(path)

    assert "Windows-1252" in exc.value.message
