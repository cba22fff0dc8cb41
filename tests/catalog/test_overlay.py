"""Tests for the overlay catalog store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from labelpilot.core.catalog.overlay import InMemoryCustomLabelStore, JsonCustomLabelStore, upsert_label
from labelpilot.core.contracts.exceptions import CatalogLoadError
from labelpilot.core.contracts.label import Label, LabelCatalog


def test_load_missing_file_returns_empty_catalog(tmp_path: Path) -> None:
    assert len(JsonCustomLabelStore(tmp_path / "labels-custom.json").load()) == 0


def test_load_invalid_content_returns_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "labels-custom.json"
    path.write_text("{broken")
    assert len(JsonCustomLabelStore(path).load()) == 0

    path.write_text(json.dumps({"type": [{"name": "x", "color": "nothex"}]}))
    assert len(JsonCustomLabelStore(path).load()) == 0


def test_save_creates_pretty_printed_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "labels-custom.json"
    store = JsonCustomLabelStore(path)

    store.save("type", Label(name="perf", color="abcdef", description="[Type] Performance [issues]"))

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert text.startswith('{\n  "type": [')
    expected = {"type": [{"name": "perf", "color": "abcdef", "description": "[Type] Performance [issues]"}]}
    assert json.loads(text) == expected


def test_save_upserts_case_insensitively_within_category(tmp_path: Path) -> None:
    store = JsonCustomLabelStore(tmp_path / "labels-custom.json")

    store.save("type", Label(name="perf", color="111111"))
    store.save("type", Label(name="PERF", color="222222"))
    store.save("area", Label(name="perf", color="333333"))

    catalog = store.load()
    assert [(label.name, label.color) for label in catalog.labels("type")] == [("PERF", "222222")]
    assert catalog.categories == ["type", "area"]


def test_upsert_label_does_not_mutate_input() -> None:
    original = LabelCatalog({"type": [Label(name="bug", color="111111")]})

    updated = upsert_label(original, "type", Label(name="perf", color="222222"))

    assert len(original) == 1
    assert len(updated) == 2


def test_in_memory_store() -> None:
    store = InMemoryCustomLabelStore()

    store.save("team", Label(name="platform", color="123456"))

    assert store.load().categories == ["team"]


def test_load_non_utf8_file_returns_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "labels-custom.json"
    path.write_bytes(b'{"type": [\xff\xfe]}')

    assert len(JsonCustomLabelStore(path).load()) == 0


def test_save_keeps_entries_that_fail_validation(tmp_path: Path) -> None:
    path = tmp_path / "labels-custom.json"
    existing = {
        "type": [
            {"name": "keep-me", "color": "abcdef", "description": "kept"},
            {"name": "short", "color": "fff", "description": "hand edited"},
        ],
        "area": [{"name": "infra", "color": "123456", "description": ""}],
    }
    path.write_text(json.dumps(existing), encoding="utf-8")

    JsonCustomLabelStore(path).save("status", Label(name="new", color="654321"))
    JsonCustomLabelStore(path).save("type", Label(name="Short", color="ffffff"))

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert list(saved) == ["type", "area", "status"]
    assert saved["type"] == [
        {"name": "keep-me", "color": "abcdef", "description": "kept"},
        {"name": "Short", "color": "ffffff", "description": ""},
    ]
    assert saved["area"] == existing["area"]
    assert saved["status"] == [{"name": "new", "color": "654321", "description": ""}]


@pytest.mark.parametrize("content", [b"{broken", b'{"type": [\xff]}', b"[]"])
def test_save_refuses_to_overwrite_unparseable_file(tmp_path: Path, content: bytes) -> None:
    path = tmp_path / "labels-custom.json"
    path.write_bytes(content)

    with pytest.raises(CatalogLoadError):
        JsonCustomLabelStore(path).save("type", Label(name="perf", color="abcdef"))

    assert path.read_bytes() == content
