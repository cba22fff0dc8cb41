"""Tests for catalog loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from labelpilot.core.catalog.loader import load_catalog, load_default_catalog
from labelpilot.core.contracts.exceptions import CatalogLoadError


def test_bundled_catalog_shape() -> None:
    catalog = load_default_catalog()

    assert catalog.categories == ["type", "status", "community", "resolution", "area"]
    assert [len(catalog.labels(category)) for category in catalog.categories] == [6, 4, 5, 4, 4]
    assert len(catalog) == 23


def test_bundled_descriptions_follow_convention() -> None:
    catalog = load_default_catalog()

    for category, labels in catalog.entries():
        for label in labels:
            assert label.description.startswith(f"[{category.capitalize()}] ")
            assert label.description.endswith(("[issues]", "[PRs]", "[issues, PRs]"))


def test_load_catalog_from_file(tmp_path: Path) -> None:
    path = tmp_path / "labels.json"
    path.write_text(json.dumps({"team": [{"name": "platform", "color": "#123abc", "description": "x"}]}))

    catalog = load_catalog(path)

    assert catalog.categories == ["team"]
    assert catalog.labels("team")[0].color == "123abc"


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError, match="not found"):
        load_catalog(tmp_path / "missing.json")


def test_load_catalog_directory(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError, match="not a file"):
        load_catalog(tmp_path)


def test_load_catalog_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "labels.json"
    path.write_text("{not json")

    with pytest.raises(CatalogLoadError, match="invalid JSON"):
        load_catalog(path)


def test_load_catalog_non_object_root(tmp_path: Path) -> None:
    path = tmp_path / "labels.json"
    path.write_text("[]")

    with pytest.raises(CatalogLoadError, match="root must be an object"):
        load_catalog(path)


def test_load_catalog_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "labels.json"
    path.write_bytes(b'{"type": [\xff\xfe]}')

    with pytest.raises(CatalogLoadError, match="not valid UTF-8"):
        load_catalog(path)
