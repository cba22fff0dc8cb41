"""Catalog loading from JSON files."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from labelpilot.core.contracts.exceptions import CatalogLoadError
from labelpilot.core.contracts.label import LabelCatalog

_DEFAULT_CATALOG_RESOURCE = "labels.json"


def load_default_catalog() -> LabelCatalog:
    """Load the template bundled with the package."""
    text = resources.files("labelpilot.core.catalog").joinpath(_DEFAULT_CATALOG_RESOURCE).read_text(encoding="utf-8")
    return LabelCatalog.from_payload(json.loads(text))


def load_catalog(path: str | Path) -> LabelCatalog:
    """Load a catalog from an explicit JSON file."""
    catalog_path = Path(path).expanduser()
    payload = _read_json(catalog_path)
    if not isinstance(payload, dict):
        raise CatalogLoadError(f"catalog root must be an object: {catalog_path}")
    return LabelCatalog.from_payload(payload)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise CatalogLoadError(f"catalog file not found: {path}")
    if not path.is_file():
        raise CatalogLoadError(f"catalog path is not a file: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogLoadError(f"failed reading catalog file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogLoadError(f"catalog file is not valid UTF-8: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"invalid JSON in catalog file: {path}") from exc
