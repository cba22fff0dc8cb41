"""User-maintained overlay catalog (``labels-custom.json``).

The overlay holds labels generated or curated by the user. Loading never
raises: a missing, unreadable, or malformed file yields an empty catalog.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from labelpilot.core.contracts.exceptions import CatalogLoadError
from labelpilot.core.contracts.label import Label, LabelCatalog

logger = logging.getLogger(__name__)


class CustomLabelStore(ABC):
    """Load/save capability for the overlay catalog."""

    @abstractmethod
    def load(self) -> LabelCatalog: ...  # pragma: no cover

    @abstractmethod
    def save(self, category: str, label: Label) -> None:
        """Upsert *label* in *category* by case-insensitive name."""
        ...  # pragma: no cover


def upsert_label(catalog: LabelCatalog, category: str, label: Label) -> LabelCatalog:
    """Return a copy of *catalog* with *label* replacing or appended to *category*."""
    payload = {name: list(labels) for name, labels in catalog.entries()}
    labels = payload.setdefault(category, [])
    for index, existing in enumerate(labels):
        if existing.key == label.key:
            labels[index] = label
            break
    else:
        labels.append(label)
    return LabelCatalog(payload)


class JsonCustomLabelStore(CustomLabelStore):
    """Overlay kept in a pretty-printed JSON file.

    ``save`` upserts into the raw JSON mapping, so entries this package cannot
    validate (a hand-edited short color, say) survive. A file that exists but
    cannot be parsed is never overwritten.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LabelCatalog:
        if not self._path.is_file():
            return LabelCatalog()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return LabelCatalog.from_payload(payload)
        except (OSError, ValueError, CatalogLoadError) as exc:
            logger.debug("Ignoring unreadable custom labels file %s: %s", self._path, exc)
            return LabelCatalog()

    def save(self, category: str, label: Label) -> None:
        payload = self._read_raw()
        entries = payload.setdefault(category, [])
        if not isinstance(entries, list):
            logger.warning("Not overwriting %s: category %r is not a list", self._path, category)
            raise CatalogLoadError(f"custom labels file has a malformed {category!r} category: {self._path}")

        for index, existing in enumerate(entries):
            if isinstance(existing, dict) and str(existing.get("name", "")).strip().lower() == label.key:
                entries[index] = label.model_dump()
                break
        else:
            entries.append(label.model_dump())

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    def _read_raw(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Not overwriting unreadable custom labels file %s: %s", self._path, exc)
            raise CatalogLoadError(f"cannot update unreadable custom labels file: {self._path}") from exc
        if not isinstance(payload, dict):
            logger.warning("Not overwriting custom labels file %s: root is not an object", self._path)
            raise CatalogLoadError(f"custom labels file root must be an object: {self._path}")
        return payload


class InMemoryCustomLabelStore(CustomLabelStore):
    def __init__(self, catalog: LabelCatalog | None = None) -> None:
        self._catalog = catalog or LabelCatalog()

    def load(self) -> LabelCatalog:
        return self._catalog

    def save(self, category: str, label: Label) -> None:
        self._catalog = upsert_label(self._catalog, category, label)
