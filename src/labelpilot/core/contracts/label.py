"""Label and catalog contracts."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from labelpilot.core.contracts.exceptions import CatalogLoadError

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


class Label(BaseModel):
    """A named, colored, described tag.

    Identity is the name compared case-insensitively (see :attr:`key`).
    """

    name: str
    color: str
    description: str = ""

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("label name must be non-empty")
        return name

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        color = value.strip().removeprefix("#")
        if not _HEX_COLOR.match(color):
            raise ValueError(f"color must be a 6-digit hex string, got {value!r}")
        return color

    @property
    def key(self) -> str:
        return self.name.lower()


CatalogEntry = tuple[str, tuple[Label, ...]]

_PAYLOAD_ADAPTER: TypeAdapter[dict[str, list[Label]]] = TypeAdapter(dict[str, list[Label]])


class LabelCatalog:
    """Immutable, insertion-ordered mapping of category name to labels."""

    def __init__(self, categories: Mapping[str, Iterable[Label]] | None = None) -> None:
        self._categories: dict[str, tuple[Label, ...]] = {
            category: tuple(labels) for category, labels in (categories or {}).items()
        }

    @classmethod
    def from_payload(cls, payload: Any) -> LabelCatalog:
        """Validate a JSON-shaped ``{category: [label, ...]}`` payload."""
        try:
            parsed = _PAYLOAD_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            raise CatalogLoadError(f"catalog schema mismatch: {exc}") from exc
        return cls(parsed)

    def to_payload(self) -> dict[str, list[dict[str, str]]]:
        return {
            category: [label.model_dump() for label in labels] for category, labels in self._categories.items()
        }

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    def entries(self) -> list[CatalogEntry]:
        return list(self._categories.items())

    def labels(self, category: str) -> tuple[Label, ...]:
        return self._categories.get(category, ())

    def all_labels(self) -> list[Label]:
        return [label for labels in self._categories.values() for label in labels]

    def label_names(self) -> set[str]:
        return {label.key for label in self.all_labels()}

    def merged_with(self, overlay: LabelCatalog) -> LabelCatalog:
        """Layer *overlay* onto this catalog.

        Labels are appended per category only when the category does not
        already hold the same name (case-insensitive). The base entry wins;
        no cross-category deduplication happens.
        """
        merged: dict[str, list[Label]] = {category: list(labels) for category, labels in self._categories.items()}
        for category, labels in overlay.entries():
            target = merged.setdefault(category, [])
            for label in labels:
                if any(existing.key == label.key for existing in target):
                    continue
                target.append(label)
        return LabelCatalog(merged)

    def __len__(self) -> int:
        return sum(len(labels) for labels in self._categories.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelCatalog):
            return NotImplemented
        return self._categories == other._categories

    def __repr__(self) -> str:
        return f"LabelCatalog(categories={self.categories!r}, labels={len(self)})"
