"""Filter criteria contracts."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, field_validator


def split_tokens(raw: str | None) -> tuple[str, ...] | None:
    """Split comma-separated input into trimmed, lower-cased tokens.

    ``None`` or an empty string means "no filter" and yields ``None``. Input
    made only of separators (``",,"``) yields an empty tuple, which selects
    nothing on that axis.
    """
    if not raw:
        return None
    return _normalize(raw.split(","))


def _normalize(values: Iterable[str]) -> tuple[str, ...]:
    tokens = (value.strip().lower() for value in values)
    return tuple(dict.fromkeys(token for token in tokens if token))


class FilterCriteria(BaseModel):
    """Inclusion/exclusion criteria over label names and category names."""

    include_labels: tuple[str, ...] | None = None
    include_categories: tuple[str, ...] | None = None
    exclude_labels: tuple[str, ...] | None = None
    exclude_categories: tuple[str, ...] | None = None

    model_config = {"frozen": True}

    @field_validator("include_labels", "include_categories", "exclude_labels", "exclude_categories")
    @classmethod
    def normalize_tokens(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if value is None:
            return None
        return _normalize(value)

    @classmethod
    def from_strings(
        cls,
        *,
        label: str | None = None,
        category: str | None = None,
        exclude: str | None = None,
        exclude_category: str | None = None,
    ) -> FilterCriteria:
        return cls(
            include_labels=split_tokens(label),
            include_categories=split_tokens(category),
            exclude_labels=split_tokens(exclude),
            exclude_categories=split_tokens(exclude_category),
        )

    @property
    def has_inclusion(self) -> bool:
        return self.include_labels is not None or self.include_categories is not None

    @property
    def has_exclusion(self) -> bool:
        return self.exclude_labels is not None or self.exclude_categories is not None

    @property
    def is_empty(self) -> bool:
        return not self.has_inclusion and not self.has_exclusion
