"""Filter engine: select an ordered subset of a label catalog.

Inclusion is applied first, with union semantics:

- no inclusion criteria: every category passes through
- a category named in ``include_categories`` contributes all its labels
- any other category contributes only labels named in ``include_labels``

Exclusion is applied second: categories named in ``exclude_categories`` are
dropped, then labels named in ``exclude_labels`` are removed. Categories left
without labels never appear in the result. Filtering never reorders.

Unknown tokens produce advisory warnings and otherwise match nothing.
"""

from __future__ import annotations

from labelpilot.core.contracts.filter import FilterCriteria
from labelpilot.core.contracts.label import CatalogEntry, LabelCatalog
from labelpilot.core.contracts.results import FilterResult


def resolve_labels(catalog: LabelCatalog, criteria: FilterCriteria | None = None) -> FilterResult:
    criteria = criteria or FilterCriteria()
    if criteria.is_empty:
        return FilterResult(entries=_non_empty(catalog.entries()))

    warnings = validate_criteria(catalog, criteria)
    included = _apply_inclusion(catalog, criteria)
    return FilterResult(entries=_apply_exclusion(included, criteria), warnings=warnings)


def validate_criteria(catalog: LabelCatalog, criteria: FilterCriteria) -> list[str]:
    """Return one warning per token that names nothing in *catalog*."""
    warnings: list[str] = []
    known_categories = {category.lower() for category in catalog.categories}
    known_labels = catalog.label_names()
    valid_listing = ", ".join(catalog.categories)

    for token in criteria.include_categories or ():
        if token not in known_categories:
            warnings.append(f'Unknown category "{token}". Valid categories: {valid_listing}')
    for token in criteria.include_labels or ():
        if token not in known_labels:
            warnings.append(f'Label "{token}" not found in the template.')
    for token in criteria.exclude_categories or ():
        if token not in known_categories:
            warnings.append(f'Unknown exclude category "{token}". Valid categories: {valid_listing}')
    for token in criteria.exclude_labels or ():
        if token not in known_labels:
            warnings.append(f'Exclude label "{token}" not found in the template.')
    return warnings


def _apply_inclusion(catalog: LabelCatalog, criteria: FilterCriteria) -> list[CatalogEntry]:
    if not criteria.has_inclusion:
        return _non_empty(catalog.entries())

    include_categories = set(criteria.include_categories or ())
    include_labels = set(criteria.include_labels or ())
    included: list[CatalogEntry] = []
    for category, labels in catalog.entries():
        if category.lower() in include_categories:
            included.append((category, labels))
            continue
        matching = tuple(label for label in labels if label.key in include_labels)
        included.append((category, matching))
    return _non_empty(included)


def _apply_exclusion(entries: list[CatalogEntry], criteria: FilterCriteria) -> list[CatalogEntry]:
    exclude_categories = set(criteria.exclude_categories or ())
    exclude_labels = set(criteria.exclude_labels or ())
    kept: list[CatalogEntry] = []
    for category, labels in entries:
        if category.lower() in exclude_categories:
            continue
        kept.append((category, tuple(label for label in labels if label.key not in exclude_labels)))
    return _non_empty(kept)


def _non_empty(entries: list[CatalogEntry]) -> list[CatalogEntry]:
    return [(category, labels) for category, labels in entries if labels]
