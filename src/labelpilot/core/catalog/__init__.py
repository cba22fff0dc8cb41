"""Core catalog-domain exports."""

from labelpilot.core.catalog.loader import load_catalog, load_default_catalog
from labelpilot.core.catalog.overlay import (
    CustomLabelStore,
    InMemoryCustomLabelStore,
    JsonCustomLabelStore,
    upsert_label,
)

__all__ = [
    "CustomLabelStore",
    "InMemoryCustomLabelStore",
    "JsonCustomLabelStore",
    "load_catalog",
    "load_default_catalog",
    "upsert_label",
]
