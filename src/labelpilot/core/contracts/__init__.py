"""Core contracts-domain exports."""

from labelpilot.core.contracts.config import LabelPilotConfig
from labelpilot.core.contracts.exceptions import (
    AuthenticationError,
    CatalogLoadError,
    ConfigError,
    LabelPilotError,
    ProviderError,
    SuggestionError,
)
from labelpilot.core.contracts.filter import FilterCriteria, split_tokens
from labelpilot.core.contracts.label import CatalogEntry, Label, LabelCatalog
from labelpilot.core.contracts.provider import LabelProvider
from labelpilot.core.contracts.results import (
    ApplyResult,
    CategoryReport,
    CheckResult,
    CheckStatus,
    ComplianceReport,
    FilterResult,
    LabelAction,
    LabelOutcome,
    MigrateResult,
    WipeResult,
)

__all__ = [
    "ApplyResult",
    "AuthenticationError",
    "CatalogEntry",
    "CatalogLoadError",
    "CategoryReport",
    "CheckResult",
    "CheckStatus",
    "ComplianceReport",
    "ConfigError",
    "FilterCriteria",
    "FilterResult",
    "Label",
    "LabelAction",
    "LabelCatalog",
    "LabelOutcome",
    "LabelPilotConfig",
    "LabelPilotError",
    "LabelProvider",
    "MigrateResult",
    "ProviderError",
    "SuggestionError",
    "WipeResult",
    "split_tokens",
]
