"""Public API surface for labelpilot."""

__version__ = "1.0.0"

from labelpilot.core.auth import TokenResolver, create_token_resolver
from labelpilot.core.catalog import (
    CustomLabelStore,
    InMemoryCustomLabelStore,
    JsonCustomLabelStore,
    load_catalog,
    load_default_catalog,
)
from labelpilot.core.contracts.config import LabelPilotConfig
from labelpilot.core.contracts.exceptions import (
    AuthenticationError,
    CatalogLoadError,
    ConfigError,
    LabelPilotError,
    ProviderError,
    SuggestionError,
)
from labelpilot.core.contracts.filter import FilterCriteria
from labelpilot.core.contracts.label import Label, LabelCatalog
from labelpilot.core.contracts.provider import LabelProvider
from labelpilot.core.contracts.results import (
    ApplyResult,
    CheckResult,
    CheckStatus,
    ComplianceReport,
    FilterResult,
    LabelAction,
    LabelOutcome,
    MigrateResult,
    WipeResult,
)
from labelpilot.core.engine import ComplianceChecker, LabelReconciler, resolve_labels, select_wipe_targets
from labelpilot.core.engine.progress import ReconcileProgress
from labelpilot.core.providers import create_provider
from labelpilot.core.release import fetch_latest_version, is_newer_version
from labelpilot.core.suggest import GitHubModelsSuggester, LabelSuggester, SuggestionRequest, parse_labels_response
from labelpilot.sdk import LabelPilot, build_config, load_template

__all__ = [
    "ApplyResult",
    "AuthenticationError",
    "CatalogLoadError",
    "CheckResult",
    "CheckStatus",
    "ComplianceChecker",
    "ComplianceReport",
    "ConfigError",
    "CustomLabelStore",
    "FilterCriteria",
    "FilterResult",
    "GitHubModelsSuggester",
    "InMemoryCustomLabelStore",
    "JsonCustomLabelStore",
    "Label",
    "LabelAction",
    "LabelCatalog",
    "LabelOutcome",
    "LabelPilot",
    "LabelPilotConfig",
    "LabelPilotError",
    "LabelProvider",
    "LabelReconciler",
    "LabelSuggester",
    "MigrateResult",
    "ProviderError",
    "ReconcileProgress",
    "SuggestionError",
    "SuggestionRequest",
    "TokenResolver",
    "WipeResult",
    "__version__",
    "build_config",
    "create_provider",
    "create_token_resolver",
    "fetch_latest_version",
    "is_newer_version",
    "load_catalog",
    "load_default_catalog",
    "load_template",
    "parse_labels_response",
    "resolve_labels",
    "select_wipe_targets",
]
