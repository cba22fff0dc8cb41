"""Custom exception hierarchy for labelpilot.

All labelpilot exceptions inherit from :class:`LabelPilotError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.

Per-label remote failures are *not* exceptions: providers report them as a
``False`` return value and the engine counts them.
"""

from __future__ import annotations


class LabelPilotError(Exception):
    """Base exception for all labelpilot errors."""


class ConfigError(LabelPilotError):
    """Raised when configuration is invalid or the target cannot be resolved."""


class CatalogLoadError(LabelPilotError):
    """Raised when a label catalog cannot be read or parsed."""


class AuthenticationError(LabelPilotError):
    """Raised when the provider cannot authenticate."""


class ProviderError(LabelPilotError):
    """Raised when the provider is unusable (missing tool, failed listing)."""


class SuggestionError(LabelPilotError):
    """Raised when label suggestions cannot be generated or parsed."""
