"""Factory for creating provider instances.

Decouples provider selection from provider implementation. The SDK uses this
factory to instantiate providers by name, without importing concrete providers.
"""

from __future__ import annotations

from typing import Any

from labelpilot.core.contracts.exceptions import ConfigError
from labelpilot.core.contracts.provider import LabelProvider
from labelpilot.core.providers.dry_run import DryRunLabelProvider
from labelpilot.core.providers.github.provider import GhCliLabelProvider

# Registry mapping provider names to their classes
_REGISTRY: dict[str, type[LabelProvider]] = {
    "github": GhCliLabelProvider,
    "dry-run": DryRunLabelProvider,
}


def register(name: str, provider_cls: type[LabelProvider]) -> None:
    """Register a provider class by name.

    Args:
        name: Provider name (e.g. "github").
        provider_cls: Provider class that implements the LabelProvider ABC.
    """
    _REGISTRY[name] = provider_cls


def create_provider(name: str, *, target: str, **kwargs: Any) -> LabelProvider:
    """Create a provider instance by name.

    The returned provider is an async context manager. Use it like::

        async with create_provider("github", target="owner/repo") as provider:
            names = await provider.list_label_names()

    Raises:
        ConfigError: If the provider name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY)) or "(none registered)"
        raise ConfigError(f"Unknown provider: {name!r}. Available: {available}")

    provider_cls = _REGISTRY[name]
    return provider_cls(target=target, **kwargs)  # type: ignore[call-arg]
