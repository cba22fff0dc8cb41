"""Core providers-domain exports."""

from labelpilot.core.providers.dry_run import DryRunLabelProvider, DryRunOperation
from labelpilot.core.providers.factory import create_provider, register
from labelpilot.core.providers.github import GhCliLabelProvider, GhClient

__all__ = ["DryRunLabelProvider", "DryRunOperation", "GhCliLabelProvider", "GhClient", "create_provider", "register"]
