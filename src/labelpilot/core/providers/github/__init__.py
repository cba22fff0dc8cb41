"""GitHub provider exports."""

from labelpilot.core.providers.github.client import CompletedProcess, GhClient
from labelpilot.core.providers.github.provider import GhCliLabelProvider

__all__ = ["CompletedProcess", "GhCliLabelProvider", "GhClient"]
