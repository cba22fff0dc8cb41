"""Concrete token resolvers."""

from labelpilot.core.auth.resolvers.env import EnvTokenResolver
from labelpilot.core.auth.resolvers.gh_cli import GhCliTokenResolver
from labelpilot.core.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
