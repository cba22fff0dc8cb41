"""Token resolver factory."""

from __future__ import annotations

from labelpilot.core.auth.base import TokenResolver
from labelpilot.core.auth.resolvers.env import EnvTokenResolver
from labelpilot.core.auth.resolvers.gh_cli import GhCliTokenResolver
from labelpilot.core.auth.resolvers.static import StaticTokenResolver
from labelpilot.core.contracts.config import LabelPilotConfig
from labelpilot.core.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def hostname_from_target(target: str | None) -> str:
    """Return the GitHub host of ``owner/repo`` or ``host/owner/repo``."""
    parts = (target or "").strip().split("/")
    if len(parts) == 3 and "." in parts[0]:
        return parts[0]
    return "github.com"


def create_token_resolver(config: LabelPilotConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver(hostname=hostname_from_target(config.target))
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
