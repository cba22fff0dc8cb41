"""Token from the ``gh`` CLI login, for the GitHub Models suggester."""

from __future__ import annotations

from dataclasses import dataclass, field

from labelpilot.core.auth.base import TokenResolver
from labelpilot.core.contracts.exceptions import AuthenticationError, ProviderError
from labelpilot.core.providers.github.client import GhClient


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    """Reuses the account ``gh`` is logged in with on *hostname*.

    GitHub Models accepts the same OAuth token the label commands run under,
    so ``generate`` needs no extra credential setup.
    """

    hostname: str = "github.com"
    client: GhClient = field(default_factory=GhClient, compare=False, repr=False)

    async def resolve(self) -> str:
        try:
            result = await self.client.run(["auth", "token", "--hostname", self.hostname], check=False)
        except ProviderError as exc:
            raise AuthenticationError(f"Cannot read a GitHub Models token: {exc}") from exc

        if not result.ok:
            message = f"Not logged in to {self.hostname}. Run `gh auth login` or use --auth env"
            details = result.stderr.strip()
            raise AuthenticationError(f"{message}: {details}" if details else message)

        token = result.stdout.strip()
        if not token:
            raise AuthenticationError(f"gh auth token returned an empty token for {self.hostname}")
        return token
