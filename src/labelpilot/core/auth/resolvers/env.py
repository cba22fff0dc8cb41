"""Environment token resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from labelpilot.core.auth.base import TokenResolver
from labelpilot.core.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variables: tuple[str, ...] = ("GITHUB_TOKEN", "GH_TOKEN")

    async def resolve(self) -> str:
        for variable in self.variables:
            token = (os.getenv(variable) or "").strip()
            if token:
                return token
        raise AuthenticationError(f"{' or '.join(self.variables)} is not set or empty")
