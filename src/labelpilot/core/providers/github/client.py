"""Async wrapper around the ``gh`` CLI."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any

from labelpilot.core.contracts.exceptions import AuthenticationError, ProviderError

logger = logging.getLogger(__name__)

GH_INSTALL_HINT = "gh CLI is not installed. Install it from https://cli.github.com"


@dataclass
class CompletedProcess:
    """Result of a ``gh`` CLI invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GhClient:
    """Async wrapper around the ``gh`` CLI binary.

    All GitHub calls are executed by shelling out to ``gh``.
    """

    def __init__(self, executable: str = "gh") -> None:
        self._executable = executable

    async def run(self, args: list[str], *, check: bool = True) -> CompletedProcess:
        """Execute ``gh <args>`` asynchronously.

        Args:
            args: Arguments to pass to gh.
            check: If True, raise on non-zero exit.

        Returns:
            CompletedProcess with stdout, stderr, returncode.

        Raises:
            ProviderError: If the binary is missing, or check=True and the command fails.
        """
        cmd = [self._executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise ProviderError(GH_INSTALL_HINT) from exc
        except OSError as exc:
            raise ProviderError(f"Failed to execute gh CLI: {exc}") from exc

        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode(errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode(errors="replace") if stderr_bytes else "",
        )
        if check and not result.ok:
            raise ProviderError(f"gh command failed: {' '.join(cmd)}\n{result.stderr}")
        return result

    async def json(self, args: list[str]) -> Any:
        """Execute ``gh <args>`` and parse stdout as JSON.

        Returns:
            Parsed JSON, or None if stdout is empty.
        """
        result = await self.run(args)
        if not result.stdout.strip():
            return None
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ProviderError(f"gh returned invalid JSON for: {' '.join(args)}") from exc

    async def check_installed(self) -> None:
        """Verify the ``gh`` binary can be executed.

        Raises:
            ProviderError: If gh is missing or broken.
        """
        result = await self.run(["--version"], check=False)
        if not result.ok:
            raise ProviderError(GH_INSTALL_HINT)

    async def check_auth(self) -> None:
        """Verify gh authentication status.

        Raises:
            AuthenticationError: If not authenticated.
        """
        result = await self.run(["auth", "status"], check=False)
        if not result.ok:
            raise AuthenticationError("Not authenticated. Run `gh auth login` first.")

    async def detect_repo(self) -> str | None:
        """Return ``owner/repo`` of the repository in the working directory, if any."""
        result = await self.run(
            ["repo", "view", "--json", "nameWithOwner", "-q", ".nameWithOwner"],
            check=False,
        )
        if not result.ok:
            return None
        return result.stdout.strip() or None
