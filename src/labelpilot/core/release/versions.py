"""Published-version lookup and self-update."""

from __future__ import annotations

import asyncio
import logging
import re
import sys

import httpx

logger = logging.getLogger(__name__)

PACKAGE_NAME = "labelpilot"
PYPI_URL = f"https://pypi.org/pypi/{PACKAGE_NAME}/json"
DEFAULT_TIMEOUT = 10.0

_LEADING_DIGITS = re.compile(r"\d+")


def _version_parts(version: str) -> tuple[int, int, int]:
    parts: list[int] = []
    for segment in version.strip().removeprefix("v").split(".")[:3]:
        match = _LEADING_DIGITS.match(segment)
        parts.append(int(match.group(0)) if match else 0)
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def is_newer_version(latest: str, current: str) -> bool:
    """Return True when *latest* is strictly newer than *current* (major.minor.patch)."""
    return _version_parts(latest) > _version_parts(current)


async def fetch_latest_version(
    *,
    url: str = PYPI_URL,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str | None:
    """Return the latest published version, or None when it cannot be determined."""
    try:
        async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
        version = response.json()["info"]["version"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        logger.debug("Latest version lookup failed: %s", exc)
        return None
    return version if isinstance(version, str) and version else None


def upgrade_command() -> list[str]:
    return [sys.executable, "-m", "pip", "install", "--upgrade", PACKAGE_NAME]


async def run_upgrade(command: list[str] | None = None) -> int:
    """Run the upgrade command with inherited stdio and return its exit code."""
    cmd = command or upgrade_command()
    logger.debug("Running: %s", " ".join(cmd))
    try:
        process = await asyncio.create_subprocess_exec(*cmd)
    except OSError as exc:
        logger.debug("Upgrade command failed to start: %s", exc)
        return 1
    return await process.wait()
