"""GitHub label provider backed by the ``gh`` CLI."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from labelpilot.core.contracts.exceptions import ProviderError
from labelpilot.core.contracts.label import Label
from labelpilot.core.contracts.provider import LabelProvider
from labelpilot.core.providers.github.client import GhClient

logger = logging.getLogger(__name__)

LIST_LIMIT = 1000


class GhCliLabelProvider(LabelProvider):
    """Reads and writes repository labels with ``gh label`` subcommands.

    Pre-flight checks (binary present, authenticated) run once, on the first
    ``async with``.
    """

    def __init__(self, *, target: str, client: GhClient | None = None, **_: Any) -> None:
        self._target = target
        self._client = client or GhClient()
        self._verified = False

    @property
    def target(self) -> str:
        return self._target

    async def __aenter__(self) -> GhCliLabelProvider:
        if not self._verified:
            await self._client.check_installed()
            await self._client.check_auth()
            self._verified = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    async def list_label_names(self) -> list[str]:
        return [label.name for label in await self.list_labels()]

    async def list_labels(self) -> list[Label]:
        payload = await self._client.json(
            [
                "label",
                "list",
                "--repo",
                self._target,
                "--json",
                "name,color,description",
                "--limit",
                str(LIST_LIMIT),
            ]
        )
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ProviderError(f"unexpected label listing for {self._target}")
        try:
            return [
                Label(
                    name=raw["name"],
                    color=raw.get("color") or "ededed",
                    description=raw.get("description") or "",
                )
                for raw in payload
            ]
        except (KeyError, TypeError, ValidationError) as exc:
            raise ProviderError(f"malformed label listing for {self._target}: {exc}") from exc

    async def create_label(self, label: Label) -> bool:
        return await self._write(["label", "create", label.name, *self._label_fields(label)])

    async def update_label(self, label: Label) -> bool:
        return await self._write(["label", "edit", label.name, *self._label_fields(label)])

    async def delete_label(self, name: str) -> bool:
        return await self._write(["label", "delete", name, "--repo", self._target, "--yes"])

    def _label_fields(self, label: Label) -> list[str]:
        return ["--repo", self._target, "--color", label.color, "--description", label.description]

    async def _write(self, args: list[str]) -> bool:
        result = await self._client.run(args, check=False)
        if not result.ok:
            logger.warning("gh %s %r failed: %s", args[1], args[2], result.stderr.strip())
        return result.ok
