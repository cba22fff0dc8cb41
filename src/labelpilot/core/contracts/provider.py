"""Provider adapter contract.

A provider is bound to a single repository at construction time. Write
operations report success as a boolean; a ``False`` return is a per-label
failure that the engine counts without aborting the batch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from labelpilot.core.contracts.label import Label


class LabelProvider(ABC):
    @abstractmethod
    async def __aenter__(self) -> LabelProvider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @property
    @abstractmethod
    def target(self) -> str: ...  # pragma: no cover

    @abstractmethod
    async def list_label_names(self) -> list[str]: ...  # pragma: no cover

    @abstractmethod
    async def list_labels(self) -> list[Label]: ...  # pragma: no cover

    @abstractmethod
    async def create_label(self, label: Label) -> bool: ...  # pragma: no cover

    @abstractmethod
    async def update_label(self, label: Label) -> bool: ...  # pragma: no cover

    @abstractmethod
    async def delete_label(self, name: str) -> bool: ...  # pragma: no cover
