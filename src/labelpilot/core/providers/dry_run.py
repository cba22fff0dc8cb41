"""In-memory dry-run provider."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from labelpilot.core.contracts.label import Label
from labelpilot.core.contracts.provider import LabelProvider


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    label: str
    payload: dict[str, str] = field(default_factory=dict)


class DryRunLabelProvider(LabelProvider):
    """Provider that records writes instead of performing them.

    Reads come from *delegate* (fetched once, on the first ``async with``) or
    from *labels* when no delegate is given. Writes update the in-memory view
    the way the remote service would: creating an existing name or deleting a
    missing one fails.
    """

    def __init__(
        self,
        *,
        target: str = "dry-run",
        delegate: LabelProvider | None = None,
        labels: Iterable[Label] = (),
        **_: Any,
    ) -> None:
        self._target = delegate.target if delegate is not None else target
        self._delegate = delegate
        self._labels: dict[str, Label] = {label.key: label for label in labels}
        self._seeded = delegate is None
        self._operation_counter = 0
        self._operations: list[DryRunOperation] = []

    @property
    def target(self) -> str:
        return self._target

    @property
    def operations(self) -> tuple[DryRunOperation, ...]:
        return tuple(self._operations)

    def _record_operation(self, name: str, label: str, payload: dict[str, str] | None = None) -> None:
        self._operation_counter += 1
        self._operations.append(
            DryRunOperation(
                sequence=self._operation_counter,
                name=name,
                label=label,
                payload=payload or {},
            )
        )

    async def __aenter__(self) -> DryRunLabelProvider:
        if not self._seeded and self._delegate is not None:
            async with self._delegate:
                observed = await self._delegate.list_labels()
            self._labels = {label.key: label for label in observed}
            self._seeded = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        return None

    async def list_label_names(self) -> list[str]:
        return [label.name for label in self._labels.values()]

    async def list_labels(self) -> list[Label]:
        return list(self._labels.values())

    async def create_label(self, label: Label) -> bool:
        self._record_operation("create_label", label.name, {"color": label.color, "description": label.description})
        if label.key in self._labels:
            return False
        self._labels[label.key] = label
        return True

    async def update_label(self, label: Label) -> bool:
        self._record_operation("update_label", label.name, {"color": label.color, "description": label.description})
        if label.key not in self._labels:
            return False
        self._labels[label.key] = label
        return True

    async def delete_label(self, name: str) -> bool:
        self._record_operation("delete_label", name)
        return self._labels.pop(name.lower(), None) is not None
