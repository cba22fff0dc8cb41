"""In-memory label provider fake for tests."""

from __future__ import annotations

from collections.abc import Iterable

from labelpilot.core.contracts.label import Label
from labelpilot.core.contracts.provider import LabelProvider


class FakeLabelProvider(LabelProvider):
    """In-memory provider with spy tracking.

    Names listed in *failing* make every write call for that label return
    ``False``, the way a rejected ``gh`` call would.
    """

    def __init__(
        self,
        labels: Iterable[Label] = (),
        *,
        target: str = "owner/repo",
        failing: Iterable[str] = (),
    ) -> None:
        self._target = target
        self.labels: dict[str, Label] = {label.key: label for label in labels}
        self.failing = {name.lower() for name in failing}

        self.enter_count = 0
        self.create_calls: list[Label] = []
        self.update_calls: list[Label] = []
        self.delete_calls: list[str] = []

    @property
    def target(self) -> str:
        return self._target

    async def __aenter__(self) -> FakeLabelProvider:
        self.enter_count += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[override]
        return None

    async def list_label_names(self) -> list[str]:
        return [label.name for label in self.labels.values()]

    async def list_labels(self) -> list[Label]:
        return list(self.labels.values())

    async def create_label(self, label: Label) -> bool:
        self.create_calls.append(label)
        if label.key in self.failing or label.key in self.labels:
            return False
        self.labels[label.key] = label
        return True

    async def update_label(self, label: Label) -> bool:
        self.update_calls.append(label)
        if label.key in self.failing or label.key not in self.labels:
            return False
        self.labels[label.key] = label
        return True

    async def delete_label(self, name: str) -> bool:
        self.delete_calls.append(name)
        if name.lower() in self.failing:
            return False
        return self.labels.pop(name.lower(), None) is not None
