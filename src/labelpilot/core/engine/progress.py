"""Progress reporting protocol for reconciliation passes.

This is engine-level instrumentation, not a provider contract.
The engine emits phase lifecycle events and one event per processed label;
consumers (e.g. the CLI's Rich reporter) implement ``ReconcileProgress``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from labelpilot.core.contracts.results import LabelOutcome


class ReconcileProgress(ABC):
    """Observer interface for reconciliation progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str, outcome: LabelOutcome) -> None:
        """One label within *phase* has been processed."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullReconcileProgress(ReconcileProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str, outcome: LabelOutcome) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
