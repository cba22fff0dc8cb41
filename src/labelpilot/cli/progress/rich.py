"""Rich-based reconciliation reporter."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.text import Text

from labelpilot.cli.common import category_heading, describe_outcome
from labelpilot.core.contracts.results import LabelAction, LabelOutcome
from labelpilot.core.engine.progress import ReconcileProgress


class RichReconcileReporter(ReconcileProgress):
    """Prints one line per processed label, grouped under category headings.

    Label names go through :class:`rich.text.Text`, so catalog text such as
    ``[Type]`` is never parsed as console markup.
    """

    _PHASE_HEADINGS: ClassVar[dict[str, str]] = {
        "Wipe": "Deleting Labels",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._category: str | None = None

    @property
    def console(self) -> Console:
        return self._console

    def _heading(self, title: str) -> None:
        self._console.print()
        self._console.print(Text(title, style="bold underline"))

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._category = None
        heading = self._PHASE_HEADINGS.get(phase)
        if heading is not None and total:
            self._heading(heading)

    def item_done(self, phase: str, outcome: LabelOutcome) -> None:
        if outcome.category is not None and outcome.category != self._category:
            self._category = outcome.category
            self._heading(category_heading(outcome.category))

        if outcome.action is LabelAction.SKIP:
            icon, style = "~", "yellow"
        elif outcome.ok:
            icon, style = "✔", "green"
        else:
            icon, style = "✘", "red"
        self._console.print(
            Text.assemble(
                "  ",
                (icon, style),
                " ",
                outcome.name,
                (f" ({describe_outcome(outcome)})", "dim" if outcome.ok else "red"),
            )
        )

    def phase_done(self, phase: str) -> None:
        self._category = None

    def phase_error(self, phase: str, error: BaseException) -> None:
        self._console.print(Text.assemble(("✘ ", "red"), f"{phase} aborted: {error}"))
