"""Models for filter, reconciliation, and compliance results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from labelpilot.core.contracts.label import CatalogEntry, Label


class FilterResult(BaseModel):
    """Value returned by :func:`resolve_labels`."""

    entries: list[CatalogEntry] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def labels(self) -> list[Label]:
        return [label for _, labels in self.entries for label in labels]

    @property
    def label_count(self) -> int:
        return sum(len(labels) for _, labels in self.entries)


class LabelAction(StrEnum):
    """Per-label reconciliation decision."""

    CREATE = "create"
    UPDATE = "update"
    SKIP = "skip"
    DELETE = "delete"


class LabelOutcome(BaseModel):
    """Outcome of a single reconciliation decision."""

    name: str
    category: str | None = None
    action: LabelAction
    ok: bool = True

    model_config = {"frozen": True}


class ApplyResult(BaseModel):
    """Counts accumulated by an apply pass."""

    created: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: list[LabelOutcome] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        return self.created + self.updated + self.skipped + self.failed


class WipeResult(BaseModel):
    """Counts accumulated by a wipe pass."""

    deleted: int = 0
    failed: int = 0
    outcomes: list[LabelOutcome] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        return self.deleted + self.failed


class MigrateResult(BaseModel):
    """Wipe counts followed by apply counts; the phases are not transactional."""

    wipe: WipeResult
    apply: ApplyResult
    dry_run: bool = False


class CheckStatus(StrEnum):
    """Match state of a desired label against the repository."""

    MATCH = "match"
    COLOR_MISMATCH = "color-mismatch"
    DESC_MISMATCH = "desc-mismatch"
    BOTH_MISMATCH = "both-mismatch"
    MISSING = "missing"


class CheckResult(BaseModel):
    """Compliance verdict for one desired label."""

    category: str
    label: Label
    status: CheckStatus
    repo_color: str | None = None
    repo_description: str | None = None

    model_config = {"frozen": True}

    def is_failing(self, *, strict: bool) -> bool:
        if self.status is CheckStatus.MISSING:
            return True
        return strict and self.status is not CheckStatus.MATCH


class CategoryReport(BaseModel):
    """Per-category slice of a compliance report."""

    category: str
    results: list[CheckResult]
    failing: int
    total: int


class ComplianceReport(BaseModel):
    """Run-level compliance verdict."""

    results: list[CheckResult] = Field(default_factory=list)
    strict: bool = False

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def matched(self) -> int:
        return sum(1 for result in self.results if result.status is CheckStatus.MATCH)

    @property
    def missing(self) -> int:
        return sum(1 for result in self.results if result.status is CheckStatus.MISSING)

    @property
    def mismatched(self) -> int:
        return self.total - self.matched - self.missing

    @property
    def failing(self) -> int:
        return sum(1 for result in self.results if result.is_failing(strict=self.strict))

    @property
    def compatible(self) -> bool:
        return self.failing == 0

    def by_category(self) -> list[CategoryReport]:
        grouped: dict[str, list[CheckResult]] = {}
        for result in self.results:
            grouped.setdefault(result.category, []).append(result)
        return [
            CategoryReport(
                category=category,
                results=results,
                failing=sum(1 for result in results if result.is_failing(strict=self.strict)),
                total=len(results),
            )
            for category, results in grouped.items()
        ]
