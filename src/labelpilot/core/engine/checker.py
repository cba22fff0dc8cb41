"""Compliance checker: classify desired labels against the repository."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from labelpilot.core.contracts.label import CatalogEntry, Label
from labelpilot.core.contracts.results import CheckResult, CheckStatus, ComplianceReport


def index_labels(labels: Iterable[Label]) -> dict[str, Label]:
    """Key observed labels by lower-cased name; later duplicates win."""
    return {label.key: label for label in labels}


def classify(category: str, desired: Label, observed: Label | None) -> CheckResult:
    if observed is None:
        return CheckResult(category=category, label=desired, status=CheckStatus.MISSING)

    color_match = observed.color.lower() == desired.color.lower()
    desc_match = observed.description.strip() == desired.description.strip()

    if color_match and desc_match:
        return CheckResult(category=category, label=desired, status=CheckStatus.MATCH)
    if not color_match and not desc_match:
        return CheckResult(
            category=category,
            label=desired,
            status=CheckStatus.BOTH_MISMATCH,
            repo_color=observed.color,
            repo_description=observed.description,
        )
    if not color_match:
        return CheckResult(
            category=category,
            label=desired,
            status=CheckStatus.COLOR_MISMATCH,
            repo_color=observed.color,
        )
    return CheckResult(
        category=category,
        label=desired,
        status=CheckStatus.DESC_MISMATCH,
        repo_description=observed.description,
    )


class ComplianceChecker:
    """Report how far the repository deviates from the desired labels.

    Missing labels always fail the run; color and description mismatches only
    fail it in strict mode.
    """

    def check(
        self,
        entries: Sequence[CatalogEntry],
        observed: Mapping[str, Label] | Iterable[Label],
        *,
        strict: bool = False,
    ) -> ComplianceReport:
        if isinstance(observed, Mapping):
            observed_by_key = {key.lower(): label for key, label in observed.items()}
        else:
            observed_by_key = index_labels(observed)
        results = [
            classify(category, label, observed_by_key.get(label.key))
            for category, labels in entries
            for label in labels
        ]
        return ComplianceReport(results=results, strict=strict)
