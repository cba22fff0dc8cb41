"""Reconciliation engine: decide and execute per-label remote actions."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence

from labelpilot.core.contracts.label import CatalogEntry, Label
from labelpilot.core.contracts.results import ApplyResult, LabelAction, LabelOutcome, MigrateResult, WipeResult
from labelpilot.core.engine.progress import NullReconcileProgress, ReconcileProgress

logger = logging.getLogger(__name__)

LabelCallback = Callable[[Label], Awaitable[bool]]
DeleteCallback = Callable[[str], Awaitable[bool]]

PHASE_APPLY = "Apply"
PHASE_WIPE = "Wipe"


def select_wipe_targets(entries: Sequence[CatalogEntry], observed_names: Iterable[str]) -> list[str]:
    """Intersect the desired labels with the observed names.

    Returns the observed spelling of each desired label that exists remotely,
    in desired order. Desired labels absent remotely are dropped silently.
    """
    observed_by_key: dict[str, str] = {}
    for name in observed_names:
        observed_by_key.setdefault(name.lower(), name)

    targets: list[str] = []
    seen: set[str] = set()
    for _, labels in entries:
        for label in labels:
            if label.key in seen or label.key not in observed_by_key:
                continue
            seen.add(label.key)
            targets.append(observed_by_key[label.key])
    return targets


class LabelReconciler:
    """Apply, wipe and migrate passes over a desired label set.

    Items are processed one at a time; a failed item never aborts the rest of
    the batch. Results accumulate and are never rolled back.
    """

    def __init__(self, *, progress: ReconcileProgress | None = None, dry_run: bool = False) -> None:
        self._progress = progress or NullReconcileProgress()
        self._dry_run = dry_run

    async def apply(
        self,
        entries: Sequence[CatalogEntry],
        observed_names: Iterable[str],
        *,
        force: bool,
        create: LabelCallback,
        update: LabelCallback,
    ) -> ApplyResult:
        observed = {name.lower() for name in observed_names}
        result = ApplyResult(dry_run=self._dry_run)
        total = sum(len(labels) for _, labels in entries)

        self._progress.phase_start(PHASE_APPLY, total=total)
        try:
            for category, labels in entries:
                for label in labels:
                    outcome = await self._apply_one(
                        category, label, observed, force=force, create=create, update=update
                    )
                    _count_apply(result, outcome)
                    result.outcomes.append(outcome)
                    self._progress.item_done(PHASE_APPLY, outcome)
        except Exception as exc:
            self._progress.phase_error(PHASE_APPLY, exc)
            raise
        self._progress.phase_done(PHASE_APPLY)
        return result

    async def _apply_one(
        self,
        category: str,
        label: Label,
        observed: set[str],
        *,
        force: bool,
        create: LabelCallback,
        update: LabelCallback,
    ) -> LabelOutcome:
        if label.key not in observed:
            ok = await create(label)
            action = LabelAction.CREATE
        elif force:
            ok = await update(label)
            action = LabelAction.UPDATE
        else:
            return LabelOutcome(name=label.name, category=category, action=LabelAction.SKIP)

        if not ok:
            logger.debug("%s failed for label %r", action.value, label.name)
        return LabelOutcome(name=label.name, category=category, action=action, ok=ok)

    async def wipe(self, target_names: Sequence[str], *, delete: DeleteCallback) -> WipeResult:
        result = WipeResult(dry_run=self._dry_run)

        self._progress.phase_start(PHASE_WIPE, total=len(target_names))
        try:
            for name in target_names:
                ok = await delete(name)
                if ok:
                    result.deleted += 1
                else:
                    logger.debug("delete failed for label %r", name)
                    result.failed += 1
                outcome = LabelOutcome(name=name, action=LabelAction.DELETE, ok=ok)
                result.outcomes.append(outcome)
                self._progress.item_done(PHASE_WIPE, outcome)
        except Exception as exc:
            self._progress.phase_error(PHASE_WIPE, exc)
            raise
        self._progress.phase_done(PHASE_WIPE)
        return result

    async def migrate(
        self,
        entries: Sequence[CatalogEntry],
        observed_names: Sequence[str],
        *,
        create: LabelCallback,
        delete: DeleteCallback,
    ) -> MigrateResult:
        """Wipe every observed label, then create every desired label.

        The two phases are independent: a partial wipe does not stop the apply
        phase, and the apply phase always issues create calls.
        """
        wipe_result = await self.wipe(observed_names, delete=delete)
        apply_result = await self.apply(entries, (), force=False, create=create, update=create)
        return MigrateResult(wipe=wipe_result, apply=apply_result, dry_run=self._dry_run)


def _count_apply(result: ApplyResult, outcome: LabelOutcome) -> None:
    if not outcome.ok:
        result.failed += 1
    elif outcome.action is LabelAction.CREATE:
        result.created += 1
    elif outcome.action is LabelAction.UPDATE:
        result.updated += 1
    else:
        result.skipped += 1
