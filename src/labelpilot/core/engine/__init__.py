"""Core engine-domain exports."""

from labelpilot.core.engine.checker import ComplianceChecker, classify, index_labels
from labelpilot.core.engine.filter import resolve_labels, validate_criteria
from labelpilot.core.engine.progress import NullReconcileProgress, ReconcileProgress
from labelpilot.core.engine.reconciler import LabelReconciler, select_wipe_targets

__all__ = [
    "ComplianceChecker",
    "LabelReconciler",
    "NullReconcileProgress",
    "ReconcileProgress",
    "classify",
    "index_labels",
    "resolve_labels",
    "select_wipe_targets",
    "validate_criteria",
]
