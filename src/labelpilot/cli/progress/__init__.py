"""CLI progress reporters."""

from labelpilot.cli.progress.rich import RichReconcileReporter

__all__ = ["RichReconcileReporter"]
