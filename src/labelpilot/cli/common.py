"""Shared CLI helpers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

from labelpilot import FilterCriteria, LabelAction, LabelOutcome, LabelPilot, LabelPilotConfig, build_config


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def category_heading(category: str) -> str:
    return f"{category[:1].upper()}{category[1:]} Labels"


def describe_outcome(outcome: LabelOutcome) -> str:
    """Short status shown after a label name."""
    if outcome.action is LabelAction.SKIP:
        return "already exists, use --force to update"
    verb = {
        LabelAction.CREATE: ("created", "create"),
        LabelAction.UPDATE: ("updated", "update"),
        LabelAction.DELETE: ("deleted", "delete"),
    }[outcome.action]
    return verb[0] if outcome.ok else f"{verb[1]} failed"


def config_from_args(args: argparse.Namespace) -> LabelPilotConfig:
    template = getattr(args, "template", None)
    custom_file = getattr(args, "custom_file", None)
    return build_config(
        target=getattr(args, "repo", None),
        template_path=Path(template) if template else None,
        custom_path=Path(custom_file) if custom_file else None,
        include_custom=getattr(args, "custom", False),
        dry_run=getattr(args, "dry_run", False),
        auth=getattr(args, "auth", None),
        model=getattr(args, "model", None),
    )


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria.from_strings(
        label=getattr(args, "label", None),
        category=getattr(args, "category", None),
        exclude=getattr(args, "exclude", None),
        exclude_category=getattr(args, "exclude_category", None),
    )


def print_warnings(warnings: Iterable[str]) -> None:
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)


def print_catalog_notes(pp: LabelPilot, config: LabelPilotConfig) -> None:
    """Announce the target and any overlay labels merged into the catalog."""
    print(f"Target: {pp.target}")
    if pp.overlay is None:
        return
    if len(pp.overlay) == 0:
        print_warnings(["No custom labels found. Use `labelpilot generate` to create custom labels."])
    else:
        print(f"Including {plural(len(pp.overlay), 'custom label')} from {config.custom_path}")
