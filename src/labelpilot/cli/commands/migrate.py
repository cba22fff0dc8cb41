"""Migrate command handlers."""

from __future__ import annotations

import argparse

from labelpilot import MigrateResult


def format_migrate_summary(result: MigrateResult, *, target: str) -> str:
    mode = "dry-run" if result.dry_run else "apply"

    lines = [
        "",
        f"labelpilot - migrate complete ({mode})",
        "",
        f"  Target:    {target}",
        "",
        "  Wipe",
        f"    Deleted: {result.wipe.deleted}",
        f"    Failed:  {result.wipe.failed}",
        "",
        "  Apply",
        f"    Created: {result.apply.created}",
        f"    Failed:  {result.apply.failed}",
        "",
    ]
    if result.dry_run:
        lines.append("  [dry-run] No changes were made")
        lines.append("")
    return "\n".join(lines)


async def run_migrate(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    criteria = cli.criteria_from_args(args)

    pp = await cli.LabelPilot.from_config(config, progress=cli.RichReconcileReporter())
    cli.print_catalog_notes(pp, config)

    resolved = pp.resolve(criteria)
    cli.print_warnings(resolved.warnings)
    existing = await pp.list_label_names()

    if not args.yes:
        message = (
            f"This will delete all {cli.plural(len(existing), 'existing label')} from {pp.target} "
            f"and apply {cli.plural(resolved.label_count, 'template label')}. Continue?"
        )
        if not await cli.confirm_prompt(message, default=False):
            print("Aborted.")
            return 2

    if not existing:
        print("No existing labels to wipe.")
    result = await pp.migrate(criteria, existing=existing)
    print(cli._format_migrate_summary(result, target=pp.target))
    return 0


__all__ = ["format_migrate_summary", "run_migrate"]
