"""Apply command handlers."""

from __future__ import annotations

import argparse

from labelpilot import ApplyResult


def format_apply_summary(result: ApplyResult, *, target: str) -> str:
    mode = "dry-run" if result.dry_run else "apply"

    lines = [
        "",
        f"labelpilot - apply complete ({mode})",
        "",
        f"  Target:    {target}",
        f"  Created:   {result.created}",
        f"  Updated:   {result.updated}",
        f"  Skipped:   {result.skipped}",
        f"  Failed:    {result.failed}",
        "",
    ]
    if result.skipped and not result.updated:
        lines.append("  Use --force to update labels that already exist")
        lines.append("")
    if result.dry_run:
        lines.append("  [dry-run] No changes were made")
        lines.append("")
    return "\n".join(lines)


async def run_apply(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    criteria = cli.criteria_from_args(args)

    pp = await cli.LabelPilot.from_config(config, progress=cli.RichReconcileReporter())
    cli.print_catalog_notes(pp, config)

    resolved = pp.resolve(criteria)
    cli.print_warnings(resolved.warnings)
    if resolved.label_count == 0:
        print("No labels matched the given filters. Nothing to apply.")
        return 0

    result = await pp.apply(criteria, force=args.force)
    print(cli._format_apply_summary(result, target=pp.target))
    return 0


__all__ = ["format_apply_summary", "run_apply"]
