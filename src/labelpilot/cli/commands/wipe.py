"""Wipe command handlers."""

from __future__ import annotations

import argparse

from labelpilot import WipeResult


def format_wipe_summary(result: WipeResult, *, target: str) -> str:
    mode = "dry-run" if result.dry_run else "apply"

    lines = [
        "",
        f"labelpilot - wipe complete ({mode})",
        "",
        f"  Target:    {target}",
        f"  Deleted:   {result.deleted}",
        f"  Failed:    {result.failed}",
        "",
    ]
    if result.dry_run:
        lines.append("  [dry-run] No labels were deleted")
        lines.append("")
    return "\n".join(lines)


async def run_wipe(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    criteria = cli.criteria_from_args(args)

    pp = await cli.LabelPilot.from_config(config, progress=cli.RichReconcileReporter())
    cli.print_catalog_notes(pp, config)
    if not criteria.is_empty:
        cli.print_warnings(pp.resolve(criteria).warnings)

    targets = await pp.wipe_targets(criteria)
    if not targets:
        print("No labels found. Nothing to wipe.")
        return 0

    if not args.yes:
        scope = "all " if criteria.is_empty else ""
        message = f"This will delete {scope}{cli.plural(len(targets), 'label')} from {pp.target}. Continue?"
        if not await cli.confirm_prompt(message, default=False):
            print("Aborted.")
            return 2

    result = await pp.wipe(targets)
    print(cli._format_wipe_summary(result, target=pp.target))
    return 0


__all__ = ["format_wipe_summary", "run_wipe"]
