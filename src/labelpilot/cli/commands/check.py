"""Check command handlers."""

from __future__ import annotations

import argparse

from labelpilot import CheckResult, CheckStatus, ComplianceReport
from labelpilot.cli.common import plural

_STATUS_TEXT = {
    CheckStatus.MATCH: "match",
    CheckStatus.COLOR_MISMATCH: "color mismatch",
    CheckStatus.DESC_MISMATCH: "description mismatch",
    CheckStatus.BOTH_MISMATCH: "color + description mismatch",
    CheckStatus.MISSING: "missing",
}


def status_icon(status: CheckStatus) -> str:
    if status is CheckStatus.MATCH:
        return "✔"
    if status is CheckStatus.MISSING:
        return "✘"
    return "~"


def format_check_line(result: CheckResult) -> str:
    label = result.label
    line = f"  {status_icon(result.status)} {label.name:<28} #{label.color}  {_STATUS_TEXT[result.status]}"
    if result.repo_color is not None:
        line += f"  (repo: #{result.repo_color})"
    if result.repo_description is not None:
        line += f'\n    repo desc: "{result.repo_description}"'
    return line


def format_check_report(report: ComplianceReport) -> str:
    lines = [""]
    for category in report.by_category():
        title = f"{category.category[:1].upper()}{category.category[1:]}"
        verdict = plural(category.failing, "issue") if category.failing else "all good"
        lines.append(f"{title} ({category.total}) - {verdict}")
        lines.extend(format_check_line(result) for result in category.results)
        lines.append("")

    result_line = f"Result: {report.matched}/{report.total} labels matched"
    if report.mismatched:
        result_line += f", {report.mismatched} mismatched"
    if report.missing:
        result_line += f", {report.missing} missing"
    lines.append(result_line)

    if report.compatible:
        lines.append(f"Compatible: ✔ Yes{' (strict)' if report.strict else ''}")
    else:
        lines.append("Compatible: ✘ No - run `labelpilot apply` to fix")
    return "\n".join(lines)


async def run_check(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    criteria = cli.criteria_from_args(args)

    pp = await cli.LabelPilot.from_config(config)
    cli.print_catalog_notes(pp, config)
    if args.strict:
        print("Mode: strict (name + color + description)")
    cli.print_warnings(pp.resolve(criteria).warnings)

    report = await pp.check(criteria, strict=args.strict)
    print(cli._format_check_report(report))
    return 0 if report.compatible else 1


__all__ = ["format_check_line", "format_check_report", "run_check", "status_icon"]
