"""List command handlers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from labelpilot import Label


def format_label_list(labels: Sequence[Label]) -> str:
    if not labels:
        return "No labels found."
    width = max(len(label.name) for label in labels)
    lines = [f"  {label.name:<{width}}  #{label.color}  {label.description}".rstrip() for label in labels]
    lines.append("")
    lines.append(f"Total: {len(labels)} label{'s' if len(labels) != 1 else ''}")
    return "\n".join(lines)


async def run_list(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    config = cli.config_from_args(args)
    pp = await cli.LabelPilot.from_config(config)
    print(f"Target: {pp.target}")
    print()
    print(cli._format_label_list(await pp.list_labels()))
    return 0


__all__ = ["format_label_list", "run_list"]
