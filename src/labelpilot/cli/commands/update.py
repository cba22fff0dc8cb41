"""Update command handlers."""

from __future__ import annotations

import argparse
import sys


async def run_update(args: argparse.Namespace) -> int:
    import labelpilot.cli as cli

    current = cli._package_version()
    print(f"Current version: v{current}")

    latest = await cli.fetch_latest_version()
    if latest is None:
        print("error: Could not fetch the latest version. Check your internet connection.", file=sys.stderr)
        return 1
    print(f"Latest version:  v{latest}")

    if not cli.is_newer_version(latest, current):
        print("Already on the latest version.")
        return 0

    if args.check or args.dry_run:
        print(f"Update available: v{current} -> v{latest}")
        print("Run `labelpilot update` to upgrade.")
        return 0

    command = cli.upgrade_command()
    print(f"Running: {' '.join(command)}")
    if await cli.run_upgrade(command) != 0:
        print("error: Update failed. Try running the update command manually:", file=sys.stderr)
        print(f"  {' '.join(command)}", file=sys.stderr)
        return 1
    print(f"labelpilot updated to v{latest}")
    return 0


__all__ = ["run_update"]
