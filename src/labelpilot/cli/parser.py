"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from labelpilot.core.contracts.config import DEFAULT_CUSTOM_PATH, DEFAULT_SUGGESTION_MODEL


def _package_version() -> str:
    try:
        return version("labelpilot")
    except PackageNotFoundError:
        return "0.0.0"


def _target_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--repo", "-r", default=None, help="Target repository (owner/repo). Defaults to current repo.")
    parent.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parent


def _filter_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--label", "-l", default=None, help='Only these labels, comma-separated (e.g. "bug,feature")')
    parent.add_argument("--category", "-c", default=None, help='Only these categories, comma-separated (e.g. "type")')
    parent.add_argument("--exclude", "-e", default=None, help="Skip these labels, comma-separated")
    parent.add_argument("--exclude-category", default=None, help="Skip these categories, comma-separated")
    return parent


def _catalog_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("--custom", action="store_true", help="Include custom labels from the custom labels file")
    parent.add_argument(
        "--custom-file",
        default=str(DEFAULT_CUSTOM_PATH),
        help=f"Custom labels file (default: {DEFAULT_CUSTOM_PATH})",
    )
    parent.add_argument("--template", default=None, help="Use this JSON catalog instead of the bundled template")
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="labelpilot")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    target = _target_options()
    filters = _filter_options()
    catalog = _catalog_options()

    apply_parser = subparsers.add_parser(
        "apply",
        parents=[target, filters, catalog],
        help="Apply the label template to a repository",
    )
    apply_parser.add_argument("--force", "-f", action="store_true", help="Update labels that already exist")
    apply_parser.add_argument("--dry-run", action="store_true", help="Preview mode")

    wipe_parser = subparsers.add_parser(
        "wipe",
        parents=[target, filters, catalog],
        help="Remove existing labels from a repository (all of them unless filtered)",
    )
    wipe_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation prompt")
    wipe_parser.add_argument("--dry-run", action="store_true", help="Preview mode")

    migrate_parser = subparsers.add_parser(
        "migrate",
        parents=[target, filters, catalog],
        help="Wipe all existing labels and apply the template (clean slate)",
    )
    migrate_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation prompt")
    migrate_parser.add_argument("--dry-run", action="store_true", help="Preview mode")

    check_parser = subparsers.add_parser(
        "check",
        parents=[target, filters, catalog],
        help="Check whether a repository follows the label template",
    )
    check_parser.add_argument(
        "--strict",
        "-s",
        action="store_true",
        help="Also flag labels with mismatched color or description",
    )

    subparsers.add_parser("list", parents=[target], help="List the labels of a repository")

    generate_parser = subparsers.add_parser(
        "generate",
        parents=[target],
        help="Generate custom labels with AI suggestions (GitHub Models)",
    )
    generate_parser.add_argument("--category", "-c", default=None, help="Pre-select a category")
    generate_parser.add_argument(
        "--model",
        "-m",
        default=DEFAULT_SUGGESTION_MODEL,
        help=f"GitHub Models model id (default: {DEFAULT_SUGGESTION_MODEL})",
    )
    generate_parser.add_argument(
        "--auth",
        choices=["gh-cli", "env"],
        default="gh-cli",
        help="Token source for GitHub Models (default: gh-cli)",
    )
    generate_parser.add_argument(
        "--custom-file",
        default=str(DEFAULT_CUSTOM_PATH),
        help=f"Custom labels file (default: {DEFAULT_CUSTOM_PATH})",
    )
    generate_parser.add_argument("--template", default=None, help="Catalog whose labels the suggestions must avoid")

    update_parser = subparsers.add_parser("update", help="Update labelpilot to the latest published version")
    update_parser.add_argument("--check", action="store_true", help="Only check whether an update is available")
    update_parser.add_argument("--dry-run", action="store_true", help="Alias for --check")
    update_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
