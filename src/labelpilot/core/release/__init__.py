"""Release and self-update helpers."""

from labelpilot.core.release.versions import (
    PACKAGE_NAME,
    fetch_latest_version,
    is_newer_version,
    run_upgrade,
    upgrade_command,
)

__all__ = ["PACKAGE_NAME", "fetch_latest_version", "is_newer_version", "run_upgrade", "upgrade_command"]
