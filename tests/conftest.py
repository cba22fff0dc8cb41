"""Shared test fixtures for labelpilot tests."""

from __future__ import annotations

import pytest

from labelpilot.core.contracts.label import Label, LabelCatalog


@pytest.fixture
def bug() -> Label:
    return Label(name="bug", color="d73a4a", description="[Type] Something isn't working [issues]")


@pytest.fixture
def wip() -> Label:
    return Label(name="wip", color="fbca04", description="[Status] Work in progress [PRs]")


@pytest.fixture
def small_catalog(bug: Label, wip: Label) -> LabelCatalog:
    """The two-category catalog used by the end-to-end filter scenario."""
    return LabelCatalog({"type": [bug], "status": [wip]})


@pytest.fixture
def sample_catalog() -> LabelCatalog:
    return LabelCatalog(
        {
            "type": [
                Label(name="bug", color="d73a4a", description="[Type] Something isn't working [issues]"),
                Label(name="feature", color="a2eeef", description="[Type] New feature or request [issues]"),
                Label(name="docs", color="0075ca", description="[Type] Documentation only [issues, PRs]"),
            ],
            "status": [
                Label(name="wip", color="fbca04", description="[Status] Work in progress [PRs]"),
                Label(name="blocked", color="b60205", description="[Status] Blocked by something [issues, PRs]"),
            ],
            "area": [
                Label(name="frontend", color="1d76db", description="[Area] User interface [issues, PRs]"),
            ],
        }
    )
