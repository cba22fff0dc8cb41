"""Tests for filter criteria parsing."""

from __future__ import annotations

import pytest

from labelpilot.core.contracts.filter import FilterCriteria, split_tokens


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("bug", ("bug",)),
        (" Bug , WIP ,", ("bug", "wip")),
        ("bug,BUG,bug", ("bug",)),
        (",,", ()),
    ],
)
def test_split_tokens(raw: str | None, expected: tuple[str, ...] | None) -> None:
    assert split_tokens(raw) == expected


def test_from_strings_maps_every_axis() -> None:
    criteria = FilterCriteria.from_strings(label="a", category="b", exclude="c", exclude_category="d")

    assert criteria.include_labels == ("a",)
    assert criteria.include_categories == ("b",)
    assert criteria.exclude_labels == ("c",)
    assert criteria.exclude_categories == ("d",)
    assert criteria.has_inclusion and criteria.has_exclusion


def test_empty_criteria() -> None:
    assert FilterCriteria().is_empty
    assert FilterCriteria.from_strings(label="").is_empty


def test_given_but_empty_axis_is_not_empty() -> None:
    criteria = FilterCriteria.from_strings(label=",")

    assert criteria.include_labels == ()
    assert not criteria.is_empty


def test_direct_construction_normalizes_tokens() -> None:
    criteria = FilterCriteria(include_categories=("TYPE", " type ", "Status"))

    assert criteria.include_categories == ("type", "status")
