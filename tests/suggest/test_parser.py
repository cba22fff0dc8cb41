"""Tests for suggestion response parsing."""

from __future__ import annotations

import pytest

from labelpilot.core.contracts.exceptions import SuggestionError
from labelpilot.core.contracts.label import Label
from labelpilot.core.suggest.parser import parse_labels_response


def test_parses_plain_array() -> None:
    text = '[{"name": "perf", "color": "ABCDEF", "description": "[Type] Performance [issues]"}]'

    expected = [Label(name="perf", color="abcdef", description="[Type] Performance [issues]")]
    assert parse_labels_response(text) == expected


def test_strips_markdown_fences_and_hash() -> None:
    text = '```json\n[{"name": "perf", "color": "#123456", "description": "d"}]\n```'

    assert parse_labels_response(text)[0].color == "123456"


def test_extracts_array_from_surrounding_prose() -> None:
    text = 'Here you go:\n[{"name": "a", "color": "111111", "description": "x"}]\nEnjoy!'

    assert [label.name for label in parse_labels_response(text)] == ["a"]


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("no array here", "No JSON array"),
        ("[not json]", "not valid JSON"),
        ('[{"name": "a", "color": "111111"}]', "missing required fields"),
        ('[{"name": "a", "color": "xyz", "description": "d"}]', "invalid color"),
        ('["just a string"]', "missing required fields"),
    ],
)
def test_rejects_malformed_replies(text: str, message: str) -> None:
    with pytest.raises(SuggestionError, match=message):
        parse_labels_response(text)
