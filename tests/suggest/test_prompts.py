"""Tests for suggestion prompts."""

from __future__ import annotations

from labelpilot.core.contracts.label import Label
from labelpilot.core.suggest.base import SuggestionRequest
from labelpilot.core.suggest.prompts import build_system_prompt, build_user_prompt, category_title


def test_category_title_falls_back_to_raw_name() -> None:
    assert category_title("type") == "Type"
    assert category_title("team") == "team"


def test_system_prompt_lists_existing_labels_and_rules() -> None:
    request = SuggestionRequest(
        category="type",
        description="performance problems",
        existing=(Label(name="bug", color="d73a4a", description="[Type] Broken [issues]"),),
    )

    prompt = build_system_prompt(request)

    assert 'Generate exactly 3 label suggestions for the "Type" category' in prompt
    assert '"bug" (d73a4a): [Type] Broken [issues]' in prompt
    assert "MUST start with [Type]" in prompt
    assert "attempt #" not in prompt


def test_later_attempts_ask_for_variation() -> None:
    request = SuggestionRequest(category="type", description="perf", attempt=2)

    assert "This is attempt #2" in build_system_prompt(request)
    assert "This is attempt #2" in build_user_prompt(request)


def test_user_prompt_includes_refinement() -> None:
    request = SuggestionRequest(category="type", description="perf", refinement="shorter names")

    prompt = build_user_prompt(request)

    assert prompt.startswith("I need a label for: perf")
    assert "Refinement feedback: shorter names" in prompt
