"""AI-assisted label suggestion."""

from labelpilot.core.suggest.base import LabelSuggester, SuggestionRequest
from labelpilot.core.suggest.github_models import GitHubModelsSuggester
from labelpilot.core.suggest.parser import parse_labels_response
from labelpilot.core.suggest.prompts import build_system_prompt, build_user_prompt, category_title

__all__ = [
    "GitHubModelsSuggester",
    "LabelSuggester",
    "SuggestionRequest",
    "build_system_prompt",
    "build_user_prompt",
    "category_title",
    "parse_labels_response",
]
