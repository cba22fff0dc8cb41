"""Prompt construction for label suggestions."""

from __future__ import annotations

from labelpilot.core.suggest.base import SuggestionRequest

CATEGORY_TITLES: dict[str, str] = {
    "type": "Type",
    "status": "Status",
    "community": "Community",
    "resolution": "Resolution",
    "area": "Area",
}


def category_title(category: str) -> str:
    return CATEGORY_TITLES.get(category, category)


def build_system_prompt(request: SuggestionRequest) -> str:
    title = category_title(request.category)
    existing = "\n".join(
        f'  - "{label.name}" ({label.color}): {label.description}' for label in request.existing
    )

    lines = [
        f"You are a GitHub label generator. The user will describe the kind of label they need. "
        f'Generate exactly {request.count} label suggestions for the "{title}" category that DIRECTLY '
        "match what the user is asking for.",
        "",
        "CRITICAL: Every suggestion MUST be relevant to the user's description. Do NOT generate generic "
        "or unrelated labels. Focus on what the user specifically asked for.",
    ]
    if request.attempt > 1:
        lines += [
            "",
            f"IMPORTANT: This is attempt #{request.attempt}. You MUST generate completely different label "
            "names, colors, and descriptions than any previous suggestions. Be creative and explore new angles.",
        ]
    lines += [
        "",
        "Each label must follow this exact JSON format:",
        "[",
        f'  {{ "name": "label-name", "color": "hex123", "description": "[{title}] Description text [scope]" }}',
        "]",
        "",
        "Rules:",
        "- name: lowercase, concise (1-3 words), use spaces for multi-word names, must reflect the user's request",
        "- color: 6-character hex without #, choose colors that are visually distinct from existing labels",
        f"- description: MUST start with [{title}] and end with [issues], [PRs], or [issues, PRs]",
        "- Do NOT duplicate any of these existing labels:",
        existing,
        "",
        "Return ONLY the JSON array, no markdown fences, no explanation, no extra text.",
    ]
    return "\n".join(lines)


def build_user_prompt(request: SuggestionRequest) -> str:
    prompt = f"I need a label for: {request.description}"
    if request.refinement:
        prompt += f"\n\nRefinement feedback: {request.refinement}"
    if request.attempt > 1:
        prompt += (
            f"\n\nGenerate different suggestions from previous attempts. This is attempt #{request.attempt}, "
            "so provide fresh and unique alternatives."
        )
    return prompt
