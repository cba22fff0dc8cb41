"""Parse model replies into labels."""

from __future__ import annotations

import json
import re

from labelpilot.core.contracts.exceptions import SuggestionError
from labelpilot.core.contracts.label import Label

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")
_ARRAY = re.compile(r"\[.*\]", re.DOTALL)
_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")


def parse_labels_response(text: str) -> list[Label]:
    """Extract the label array from a model reply.

    Markdown fences and surrounding prose are tolerated. Colors may carry a
    leading ``#`` and are returned lower-cased.

    Raises:
        SuggestionError: If no well-formed label array can be found.
    """
    cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text.strip())).strip()
    match = _ARRAY.search(cleaned)
    if match is None:
        raise SuggestionError("No JSON array found in response")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise SuggestionError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(parsed, list):
        raise SuggestionError("Response is not a JSON array")

    labels: list[Label] = []
    for index, item in enumerate(parsed):
        if not isinstance(item, dict) or not all(
            isinstance(item.get(key), str) for key in ("name", "color", "description")
        ):
            raise SuggestionError(f"Label at index {index} is missing required fields (name, color, description)")

        color = item["color"].removeprefix("#")
        if not _HEX_COLOR.fullmatch(color):
            raise SuggestionError(f'Label "{item["name"]}" has invalid color "{item["color"]}": must be 6-char hex')
        if not item["name"].strip():
            raise SuggestionError(f"Label at index {index} has an empty name")

        labels.append(Label(name=item["name"], color=color.lower(), description=item["description"]))
    return labels
