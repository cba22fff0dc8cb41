"""Label suggestion contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from labelpilot.core.contracts.label import Label


class SuggestionRequest(BaseModel):
    """One round of the suggestion loop."""

    category: str
    description: str
    count: int = Field(default=3, ge=1)
    refinement: str | None = None
    attempt: int = Field(default=1, ge=1)
    existing: tuple[Label, ...] = ()

    model_config = {"frozen": True}


class LabelSuggester(ABC):
    """Produces candidate labels for a category from a free-text description."""

    @abstractmethod
    async def suggest(self, request: SuggestionRequest) -> list[Label]:
        """Return suggested labels.

        Raises:
            SuggestionError: If the backend fails or its reply cannot be parsed.
        """
