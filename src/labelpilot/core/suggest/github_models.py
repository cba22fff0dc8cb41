"""GitHub Models chat-completions suggester."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from labelpilot.core.auth.base import TokenResolver
from labelpilot.core.contracts.config import DEFAULT_SUGGESTION_MODEL
from labelpilot.core.contracts.exceptions import SuggestionError
from labelpilot.core.contracts.label import Label
from labelpilot.core.suggest.base import LabelSuggester, SuggestionRequest
from labelpilot.core.suggest.parser import parse_labels_response
from labelpilot.core.suggest.prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)

MODELS_ENDPOINT = "https://models.github.ai/inference/chat/completions"
DEFAULT_TIMEOUT = 60.0


class GitHubModelsSuggester(LabelSuggester):
    """Ask a GitHub Models chat model for label suggestions.

    The endpoint speaks the OpenAI chat-completions protocol. A token is
    resolved lazily on the first request.
    """

    def __init__(
        self,
        *,
        token_resolver: TokenResolver,
        model: str = DEFAULT_SUGGESTION_MODEL,
        endpoint: str = MODELS_ENDPOINT,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._token_resolver = token_resolver
        self._model = model
        self._endpoint = endpoint
        self._transport = transport
        self._timeout = timeout
        self._token: str | None = None

    @property
    def model(self) -> str:
        return self._model

    async def suggest(self, request: SuggestionRequest) -> list[Label]:
        messages = [
            {"role": "system", "content": build_system_prompt(request)},
            {"role": "user", "content": build_user_prompt(request)},
        ]
        content = await self.chat(messages)
        return parse_labels_response(content)

    async def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        """Send a chat completion and return the first choice's content."""
        if self._token is None:
            self._token = await self._token_resolver.resolve()

        payload: dict[str, Any] = {"model": self._model, "messages": messages, **kwargs}
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }
        logger.debug("Requesting chat completion from %s with %d messages", self._model, len(messages))

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(self._endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise SuggestionError(f"Could not reach GitHub Models: {exc}") from exc

        if response.status_code in (401, 403):
            raise SuggestionError(
                f"GitHub Models rejected the token (HTTP {response.status_code}). "
                "Run `gh auth refresh` or provide a token with models access."
            )
        if response.is_error:
            raise SuggestionError(f"GitHub Models request failed (HTTP {response.status_code}): {response.text}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise SuggestionError("No response received from GitHub Models") from exc
        if not isinstance(content, str) or not content.strip():
            raise SuggestionError("No response received from GitHub Models")

        logger.debug("Generated %d characters", len(content))
        return content
