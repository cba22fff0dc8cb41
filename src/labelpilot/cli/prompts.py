"""Interactive prompts (questionary)."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import questionary


async def confirm_prompt(message: str, *, default: bool = False) -> bool:
    answer = await questionary.confirm(message, default=default).ask_async()
    if answer is None:
        raise KeyboardInterrupt
    return bool(answer)


async def select_prompt(message: str, choices: Sequence[tuple[str, str]]) -> str:
    """Ask for one of *choices*, given as ``(title, value)`` pairs; return the value."""
    answer = await questionary.select(
        message,
        choices=[questionary.Choice(title, value=value) for title, value in choices],
    ).ask_async()
    if answer is None:
        raise KeyboardInterrupt
    return str(answer)


async def text_prompt(message: str, *, validate: Callable[[str], bool | str] | None = None) -> str:
    answer = await questionary.text(message, validate=validate).ask_async()
    if answer is None:
        raise KeyboardInterrupt
    return str(answer).strip()


def require_text(error: str) -> Callable[[str], bool | str]:
    def _validate(value: str) -> bool | str:
        return len(value.strip()) > 0 or error

    return _validate
