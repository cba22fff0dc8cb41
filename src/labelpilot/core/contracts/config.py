"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

DEFAULT_CUSTOM_PATH = Path("labels-custom.json")
DEFAULT_SUGGESTION_MODEL = "openai/gpt-4.1-mini"


class LabelPilotConfig(BaseModel):
    provider: str = "github"
    target: str | None = None
    template_path: Path | None = None
    custom_path: Path = DEFAULT_CUSTOM_PATH
    include_custom: bool = False
    dry_run: bool = False
    auth: str = "gh-cli"
    token: str | None = None
    model: str = DEFAULT_SUGGESTION_MODEL

    model_config = {"frozen": True}

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: str | None) -> str | None:
        if value is None:
            return None
        candidate = value.strip()
        parts = candidate.split("/")
        if len(parts) not in {2, 3} or not all(parts):
            raise ValueError("target must use the format owner/repo or host/owner/repo")
        return candidate

    @model_validator(mode="after")
    def validate_auth_token(self) -> LabelPilotConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        return self
