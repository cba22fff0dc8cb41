"""Core auth exports."""

from labelpilot.core.auth.base import TokenResolver
from labelpilot.core.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
