"""Anthropic Claude provider."""

from .client import ClaudeConnector


def register(registry) -> None:
    registry.register(ClaudeConnector.name, ClaudeConnector, ClaudeConnector.requires_api_key)


__all__ = ["ClaudeConnector", "register"]
