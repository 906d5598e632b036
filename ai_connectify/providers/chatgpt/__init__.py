"""OpenAI ChatGPT provider."""

from .client import ChatGPTConnector, OpenAIConnector


def register(registry) -> None:
    registry.register(ChatGPTConnector.name, ChatGPTConnector, ChatGPTConnector.requires_api_key)


__all__ = ["ChatGPTConnector", "OpenAIConnector", "register"]
