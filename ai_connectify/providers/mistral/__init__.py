"""Mistral AI provider."""

from .client import MistralConnector


def register(registry) -> None:
    registry.register(MistralConnector.name, MistralConnector, MistralConnector.requires_api_key)


__all__ = ["MistralConnector", "register"]
