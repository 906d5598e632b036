"""Cohere provider."""

from .client import CohereConnector


def register(registry) -> None:
    registry.register(CohereConnector.name, CohereConnector, CohereConnector.requires_api_key)


__all__ = ["CohereConnector", "register"]
