"""OpenAI DALL-E provider."""

from .client import DALLEConnector


def register(registry) -> None:
    registry.register(DALLEConnector.name, DALLEConnector, DALLEConnector.requires_api_key)


__all__ = ["DALLEConnector", "register"]
