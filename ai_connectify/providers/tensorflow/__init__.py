"""Local TensorFlow provider (no API key)."""

from .client import TensorFlowConnector


def register(registry) -> None:
    registry.register(TensorFlowConnector.name, TensorFlowConnector, TensorFlowConnector.requires_api_key)


__all__ = ["TensorFlowConnector", "register"]
