"""Stability AI provider."""

from .client import StabilityConnector


def register(registry) -> None:
    registry.register(StabilityConnector.name, StabilityConnector, StabilityConnector.requires_api_key)


__all__ = ["StabilityConnector", "register"]
