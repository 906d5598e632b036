"""
Connector Factory.

Turns (provider name, optional API key) into a ready-to-use connector instance.
Key checks are purely syntactic; no network call is made here.
"""

import logging
from typing import Any, Optional

from ..core.exceptions import ConfigurationError, MissingApiKeyError, ValidationError
from ..core.validation import validate_key_string
from .registry import ProviderRegistry, get_default_registry

logger = logging.getLogger(__name__)


class ConnectorFactory:
    """
    Factory for creating connector instances from a registry.

    Usage:
        factory = ConnectorFactory(create_registry())
        cohere = factory.create_instance("Cohere", api_key="...")
        connector = await cohere.get_connector("connector-id")
    """

    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    def create_instance(self, provider_name: str, api_key: Optional[str] = None) -> Any:
        """
        Create a connector instance.

        Args:
            provider_name: Registered provider name (e.g., 'ChatGPT', 'TensorFlowNode')
            api_key: API key, required only by providers registered with requires_api_key

        Returns:
            The constructed connector

        Raises:
            ConfigurationError: If no provider name is given
            ProviderNotRegisteredError: If the provider is unknown
            MissingApiKeyError: If a required key is missing or malformed
        """
        if not isinstance(provider_name, str) or not provider_name.strip():
            raise ConfigurationError("You must specify an AI to use")

        descriptor = self.registry.get(provider_name)

        if not descriptor.requires_api_key:
            logger.info(f"Creating connector: {provider_name}")
            return descriptor.connector_class()

        message = f"A valid API key must be provided for {provider_name}"
        try:
            validate_key_string(api_key, message)
        except ValidationError as e:
            raise MissingApiKeyError(message) from e

        logger.info(f"Creating connector: {provider_name}")
        return descriptor.connector_class(api_key)


def create_ai_instance(
    provider_name: str,
    api_key: Optional[str] = None,
    *,
    registry: ProviderRegistry | None = None,
) -> Any:
    """
    Convenience function to create a connector.

    Args:
        provider_name: Registered provider name
        api_key: Optional API key
        registry: Registry to use; defaults to the shared default registry
    """
    if registry is None:
        registry = get_default_registry()
    return ConnectorFactory(registry).create_instance(provider_name, api_key)


class AIConnectify:
    """
    Entry point holding one connector.

    Usage:
        ai = AIConnectify("Cohere", "your-api-key")
        models = await ai.connector.get_models()
    """

    def __init__(
        self,
        ai: str,
        api_key: Optional[str] = None,
        *,
        registry: ProviderRegistry | None = None,
    ):
        self.connector = create_ai_instance(ai, api_key, registry=registry)
