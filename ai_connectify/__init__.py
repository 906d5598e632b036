"""
AI-Connectify: one calling convention over several generative-AI HTTP APIs.

Usage:
    from ai_connectify import AIConnectify

    ai = AIConnectify("Cohere", "your-api-key")
    connector = await ai.connector.get_connector("connector-id")
"""

from .core import (
    AIConnectifyError,
    ConfigurationError,
    MissingApiKeyError,
    ProviderNotRegisteredError,
    ProviderRequestError,
    Settings,
    ValidationError,
    get_settings,
    setup_logging,
)
from .providers import (
    AIConnectify,
    ConnectorFactory,
    ProviderRegistry,
    create_ai_instance,
    create_registry,
    get_default_registry,
    reset_default_registry,
)

__version__ = "1.0.0"

__all__ = [
    "AIConnectify",
    "ConnectorFactory",
    "ProviderRegistry",
    "create_ai_instance",
    "create_registry",
    "get_default_registry",
    "reset_default_registry",
    "Settings",
    "get_settings",
    "setup_logging",
    "AIConnectifyError",
    "ConfigurationError",
    "MissingApiKeyError",
    "ProviderNotRegisteredError",
    "ProviderRequestError",
    "ValidationError",
]
