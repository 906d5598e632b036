"""
Provider layer for AI-Connectify.

This package holds the registry, the factory and the HTTP plumbing shared by
the provider adapters (ChatGPT, Claude, Cohere, DALLE, Mistral, Stability and
TensorFlowNode). Adapters live in subpackages and are loaded by registry
discovery rather than imported here.
"""

from .base import BaseConnector, connector_method
from .factory import AIConnectify, ConnectorFactory, create_ai_instance
from .http_client import ErrorSink, HttpClient, HttpClientProtocol
from .registry import (
    ProviderDescriptor,
    ProviderRegistry,
    create_registry,
    get_default_registry,
    reset_default_registry,
)

__all__ = [
    # Base classes
    "BaseConnector",
    "connector_method",
    # HTTP
    "ErrorSink",
    "HttpClient",
    "HttpClientProtocol",
    # Registry
    "ProviderDescriptor",
    "ProviderRegistry",
    "create_registry",
    "get_default_registry",
    "reset_default_registry",
    # Factory
    "AIConnectify",
    "ConnectorFactory",
    "create_ai_instance",
]
