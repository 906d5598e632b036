"""
Core modules for AI-Connectify.

This package contains the leaf utilities used across the library:
- config: Library settings and configuration
- exceptions: The shared error hierarchy
- validation: Input validation helpers
- logging_setup: Library logger configuration
"""

from .config import Settings, get_settings
from .exceptions import (
    AIConnectifyError,
    ConfigurationError,
    MissingApiKeyError,
    ProviderNotRegisteredError,
    ProviderRequestError,
    ValidationError,
)
from .logging_setup import setup_logging

__all__ = [
    # Config
    "get_settings",
    "Settings",
    "setup_logging",
    # Exceptions
    "AIConnectifyError",
    "ConfigurationError",
    "MissingApiKeyError",
    "ProviderNotRegisteredError",
    "ProviderRequestError",
    "ValidationError",
]
