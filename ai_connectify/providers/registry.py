"""
Provider Registry for managing and discovering AI connectors.

This module provides the name -> descriptor table used by the factory. Each
provider package exposes a `register(registry)` function; discovery imports
those packages from an explicit list and calls it once per provider.
"""

import importlib
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.config import get_settings
from ..core.exceptions import ConfigurationError, ProviderNotRegisteredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderDescriptor:
    """Registry entry for a provider."""

    name: str
    connector_class: type
    requires_api_key: bool


class ProviderRegistry:
    """
    Central registry for all AI connectors.

    Supports:
    - Explicit provider registration (last write wins)
    - Best-effort discovery from provider module paths
    - Exact, case-sensitive lookup
    """

    def __init__(self):
        self._providers: dict[str, ProviderDescriptor] = {}
        self.failures: dict[str, str] = {}

    def register(self, name: str, connector_class: type, requires_api_key: bool) -> None:
        """
        Register a connector class.

        Args:
            name: Unique, case-sensitive identifier (e.g., 'ChatGPT', 'Cohere')
            connector_class: Class (or any callable) that builds the connector
            requires_api_key: Whether the factory must validate a key before construction

        Raises:
            ConfigurationError: If the name is empty or the class is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Provider name must be a non-empty string")
        if not callable(connector_class):
            raise ConfigurationError(f"Connector for {name} must be callable")

        if name in self._providers:
            logger.debug(f"Overriding registered provider: {name}")
        self._providers[name] = ProviderDescriptor(
            name=name,
            connector_class=connector_class,
            requires_api_key=bool(requires_api_key),
        )
        logger.debug(f"Registered provider: {name} (requires_api_key={bool(requires_api_key)})")

    def get(self, name: str) -> ProviderDescriptor:
        """
        Get the descriptor registered under `name`.

        Raises:
            ProviderNotRegisteredError: If no provider has that exact name
        """
        descriptor = self._providers.get(name) if isinstance(name, str) else None
        if descriptor is None:
            raise ProviderNotRegisteredError(f"AI service {name} is not registered")
        return descriptor

    def get_ai(self, name: str) -> ProviderDescriptor:
        """Alias of get(), kept as the public lookup entry point."""
        return self.get(name)

    def discover(self, module_paths: Iterable[str]) -> None:
        """
        Import provider modules and let each one register itself.

        A failing provider is logged and recorded in `failures`; the remaining
        providers are still registered.
        """
        for module_path in module_paths:
            try:
                module = importlib.import_module(module_path)
                register = getattr(module, "register", None)
                if not callable(register):
                    raise ConfigurationError(f"{module_path} does not expose register(registry)")
                register(self)
            except Exception as e:
                self.failures[module_path] = str(e)
                logger.error(f"Failed to load AI module {module_path}: {e}")

    def names(self) -> list[str]:
        """Get names of all registered providers."""
        return list(self._providers.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a provider is registered."""
        return name in self._providers

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def clear(self) -> None:
        """Clear all registered providers (mainly for testing)."""
        self._providers.clear()
        self.failures.clear()


def create_registry(module_paths: Iterable[str] | None = None) -> ProviderRegistry:
    """
    Build a new registry and run discovery.

    Args:
        module_paths: Provider modules to load; defaults to the configured list
    """
    registry = ProviderRegistry()
    registry.discover(module_paths if module_paths is not None else get_settings().providers)
    logger.info(f"Provider registry ready: {', '.join(registry.names()) or 'no providers'}")
    return registry


# Shared default instance used by the convenience entry points
_registry: ProviderRegistry | None = None


def get_default_registry() -> ProviderRegistry:
    """
    Get the lazily built default registry.

    Prefer passing an explicit registry; this exists for the one-line entry points.
    """
    global _registry
    if _registry is None:
        _registry = create_registry()
    return _registry


def reset_default_registry() -> None:
    """Reset the default registry (mainly for testing)."""
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None
