"""
Claude connector.
"""

from ...core.validation import validate_string_input
from ..base import BaseConnector, connector_method
from . import methods


class ClaudeConnector(BaseConnector):
    """Connector for the Anthropic Messages and Message Batches API."""

    name = "Claude"
    requires_api_key = True

    def __init__(self, api_key: str | None = None, **kwargs):
        self.anthropic_version = None
        super().__init__(api_key, **kwargs)

    def _get_base_url(self) -> str:
        return self.settings.anthropic_base_url

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key or "",
            "anthropic-version": self.anthropic_version or self.settings.anthropic_version,
        }

    def set_anthropic_version(self, version: str) -> None:
        """Change the anthropic-version header sent with every request."""
        validate_string_input(version, "The version is required to set the new anthropic-version request header")
        self.anthropic_version = version
        self._set_header("anthropic-version", version)

    create_message = connector_method(methods.create_message)
    create_message_batch = connector_method(methods.create_message_batch)
    get_message_batch = connector_method(methods.get_message_batch)
    get_message_batch_list = connector_method(methods.get_message_batch_list)
    get_message_batch_results = connector_method(methods.get_message_batch_results)
    cancel_message_batch = connector_method(methods.cancel_message_batch)
