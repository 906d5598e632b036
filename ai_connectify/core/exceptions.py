"""
Exception classes for AI-Connectify.

Every failure a caller can observe is an AIConnectifyError:
- error_code: Machine-readable error code
- message: Human-readable error message
- status_code: Upstream HTTP status, when the failure came from a provider
- provider: Name of the connector that raised it, when known

Transport and provider failures are normalized with AIConnectifyError.from_error,
which keeps the original exception reachable through __cause__.
"""

from typing import Any

import httpx


def extract_error_message(response: httpx.Response) -> str:
    """
    Extract an error message from an upstream response body.

    Looks for, in order: {"error": {"message": "..."}}, {"error": "..."},
    {"message": "..."} and {"errors": [...]}.
    """
    try:
        data = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"

    if not isinstance(data, dict):
        return f"HTTP {response.status_code}"
    if isinstance(data.get("error"), dict) and data["error"].get("message"):
        return str(data["error"]["message"])
    if isinstance(data.get("error"), str):
        return data["error"]
    if data.get("message"):
        return str(data["message"])
    errors = data.get("errors")
    if isinstance(errors, list) and errors:
        return ", ".join(str(e) for e in errors)
    if isinstance(errors, str):
        return errors
    return f"HTTP {response.status_code}"


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class AIConnectifyError(Exception):
    """Base exception for all AI-Connectify errors."""

    error_code: str = "ai_connectify_error"
    message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        provider: str | None = None,
    ):
        self.message = self.message if message is None else message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        self.status_code = status_code
        self.provider = provider
        super().__init__(self.message)

    @classmethod
    def from_error(cls, error: Any, provider: str | None = None) -> "AIConnectifyError":
        """
        Normalize any failure into a single AIConnectifyError.

        Args:
            error: A message string, an httpx exception, or any other exception
            provider: Connector name to attach to the result

        Returns:
            The error to raise. Existing AIConnectifyError instances are returned as-is.
        """
        if isinstance(error, AIConnectifyError):
            return error

        if isinstance(error, str):
            return cls(error, provider=provider)

        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            return cls(
                extract_error_message(response),
                status_code=response.status_code,
                details={"body": _response_body(response)},
                provider=provider,
            )

        if isinstance(error, httpx.Response):
            return cls(
                extract_error_message(error),
                status_code=error.status_code,
                details={"body": _response_body(error)},
                provider=provider,
            )

        return cls(str(error) or type(error).__name__, provider=provider)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging or serialization."""
        result: dict[str, Any] = {
            "code": self.error_code,
            "message": self.message,
        }
        if self.provider:
            result["provider"] = self.provider
        if self.status_code is not None:
            result["status_code"] = self.status_code
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(AIConnectifyError):
    """Raised when a caller supplies a missing or malformed argument."""

    error_code = "validation_error"
    message = "Invalid input"


class ConfigurationError(AIConnectifyError):
    """Raised when the library or a provider is misconfigured."""

    error_code = "configuration_error"
    message = "Invalid configuration"


class ProviderNotRegisteredError(ConfigurationError):
    """Raised when an unknown provider name is requested."""

    error_code = "provider_not_registered"
    message = "AI service is not registered"


class MissingApiKeyError(ConfigurationError):
    """Raised when a provider requires an API key and none (or a malformed one) was given."""

    error_code = "missing_api_key"
    message = "A valid API key must be provided"


class ProviderRequestError(AIConnectifyError):
    """Raised when an upstream request fails (provider-reported or transport)."""

    error_code = "provider_request_error"
    message = "Provider request failed"
