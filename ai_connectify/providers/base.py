"""
Base class and helpers shared by all provider connectors.

A connector owns one HttpClient (base URL + default headers) and one error sink
(throw_error). Endpoint logic lives in plain async functions in each provider's
methods module; connector_method binds them to a connector instance so that

    await connector.get_connector("connector-id")

calls

    await methods.get_connector(connector.http, connector.throw_error, "connector-id")
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, NoReturn

import httpx

from ..core.config import Settings, get_settings
from ..core.exceptions import ProviderRequestError
from .http_client import HttpClient

logger = logging.getLogger(__name__)


class connector_method:
    """
    Descriptor exposing a method-module function as a connector coroutine method.

    The wrapped function must accept (http, throw_error, *args, **kwargs).
    """

    def __init__(self, func: Callable[..., Awaitable[Any]]):
        self.func = func
        functools.update_wrapper(self, func)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self

        func = self.func

        @functools.wraps(func)
        async def bound(*args: Any, **kwargs: Any) -> Any:
            return await func(instance.http, instance.throw_error, *args, **kwargs)

        return bound


class BaseConnector:
    """
    Base class for HTTP-backed provider connectors.

    Subclasses set `name` and `requires_api_key`, implement `_get_base_url`, and
    override `_get_default_headers` for provider-specific authentication.
    """

    name: ClassVar[str] = "Provider"
    requires_api_key: ClassVar[bool] = True

    def __init__(
        self,
        api_key: str | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.settings = settings or get_settings()
        self._transport = transport
        self._extra_headers: dict[str, str] = {}
        self.http = self._create_http_client()

    def _get_base_url(self) -> str:
        raise NotImplementedError("Subclass must implement _get_base_url")

    def _get_client_timeout(self) -> float:
        """Get timeout for the HTTP client. Override for longer timeouts."""
        return self.settings.request_timeout

    def _get_default_headers(self) -> dict[str, str]:
        """
        Get default headers for requests. Override in subclasses for custom auth.

        Default implementation uses Bearer token authentication.
        """
        return {"Authorization": f"Bearer {self.api_key}"}

    def _create_http_client(self) -> HttpClient:
        return HttpClient(
            self._get_base_url(),
            {**self._get_default_headers(), **self._extra_headers},
            timeout=self._get_client_timeout(),
            transport=self._transport,
        )

    def _set_header(self, header: str, value: str) -> None:
        """Add a default header; the existing HTTP client and its pool are kept."""
        self._extra_headers[header] = value
        self.http.set_header(header, value)

    def throw_error(self, error: Any) -> NoReturn:
        """
        Normalize a failure and raise it.

        Validation errors pass through unchanged; everything else becomes a
        ProviderRequestError chained to the original exception.
        """
        normalized = ProviderRequestError.from_error(error, provider=self.name)
        if normalized is not error:
            logger.warning(f"[{self.name}] request failed: {normalized.message}")
        if isinstance(error, BaseException) and normalized is not error:
            raise normalized from error
        raise normalized

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self.http.aclose()

    async def __aenter__(self) -> "BaseConnector":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"

