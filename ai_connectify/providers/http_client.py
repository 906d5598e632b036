"""
HTTP client used by every connector.

Method modules only depend on the HttpClientProtocol capability (get, post,
patch, delete) and on an ErrorSink callable, so tests can pass any double.
HttpClient is the concrete implementation over httpx.
"""

import logging
from collections.abc import Callable
from typing import Any, NoReturn, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

# Receives any failure and raises the normalized error.
ErrorSink = Callable[[Any], NoReturn]


@runtime_checkable
class HttpClientProtocol(Protocol):
    """Capability required by method modules."""

    async def get(self, endpoint: str, params: dict | None = None, **kwargs: Any) -> Any: ...

    async def post(self, endpoint: str, body: Any = None, **kwargs: Any) -> Any: ...

    async def patch(self, endpoint: str, body: Any = None, **kwargs: Any) -> Any: ...

    async def delete(self, endpoint: str, **kwargs: Any) -> Any: ...


class HttpClient:
    """
    Thin async HTTP client bound to one provider base URL.

    - Non-raw calls raise httpx.HTTPStatusError on non-2xx responses and
      return the decoded body.
    - raw=True returns the httpx.Response untouched, whatever its status.
    - Transport errors propagate as raised by httpx.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def set_header(self, name: str, value: str) -> None:
        """Set a default header, on the live httpx client too when one exists."""
        self.headers[name] = value
        if self._client is not None:
            self._client.headers[name] = value

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a successful response: JSON when possible, text otherwise."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def _request(self, method: str, endpoint: str, raw: bool = False, **kwargs: Any) -> Any:
        logger.debug(f"{method} {self.base_url}{endpoint}")
        response = await self._get_client().request(method, endpoint, **kwargs)
        if raw:
            return response
        response.raise_for_status()
        return self._decode(response)

    async def get(
        self,
        endpoint: str,
        params: dict | None = None,
        *,
        headers: dict[str, str] | None = None,
        raw: bool = False,
    ) -> Any:
        """Send a GET request with optional query parameters."""
        return await self._request("GET", endpoint, raw=raw, params=params or None, headers=headers)

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        *,
        data: dict | None = None,
        files: dict | None = None,
        headers: dict[str, str] | None = None,
        raw: bool = False,
    ) -> Any:
        """
        Send a POST request.

        Args:
            endpoint: Path relative to the base URL
            body: JSON body
            data: Form fields (multipart when combined with files)
            files: Files for a multipart upload
            headers: Extra headers for this request only
            raw: Return the httpx.Response instead of the decoded body
        """
        kwargs: dict[str, Any] = {"headers": headers}
        if data is not None or files is not None:
            kwargs["data"] = data
            kwargs["files"] = files
        elif body is not None:
            kwargs["json"] = body
        return await self._request("POST", endpoint, raw=raw, **kwargs)

    async def patch(
        self,
        endpoint: str,
        body: Any = None,
        *,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a PATCH request with a JSON body."""
        kwargs: dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        return await self._request("PATCH", endpoint, **kwargs)

    async def delete(
        self,
        endpoint: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a DELETE request."""
        return await self._request("DELETE", endpoint, headers=headers)
