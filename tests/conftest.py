"""
Pytest configuration and fixtures.
"""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Keep a developer's .env / environment from leaking into tests
for _key in [k for k in os.environ if k.startswith("AI_CONNECTIFY_")]:
    del os.environ[_key]

from ai_connectify.core.config import get_settings  # noqa: E402
from ai_connectify.core.exceptions import ProviderRequestError  # noqa: E402
from ai_connectify.providers.registry import reset_default_registry  # noqa: E402

TEST_API_KEY = "TEST_API_KEY_WITH_16_CHARACTERS"


# ============ Global State ============


@pytest.fixture(autouse=True)
def reset_global_state():
    """Clear cached settings and the default registry around every test."""
    get_settings.cache_clear()
    reset_default_registry()
    yield
    get_settings.cache_clear()
    reset_default_registry()


# ============ Method Doubles ============


@pytest.fixture
def mock_http() -> AsyncMock:
    """HTTP client double; get/post/patch/delete are AsyncMocks."""
    return AsyncMock()


@pytest.fixture
def throw_error() -> MagicMock:
    """Error sink double that records calls without raising."""
    return MagicMock()


@pytest.fixture
def raising_sink():
    """Error sink that behaves like a connector's throw_error."""

    def sink(error: Any):
        normalized = ProviderRequestError.from_error(error, provider="Test")
        if isinstance(error, BaseException) and normalized is not error:
            raise normalized from error
        raise normalized

    return sink


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


# ============ HTTP Responses ============


def make_response(
    status_code: int = 200,
    json: Any = None,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
    url: str = "https://api.example.com/test",
) -> httpx.Response:
    """Build an httpx.Response bound to a request, as the transport returns it."""
    kwargs: dict[str, Any] = {"headers": headers}
    if json is not None:
        kwargs["json"] = json
    elif content is not None:
        kwargs["content"] = content
    return httpx.Response(status_code, request=httpx.Request("GET", url), **kwargs)


@pytest.fixture
def response_factory():
    """Expose make_response as a fixture."""
    return make_response


@pytest.fixture
def upload_file(tmp_path):
    """A small local file to upload."""
    path = tmp_path / "upload.png"
    path.write_bytes(b"\x89PNG fake image")
    return path


@pytest.fixture
def output_dir(tmp_path):
    """Existing destination folder for downloaded media."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture(params=["provider", "network"])
def request_failure(request):
    """A failure raised by the HTTP client: an HTTP error response or a transport error."""
    if request.param == "provider":
        response = make_response(400, json={"message": "invalid request"})
        return httpx.HTTPStatusError("400 Bad Request", request=response.request, response=response)
    return httpx.ConnectError("Network Error")
