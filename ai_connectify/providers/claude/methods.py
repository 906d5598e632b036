"""
Anthropic (Claude) Messages API endpoint functions.
"""

import json
from typing import Any

from ...core.validation import validate_array_input, validate_number_input, validate_string_input
from ..http_client import ErrorSink, HttpClientProtocol

# Message Batches are gated behind this beta header
BATCHES_BETA_HEADERS = {"anthropic-beta": "message-batches-2024-09-24"}


async def create_message(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    messages: list,
    model_id: str = "claude-3-5-sonnet-20240620",
    max_tokens: int = 1024,
    config: dict | None = None,
) -> Any:
    """
    Send a structured list of input messages and get the model's reply.

    Args:
        messages: Alternating user/assistant turns
        model_id: Claude model (e.g. "claude-3-5-sonnet-20240620")
        max_tokens: Maximum number of tokens to generate
        config: Extra request fields (system, temperature, ...)

    Returns:
        The message body without its "usage" field
    """
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_number_input(max_tokens, "Cannot process the max tokens value")

    try:
        response = await http.post(
            "/messages",
            {**(config or {}), "messages": messages, "model": model_id, "max_tokens": max_tokens},
        )
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


async def create_message_batch(http: HttpClientProtocol, throw_error: ErrorSink, requests: list) -> Any:
    """Submit a batch of Messages requests for asynchronous processing."""
    validate_array_input(requests, "Cannot process the requests array")

    try:
        return await http.post("/messages/batches", {"requests": requests}, headers=BATCHES_BETA_HEADERS)
    except Exception as e:
        throw_error(e)


async def get_message_batch(http: HttpClientProtocol, throw_error: ErrorSink, batch_id: str) -> Any:
    validate_string_input(batch_id, "Cannot process the message batch ID")

    try:
        return await http.get(f"/messages/batches/{batch_id}", headers=BATCHES_BETA_HEADERS)
    except Exception as e:
        throw_error(e)


async def get_message_batch_list(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    """List message batches, most recent first; `config` holds paging parameters."""
    try:
        return await http.get("/messages/batches", params=config, headers=BATCHES_BETA_HEADERS)
    except Exception as e:
        throw_error(e)


async def get_message_batch_results(http: HttpClientProtocol, throw_error: ErrorSink, batch_id: str) -> Any:
    """
    Get the results of a finished batch.

    Results are served as JSON Lines; each line is decoded into one entry.
    A single-line body already arrives decoded.
    """
    validate_string_input(batch_id, "Cannot process the message batch ID")

    try:
        response = await http.get(f"/messages/batches/{batch_id}/results", headers=BATCHES_BETA_HEADERS)
        if isinstance(response, str):
            return [json.loads(line) for line in response.splitlines() if line.strip()]
        if isinstance(response, dict):
            return [response]
        return response or []
    except Exception as e:
        throw_error(e)


async def cancel_message_batch(http: HttpClientProtocol, throw_error: ErrorSink, batch_id: str) -> Any:
    validate_string_input(batch_id, "Cannot process the message batch ID")

    try:
        return await http.post(f"/messages/batches/{batch_id}/cancel", headers=BATCHES_BETA_HEADERS)
    except Exception as e:
        throw_error(e)
