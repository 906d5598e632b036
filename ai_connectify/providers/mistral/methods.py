"""
Mistral AI API endpoint functions.
"""

from typing import Any

from ...core.validation import validate_array_input, validate_string_input
from ..http_client import ErrorSink, HttpClientProtocol


# ============ Models ============


async def get_models(http: HttpClientProtocol, throw_error: ErrorSink) -> Any:
    try:
        response = await http.get("/models")
        return response["data"]
    except Exception as e:
        throw_error(e)


async def get_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.get(f"/models/{model_id}")
    except Exception as e:
        throw_error(e)


async def delete_fine_tuning_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    """Delete a fine-tuned model."""
    validate_string_input(model_id, "Cannot process the fine tunning model ID")

    try:
        return await http.delete(f"/models/{model_id}")
    except Exception as e:
        throw_error(e)


# ============ Completions ============


async def create_chat_completion(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    messages: list,
    model_id: str = "mistral-small-latest",
    config: dict | None = None,
) -> Any:
    """Chat completion; returns the body without "usage"."""
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/chat/completions",
            {**(config or {}), "messages": messages, "model": model_id},
        )
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


async def fim_completion(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    model_id: str = "codestral-2405",
    config: dict | None = None,
) -> Any:
    """
    Fill-in-the-middle completion for code models.

    Pass the text after the gap as `suffix` in config.
    """
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post("/fim/completions", {**(config or {}), "prompt": prompt, "model": model_id})
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


async def agents_completion(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    messages: list,
    agent_id: str,
    config: dict | None = None,
) -> Any:
    validate_array_input(messages, "Cannot process the message array")
    validate_string_input(agent_id, "Cannot process the agent ID")

    try:
        response = await http.post(
            "/agents/completions",
            {**(config or {}), "messages": messages, "agent_id": agent_id},
        )
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


async def embeddings(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    input: str | list,
    model_id: str = "mistral-embed",
    config: dict | None = None,
) -> Any:
    """Embed text; the vectors are under "data"."""
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post("/embeddings", {**(config or {}), "input": input, "model": model_id})
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


# ============ Fine-tuning jobs ============


async def create_fine_tuning_job(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    hyperparameters: dict,
    model_id: str,
    config: dict | None = None,
) -> Any:
    """
    Create a fine-tuning job.

    Args:
        hyperparameters: e.g. {"training_steps": 10, "learning_rate": 0.0001}
        model_id: Base model to fine-tune
        config: training_files, validation_files, auto_start, ...
    """
    validate_string_input(model_id, "Cannot process the fine model ID")

    try:
        return await http.post(
            "/fine_tuning/jobs",
            {**(config or {}), "hyperparameters": hyperparameters, "model": model_id},
        )
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_jobs(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    try:
        response = await http.get("/fine_tuning/jobs", params=config)
        return response["data"]
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_job(http: HttpClientProtocol, throw_error: ErrorSink, job_id: str) -> Any:
    validate_string_input(job_id, "Cannot process the fine tunning job ID")

    try:
        return await http.get(f"/fine_tuning/jobs/{job_id}")
    except Exception as e:
        throw_error(e)


async def start_fine_tuning_job(http: HttpClientProtocol, throw_error: ErrorSink, job_id: str) -> Any:
    """Start a job created with auto_start disabled."""
    validate_string_input(job_id, "Cannot process the fine tunning job ID")

    try:
        return await http.post(f"/fine_tuning/jobs/{job_id}/start")
    except Exception as e:
        throw_error(e)


async def cancel_fine_tuning_job(http: HttpClientProtocol, throw_error: ErrorSink, job_id: str) -> Any:
    validate_string_input(job_id, "Cannot process the fine tunning job ID")

    try:
        return await http.post(f"/fine_tuning/jobs/{job_id}/cancel")
    except Exception as e:
        throw_error(e)


# ============ Fine-tuned models ============


async def update_fine_tuning_model(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    model_id: str,
    config: dict | None = None,
) -> Any:
    """Update the name or description of a fine-tuned model."""
    validate_string_input(model_id, "Cannot process the fine tunning model ID")

    try:
        return await http.patch(f"/fine_tuning/models/{model_id}", config or {})
    except Exception as e:
        throw_error(e)


async def archive_fine_tuning_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    validate_string_input(model_id, "Cannot process the fine tunning model ID")

    try:
        return await http.post(f"/fine_tuning/models/{model_id}/archive")
    except Exception as e:
        throw_error(e)


async def unarchive_fine_tuning_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    validate_string_input(model_id, "Cannot process the fine tunning model ID")

    try:
        return await http.delete(f"/fine_tuning/models/{model_id}/archive")
    except Exception as e:
        throw_error(e)
