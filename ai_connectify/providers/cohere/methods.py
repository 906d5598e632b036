"""
Cohere API endpoint functions.

Each function takes the connector's HTTP client and error sink first, validates
its arguments, performs one request and returns one shaped value. Caller options
(`config`) are merged first so required fields always win.
"""

from typing import Any
from urllib.parse import urlencode

from ...core.validation import validate_array_input, validate_string_input
from ..http_client import ErrorSink, HttpClientProtocol
from ..media import form_fields, read_upload


# ============ API key ============


async def check_api_key(http: HttpClientProtocol, throw_error: ErrorSink) -> Any:
    """Check that the configured API key is valid."""
    try:
        return await http.post("/check-api-key")
    except Exception as e:
        throw_error(e)


# ============ Chat & text ============


async def chat(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    messages: list,
    model_id: str = "command-r-plus-08-2024",
    config: dict | None = None,
) -> Any:
    """
    Generate a chat response.

    Args:
        messages: Conversation so far, as a list of {"role", "content"} dicts
        model_id: Cohere model name (e.g. "command-r-plus")
        config: Extra request fields (temperature, max_tokens, ...)

    Returns:
        The response body without its "meta" field
    """
    validate_array_input(messages, "Cannot process the message")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/v2/chat",
            {**(config or {}), "messages": messages, "stream": False, "model": model_id},
        )
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def classify(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    inputs: list,
    examples: list | None = None,
    model_id: str = "embed-english-light-v2.0",
    config: dict | None = None,
) -> Any:
    """Classify each input, optionally guided by labelled examples."""
    validate_array_input(inputs, "Cannot process the inputs array")
    validate_string_input(model_id, "Cannot process the model ID")
    examples = examples if examples is not None else []
    if examples:
        validate_array_input(examples, "Cannot process the examples array")

    try:
        response = await http.post(
            "/v1/classify",
            {**(config or {}), "inputs": inputs, "examples": examples, "model": model_id},
        )
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def embed(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    input_type: str,
    embedding_types: list,
    model_id: str = "embed-english-v2.0",
    config: dict | None = None,
) -> Any:
    """Create embeddings; texts or images go in `config`."""
    validate_string_input(input_type, "Cannot process the input type")
    validate_array_input(embedding_types, "Cannot process the embedding types")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/v2/embed",
            {
                **(config or {}),
                "input_type": input_type,
                "embedding_types": embedding_types,
                "model": model_id,
            },
        )
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def rerank(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    query: str,
    documents: list,
    model_id: str = "rerank-english-v3.0",
    config: dict | None = None,
) -> Any:
    """Order documents by relevance to a query."""
    validate_string_input(query, "Cannot process the query")
    validate_array_input(documents, "Cannot process the documents array")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/v2/rerank",
            {**(config or {}), "query": query, "documents": documents, "model": model_id},
        )
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def tokenize(http: HttpClientProtocol, throw_error: ErrorSink, text: str, model_id: str = "command") -> Any:
    validate_string_input(text, "Cannot process the text")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post("/v1/tokenize", {"text": text, "model": model_id})
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def detokenize(http: HttpClientProtocol, throw_error: ErrorSink, tokens: list, model_id: str = "command") -> Any:
    validate_array_input(tokens, "Cannot process the tokens array")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post("/v1/detokenize", {"tokens": tokens, "model": model_id})
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


# ============ Models ============


async def get_models(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    """List available models; `config` becomes query parameters."""
    try:
        return await http.get("/v1/models", params=config)
    except Exception as e:
        throw_error(e)


async def get_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.get(f"/v1/models/{model_id}")
    except Exception as e:
        throw_error(e)


# ============ Connectors ============


async def create_connector(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    name: str,
    url: str,
    config: dict | None = None,
) -> Any:
    """Create a connector and return it."""
    validate_string_input(name, "Cannot process the name")
    validate_string_input(url, "Cannot process the url")

    try:
        response = await http.post("/v1/connectors", {**(config or {}), "name": name, "url": url})
        return response["connector"]
    except Exception as e:
        throw_error(e)


async def get_connectors(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    try:
        response = await http.get("/v1/connectors", params=config)
        return response["connectors"]
    except Exception as e:
        throw_error(e)


async def get_connector(http: HttpClientProtocol, throw_error: ErrorSink, connector_id: str) -> Any:
    """Retrieve a single connector by ID."""
    validate_string_input(connector_id, "Cannot process the connector ID")

    try:
        response = await http.get(f"/v1/connectors/{connector_id}")
        return response["connector"]
    except Exception as e:
        throw_error(e)


async def update_connector(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    connector_id: str,
    config: dict | None = None,
) -> Any:
    """Update connector fields; `config` is sent as the PATCH body."""
    validate_string_input(connector_id, "Cannot process the connector ID")

    try:
        response = await http.patch(f"/v1/connectors/{connector_id}", config or {})
        return response["connector"]
    except Exception as e:
        throw_error(e)


async def delete_connector(http: HttpClientProtocol, throw_error: ErrorSink, connector_id: str) -> Any:
    validate_string_input(connector_id, "Cannot process the connector ID")

    try:
        await http.delete(f"/v1/connectors/{connector_id}")
        return {"connector_id": connector_id, "status": "deleted"}
    except Exception as e:
        throw_error(e)


async def authorize_connector(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    connector_id: str,
    after_token_redirect: str | None = None,
) -> Any:
    """Start the OAuth flow for a connector; returns the redirect URL payload."""
    validate_string_input(connector_id, "Cannot process the connector ID")
    endpoint = f"/v1/connectors/{connector_id}/oauth/authorize"
    if after_token_redirect:
        validate_string_input(after_token_redirect, "Cannot process the after token redirect URL")
        endpoint = f"{endpoint}?{urlencode({'after_token_redirect': after_token_redirect})}"

    try:
        return await http.post(endpoint)
    except Exception as e:
        throw_error(e)


# ============ Datasets ============


async def create_dataset(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    name: str,
    file_path: str,
    dataset_type: str = "embed-input",
    config: dict | None = None,
) -> Any:
    """
    Upload a file as a new dataset.

    Args:
        name: Dataset name
        file_path: Local file to upload
        dataset_type: Cohere dataset type (e.g. "embed-input")
        config: Extra form fields

    Returns:
        {"dataset_id": ...}
    """
    validate_string_input(name, "Cannot process the name")
    validate_string_input(file_path, "Cannot process the file path")
    validate_string_input(dataset_type, "Cannot process the type")

    try:
        upload = await read_upload(file_path)
        response = await http.post(
            "/v1/datasets",
            data={**form_fields(config), "name": name, "type": dataset_type},
            files={"data": upload},
        )
        return {"dataset_id": response["id"]}
    except Exception as e:
        throw_error(e)


async def get_datasets(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    try:
        response = await http.get("/v1/datasets", params=config)
        return response["datasets"]
    except Exception as e:
        throw_error(e)


async def get_dataset(http: HttpClientProtocol, throw_error: ErrorSink, dataset_id: str) -> Any:
    validate_string_input(dataset_id, "Cannot process the dataset ID")

    try:
        response = await http.get(f"/v1/datasets/{dataset_id}")
        return response["dataset"]
    except Exception as e:
        throw_error(e)


async def get_dataset_usage(http: HttpClientProtocol, throw_error: ErrorSink) -> Any:
    """Get the organization's dataset storage usage."""
    try:
        return await http.get("/v1/datasets/usage")
    except Exception as e:
        throw_error(e)


async def delete_dataset(http: HttpClientProtocol, throw_error: ErrorSink, dataset_id: str) -> Any:
    validate_string_input(dataset_id, "Cannot process the dataset ID")

    try:
        await http.delete(f"/v1/datasets/{dataset_id}")
        return {"dataset_id": dataset_id, "status": "deleted"}
    except Exception as e:
        throw_error(e)


# ============ Embed jobs ============


async def create_embed_job(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    dataset_id: str,
    model_id: str = "embed-english-light-v3.0",
    input_type: str = "classification",
    config: dict | None = None,
) -> Any:
    """Launch an asynchronous embed job over a dataset; returns the job ID."""
    validate_string_input(dataset_id, "Cannot process the dataset ID")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(input_type, "Cannot process the input type")

    try:
        response = await http.post(
            "/v1/embed-jobs",
            {**(config or {}), "model": model_id, "dataset_id": dataset_id, "input_type": input_type},
        )
        return response["job_id"]
    except Exception as e:
        throw_error(e)


async def get_embed_jobs(http: HttpClientProtocol, throw_error: ErrorSink) -> Any:
    try:
        response = await http.get("/v1/embed-jobs")
        return response["embed_jobs"]
    except Exception as e:
        throw_error(e)


async def get_embed_job(http: HttpClientProtocol, throw_error: ErrorSink, embed_job_id: str) -> Any:
    validate_string_input(embed_job_id, "Cannot process the embed job ID")

    try:
        response = await http.get(f"/v1/embed-jobs/{embed_job_id}")
        if isinstance(response, dict):
            response.pop("meta", None)
        return response
    except Exception as e:
        throw_error(e)


async def cancel_embed_job(http: HttpClientProtocol, throw_error: ErrorSink, embed_job_id: str) -> Any:
    validate_string_input(embed_job_id, "Cannot process the embed job ID")

    try:
        await http.post(f"/v1/embed-jobs/{embed_job_id}/cancel")
        return {"embed_job_id": embed_job_id, "status": "canceled"}
    except Exception as e:
        throw_error(e)


# ============ Fine-tuning ============


async def create_fine_tuned_model(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    name: str,
    settings: dict,
    config: dict | None = None,
) -> Any:
    """Create a fine-tuned model from a dataset described in `settings`."""
    validate_string_input(name, "Cannot process the fine-tuned model name")

    try:
        response = await http.post(
            "/v1/finetuning/finetuned-models",
            {**(config or {}), "name": name, "settings": settings},
        )
        return response["finetuned_model"]
    except Exception as e:
        throw_error(e)


async def get_fine_tuned_models(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    try:
        return await http.get("/v1/finetuning/finetuned-models", params=config)
    except Exception as e:
        throw_error(e)


async def get_fine_tuned_model(http: HttpClientProtocol, throw_error: ErrorSink, finetuned_model_id: str) -> Any:
    validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")

    try:
        response = await http.get(f"/v1/finetuning/finetuned-models/{finetuned_model_id}")
        return response["finetuned_model"]
    except Exception as e:
        throw_error(e)


async def update_fine_tuned_model(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    finetuned_model_id: str,
    name: str,
    settings: dict,
    config: dict | None = None,
) -> Any:
    validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
    validate_string_input(name, "Cannot process the fine-tuned model name")

    try:
        response = await http.patch(
            f"/v1/finetuning/finetuned-models/{finetuned_model_id}",
            {**(config or {}), "name": name, "settings": settings},
        )
        return response["finetuned_model"]
    except Exception as e:
        throw_error(e)


async def delete_fine_tuned_model(http: HttpClientProtocol, throw_error: ErrorSink, finetuned_model_id: str) -> Any:
    validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")

    try:
        await http.delete(f"/v1/finetuning/finetuned-models/{finetuned_model_id}")
        return {"finetuned_model_id": finetuned_model_id, "status": "deleted"}
    except Exception as e:
        throw_error(e)


async def get_fine_tuned_model_chronology(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    finetuned_model_id: str,
    config: dict | None = None,
) -> Any:
    """List status-change events of a fine-tuned model."""
    validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")

    try:
        return await http.get(
            f"/v1/finetuning/finetuned-models/{finetuned_model_id}/events",
            params=config,
        )
    except Exception as e:
        throw_error(e)


async def get_fine_tuned_model_metrics(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    finetuned_model_id: str,
    config: dict | None = None,
) -> Any:
    """List training-step metrics of a fine-tuned model."""
    validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")

    try:
        return await http.get(
            f"/v1/finetuning/finetuned-models/{finetuned_model_id}/training-step-metrics",
            params=config,
        )
    except Exception as e:
        throw_error(e)
