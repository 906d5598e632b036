"""
OpenAI (ChatGPT) API endpoint functions.

Covers models, chat completions, embeddings, moderation, audio and fine-tuning
jobs. Fine-tuning job IDs are checked with the key pattern since OpenAI job IDs
share its alphabet.
"""

from typing import Any

from ...core.exceptions import AIConnectifyError
from ...core.validation import (
    validate_array_input,
    validate_directory_path,
    validate_key_string,
    validate_string_input,
)
from ..http_client import ErrorSink, HttpClientProtocol
from ..media import form_fields, read_upload, save_media


# ============ Models ============


async def get_models(http: HttpClientProtocol, throw_error: ErrorSink) -> Any:
    """List the currently available models."""
    try:
        response = await http.get("/models")
        return response["data"]
    except Exception as e:
        throw_error(e)


async def get_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    """Retrieve a model by ID."""
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.get(f"/models/{model_id}")
    except Exception as e:
        throw_error(e)


async def delete_fine_tuned_model(http: HttpClientProtocol, throw_error: ErrorSink, model_id: str) -> Any:
    """Delete a fine-tuned model owned by the organization."""
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.delete(f"/models/{model_id}")
    except Exception as e:
        throw_error(e)


# ============ Text ============


async def create_chat_completion(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    messages: list,
    model_id: str = "gpt-3.5-turbo",
    config: dict | None = None,
) -> Any:
    """
    Create a model response for a chat conversation.

    Args:
        messages: Conversation so far
        model_id: OpenAI model ID
        config: Extra request fields (temperature, max_tokens, ...)

    Returns:
        The completion body without its "usage" field
    """
    validate_array_input(messages, "Cannot process the messages")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/chat/completions",
            {**(config or {}), "model": model_id, "messages": messages},
        )
        if isinstance(response, dict):
            response.pop("usage", None)
        return response
    except Exception as e:
        throw_error(e)


async def create_embeddings(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    input: str | list,
    model_id: str = "text-embedding-ada-002",
    config: dict | None = None,
) -> Any:
    """Embed a string or a list of strings/tokens; returns the "data" list."""
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post("/embeddings", {**(config or {}), "input": input, "model": model_id})
        return response["data"]
    except Exception as e:
        throw_error(e)


async def create_moderation(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    input: str | list,
    model_id: str = "omni-moderation-latest",
) -> Any:
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.post("/moderations", {"input": input, "model": model_id})
    except Exception as e:
        throw_error(e)


# ============ Audio ============


async def create_speech(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    input: str,
    destination_folder: str,
    model_id: str = "tts-1",
    response_format: str = "mp3",
    voice: str = "alloy",
    config: dict | None = None,
) -> Any:
    """
    Generate audio from text and save it.

    Args:
        input: Text to speak
        destination_folder: Existing directory for the audio file
        model_id: TTS model
        response_format: Audio format, also used as the file extension
        voice: Voice name
        config: Extra request fields (speed, ...)

    Returns:
        {"audio_path": ...}
    """
    validate_string_input(input, "Cannot process the input text")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(response_format, "Cannot process the response format")
    validate_string_input(voice, "Cannot process the voice")
    directory = validate_directory_path(destination_folder, "destination folder")

    try:
        response = await http.post(
            "/audio/speech",
            {
                **(config or {}),
                "input": input,
                "model": model_id,
                "response_format": response_format,
                "voice": voice,
            },
            raw=True,
        )
        if response.status_code != 200:
            throw_error(response)
            return None
        audio_path = await save_media(directory, response.content, response_format)
        return {"audio_path": audio_path}
    except AIConnectifyError:
        raise
    except Exception as e:
        throw_error(e)


async def _upload_audio(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    endpoint: str,
    file_path: str,
    model_id: str,
    config: dict | None,
) -> Any:
    validate_string_input(file_path, "Cannot process the file path")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        upload = await read_upload(file_path)
        response = await http.post(
            endpoint,
            data={**form_fields(config), "model": model_id},
            files={"file": upload},
        )
        return response["text"]
    except Exception as e:
        throw_error(e)


async def create_transcription(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    file_path: str,
    model_id: str = "whisper-1",
    config: dict | None = None,
) -> Any:
    """Transcribe an audio file; returns the text."""
    return await _upload_audio(http, throw_error, "/audio/transcriptions", file_path, model_id, config)


async def create_translation(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    file_path: str,
    model_id: str = "whisper-1",
    config: dict | None = None,
) -> Any:
    """Translate an audio file into English text."""
    return await _upload_audio(http, throw_error, "/audio/translations", file_path, model_id, config)


# ============ Fine-tuning ============


async def create_fine_tuning_job(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    training_file_id: str,
    model_id: str = "gpt-4o-mini",
    config: dict | None = None,
) -> Any:
    """Start a fine-tuning job from an uploaded training file."""
    validate_string_input(training_file_id, "Cannot process the training file ID")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        return await http.post(
            "/fine_tuning/jobs",
            {**(config or {}), "training_file": training_file_id, "model": model_id},
        )
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_jobs(http: HttpClientProtocol, throw_error: ErrorSink, config: dict | None = None) -> Any:
    """List the organization's fine-tuning jobs; `config` holds after/limit."""
    try:
        return await http.get("/fine_tuning/jobs", params=config)
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_job(http: HttpClientProtocol, throw_error: ErrorSink, job_id: str) -> Any:
    validate_key_string(job_id, "Cannot process the fine-tuning job ID")

    try:
        return await http.get(f"/fine_tuning/jobs/{job_id}")
    except Exception as e:
        throw_error(e)


async def cancel_fine_tuning_job(http: HttpClientProtocol, throw_error: ErrorSink, job_id: str) -> Any:
    validate_key_string(job_id, "Cannot process the fine-tuning job ID")

    try:
        return await http.post(f"/fine_tuning/jobs/{job_id}/cancel")
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_job_events(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    job_id: str,
    config: dict | None = None,
) -> Any:
    """Get status updates for a fine-tuning job."""
    validate_key_string(job_id, "Cannot process the fine-tuning job ID")

    try:
        return await http.get(f"/fine_tuning/jobs/{job_id}/events", params=config)
    except Exception as e:
        throw_error(e)


async def get_fine_tuning_job_checkpoints(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    job_id: str,
    config: dict | None = None,
) -> Any:
    """List checkpoints of a fine-tuning job."""
    validate_key_string(job_id, "Cannot process the fine-tuning job ID")

    try:
        return await http.get(f"/fine_tuning/jobs/{job_id}/checkpoints", params=config)
    except Exception as e:
        throw_error(e)
