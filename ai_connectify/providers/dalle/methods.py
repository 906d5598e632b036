"""
OpenAI image (DALL-E) endpoint functions.

Every image call returns the "data" list of generated images (URLs or base64,
depending on `response_format` in config).
"""

from typing import Any

from ...core.validation import validate_string_input
from ..http_client import ErrorSink, HttpClientProtocol
from ..media import form_fields, read_upload


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


async def create_image(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    model_id: str = "dall-e-2",
    config: dict | None = None,
) -> Any:
    """Generate images from a prompt."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/images/generations",
            {**(config or {}), "prompt": prompt, "model": model_id},
        )
        return response["data"]
    except Exception as e:
        throw_error(e)


async def create_image_edit(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    prompt: str,
    model_id: str = "dall-e-2",
    config: dict | None = None,
) -> Any:
    """
    Edit an image given a prompt.

    Args:
        image_path: Local PNG to edit
        prompt: Description of the desired result
        model_id: Image model
        config: Extra form fields; a "mask" entry is a local file path and is
            uploaded as a file

    Returns:
        The "data" list of edited images
    """
    validate_string_input(image_path, "Cannot process the image path")
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, "Cannot process the model ID")
    fields = dict(config or {})
    mask_path = fields.pop("mask", None)
    if mask_path is not None:
        validate_string_input(mask_path, "Cannot process the image mask path")

    try:
        files = {"image": await read_upload(image_path)}
        if mask_path is not None:
            files["mask"] = await read_upload(mask_path)
        response = await http.post(
            "/images/edits",
            data={**form_fields(fields), "prompt": prompt, "model": model_id},
            files=files,
        )
        return response["data"]
    except Exception as e:
        throw_error(e)


async def create_image_variation(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    model_id: str = "dall-e-2",
    config: dict | None = None,
) -> Any:
    """Create variations of an image."""
    validate_string_input(image_path, "Cannot process the image path")
    validate_string_input(model_id, "Cannot process the model ID")

    try:
        response = await http.post(
            "/images/variations",
            data={**form_fields(config), "model": model_id},
            files={"image": await read_upload(image_path)},
        )
        return response["data"]
    except Exception as e:
        throw_error(e)
