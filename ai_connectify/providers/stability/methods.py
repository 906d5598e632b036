"""
Stability AI (v2beta) endpoint functions.

Stability endpoints take multipart forms and answer with raw image, video or
3D bytes. Results are written into a caller-provided folder; any status other
than 200 (or 202 for polling endpoints) is handed to the error sink.
"""

from pathlib import Path
from typing import Any

from ...core.exceptions import AIConnectifyError
from ...core.validation import (
    validate_directory_path,
    validate_number_input,
    validate_string_input,
)
from ..http_client import ErrorSink, HttpClientProtocol
from ..media import form_fields, read_upload, save_media

STILL_RUNNING = {"status": "Generation is still running, try again in 10 seconds"}

# Stability only accepts multipart bodies; this forces one when no file is sent
EMPTY_MULTIPART = {"none": ""}


def _pop_upload_path(config: dict, key: str, message: str) -> str | None:
    """Take a file path out of the caller options, validating it."""
    path = config.pop(key, None)
    if path is not None:
        validate_string_input(path, message)
    return path


async def _post_media(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    endpoint: str,
    fields: dict,
    uploads: dict[str, str],
    directory: Path,
    extension: str,
    result_key: str = "image_path",
    accept: str = "image/*",
) -> Any:
    """
    POST a multipart form and save the binary result.

    Args:
        endpoint: Stability path
        fields: Form fields
        uploads: Form field name -> local file path
        directory: Validated destination folder
        extension: File extension of the saved result
        result_key: Key of the returned dict
        accept: Accept header value

    Returns:
        {result_key: saved file path}
    """
    try:
        files = {name: await read_upload(path) for name, path in uploads.items()} or EMPTY_MULTIPART
        response = await http.post(
            endpoint,
            data=form_fields(fields),
            files=files,
            headers={"Accept": accept},
            raw=True,
        )
        if response.status_code != 200:
            throw_error(response)
            return None
        saved = await save_media(directory, response.content, extension)
        return {result_key: saved}
    except AIConnectifyError:
        raise
    except Exception as e:
        throw_error(e)


async def _fetch_result(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    endpoint: str,
    directory: Path,
    file_name: str,
    accept: str,
    result_key: str,
    extension: str | None = None,
) -> Any:
    """Poll an asynchronous generation; saves the result once it is ready."""
    try:
        response = await http.get(endpoint, headers={"Accept": accept}, raw=True)
        if response.status_code == 202:
            return dict(STILL_RUNNING)
        if response.status_code != 200:
            throw_error(response)
            return None
        if extension is None:
            extension = _extension_from_content_type(response.headers.get("content-type", ""))
        saved = await save_media(directory, response.content, extension, file_name=file_name)
        return {result_key: saved}
    except AIConnectifyError:
        raise
    except Exception as e:
        throw_error(e)


def _extension_from_content_type(content_type: str) -> str:
    if "jpeg" in content_type:
        return "jpeg"
    if "png" in content_type:
        return "png"
    return "webp"


# ============ Generate ============


async def generate_image_ultra(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Generate an image with Stable Image Ultra."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")
    fields = dict(config or {})
    image_path = _pop_upload_path(fields, "image", "Cannot process the image path folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/generate/ultra",
        {**fields, "prompt": prompt, "output_format": output_format},
        {"image": image_path} if image_path else {},
        directory,
        output_format,
    )


async def generate_image_core(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Generate an image with Stable Image Core."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/generate/core",
        {**(config or {}), "prompt": prompt, "output_format": output_format},
        {},
        directory,
        output_format,
    )


async def generate_image_diffusion(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    destination_folder: str,
    strength: float,
    model_id: str = "sd3-medium",
    mode: str = "text-to-image",
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """
    Generate an image with Stable Diffusion 3.

    Args:
        prompt: What to generate
        destination_folder: Existing directory for the image
        strength: Influence of the input image (image-to-image mode)
        model_id: sd3-large, sd3-medium, ...
        mode: "text-to-image" or "image-to-image"
        output_format: png, jpeg or webp
        config: Extra form fields; an "image" entry is a local file path

    Returns:
        {"image_path": ...}
    """
    validate_string_input(prompt, "Cannot process the prompt")
    validate_number_input(strength, "Cannot process the strength value")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(mode, "Cannot process the mode")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")
    fields = dict(config or {})
    image_path = _pop_upload_path(fields, "image", "Cannot process the image path folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/generate/sd3",
        {
            **fields,
            "prompt": prompt,
            "strength": strength,
            "model": model_id,
            "mode": mode,
            "output_format": output_format,
        },
        {"image": image_path} if image_path else {},
        directory,
        output_format,
    )


# ============ Upscale ============


async def upscale_fast(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
) -> Any:
    """Upscale an image 4x without prompt guidance."""
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/upscale/fast",
        {"output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def upscale_conservative(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Upscale up to 4K while preserving the original image."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/upscale/conservative",
        {**(config or {}), "prompt": prompt, "output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def upscale_creative(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """
    Start a creative upscale.

    The result is produced asynchronously; poll it with get_upscale_creative.

    Returns:
        {"image_id": ...}
    """
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")

    try:
        response = await http.post(
            "/stable-image/upscale/creative",
            data=form_fields({**(config or {}), "prompt": prompt, "output_format": output_format}),
            files={"image": await read_upload(image_path)},
        )
        return {"image_id": response["id"]}
    except Exception as e:
        throw_error(e)


async def get_upscale_creative(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    upscale_id: str,
    destination_folder: str,
) -> Any:
    """Fetch a creative upscale; returns a still-running status while it is in progress."""
    validate_string_input(upscale_id, "Cannot process the upscale ID")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _fetch_result(
        http,
        throw_error,
        f"/stable-image/upscale/creative/result/{upscale_id}",
        directory,
        upscale_id,
        accept="image/*",
        result_key="image_path",
    )


# ============ Edit ============


async def erase(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Remove unwanted objects; a "mask" path in config selects the area."""
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")
    fields = dict(config or {})
    mask_path = _pop_upload_path(fields, "mask", "Cannot process the mask image path folder")

    uploads = {"image": image_path}
    if mask_path:
        uploads["mask"] = mask_path
    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/erase",
        {**fields, "output_format": output_format},
        uploads,
        directory,
        output_format,
    )


async def inpaint(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Fill or replace part of an image; a "mask" path in config selects the area."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")
    fields = dict(config or {})
    mask_path = _pop_upload_path(fields, "mask", "Cannot process the mask image path folder")

    uploads = {"image": image_path}
    if mask_path:
        uploads["mask"] = mask_path
    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/inpaint",
        {**fields, "prompt": prompt, "output_format": output_format},
        uploads,
        directory,
        output_format,
    )


async def outpaint(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    destination_folder: str,
    directions: dict,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """
    Extend an image in any direction.

    Args:
        directions: Pixels to add, keyed by "left", "right", "up" and "down";
            missing sides are not extended
    """
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")
    sides = {side: directions.get(side) for side in ("left", "right", "up", "down")} if directions else {}

    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/outpaint",
        {**(config or {}), **sides, "output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def search_and_replace(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    search_prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Replace the object described by `search_prompt` with `prompt`."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(search_prompt, "Cannot process the search prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/search-and-replace",
        {**(config or {}), "prompt": prompt, "search_prompt": search_prompt, "output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def search_and_recolor(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    select_prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Recolor the object described by `select_prompt`."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(select_prompt, "Cannot process the select prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/search-and-recolor",
        {**(config or {}), "prompt": prompt, "select_prompt": select_prompt, "output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def remove_background(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
) -> Any:
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/stable-image/edit/remove-background",
        {"output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


# ============ Control ============


async def _control(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    kind: str,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str,
    config: dict | None,
) -> Any:
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_string_input(output_format, "Cannot process the output format")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        f"/stable-image/control/{kind}",
        {**(config or {}), "prompt": prompt, "output_format": output_format},
        {"image": image_path},
        directory,
        output_format,
    )


async def control_sketch(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Turn a sketch into a refined image."""
    return await _control(http, throw_error, "sketch", prompt, image_path, destination_folder, output_format, config)


async def control_structure(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Generate an image that keeps the structure of the input image."""
    return await _control(
        http, throw_error, "structure", prompt, image_path, destination_folder, output_format, config
    )


async def control_style(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: dict | None = None,
) -> Any:
    """Generate an image in the style of the input image."""
    return await _control(http, throw_error, "style", prompt, image_path, destination_folder, output_format, config)


# ============ Video & 3D ============


async def image_to_video(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    cfg_scale: float = 1.8,
    motion_bucket_id: int = 127,
    seed: int = 0,
) -> Any:
    """
    Start a video generation from an image.

    Returns:
        {"video_generated_id": ...}; poll it with get_image_to_video
    """
    validate_string_input(image_path, "Cannot process the image path folder")
    validate_number_input(cfg_scale, "Cannot process the cfg scale")
    validate_number_input(motion_bucket_id, "Cannot process the motion bucket ID")
    validate_number_input(seed, "Cannot process the seed")

    try:
        response = await http.post(
            "/image-to-video",
            data=form_fields({"cfg_scale": cfg_scale, "motion_bucket_id": motion_bucket_id, "seed": seed}),
            files={"image": await read_upload(image_path)},
        )
        return {"video_generated_id": response["id"]}
    except Exception as e:
        throw_error(e)


async def get_image_to_video(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    video_id: str,
    destination_folder: str,
) -> Any:
    """Fetch a generated video as `<video_id>.mp4`."""
    validate_string_input(video_id, "Cannot process the video ID")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _fetch_result(
        http,
        throw_error,
        f"/image-to-video/result/{video_id}",
        directory,
        video_id,
        accept="video/*",
        result_key="video_path",
        extension="mp4",
    )


async def video_stable_fast(
    http: HttpClientProtocol,
    throw_error: ErrorSink,
    image_path: str,
    destination_folder: str,
    config: dict | None = None,
) -> Any:
    """Generate a 3D model (.glb) from a single image with Stable Fast 3D."""
    validate_string_input(image_path, "Cannot process the image path folder")
    directory = validate_directory_path(destination_folder, "destination folder")

    return await _post_media(
        http,
        throw_error,
        "/3d/stable-fast-3d",
        config or {},
        {"image": image_path},
        directory,
        "glb",
        result_key="model_path",
        accept="model/gltf-binary",
    )
