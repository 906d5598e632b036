"""
File helpers for upload and download endpoints.

Uploads are read into memory before the request; downloaded media is written
into a caller-provided directory under a random name.
"""

import logging
from pathlib import Path
from typing import Any

import aiofiles

from ..core.validation import generate_random_id

logger = logging.getLogger(__name__)


async def read_upload(file_path: str) -> tuple[str, bytes]:
    """
    Read a file for a multipart upload.

    Returns:
        (file name, content) tuple accepted by httpx `files=`
    """
    path = Path(file_path)
    async with aiofiles.open(path, "rb") as f:
        content = await f.read()
    return path.name, content


async def save_media(directory: Path, data: bytes, extension: str, file_name: str | None = None) -> str:
    """
    Write downloaded media to `directory`.

    Args:
        directory: Existing destination directory
        data: Raw bytes
        extension: File extension without the dot
        file_name: Base name to use; a random ID when omitted

    Returns:
        Path of the written file, as a string
    """
    file_path = directory / f"{file_name or generate_random_id()}.{extension}"
    async with aiofiles.open(file_path, "wb") as f:
        await f.write(data)
    logger.debug(f"Saved media file: {file_path}")
    return str(file_path)


def form_fields(config: dict[str, Any] | None) -> dict[str, Any]:
    """Convert caller options to multipart form values."""
    fields: dict[str, Any] = {}
    for key, value in (config or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            fields[key] = "true" if value else "false"
        elif isinstance(value, (int, float)):
            fields[key] = str(value)
        else:
            fields[key] = value
    return fields
