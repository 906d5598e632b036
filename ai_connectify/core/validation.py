"""
Input validation helpers shared by every provider method and the factory.

All helpers are synchronous and side-effect free. A failed check raises
ValidationError carrying the caller's message verbatim.
"""

import math
import re
import secrets
import string
from pathlib import Path
from typing import Any

from .exceptions import ValidationError

# Minimal API key shape; no network verification happens here.
KEY_PATTERN = re.compile(r"^[A-Za-z0-9\-_.+=]{16,256}$")

_ID_ALPHABET = string.ascii_letters + string.digits


def validate_string_input(value: Any, message: str) -> None:
    """Require a string with at least one non-whitespace character."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)


def validate_number_input(value: Any, message: str) -> None:
    """Require a finite int or float. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message)
    if not math.isfinite(value):
        raise ValidationError(message)


def validate_array_input(value: Any, message: str) -> None:
    """Require a non-empty list or tuple."""
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise ValidationError(message)


def validate_key_string(value: Any, message: str) -> None:
    """Require a string shaped like an API key or identifier."""
    validate_string_input(value, message)
    if not KEY_PATTERN.fullmatch(value):
        raise ValidationError(message)


def validate_boolean_input(value: Any, message: str) -> None:
    """Require a real bool."""
    if not isinstance(value, bool):
        raise ValidationError(message)


def validate_directory_path(path: Any, variable_name: str) -> Path:
    """
    Validate a destination directory for downloaded media.

    Args:
        path: Directory path, absolute or relative to the working directory
        variable_name: Name used in error messages (e.g. "destination folder")

    Returns:
        The directory as a Path

    Raises:
        ValidationError: If the path is not a string or does not point to a directory
    """
    validate_string_input(path, f"Cannot process the {variable_name}")

    directory = Path(path.strip().rstrip("/\\") or "/")
    if not directory.is_dir():
        raise ValidationError(f"The '{variable_name}' path is invalid or does not exist")
    return directory


def generate_random_id(length: int = 16) -> str:
    """Generate a random alphanumeric identifier for file names."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
