"""Local file helpers shared by the clients (attachments and avatar images)."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Union

ImageInput = Union[str, Path, bytes]


def read_file(file_path: Union[str, Path]) -> tuple[str, bytes]:
    """Read a local file.

    Args:
        file_path: Path of the file to read.

    Returns:
        A tuple of (file name, file bytes).

    Raises:
        FileNotFoundError: If the path does not exist.
        OSError: If the file cannot be read.
    """
    path = Path(file_path)
    return path.name, path.read_bytes()


def image_data_uri(image: ImageInput, default_mime: str = "image/jpeg") -> str:
    """Encode an image as the base64 data URI Discord expects for avatars and emojis.

    Args:
        image: Path to an image file, or the raw image bytes.
        default_mime: MIME type used when it cannot be guessed from the file name.

    Returns:
        A string like ``data:image/png;base64,...``.
    """
    if isinstance(image, bytes):
        data = image
        mime = default_mime
    else:
        data = Path(image).read_bytes()
        mime = mimetypes.guess_type(str(image))[0] or default_mime

    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"
