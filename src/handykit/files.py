"""Content hashing and filename helpers.

Content is given as bytes-like data (``bytes``, ``bytearray``,
``memoryview``) or as a binary file-like object opened for reading. Streams
are hashed in chunks and are read to the end.
"""

from __future__ import annotations

import hashlib
import logging
from typing import BinaryIO

from .errors import InvalidArgumentError, UnsupportedInputError
from .slug import convert_to_slug

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
DEFAULT_HASH_LENGTH = 8
SHA256_HEX_LENGTH = 64

Content = bytes | bytearray | memoryview | BinaryIO


def _is_stream(data: object) -> bool:
    return callable(getattr(data, "read", None))


def read_bytes(data: Content) -> bytes:
    """Return the full content of ``data`` as ``bytes``.

    Raises:
        UnsupportedInputError: If ``data`` is neither bytes-like nor readable.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if _is_stream(data):
        content = data.read()  # type: ignore[union-attr]
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
    raise UnsupportedInputError("Unsupported input type for hashing")


def hash_content(data: Content, hash_length: int = DEFAULT_HASH_LENGTH) -> str:
    """Return the first ``hash_length`` hex digits of the SHA-256 of ``data``.

    Args:
        data: Bytes-like content or a binary stream.
        hash_length: Number of hex digits to keep (1-64).

    Raises:
        UnsupportedInputError: If ``data`` is neither bytes-like nor readable.
        InvalidArgumentError: If ``hash_length`` is out of range.
    """
    if not 0 < hash_length <= SHA256_HEX_LENGTH:
        raise InvalidArgumentError(
            f"Hash length must be between 1 and {SHA256_HEX_LENGTH}"
        )
    hasher = hashlib.sha256()
    if _is_stream(data) and not isinstance(data, (bytes, bytearray, memoryview)):
        for chunk in iter(lambda: data.read(CHUNK_SIZE), b""):  # type: ignore[union-attr]
            if not isinstance(chunk, (bytes, bytearray)):
                raise UnsupportedInputError("Unsupported input type for hashing")
            hasher.update(chunk)
    else:
        hasher.update(read_bytes(data))
    digest = hasher.hexdigest()
    logger.debug("sha256=%s", digest)
    return digest[:hash_length]


def sanitize_filename(name: str) -> str:
    """Make ``name`` safe for use as a filename (a slug that keeps dots).

    Examples:
        ```py
        >>> sanitize_filename("  My Cool File #1.txt  ")
        'my-cool-file-1.txt'
        ```
    """
    return convert_to_slug(name, allow_dots=True)


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` at its last dot; a leading dot does not start an extension."""
    dot_index = name.rfind(".")
    if dot_index > 0:
        return name[:dot_index], name[dot_index + 1 :]
    return name, ""


def get_hashed_filename(
    data: Content, original_name: str, hash_length: int = DEFAULT_HASH_LENGTH
) -> str:
    """Build a cache-busting filename: ``<safe-base>.<hash>[.<ext>]``.

    The base is sanitized with :func:`sanitize_filename`; the extension is kept
    as given.

    For example ``"myImage.png"`` becomes ``"myimage.<8 hex digits>.png"``.
    """
    digest = hash_content(data, hash_length)
    base, ext = split_extension(original_name)
    safe_base = sanitize_filename(base)
    return f"{safe_base}.{digest}.{ext}" if ext else f"{safe_base}.{digest}"
