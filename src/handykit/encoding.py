"""Base64 transport encoding for JSON-serializable values.

Values are serialized as compact JSON (no whitespace, non-ASCII kept as
UTF-8) and then base64-encoded with the standard alphabet and padding.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from .errors import Base64DecodeError, InvalidArgumentError


def encode_to_base64(obj: Any) -> str:
    """Serialize ``obj`` to JSON and return it base64-encoded.

    Raises:
        InvalidArgumentError: If ``obj`` is ``None``.
        TypeError: If ``obj`` is not JSON-serializable.
    """
    if obj is None:
        raise InvalidArgumentError("Cannot encode None")
    payload = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_from_base64(text: str) -> Any:
    """Decode a string produced by :func:`encode_to_base64`.

    Raises:
        InvalidArgumentError: If ``text`` is not a non-empty string.
        Base64DecodeError: If ``text`` is not valid base64-encoded JSON.
    """
    if not isinstance(text, str) or not text:
        raise InvalidArgumentError("Invalid base64 input")
    try:
        raw = base64.b64decode(text, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise Base64DecodeError("Failed to decode base64 string") from e
