"""Capitalization helpers."""

from __future__ import annotations

import re

from handykit.errors import InvalidTypeError

_WORD_START = re.compile(r"\b\w")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WORD_BREAK = re.compile(r"[\s_]+")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise InvalidTypeError("Input must be a string")
    return value


def capitalize(text: str) -> str:
    """Upper-case the first character of ``text`` and leave the rest alone.

    Unlike :meth:`str.capitalize`, the remaining characters keep their case.

    Raises:
        InvalidTypeError: If ``text`` is not a string.
    """
    text = _require_str(text)
    return text[:1].upper() + text[1:]


def capitalize_words(text: str) -> str:
    """Upper-case the first character of every word in ``text``.

    Raises:
        InvalidTypeError: If ``text`` is not a string.
    """
    text = _require_str(text)
    return _WORD_START.sub(lambda m: m.group().upper(), text)


def convert_camel_to_normal_capitalized(text: str) -> str:
    """Turn ``camelCase`` or ``snake_case`` into space-separated capitalized words.

    Examples:
        ```py
        >>> convert_camel_to_normal_capitalized("helloWorld_test")
        'Hello World Test'
        >>> convert_camel_to_normal_capitalized("thisIsATest")
        'This Is ATest'
        ```
    """
    words = _WORD_BREAK.split(_CAMEL_BOUNDARY.sub(r"\1 \2", text))
    return " ".join(capitalize(word) for word in words)
