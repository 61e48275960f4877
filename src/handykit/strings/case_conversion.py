"""camelCase / snake_case conversion for strings and mapping keys.

The ``object_keys_*`` helpers walk nested mappings and lists and rebuild
them with converted keys; values that are neither are returned as-is.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SNAKE_BOUNDARY = re.compile(r"_([a-z])")


def to_snake_case(value: str) -> str:
    """Convert ``camelCase``/``PascalCase`` to ``snake_case``.

    Examples:
        ```py
        >>> to_snake_case("myVariable")
        'my_variable'
        >>> to_snake_case("XMLParser")
        'xml_parser'
        ```
    """
    value = _ACRONYM_BOUNDARY.sub(r"\1_\2", value)
    return _CAMEL_BOUNDARY.sub(r"\1_\2", value).lower()


def to_camel_case(value: str) -> str:
    """Convert ``snake_case`` to ``camelCase``.

    Only an underscore followed by a lowercase letter is folded, so
    ``"already_Camel"`` and trailing underscores are left alone.
    """
    return _SNAKE_BOUNDARY.sub(lambda m: m.group(1).upper(), value)


def _convert_keys(obj: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(obj, Mapping):
        return {
            (convert(key) if isinstance(key, str) else key): _convert_keys(val, convert)
            for key, val in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_convert_keys(item, convert) for item in obj]
    return obj


def object_keys_to_snake_case(obj: Any) -> Any:
    """Recursively convert every mapping key in ``obj`` to ``snake_case``."""
    return _convert_keys(obj, to_snake_case)


def object_keys_to_camel_case(obj: Any) -> Any:
    """Recursively convert every mapping key in ``obj`` to ``camelCase``."""
    return _convert_keys(obj, to_camel_case)
