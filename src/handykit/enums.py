"""Lookup helpers for closed sets of string values.

``allowed`` is either a collection of plain values (``("active", "pending")``)
or an :class:`enum.Enum` subclass. For an enum class the lookup is by member
value and the member itself is returned. Comparison is case-sensitive.
"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError


def parse_enum_value(allowed: Collection[Any] | type[Enum], value: Any) -> Any | None:
    """Return the allowed value equal to ``value``, or ``None`` if there is none.

    Examples:
        ```py
        >>> parse_enum_value(("active", "inactive"), "active")
        'active'
        >>> parse_enum_value(("active", "inactive"), "unknown") is None
        True
        ```
    """
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        for member in allowed:
            if member.value == value:
                return member
        return None
    return value if value in allowed else None


def require_enum_value(allowed: Collection[Any] | type[Enum], value: Any) -> Any:
    """Like :func:`parse_enum_value` but raise on a miss.

    Raises:
        InvalidArgumentError: If ``value`` is not one of ``allowed``.
    """
    if (found := parse_enum_value(allowed, value)) is None:
        raise InvalidArgumentError(f"Invalid enum value: {value}")
    return found
