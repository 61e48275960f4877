"""Sequence helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive lists of ``size`` elements.

    The last chunk holds whatever is left and may be shorter.

    Args:
        items: The sequence to split.
        size: Number of elements per chunk.

    Returns:
        list[list[T]]: The chunks, in order; empty when ``items`` is empty.

    Raises:
        InvalidArgumentError: If ``size`` is not greater than zero.
    """
    if size <= 0:
        raise InvalidArgumentError("Chunk size must be greater than 0")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]
