"""Text truncation."""

from __future__ import annotations


def truncate_text(text: str, max_length: int = 10, suffix: str = "...") -> str:
    """Cut ``text`` to ``max_length`` characters and append ``suffix``.

    Text no longer than ``max_length`` is returned unchanged. The suffix is
    not counted against ``max_length``.
    """
    if len(text) > max_length:
        return text[:max_length] + suffix
    return text
