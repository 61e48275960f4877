"""Character-class helpers shared by the slug and name engines.

Both engines build regular expressions at call time from caller-supplied
characters (a separator, a set of allowed special characters). Every such
character goes through :func:`escape_class_chars` before it is embedded in a
bracket expression, so ``-``, ``]``, ``\\`` and ``^`` are always literal.

Compiled patterns are cached per argument tuple; callers must pass hashable
arguments (strings and tuples).
"""

from __future__ import annotations

import re
from functools import lru_cache

ALNUM_LOWER = "a-z0-9"
ALNUM_ANY_CASE = "a-zA-Z0-9"


def unique_chars(values: str | tuple[str, ...]) -> tuple[str, ...]:
    """Flatten ``values`` into its distinct characters, first occurrence wins.

    Args:
        values: A string or a tuple of strings. Multi-character entries
            contribute each of their characters.

    Returns:
        tuple[str, ...]: Distinct single characters in first-seen order.
    """
    seen: dict[str, None] = {}
    for value in values:
        for char in value:
            seen.setdefault(char, None)
    return tuple(seen)


def escape_class_chars(chars: tuple[str, ...]) -> str:
    """Escape each character for literal use inside ``[...]``.

    Args:
        chars: Single characters to escape.

    Returns:
        str: The escaped characters concatenated, ready to embed in a
        bracket expression (empty when ``chars`` is empty).
    """
    return "".join(re.escape(char) for char in chars)


@lru_cache(maxsize=256)
def run_pattern(chars: tuple[str, ...], min_run: int = 1) -> re.Pattern[str] | None:
    """Return a pattern matching runs of ``min_run`` or more of ``chars``.

    Returns ``None`` when ``chars`` is empty (``[]`` is not a valid class).
    """
    if not chars:
        return None
    quantifier = "+" if min_run == 1 else f"{{{min_run},}}"
    return re.compile(f"[{escape_class_chars(chars)}]{quantifier}")


@lru_cache(maxsize=256)
def disallowed_pattern(alnum: str, chars: tuple[str, ...]) -> re.Pattern[str]:
    """Return a pattern matching any character outside ``alnum`` and ``chars``."""
    return re.compile(f"[^{alnum}{escape_class_chars(chars)}]")


@lru_cache(maxsize=256)
def segmented_pattern(alnum: str, chars: tuple[str, ...]) -> re.Pattern[str]:
    """Return a whole-string pattern for ``alnum`` segments joined by one of ``chars``.

    The pattern accepts strings that start and end with an ``alnum`` character
    and never contain two characters from ``chars`` back to back.
    """
    if not chars:
        return re.compile(f"[{alnum}]+")
    return re.compile(f"[{alnum}]+(?:[{escape_class_chars(chars)}][{alnum}]+)*")


@lru_cache(maxsize=256)
def joined_pattern(alnum: str, joiners: tuple[str, ...]) -> re.Pattern[str]:
    """Return a whole-string pattern for ``alnum`` segments joined by one of ``joiners``.

    Unlike :func:`segmented_pattern`, each joiner is a literal string, so a
    multi-character joiner such as ``"-_"`` counts as one joint and its
    characters are never accepted on their own. Empty joiners are ignored.
    """
    literals = sorted({joiner for joiner in joiners if joiner}, key=len, reverse=True)
    if not literals:
        return re.compile(f"[{alnum}]+")
    alternatives = "|".join(re.escape(joiner) for joiner in literals)
    return re.compile(f"[{alnum}]+(?:(?:{alternatives})[{alnum}]+)*")


def strip_chars(text: str, chars: tuple[str, ...]) -> str:
    """Trim any of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip("".join(chars))
