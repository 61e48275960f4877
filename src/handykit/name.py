"""Name normalizer: validate and clean human-entered names.

Names keep their case and may contain ASCII letters, digits and a
caller-chosen set of special characters (a single space by default). The
same layout rules as for slugs apply to the special characters: never at
either end and never two in a row, whatever the mix (``"A .B"`` is invalid
when both space and dot are allowed).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ._patterns import (
    ALNUM_ANY_CASE,
    disallowed_pattern,
    run_pattern,
    segmented_pattern,
    strip_chars,
    unique_chars,
)

DEFAULT_ALLOWED_SPECIAL_CHARS: tuple[str, ...] = (" ",)


@dataclass(frozen=True)
class NameOptions:
    """Policy for the name normalizer.

    Attributes:
        allowed_special_chars: The only non-alphanumeric characters a name may
            contain. Any iterable of single characters is accepted and stored
            as a tuple.
    """

    allowed_special_chars: tuple[str, ...] = DEFAULT_ALLOWED_SPECIAL_CHARS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "allowed_special_chars", tuple(self.allowed_special_chars)
        )

    @property
    def special_class(self) -> tuple[str, ...]:
        """Distinct allowed special characters, in first-seen order."""
        return unique_chars(self.allowed_special_chars)


DEFAULT_NAME_OPTIONS = NameOptions()


def _resolve_options(
    options: NameOptions | None, allowed_special_chars: Iterable[str] | None
) -> NameOptions:
    if allowed_special_chars is not None:
        return NameOptions(allowed_special_chars=tuple(allowed_special_chars))
    return options or DEFAULT_NAME_OPTIONS


def is_valid_name(
    candidate: object,
    options: NameOptions | None = None,
    *,
    allowed_special_chars: Iterable[str] | None = None,
) -> bool:
    """Check whether ``candidate`` is a well-formed name.

    Args:
        candidate: Value to check; anything but a non-empty ``str`` is invalid.
        options: Base policy; ``allowed_special_chars`` overrides it.
        allowed_special_chars: Permitted non-alphanumeric characters
            (default: a single space).

    Returns:
        bool: True when ``candidate`` starts and ends with an alphanumeric
        character, contains only alphanumerics and allowed characters, and
        never has two allowed characters next to each other.

    Examples:
        ```py
        >>> is_valid_name("John Doe")
        True
        >>> is_valid_name("John  Doe")
        False
        >>> is_valid_name("John.-Doe", allowed_special_chars=[".", "-"])
        False
        ```
    """
    if not isinstance(candidate, str) or not candidate:
        return False
    opts = _resolve_options(options, allowed_special_chars)
    pattern = segmented_pattern(ALNUM_ANY_CASE, opts.special_class)
    return pattern.fullmatch(candidate) is not None


def normalize_name(
    text: object,
    options: NameOptions | None = None,
    *,
    allowed_special_chars: Iterable[str] | None = None,
) -> str:
    """Normalize ``text`` into a valid name, preserving case.

    Strips surrounding whitespace, drops characters that are neither
    alphanumeric nor allowed, collapses each run of two or more allowed
    characters into the first character of the run, then trims allowed
    characters from both ends.

    Args:
        text: Text to normalize; anything but a non-empty ``str`` gives ``""``.
        options: Base policy; ``allowed_special_chars`` overrides it.
        allowed_special_chars: Permitted non-alphanumeric characters
            (default: a single space).

    Returns:
        str: The normalized name, possibly empty.

    Examples:
        ```py
        >>> normalize_name("  John   Doe  ")
        'John Doe'
        >>> normalize_name("John . Doe", allowed_special_chars=[" ", "."])
        'John Doe'
        ```
    """
    if not isinstance(text, str) or not text:
        return ""
    special = _resolve_options(options, allowed_special_chars).special_class

    normalized = disallowed_pattern(ALNUM_ANY_CASE, special).sub("", text.strip())
    if (runs := run_pattern(special, min_run=2)) is not None:
        normalized = runs.sub(lambda m: m.group()[0], normalized)
    return strip_chars(normalized, special)
