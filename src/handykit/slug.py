"""Slug engine: validate, convert and de-duplicate URL-safe tokens.

A slug is a non-empty string of lowercase ASCII letters and digits joined by
the separator (``-`` by default). With ``allow_dots`` a single ``.`` may join
two segments as well, which is what filenames need (``archive.tar.gz``).
Either way, a slug never starts or ends with a separator and never contains
two separators back to back. A multi-character separator such as ``-_`` is
one joint: ``a-_b`` is a slug under it, ``a-b`` is not.

:func:`is_usable_separator` rejects any separator holding a character that a
second conversion would rewrite or read as slug content (``x``, ``é``).
Every operation treats such a separator as ``-``, which keeps conversion
idempotent.

Nothing in this module raises: predicates answer ``False`` and transforms
answer ``""`` for non-string or empty input.

Examples:
    ```py
    >>> convert_to_slug("Café & Restaurant")
    'cafe-restaurant'
    >>> convert_to_slug("My File.txt", allow_dots=True)
    'my-file.txt'
    >>> is_valid_slug("hello--world")
    False
    >>> generate_unique_slug("post", ["post", "post-1"])
    'post-2'
    ```
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ._patterns import (
    ALNUM_LOWER,
    disallowed_pattern,
    joined_pattern,
    run_pattern,
    strip_chars,
    unique_chars,
)

DEFAULT_SEPARATOR = "-"
DOT = "."

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE_OR_UNDERSCORE = re.compile(r"[\s_]+")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlugOptions:
    """Policy for the slug engine.

    Attributes:
        separator: Joins alphanumeric segments. Used verbatim in output and
            matched as one literal by validation; each of its characters
            belongs to the separator class collapsed during conversion.
        allow_dots: When True, ``.`` is an additional, interchangeable
            separator (e.g. for filenames).
    """

    separator: str = DEFAULT_SEPARATOR
    allow_dots: bool = False

    @property
    def separator_class(self) -> tuple[str, ...]:
        """Characters that conversion collapses into a single joint."""
        return unique_chars(self.separator + (DOT if self.allow_dots else ""))

    @property
    def joiners(self) -> tuple[str, ...]:
        """Literal strings that may stand between two alphanumeric segments."""
        return (self.separator, DOT) if self.allow_dots else (self.separator,)


DEFAULT_SLUG_OPTIONS = SlugOptions()


def is_usable_separator(separator: str) -> bool:
    """Return True if slugs joined by ``separator`` survive reconversion.

    Examples:
        ```py
        >>> is_usable_separator("_")
        True
        >>> is_usable_separator("é")
        False
        ```
    """
    if any(char.isascii() and char.isalnum() for char in separator):
        return False
    if _COMBINING_MARKS.search(separator):
        return False
    if separator.lower() != separator:
        return False
    return unicodedata.normalize("NFD", separator) == separator


def _resolve_options(
    options: SlugOptions | None,
    separator: str | None = None,
    allow_dots: bool | None = None,
) -> SlugOptions:
    resolved = options or DEFAULT_SLUG_OPTIONS
    overrides: dict[str, object] = {}
    if separator is not None:
        overrides["separator"] = separator
    if allow_dots is not None:
        overrides["allow_dots"] = allow_dots
    if overrides:
        resolved = replace(resolved, **overrides)
    if not is_usable_separator(resolved.separator):
        logger.debug(
            "Separator %r is not usable in slugs; using %r",
            resolved.separator,
            DEFAULT_SEPARATOR,
        )
        resolved = replace(resolved, separator=DEFAULT_SEPARATOR)
    return resolved


def is_valid_slug(
    candidate: object,
    options: SlugOptions | None = None,
    *,
    allow_dots: bool | None = None,
    separator: str | None = None,
) -> bool:
    """Check whether ``candidate`` is already a well-formed slug.

    Args:
        candidate: Value to check; anything but a non-empty ``str`` is invalid.
        options: Base policy; keyword arguments override its fields.
        allow_dots: Accept ``.`` as a separator.
        separator: Separator to accept (default ``-``).

    Returns:
        bool: True when the whole string consists of lowercase alphanumeric
        segments, each pair joined by the separator or, with ``allow_dots``,
        by one ``.``.

    Examples:
        ```py
        >>> is_valid_slug("hello-world")
        True
        >>> is_valid_slug("Hello-World")
        False
        >>> is_valid_slug("file.-txt", allow_dots=True)
        False
        ```
    """
    if not isinstance(candidate, str) or not candidate:
        return False
    opts = _resolve_options(options, separator, allow_dots)
    pattern = joined_pattern(ALNUM_LOWER, opts.joiners)
    return pattern.fullmatch(candidate) is not None


def convert_to_slug(
    text: object,
    options: SlugOptions | None = None,
    *,
    separator: str | None = None,
    allow_dots: bool | None = None,
) -> str:
    """Convert arbitrary text into a slug.

    Steps, in order:

    1. lowercase and strip surrounding whitespace;
    2. decompose (NFD) and drop combining diacritical marks, so accented
       Latin letters fold to their base letter;
    3. without ``allow_dots``, turn every ``.`` into the separator;
    4. turn runs of whitespace and underscores into the separator;
    5. drop everything outside ``[a-z0-9]`` and the separator class;
    6. collapse each run of separator-class characters into one joint,
       ``.`` if the run holds a dot, the whole separator otherwise;
    7. trim separator-class characters from both ends.

    Args:
        text: Text to convert; anything but a non-empty ``str`` gives ``""``.
        options: Base policy; keyword arguments override its fields.
        separator: Separator to emit (default ``-``).
        allow_dots: Keep ``.`` as a separator instead of replacing it.

    Returns:
        str: The slug, possibly empty. Applying the function again with the
        same options returns the same string.
    """
    if not isinstance(text, str) or not text:
        return ""
    opts = _resolve_options(options, separator, allow_dots)
    sep = opts.separator
    sep_class = opts.separator_class

    slug = unicodedata.normalize("NFD", text.lower().strip())
    slug = _COMBINING_MARKS.sub("", slug)
    if not opts.allow_dots:
        slug = slug.replace(DOT, sep)
    slug = _WHITESPACE_OR_UNDERSCORE.sub(lambda _: sep, slug)
    slug = disallowed_pattern(ALNUM_LOWER, sep_class).sub("", slug)

    if (runs := run_pattern(sep_class)) is not None:
        if opts.allow_dots:
            slug = runs.sub(lambda m: DOT if DOT in m.group() else sep, slug)
        else:
            slug = runs.sub(lambda _: sep, slug)

    return strip_chars(slug, sep_class)


def generate_unique_slug(
    base_slug: str,
    existing_slugs: Iterable[str],
    options: SlugOptions | None = None,
    *,
    separator: str | None = None,
) -> str:
    """Return ``base_slug`` or the first free ``base_slug + separator + N``.

    ``N`` starts at 1 and increases until the candidate is not among
    ``existing_slugs``. The base slug is not re-validated and the existing
    collection is only read; persisting the result is up to the caller.

    Args:
        base_slug: Preferred slug.
        existing_slugs: Slugs already taken (any iterable; order is irrelevant).
        options: Base policy; only its separator is used.
        separator: Separator placed before the numeric suffix (default ``-``).

    Returns:
        str: A slug not present in ``existing_slugs``.
    """
    sep = _resolve_options(options, separator).separator
    taken = set(existing_slugs)
    if base_slug not in taken:
        return base_slug
    suffix = 1
    while (candidate := f"{base_slug}{sep}{suffix}") in taken:
        suffix += 1
    return candidate
