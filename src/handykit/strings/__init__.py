"""String helpers: capitalization, truncation, case conversion, random text."""

from __future__ import annotations

import random
import string

from handykit.errors import InvalidArgumentError

from .capitalize import capitalize, capitalize_words, convert_camel_to_normal_capitalized
from .case_conversion import (
    object_keys_to_camel_case,
    object_keys_to_snake_case,
    to_camel_case,
    to_snake_case,
)
from .truncate import truncate_text

__all__ = [
    "capitalize",
    "capitalize_words",
    "convert_camel_to_normal_capitalized",
    "object_keys_to_camel_case",
    "object_keys_to_snake_case",
    "random_string_with_fixed_length",
    "to_camel_case",
    "to_snake_case",
    "truncate_text",
]

RANDOM_ALPHABET = string.ascii_lowercase + string.digits


def random_string_with_fixed_length(
    length: int, rng: random.Random | None = None
) -> str:
    """Return ``length`` random characters drawn from ``[a-z0-9]``.

    Not suitable for secrets; use :mod:`secrets` for tokens.

    Args:
        length: Number of characters; must be a positive integer.
        rng: Random source, for reproducible output in tests.

    Raises:
        InvalidArgumentError: If ``length`` is not a positive integer.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidArgumentError("Length must be a positive integer.")
    return "".join((rng or random).choices(RANDOM_ALPHABET, k=length))
