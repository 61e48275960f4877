"""Configuration utilities for handykit.

Settings come from ``HANDYKIT_*`` environment variables. The library helpers
never read them; only the command-line interface does, so library behavior
depends solely on the arguments passed in.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

from handykit.errors import InvalidConfigError
from handykit.slug import is_usable_separator

APP_NAME = "handykit"
ENV_PREFIX = "HANDYKIT"

HASH_LENGTH_ENV = f"{ENV_PREFIX}_HASH_LENGTH"  # pragma: no mutate
SLUG_SEPARATOR_ENV = f"{ENV_PREFIX}_SLUG_SEPARATOR"  # pragma: no mutate

DEFAULT_HASH_LENGTH = 8
MAX_HASH_LENGTH = 64
DEFAULT_SLUG_SEPARATOR = "-"
SEPARATOR_RULE = (
    "separator must not contain ASCII letters or digits, "
    "nor characters changed by lowercasing or accent folding"
)


def default_log_path() -> Path:
    """Return the default flight-recorder file in the per-user log directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


def get_hash_length() -> int:
    """Get the content-hash length from the environment.

    Returns:
        The value of ``HANDYKIT_HASH_LENGTH``, or 8 when unset or empty.

    Raises:
        InvalidConfigError: If the value is not an integer between 1 and 64.
    """
    if not (raw := os.environ.get(HASH_LENGTH_ENV, "").strip()):
        return DEFAULT_HASH_LENGTH
    try:
        length = int(raw)
    except ValueError as e:
        raise InvalidConfigError(HASH_LENGTH_ENV, raw, "expected an integer") from e
    if not 0 < length <= MAX_HASH_LENGTH:
        raise InvalidConfigError(
            HASH_LENGTH_ENV, raw, f"expected a value between 1 and {MAX_HASH_LENGTH}"
        )
    return length


def check_slug_separator(separator: str, source: str = SLUG_SEPARATOR_ENV) -> str:
    """Return ``separator`` if it can join slug segments.

    Args:
        separator: Candidate separator.
        source: Where the value came from, for the error message.

    Raises:
        InvalidConfigError: If :func:`handykit.slug.is_usable_separator`
            rejects the value.
    """
    if not is_usable_separator(separator):
        raise InvalidConfigError(source, separator, SEPARATOR_RULE)
    return separator


def get_slug_separator() -> str:
    """Get the slug separator from the environment.

    Returns:
        The value of ``HANDYKIT_SLUG_SEPARATOR``, or ``-`` when unset or empty.

    Raises:
        InvalidConfigError: If the value cannot join slug segments.
    """
    if not (separator := os.environ.get(SLUG_SEPARATOR_ENV, "")):
        return DEFAULT_SLUG_SEPARATOR
    return check_slug_separator(separator)
