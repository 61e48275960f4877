"""Exceptions raised by handykit helpers.

The slug and name engines never raise. Every other helper reports bad input
with one of the classes below. Each one also derives from the matching
builtin (``ValueError``/``TypeError``), so callers can catch either.
"""

# ============================================================================
#                           General errors
# ============================================================================


class HandykitError(Exception):
    """Base class for all handykit errors."""


class InvalidArgumentError(HandykitError, ValueError):
    """Raised when an argument has the right type but an unusable value."""


class InvalidTypeError(HandykitError, TypeError):
    """Raised when an argument has the wrong type."""


class InvalidConfigError(HandykitError):
    """Raised when a ``HANDYKIT_*`` environment variable holds a bad value."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {variable}: {reason}")
        self.variable = variable
        self.value = value


# ============================================================================
#                   Encoding and file related errors
# ============================================================================


class Base64DecodeError(InvalidArgumentError):
    """Raised when a string is not base64-encoded JSON."""


class UnsupportedInputError(InvalidTypeError):
    """Raised when content to hash is neither bytes-like nor a binary stream."""


# ============================================================================
#                       Runtime environment errors
# ============================================================================


class EnvironmentMismatchError(HandykitError):
    """Raised when a helper runs in an environment it does not support."""

    def __init__(
        self, message: str, required_environment: str, current_environment: str
    ) -> None:
        super().__init__(message)
        self.required_environment = required_environment
        self.current_environment = current_environment
