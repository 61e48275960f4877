"""Standard success/error envelopes for API-style return values.

A response is either ``StdSuccess`` carrying a ``result`` or ``StdError``
carrying an ``ErrorDetail`` with a machine-readable ``code`` and an optional
human-readable ``message``. Build them with the ``std_response`` factory:

    ```py
    >>> std_response.success({"id": "42"}).to_dict()
    {'status': 'success', 'result': {'id': '42'}}
    >>> std_response.error("NOT_FOUND", "No such user").to_dict()
    {'status': 'error', 'error': {'code': 'NOT_FOUND', 'message': 'No such user'}}
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E", str, int)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ErrorDetail(Generic[E]):
    """Error code plus optional message."""

    code: E
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; ``message`` is omitted when unset."""
        data: dict[str, Any] = {"code": self.code}
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class StdSuccess(Generic[T]):
    """Successful response."""

    result: T
    status: Literal["success"] = field(default="success", init=False)

    @property
    def is_success(self) -> bool:
        """Always True."""
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready envelope."""
        return {"status": self.status, "result": self.result}


@dataclass(frozen=True)
class StdError(Generic[E]):
    """Failed response."""

    error: ErrorDetail[E]
    status: Literal["error"] = field(default="error", init=False)

    @property
    def is_success(self) -> bool:
        """Always False."""
        return False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready envelope."""
        return {"status": self.status, "error": self.error.to_dict()}


StdResponse: TypeAlias = StdSuccess[T] | StdError[E]


class _StdResponseFactory:
    """Constructors for :data:`StdResponse` values."""

    @staticmethod
    def success(result: T) -> StdSuccess[T]:
        """Wrap ``result`` in a success envelope."""
        return StdSuccess(result=result)

    @staticmethod
    def error(code: E, message: str | None = None) -> StdError[E]:
        """Build an error envelope from ``code`` and an optional ``message``."""
        return StdError(error=ErrorDetail(code=code, message=message))


std_response = _StdResponseFactory()
