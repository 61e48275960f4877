"""Pydantic adapters for the slug and name engines.

The engines only expose ``(value) -> bool`` predicates and ``(value) -> str``
transforms; this module wraps them for pydantic v2 models:

- :class:`ValidationRule` pairs a predicate with an error message and is
  callable as an ``AfterValidator`` (it raises ``ValueError`` on failure);
- ``slug_transform``/``name_transform`` return plain transforms usable as
  ``AfterValidator`` or ``BeforeValidator`` callbacks;
- ``SlugStr``, ``FilenameSlugStr``, ``AutoSlugStr``, ``NameStr`` and
  ``NormalizedNameStr`` are ready-made ``Annotated`` field types.

Examples:
    ```py
    class Post(BaseModel):
        slug: SlugStr
        title_slug: AutoSlugStr

    Post(slug="hello-world", title_slug="Hello World!!!").title_slug
    # 'hello-world'
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import AfterValidator

from .name import is_valid_name, normalize_name
from .slug import convert_to_slug, is_valid_slug

DEFAULT_SLUG_MESSAGE = (
    "Must be a valid slug (lowercase, alphanumeric, and hyphens only, "
    "no consecutive hyphens)"
)
DEFAULT_NAME_MESSAGE = (
    "Invalid name format. Must be alphanumeric, "
    "no leading/trailing/consecutive special characters."
)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ValidationRule:
    """A named predicate with the message reported when it fails.

    Attributes:
        kind: Short identifier of the rule (``"slug"``, ``"name"``).
        predicate: Returns True for acceptable values.
        message: Error message for rejected values.
    """

    kind: str
    predicate: Callable[[Any], bool]
    message: str

    def is_valid(self, value: Any) -> bool:
        """Return the predicate's verdict for ``value``."""
        return self.predicate(value)

    def __call__(self, value: Any) -> Any:
        """Return ``value`` unchanged, or raise ``ValueError`` with :attr:`message`."""
        if not self.predicate(value):
            raise ValueError(self.message)
        return value


def slug_rule(message: str | None = None, *, allow_dots: bool = False) -> ValidationRule:
    """Return a rule accepting values for which :func:`is_valid_slug` holds."""
    return ValidationRule(
        kind="slug",
        predicate=lambda value: is_valid_slug(value, allow_dots=allow_dots),
        message=message or DEFAULT_SLUG_MESSAGE,
    )


def name_rule(
    message: str | None = None,
    *,
    allowed_special_chars: Iterable[str] | None = None,
) -> ValidationRule:
    """Return a rule accepting values for which :func:`is_valid_name` holds."""
    chars = tuple(allowed_special_chars) if allowed_special_chars is not None else None
    return ValidationRule(
        kind="name",
        predicate=lambda value: is_valid_name(value, allowed_special_chars=chars),
        message=message or DEFAULT_NAME_MESSAGE,
    )


def slug_transform(
    *, separator: str | None = None, allow_dots: bool | None = None
) -> Callable[[Any], str]:
    """Return a callback converting any value with :func:`convert_to_slug`."""
    return lambda value: convert_to_slug(value, separator=separator, allow_dots=allow_dots)


def name_transform(
    *, allowed_special_chars: Iterable[str] | None = None
) -> Callable[[Any], str]:
    """Return a callback normalizing any value with :func:`normalize_name`."""
    chars = tuple(allowed_special_chars) if allowed_special_chars is not None else None
    return lambda value: normalize_name(value, allowed_special_chars=chars)


SlugStr = Annotated[str, AfterValidator(slug_rule())]
FilenameSlugStr = Annotated[str, AfterValidator(slug_rule(allow_dots=True))]
AutoSlugStr = Annotated[str, AfterValidator(slug_transform())]
NameStr = Annotated[str, AfterValidator(name_rule())]
NormalizedNameStr = Annotated[str, AfterValidator(name_transform())]
