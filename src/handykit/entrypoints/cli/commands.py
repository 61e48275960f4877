"""Text-utility commands for the handykit CLI.

Results are printed to **stdout** one per line so they can be piped; status
lines (validity verdicts, warnings) go to **stderr**.

Failure modes
- A separator that slug conversion would rewrite (``x``, ``7`` or ``é``),
  from ``--separator`` or ``HANDYKIT_SLUG_SEPARATOR``
  → usage error (exit status 2).
- A bad ``HANDYKIT_HASH_LENGTH`` or an out-of-range ``--hash-length``
  → ``ClickException`` with the underlying message.
- ``check-slug``/``check-name`` exit with status 1 when the candidate is
  rejected.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from handykit import config
from handykit.errors import HandykitError, InvalidConfigError
from handykit.files import get_hashed_filename
from handykit.name import NameOptions, is_valid_name, normalize_name
from handykit.slug import SlugOptions, convert_to_slug, generate_unique_slug, is_valid_slug

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

EMPTY_SLUG_WARNING = "The input contains no letters or digits; the slug is empty."
EMPTY_NAME_WARNING = "The input contains no letters or digits; the name is empty."


def _resolve_separator(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str:
    """Validate --separator, falling back to ``HANDYKIT_SLUG_SEPARATOR``."""
    try:
        if value is None:
            return config.get_slug_separator()
        return config.check_slug_separator(value, source="--separator")
    except InvalidConfigError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def _name_options(allowed: tuple[str, ...]) -> NameOptions:
    # no --allow means the default (space only)
    return NameOptions(allowed_special_chars=allowed) if allowed else NameOptions()


separator_option = click.option(
    "--separator",
    "-s",
    type=str,
    default=None,
    callback=_resolve_separator,
    help="Separator placed between words. [default: HANDYKIT_SLUG_SEPARATOR or '-']",
)
allow_dots_option = click.option(
    "--allow-dots/--no-allow-dots",
    default=False,
    show_default=True,
    help="Keep dots as an extra separator (for filenames).",
)
allow_option = click.option(
    "--allow",
    "-a",
    "allowed",
    multiple=True,
    help="Special character allowed between words. Repeatable. [default: space]",
)


@click.command()
@click.argument("text", nargs=-1, required=True)
@separator_option
@allow_dots_option
@click.option(
    "--existing",
    "-e",
    "existing",
    multiple=True,
    help="Slug already in use; a numeric suffix is added on collision. Repeatable.",
)
def slug(
    text: tuple[str, ...], separator: str, allow_dots: bool, existing: tuple[str, ...]
) -> None:
    """Convert TEXT to a URL slug."""
    options = SlugOptions(separator=separator, allow_dots=allow_dots)
    result = convert_to_slug(" ".join(text), options)
    logger.debug("slug(%r) -> %r", text, result)
    if not result:
        warn(EMPTY_SLUG_WARNING)
    elif existing:
        result = generate_unique_slug(result, existing, options)
    click.echo(result)


@click.command("check-slug")
@click.argument("candidate")
@separator_option
@allow_dots_option
@click.pass_context
def check_slug(
    ctx: click.Context, candidate: str, separator: str, allow_dots: bool
) -> None:
    """Check whether CANDIDATE is a valid slug (exit status 1 if not)."""
    if is_valid_slug(candidate, SlugOptions(separator=separator, allow_dots=allow_dots)):
        success(f"{candidate!r} is a valid slug.")
        return
    error(f"{candidate!r} is not a valid slug.")
    ctx.exit(1)


@click.command()
@click.argument("text", nargs=-1, required=True)
@allow_option
def name(text: tuple[str, ...], allowed: tuple[str, ...]) -> None:
    """Normalize TEXT into a clean display name."""
    result = normalize_name(" ".join(text), _name_options(allowed))
    logger.debug("name(%r) -> %r", text, result)
    if not result:
        warn(EMPTY_NAME_WARNING)
    click.echo(result)


@click.command("check-name")
@click.argument("candidate")
@allow_option
@click.pass_context
def check_name(ctx: click.Context, candidate: str, allowed: tuple[str, ...]) -> None:
    """Check whether CANDIDATE is a valid name (exit status 1 if not)."""
    if is_valid_name(candidate, _name_options(allowed)):
        success(f"{candidate!r} is a valid name.")
        return
    error(f"{candidate!r} is not a valid name.")
    ctx.exit(1)


@click.command("hashed-filename")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path)
)
@click.option(
    "--hash-length",
    "-n",
    type=int,
    default=None,
    help="Number of hex digits of the SHA-256 digest. [default: HANDYKIT_HASH_LENGTH or 8]",
)
@click.option(
    "--name",
    "original_name",
    default=None,
    help="Name to derive the result from. [default: the file's own name]",
)
def hashed_filename(path: Path, hash_length: int | None, original_name: str | None) -> None:
    """Print a content-hashed, slug-safe file name for the file at PATH."""
    try:
        length = hash_length if hash_length is not None else config.get_hash_length()
        with path.open("rb") as stream:
            result = get_hashed_filename(stream, original_name or path.name, length)
    except HandykitError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Hashed %s", path)
    click.echo(result)
