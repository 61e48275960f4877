"""Terminal message helpers for the handykit CLI.

Render user-visible status lines with emoji→ASCII fallbacks. Messages go to
stderr so stdout carries only command results (slugs, names, filenames).
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to test (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  Separator contains no characters; segments will be joined.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  'hello-world' is a valid slug.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  'Hello World' is not a valid slug.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
