"""Unit tests for :mod:`handykit.entrypoints.cli.helpers.messages`.

Glyphs must follow the encoding of the stderr stream Click reports at call
time, and the emitters must write styled lines to stderr only.
"""

import io
import sys

import click
import pytest

from handykit.entrypoints.cli.helpers import messages
from handykit.entrypoints.cli.helpers.messages import (
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

ANSI_YELLOW = "\x1b[33m"
ANSI_GREEN = "\x1b[32m"
ANSI_RED = "\x1b[31m"
ANSI_BOLD = "\x1b[1m"


class EncodedTTY(io.StringIO):
    """A TTY-like text stream with a fixed declared encoding."""

    def __init__(self, encoding: str | None):
        super().__init__()
        self._declared = encoding

    @property
    def encoding(self):
        """The declared encoding (may be None)."""
        return self._declared

    def isatty(self) -> bool:
        """Report a terminal so Click keeps ANSI styling."""
        return True


def use_stderr(monkeypatch, stream: EncodedTTY) -> None:
    """Route both Click's stream lookup and the real stderr to ``stream``."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.mark.parametrize(
    ("encoding", "glyphs"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        ("latin-1", ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
        (None, ("⚠️", "✅", "❌")),
    ],
)
def test_glyphs_follow_encoding(monkeypatch, encoding, glyphs):
    """Emoji when stderr can encode them, ASCII otherwise; no encoding means UTF-8."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: EncodedTTY(encoding))
    assert (caution_glyph(), success_glyph(), error_glyph()) == glyphs


def test_stream_is_checked_on_every_call(monkeypatch):
    """The encoding is not cached between calls."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: EncodedTTY(next(encodings)))
    assert messages._supports_character("✅") is False  # pylint: disable=protected-access
    assert messages._supports_character("✅") is True  # pylint: disable=protected-access


@pytest.mark.parametrize(
    ("func", "color", "glyph"),
    [(warn, ANSI_YELLOW, "[!]"), (success, ANSI_GREEN, "[OK]"), (error, ANSI_RED, "[X]")],
)
def test_emitters_style_and_glyph(monkeypatch, func, color, glyph):
    """Each emitter writes a bold, colored line with its glyph."""
    stream = EncodedTTY("ascii")
    use_stderr(monkeypatch, stream)
    func("slug is empty")
    out = stream.getvalue()
    assert f"{glyph}  slug is empty" in out
    assert color in out
    assert ANSI_BOLD in out


@pytest.mark.parametrize("func", [warn, success, error])
def test_emitters_leave_stdout_alone(monkeypatch, capsys, func):
    """Status lines never reach stdout."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: EncodedTTY("utf-8"))
    func("status")
    captured = capsys.readouterr()
    assert "status" in captured.err
    assert captured.out == ""
