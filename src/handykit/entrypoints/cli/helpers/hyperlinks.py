"""OSC-8 hyperlink utilities for the handykit CLI.

Provides a small heuristic to detect whether the active text stream supports
OSC-8 terminal hyperlinks and a helper to render a URL as a clickable link,
falling back to plain text when unsupported.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: Text stream to inspect; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted.

    Notes:
        - Returns ``False`` when the stream is not a TTY (piped or redirected).
        - Uses an allowlist of terminal identifiers (VS Code, iTerm2, WezTerm,
          Kitty, Windows Terminal, VTE-based terminals).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return ``label`` (default: the URL) linked to ``url`` when supported.

    Uses BEL (``\\x07``) as the OSC-8 terminator for broad terminal support.
    """
    text = label or url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
