"""Outcome lines printed by the shell.

Every line goes to stderr, bold and colored, led by a marker glyph. Emoji
markers are used only when stderr can encode them; otherwise an ASCII marker
such as ``[OK]`` takes their place.
"""

import click

# kind: (emoji, ascii fallback, color)
MARKERS = {
    "caution": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}


def _stderr_can_encode(text: str) -> bool:
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None)
    try:
        text.encode(encoding or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def _marker(kind: str) -> str:
    emoji, fallback, _ = MARKERS[kind]
    return emoji if _stderr_can_encode(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    click.secho(f"{_marker(kind)}  {msg}", fg=MARKERS[kind][2], bold=True, err=True)


def caution_glyph() -> str:
    """"⚠️" or "[!]"."""
    return _marker("caution")


def success_glyph() -> str:
    """"✅" or "[OK]"."""
    return _marker("success")


def error_glyph() -> str:
    """"❌" or "[X]"."""
    return _marker("error")


def warn(msg: str) -> None:
    """Yellow line, e.g. ``⚠️  Login failed.``"""
    _emit("caution", msg)


def success(msg: str) -> None:
    """Green line, e.g. ``✅  Aircraft AC-1 created.``"""
    _emit("success", msg)


def error(msg: str) -> None:
    """Red line, e.g. ``❌  Aircraft (AC-9) not found.``"""
    _emit("error", msg)
