"""Text sanitization and Markdown highlighting for terminal output.

Neutralizes terminal control bytes in content pulled from disk and colors
post bodies with Pygments.
"""

from __future__ import annotations

import re

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import MarkdownLexer
from pygments.util import ClassNotFound

DEFAULT_STYLE = "default"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, TerminalFormatter] = {}


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _formatter_for_style(style: str) -> TerminalFormatter:
    """Return cached terminal formatter for a style name, falling back to default."""
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        formatter = TerminalFormatter(style=style)
    except ClassNotFound:
        formatter = TerminalFormatter(style=DEFAULT_STYLE)
    _FORMATTERS[style] = formatter
    return formatter


def highlight_markdown(source: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return sanitized Markdown, ANSI-colored unless ``no_color`` is set."""
    safe = sanitize_terminal_text(source)
    if no_color:
        return safe
    return highlight(safe, MarkdownLexer(), _formatter_for_style(style))


__all__ = [
    "DEFAULT_STYLE",
    "sanitize_terminal_text",
    "highlight_markdown",
]
