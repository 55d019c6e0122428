"""Plain-text Apache-style "Index of" tables.

Rendering here is presentation-only and side-effect free.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..content_model.types import DirectoryEntry
from ..highlight import sanitize_terminal_text
from .format import PARENT_INDICATOR, format_size, type_indicator
from .sorting import sort_entries

SERVER_SIGNATURE = "Apache/2.4.54 (Unix) OpenSSL/1.1.1t Server at {site} Port 443"
COLUMN_TITLES: tuple[tuple[str, str], ...] = (
    ("name", "Name"),
    ("date", "Last modified"),
    ("size", "Size"),
    ("description", "Description"),
)
ASC_MARK = " ▲"
DESC_MARK = " ▼"
COLUMN_GAP = "  "


def breadcrumb(path: str, site_name: str) -> str:
    """Return ``Index of /<site>/a/b`` keeping a trailing slash only for directories."""
    segments = [segment for segment in path.split("/") if segment]
    text = f"Index of /{site_name}/" + "/".join(segments)
    if segments and path.endswith("/"):
        text += "/"
    return sanitize_terminal_text(text)


def _header_cells(column: str, order: str) -> list[str]:
    cells = [""]
    for key, title in COLUMN_TITLES:
        if key == column:
            title += ASC_MARK if order == "asc" else DESC_MARK
        cells.append(title)
    return cells


def _entry_cells(entry: DirectoryEntry) -> list[str]:
    return [
        type_indicator(entry),
        sanitize_terminal_text(entry.name),
        entry.date,
        "-" if entry.is_directory else format_size(entry.size),
        sanitize_terminal_text(entry.description),
    ]


def _layout(rows: list[list[str]]) -> list[str]:
    """Pad cells into columns; the size column is right-aligned."""
    widths = [max(len(row[idx]) for row in rows) for idx in range(len(rows[0]))]
    lines: list[str] = []
    for row in rows:
        cells = []
        for idx, cell in enumerate(row):
            cells.append(cell.rjust(widths[idx]) if idx == 3 else cell.ljust(widths[idx]))
        lines.append(COLUMN_GAP.join(cells).rstrip())
    return lines


def render_listing(
    page_path: str,
    entries: Iterable[DirectoryEntry],
    column: str = "name",
    order: str = "asc",
    site_name: str = "localhost",
) -> str:
    """Render a sorted listing table for the directory at ``page_path``."""
    rows = [_header_cells(column, order)]
    if page_path != "/":
        rows.append([PARENT_INDICATOR, "Parent Directory", "", "-", ""])
    rows.extend(_entry_cells(entry) for entry in sort_entries(entries, column, order))

    table = _layout(rows)
    rule = "-" * max(len(line) for line in table)
    lines = [
        breadcrumb(page_path, site_name),
        "",
        table[0],
        rule,
        *table[1:],
        rule,
        SERVER_SIGNATURE.format(site=site_name),
    ]
    return "\n".join(lines) + "\n"


__all__ = [
    "SERVER_SIGNATURE",
    "breadcrumb",
    "render_listing",
]
