"""Column sorting for directory listings.

Directories always come first; the selected column only orders rows within
the directory and file partitions. Python's sort is stable in both directions,
so rows with equal keys keep their listing order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..content_model.types import DirectoryEntry

SORT_COLUMNS: tuple[str, ...] = ("name", "date", "size", "description")
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")
DEFAULT_SORT_COLUMN = "name"
DEFAULT_SORT_ORDER = "asc"


def _char_class(ch: str) -> int:
    if ch.isspace():
        return 0
    if ch.isdigit():
        return 2
    if ch.isalpha():
        return 3
    return 1


def locale_key(text: str) -> tuple[tuple[tuple[int, str], ...], str]:
    """Approximate locale collation for listing cells.

    Whitespace sorts before punctuation, punctuation before digits, digits
    before letters. Letters compare case-insensitively, lowercase first on
    ties. Accented letters order by code point, not by base letter.
    """
    primary = tuple((_char_class(ch), ch.casefold()) for ch in text)
    return primary, text.swapcase()


_COLUMN_KEYS: dict[str, Callable[[DirectoryEntry], object]] = {
    "name": lambda entry: locale_key(entry.name),
    "date": lambda entry: locale_key(entry.date),
    "size": lambda entry: entry.size,
    "description": lambda entry: locale_key(entry.description),
}


def validate_sort(column: str, order: str) -> None:
    if column not in _COLUMN_KEYS:
        raise ValueError(f"unknown sort column: {column!r}")
    if order not in SORT_ORDERS:
        raise ValueError(f"unknown sort order: {order!r}")


def sort_entries(entries: Iterable[DirectoryEntry], column: str, order: str) -> list[DirectoryEntry]:
    """Return ``entries`` sorted by ``column``/``order`` with directories first."""
    validate_sort(column, order)
    key = _COLUMN_KEYS[column]
    reverse = order == "desc"

    directories: list[DirectoryEntry] = []
    files: list[DirectoryEntry] = []
    for entry in entries:
        (directories if entry.is_directory else files).append(entry)

    return sorted(directories, key=key, reverse=reverse) + sorted(files, key=key, reverse=reverse)


def next_sort_state(current_column: str, current_order: str, clicked_column: str) -> tuple[str, str]:
    """Return the sort state after a header click.

    Clicking the active column flips direction; any other column starts
    ascending.
    """
    validate_sort(clicked_column, DEFAULT_SORT_ORDER)
    if clicked_column == current_column:
        return current_column, "desc" if current_order == "asc" else "asc"
    return clicked_column, "asc"


__all__ = [
    "SORT_COLUMNS",
    "SORT_ORDERS",
    "DEFAULT_SORT_COLUMN",
    "DEFAULT_SORT_ORDER",
    "locale_key",
    "validate_sort",
    "sort_entries",
    "next_sort_state",
]
