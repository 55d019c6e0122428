"""Type badges and human-readable sizes for listing rows."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..content_model.types import DirectoryEntry

DIRECTORY_INDICATOR = "[DIR]"
PARENT_INDICATOR = "[PARENTDIR]"
UNKNOWN_INDICATOR = "[ ]"

TYPE_INDICATORS: dict[str, str] = {
    ".mdx": "[TXT]",
    ".md": "[TXT]",
    ".txt": "[TXT]",
    ".pdf": "[PDF]",
    ".png": "[IMG]",
    ".jpg": "[IMG]",
    ".jpeg": "[IMG]",
    ".gif": "[IMG]",
    ".svg": "[IMG]",
    ".tar.gz": "[CMP]",
    ".zip": "[CMP]",
    ".gz": "[CMP]",
}

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB


def type_indicator(entry: DirectoryEntry) -> str:
    """Return the bracketed type badge for ``entry``."""
    if entry.is_directory:
        return DIRECTORY_INDICATOR
    return TYPE_INDICATORS.get(entry.extension.lower(), UNKNOWN_INDICATOR)


def _fixed(value: float, places: int) -> str:
    """Format with half-up rounding on the exact binary value."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_size(size_bytes: int) -> str:
    """Format a byte count the way Apache's fancy index does.

    ``0`` -> ``"0"``, bytes below 1 KiB as integers, KiB with one decimal,
    then whole MiB and GiB.
    """
    if size_bytes == 0:
        return "0"
    if size_bytes < KIB:
        return f"{size_bytes}"
    if size_bytes < MIB:
        return f"{_fixed(size_bytes / KIB, 1)}K"
    if size_bytes < GIB:
        return f"{_fixed(size_bytes / MIB, 0)}M"
    return f"{_fixed(size_bytes / GIB, 0)}G"


__all__ = [
    "DIRECTORY_INDICATOR",
    "PARENT_INDICATOR",
    "UNKNOWN_INDICATOR",
    "TYPE_INDICATORS",
    "type_indicator",
    "format_size",
]
