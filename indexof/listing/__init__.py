"""Listing presentation: sorting, type badges, size labels, and text tables."""

from __future__ import annotations

from .format import TYPE_INDICATORS, format_size, type_indicator
from .sorting import (
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_ORDER,
    SORT_COLUMNS,
    SORT_ORDERS,
    next_sort_state,
    sort_entries,
)
from .render import breadcrumb, render_listing

__all__ = [
    "TYPE_INDICATORS",
    "format_size",
    "type_indicator",
    "DEFAULT_SORT_COLUMN",
    "DEFAULT_SORT_ORDER",
    "SORT_COLUMNS",
    "SORT_ORDERS",
    "next_sort_state",
    "sort_entries",
    "breadcrumb",
    "render_listing",
]
