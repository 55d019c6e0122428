"""Domain model for a Markdown/MDX content tree.

This package contains the non-presentation pieces:
- listing and post datatypes
- frontmatter splitting and date normalization
- filesystem scanning helpers
- the read-only resolver answering listing/post/path queries
"""

from __future__ import annotations

from .types import DirectoryEntry, PostData
from .frontmatter import metadata_text, mtime_iso_date, split_frontmatter, to_iso_date
from .fs import POST_EXTENSIONS, content_segments, post_extension
from .resolver import ContentResolver

__all__ = [
    "DirectoryEntry",
    "PostData",
    "split_frontmatter",
    "metadata_text",
    "to_iso_date",
    "mtime_iso_date",
    "POST_EXTENSIONS",
    "content_segments",
    "post_extension",
    "ContentResolver",
]
