"""Domain datatypes for content-tree listings and posts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One row of a directory listing, either a subdirectory or a post file."""

    name: str
    is_directory: bool
    extension: str
    date: str
    size: int
    description: str
    href: str


@dataclass(frozen=True)
class PostData:
    """Loaded post: frontmatter fields plus the raw body text."""

    title: str
    description: str
    date: str
    content: str
    slug: str


__all__ = [
    "DirectoryEntry",
    "PostData",
]
