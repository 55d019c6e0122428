"""Filesystem scanning helpers for the content tree."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Priority order when several files share a stem.
POST_EXTENSIONS: tuple[str, ...] = (".mdx", ".md")
INDEX_STEM = "index"


@dataclass(frozen=True)
class ContentChild:
    """One scanned directory child."""

    name: str
    path: Path
    is_dir: bool


def content_segments(relative_path: str) -> tuple[str, ...] | None:
    """Split a ``/``-joined content path into segments.

    Empty and ``.`` segments are dropped. Returns ``None`` when the path tries
    to climb out of the tree with ``..``.
    """
    segments: list[str] = []
    for segment in relative_path.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            return None
        segments.append(segment)
    return tuple(segments)


def post_extension(name: str) -> str | None:
    """Return the recognized post extension ``name`` ends with, if any."""
    for extension in POST_EXTENSIONS:
        if name.endswith(extension) and len(name) > len(extension):
            return extension
    return None


def strip_post_extension(name: str) -> str:
    extension = post_extension(name)
    return name[: -len(extension)] if extension else name


def safe_mtime(path: Path) -> float | None:
    """Return ``st_mtime`` for ``path`` or ``None`` on stat failure."""
    try:
        return path.stat().st_mtime
    except OSError:
        return None


@dataclass(frozen=True)
class PostSource:
    """Decoded post text plus the on-disk byte count."""

    text: str
    size: int


def read_source(path: Path) -> PostSource | None:
    """Read a post file without newline translation.

    Decodes UTF-8, falling back to latin-1. ``size`` is the raw byte length.
    Returns ``None`` when the file cannot be read at all.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("cannot read %s: %s", path, exc)
        return None
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    return PostSource(text=text, size=len(data))


def scan_children(directory: Path) -> list[ContentChild]:
    """List immediate children of ``directory`` in scan order.

    Returns an empty list when the directory cannot be scanned.
    """
    children: list[ContentChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(ContentChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return []
    return children


def find_post_file(directory: Path, stem: str) -> Path | None:
    """Return ``directory/stem<ext>`` for the first recognized extension that exists."""
    for extension in POST_EXTENSIONS:
        candidate = directory / f"{stem}{extension}"
        if candidate.is_file():
            return candidate
    return None


__all__ = [
    "POST_EXTENSIONS",
    "INDEX_STEM",
    "ContentChild",
    "content_segments",
    "post_extension",
    "strip_post_extension",
    "safe_mtime",
    "PostSource",
    "read_source",
    "scan_children",
    "find_post_file",
]
