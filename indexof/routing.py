"""Route ``/``-joined content paths to directory or post pages.

A path resolves to a directory listing first, then to a post. Anything else
raises ``NotFoundError``, the single user-visible failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .content_model import ContentResolver, DirectoryEntry, PostData, content_segments


class NotFoundError(LookupError):
    """Raised when a path is neither a directory nor a post."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not found: {path}")
        self.path = path


@dataclass(frozen=True)
class DirectoryPage:
    """Directory listing page; ``path`` is ``/`` or ``/a/b/``."""

    path: str
    entries: tuple[DirectoryEntry, ...]


@dataclass(frozen=True)
class PostPage:
    """Post page; ``parent_path`` is ``/`` or ``/a/b``."""

    post: PostData
    path: str
    parent_path: str


Page = DirectoryPage | PostPage


def split_route(route: str) -> list[str]:
    """Split a request path into segments, raising ``NotFoundError`` on ``..``."""
    segments = content_segments(route)
    if segments is None:
        raise NotFoundError(route)
    return list(segments)


def directory_page_path(segments: Sequence[str]) -> str:
    return "/" if not segments else "/" + "/".join(segments) + "/"


def parent_path(segments: Sequence[str]) -> str:
    parents = list(segments[:-1])
    return "/" if not parents else "/" + "/".join(parents)


def resolve_page(resolver: ContentResolver, segments: Sequence[str]) -> Page:
    """Resolve ``segments`` to a page, preferring directories over posts."""
    content_path = "/".join(segments)

    if resolver.is_directory(content_path):
        return DirectoryPage(
            path=directory_page_path(segments),
            entries=tuple(resolver.list_directory(content_path)),
        )

    if resolver.is_post(content_path):
        post = resolver.load_post(content_path)
        if post is None:
            raise NotFoundError("/" + content_path)
        return PostPage(post=post, path="/" + content_path, parent_path=parent_path(segments))

    raise NotFoundError("/" + content_path)


def static_params(resolver: ContentResolver) -> list[dict[str, list[str]]]:
    """Return one ``{"path": segments}`` mapping per routable path."""
    return [{"path": segments} for segments in resolver.enumerate_all_paths()]


__all__ = [
    "NotFoundError",
    "DirectoryPage",
    "PostPage",
    "Page",
    "split_route",
    "directory_page_path",
    "parent_path",
    "resolve_page",
    "static_params",
]
