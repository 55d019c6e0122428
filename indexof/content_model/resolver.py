"""Read-only resolution of listings, posts, and routable paths from a content tree.

Every call scans the tree afresh. Missing or unreadable paths resolve to empty
results rather than errors, so callers only ever branch on presence.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from .frontmatter import metadata_text, mtime_iso_date, split_frontmatter, to_iso_date
from .fs import (
    INDEX_STEM,
    content_segments,
    find_post_file,
    post_extension,
    read_source,
    safe_mtime,
    scan_children,
    strip_post_extension,
)
from .types import DirectoryEntry, PostData


def _utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class ContentResolver:
    """Answer listing/post/path queries against a content root directory."""

    def __init__(self, root: Path, today: Callable[[], str] | None = None) -> None:
        self.root = Path(root)
        self._today = today or _utc_today

    def _resolve(self, relative_path: str) -> tuple[tuple[str, ...], Path] | None:
        segments = content_segments(relative_path)
        if segments is None:
            return None
        return segments, self.root.joinpath(*segments)

    def _post_file(self, relative_path: str) -> tuple[tuple[str, ...], Path] | None:
        resolved = self._resolve(relative_path)
        if resolved is None:
            return None
        segments, full_path = resolved
        if not segments:
            return None
        post_path = find_post_file(full_path.parent, full_path.name)
        if post_path is None:
            return None
        return segments, post_path

    def is_directory(self, relative_path: str) -> bool:
        resolved = self._resolve(relative_path)
        return resolved is not None and resolved[1].is_dir()

    def is_post(self, relative_path: str) -> bool:
        return self._post_file(relative_path) is not None

    def load_post(self, relative_path: str) -> PostData | None:
        """Load the post at ``relative_path`` (no extension), or ``None``.

        ``.mdx`` wins over ``.md`` when both exist. Title falls back to the
        final path segment; description and date fall back to ``""``.
        """
        found = self._post_file(relative_path)
        if found is None:
            return None
        segments, post_path = found
        source = read_source(post_path)
        if source is None:
            return None

        metadata, body = split_frontmatter(source.text)
        return PostData(
            title=metadata_text(metadata, "title") or segments[-1],
            description=metadata_text(metadata, "description"),
            date=to_iso_date(metadata.get("date")) or "",
            content=body,
            slug="/".join(segments),
        )

    def list_directory(self, relative_path: str) -> list[DirectoryEntry]:
        """List immediate subdirectories and post files of ``relative_path``.

        Returns ``[]`` when the path is missing or not a directory. Files
        without a recognized post extension are skipped.
        """
        resolved = self._resolve(relative_path)
        if resolved is None:
            return []
        segments, full_path = resolved
        if not full_path.is_dir():
            return []

        entries: list[DirectoryEntry] = []
        for child in scan_children(full_path):
            if child.is_dir:
                entries.append(
                    DirectoryEntry(
                        name=child.name + "/",
                        is_directory=True,
                        extension="",
                        date=self._directory_date(child.path),
                        size=0,
                        description=self._directory_description(child.path),
                        href="/" + "/".join((*segments, child.name)),
                    )
                )
                continue

            extension = post_extension(child.name)
            if extension is None:
                continue
            source = read_source(child.path)
            if source is None:
                continue
            metadata, _body = split_frontmatter(source.text)
            entries.append(
                DirectoryEntry(
                    name=child.name,
                    is_directory=False,
                    extension=extension,
                    date=self._post_date(metadata, child.path),
                    size=source.size,
                    description=metadata_text(metadata, "description"),
                    href="/" + "/".join((*segments, strip_post_extension(child.name))),
                )
            )
        return entries

    def enumerate_all_paths(self) -> list[list[str]]:
        """Return every directory and post path as segment lists, pre-order.

        A route is emitted once even when ``x.md`` and ``x.mdx`` or a post
        and a directory share it; the first one scanned keeps its position.
        """
        paths: list[list[str]] = []
        seen: set[tuple[str, ...]] = set()

        def emit(route: list[str]) -> None:
            key = tuple(route)
            if key not in seen:
                seen.add(key)
                paths.append(route)

        def walk(directory: Path, segments: list[str]) -> None:
            for child in scan_children(directory):
                if child.is_dir:
                    child_segments = [*segments, child.name]
                    emit(child_segments)
                    walk(child.path, child_segments)
                elif post_extension(child.name) is not None:
                    emit([*segments, strip_post_extension(child.name)])

        walk(self.root, [])
        return paths

    def _post_date(self, metadata: dict[str, object], path: Path) -> str:
        date = to_iso_date(metadata.get("date"))
        if date is not None:
            return date
        mtime = safe_mtime(path)
        return mtime_iso_date(mtime) if mtime is not None else ""

    def _directory_date(self, directory: Path) -> str:
        """Most recent date among the directory's own post files, else today."""
        latest = ""
        for child in scan_children(directory):
            if child.is_dir or post_extension(child.name) is None:
                continue
            source = read_source(child.path)
            metadata = split_frontmatter(source.text)[0] if source is not None else {}
            # ISO calendar dates order lexically.
            latest = max(latest, self._post_date(metadata, child.path))
        return latest or self._today()

    def _directory_description(self, directory: Path) -> str:
        index_path = find_post_file(directory, INDEX_STEM)
        if index_path is None:
            return ""
        source = read_source(index_path)
        if source is None:
            return ""
        return metadata_text(split_frontmatter(source.text)[0], "description")


__all__ = ["ContentResolver"]
