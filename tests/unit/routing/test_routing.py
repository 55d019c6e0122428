"""Tests for page routing, static params, and the post text view."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from indexof.content_model import ContentResolver
from indexof.post_view import render_post
from indexof.routing import (
    DirectoryPage,
    NotFoundError,
    PostPage,
    parent_path,
    resolve_page,
    split_route,
    static_params,
)


def build_site(root: Path) -> None:
    (root / "archives").mkdir()
    (root / "archives" / "june.md").write_text(
        "---\ntitle: June\ndate: 2025-06-15\n---\nSummer notes.\n", encoding="utf-8"
    )
    (root / "hello.mdx").write_text(
        "---\ntitle: Hello\ndate: 2026-02-23\ndescription: First post\n---\n# Hello\n\nWelcome.\n",
        encoding="utf-8",
    )
    (root / "about.md").write_text("No frontmatter.\n", encoding="utf-8")


class ResolvePageTests(unittest.TestCase):
    def test_root_is_a_directory_page(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)

            page = resolve_page(ContentResolver(root), [])

            assert isinstance(page, DirectoryPage)
            self.assertEqual(page.path, "/")
            self.assertEqual(
                sorted(entry.name for entry in page.entries),
                ["about.md", "archives/", "hello.mdx"],
            )

    def test_nested_directory_page_path_has_trailing_slash(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)

            page = resolve_page(ContentResolver(root), ["archives"])

            assert isinstance(page, DirectoryPage)
            self.assertEqual(page.path, "/archives/")

    def test_post_page_carries_parent_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)
            resolver = ContentResolver(root)

            nested = resolve_page(resolver, ["archives", "june"])
            top_level = resolve_page(resolver, ["hello"])

            assert isinstance(nested, PostPage)
            assert isinstance(top_level, PostPage)
            self.assertEqual(nested.path, "/archives/june")
            self.assertEqual(nested.parent_path, "/archives")
            self.assertEqual(nested.post.title, "June")
            self.assertEqual(top_level.parent_path, "/")

    def test_directory_wins_over_post_with_same_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)
            (root / "archives.md").write_text("shadowed\n", encoding="utf-8")

            page = resolve_page(ContentResolver(root), ["archives"])

            self.assertIsInstance(page, DirectoryPage)

    def test_unknown_path_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)

            with self.assertRaises(NotFoundError) as ctx:
                resolve_page(ContentResolver(root), ["archives", "missing"])

            self.assertEqual(ctx.exception.path, "/archives/missing")
            self.assertEqual(str(ctx.exception), "Not found: /archives/missing")


class RouteHelpersTests(unittest.TestCase):
    def test_split_route_drops_empty_segments(self) -> None:
        self.assertEqual(split_route("/a//b/"), ["a", "b"])
        self.assertEqual(split_route("/"), [])

    def test_split_route_rejects_parent_segments(self) -> None:
        with self.assertRaises(NotFoundError):
            split_route("/a/../../secret")

    def test_parent_path(self) -> None:
        self.assertEqual(parent_path(["hello"]), "/")
        self.assertEqual(parent_path(["a", "b", "c"]), "/a/b")

    def test_static_params_cover_every_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)

            params = static_params(ContentResolver(root))

            self.assertEqual(
                sorted(param["path"] for param in params),
                [["about"], ["archives"], ["archives", "june"], ["hello"]],
            )


class RenderPostTests(unittest.TestCase):
    def test_plain_post_view(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)
            page = resolve_page(ContentResolver(root), ["hello"])
            assert isinstance(page, PostPage)

            rendered = render_post(page, site_name="example.com", no_color=True)

            self.assertEqual(
                rendered,
                "Index of /example.com/hello\n\n2026-02-23\n\n# Hello\n\nWelcome.\n",
            )

    def test_post_without_date_skips_date_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)
            page = resolve_page(ContentResolver(root), ["about"])
            assert isinstance(page, PostPage)

            rendered = render_post(page, site_name="example.com", no_color=True)

            self.assertEqual(rendered, "Index of /example.com/about\n\nNo frontmatter.\n")

    def test_colored_post_view_contains_ansi(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            build_site(root)
            page = resolve_page(ContentResolver(root), ["hello"])
            assert isinstance(page, PostPage)

            rendered = render_post(page, no_color=False, style="no-such-style")

            self.assertIn("\x1b[", rendered)
            self.assertIn("Welcome.", rendered)


if __name__ == "__main__":
    unittest.main()
