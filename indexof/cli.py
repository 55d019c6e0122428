"""Command-line front door for indexof.

Parses CLI options, resolves the content root, and routes the requested path.
Then prints a directory listing, a post, or the full set of routable paths.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from . import config
from .content_model import ContentResolver
from .highlight import DEFAULT_STYLE
from .listing import SORT_COLUMNS, SORT_ORDERS, render_listing, sort_entries
from .post_view import render_post
from .routing import DirectoryPage, NotFoundError, Page, resolve_page, split_route

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def page_to_json(page: Page, column: str, order: str) -> dict[str, object]:
    """Serialize a page value; listings are emitted in display order."""
    if isinstance(page, DirectoryPage):
        return {
            "kind": "directory",
            "path": page.path,
            "entries": [asdict(entry) for entry in sort_entries(page.entries, column, order)],
        }
    return {
        "kind": "post",
        "path": page.path,
        "parent_path": page.parent_path,
        "post": asdict(page.post),
    }


def render_page(
    page: Page,
    column: str,
    order: str,
    site_name: str,
    no_color: bool,
    style: str,
) -> str:
    if isinstance(page, DirectoryPage):
        return render_listing(page.path, page.entries, column, order, site_name)
    return render_post(page, site_name=site_name, no_color=no_color, style=style)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the page for a content path.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    Explicit ``--sort``/``--order`` choices are remembered in the config file.
    """
    parser = argparse.ArgumentParser(
        description="Resolve a Markdown content tree into Apache-style listings and posts."
    )
    parser.add_argument("path", nargs="?", default="/", help="Content path to show. Defaults to the root listing.")
    parser.add_argument("--root", default=None, help="Content root directory (default: from config or ./content).")
    parser.add_argument("--site", default=None, help="Site name shown in headings and the server footer.")
    parser.add_argument("--sort", choices=SORT_COLUMNS, default=None, help="Listing sort column.")
    parser.add_argument("--order", choices=SORT_ORDERS, default=None, help="Listing sort direction.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for post bodies.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--paths", action="store_true", help="Print every routable path and exit.")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log degraded content to stderr.")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    root = Path(args.root) if args.root is not None else config.load_content_root()
    if not root.is_dir():
        raise SystemExit(f"Content root not found: {root}")
    resolver = ContentResolver(root)

    if args.paths:
        paths = resolver.enumerate_all_paths()
        if args.json:
            sys.stdout.write(json.dumps(paths, indent=2) + "\n")
        else:
            sys.stdout.write("".join("/" + "/".join(segments) + "\n" for segments in paths))
        return

    column, order = config.load_sort_preference()
    if args.sort is not None or args.order is not None:
        column = args.sort or column
        order = args.order or order
        config.save_sort_preference(column, order)

    try:
        page = resolve_page(resolver, split_route(args.path))
    except NotFoundError as exc:
        logger.debug("unresolvable path %s under %s", exc.path, root)
        raise SystemExit(str(exc)) from exc

    if args.json:
        sys.stdout.write(json.dumps(page_to_json(page, column, order), indent=2) + "\n")
        return

    site_name = args.site or config.load_site_name()
    no_color = args.no_color or not sys.stdout.isatty()
    sys.stdout.write(render_page(page, column, order, site_name, no_color, args.style))


if __name__ == "__main__":
    main()
