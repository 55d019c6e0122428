"""Plain-text article view for a routed post."""

from __future__ import annotations

from .highlight import DEFAULT_STYLE, highlight_markdown
from .listing.render import breadcrumb
from .routing import PostPage


def render_post(
    page: PostPage,
    site_name: str = "localhost",
    no_color: bool = False,
    style: str = DEFAULT_STYLE,
) -> str:
    """Render breadcrumb, optional date line, then the highlighted body."""
    lines = [breadcrumb(page.path, site_name), ""]
    if page.post.date:
        lines.extend([page.post.date, ""])
    body = highlight_markdown(page.post.content.strip("\n"), style=style, no_color=no_color)
    return "\n".join(lines) + "\n" + body.rstrip("\n") + "\n"


__all__ = ["render_post"]
