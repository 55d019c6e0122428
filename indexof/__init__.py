"""indexof: Apache-style directory listings for a Markdown/MDX content tree.

``main`` runs the command line. Importing the package itself stays cheap;
Pygments and PyYAML load only when a submodule needs them.
"""

from __future__ import annotations


def main(argv: list[str] | None = None) -> None:
    """Run the ``indexof`` command line with ``argv`` (default ``sys.argv``)."""
    from .cli import main as cli_main

    cli_main(argv)


__all__ = ["main"]
