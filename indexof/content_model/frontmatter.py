"""Frontmatter splitting and field normalization for post files.

A post starts with a YAML mapping fenced by ``---`` lines, followed by the
body. Anything malformed degrades to empty metadata instead of raising.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

import yaml

logger = logging.getLogger(__name__)

FENCE = "---"


def split_frontmatter(raw: str) -> tuple[dict[str, object], str]:
    """Return ``(metadata, body)`` for raw post text.

    Text without a leading fence, with an unterminated fence, or whose fenced
    block is not a YAML mapping yields ``({}, raw)``.
    """
    text = raw.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FENCE:
        return {}, raw

    end: int | None = None
    for idx in range(1, len(lines)):
        if lines[idx].strip() == FENCE:
            end = idx
            break
    if end is None:
        logger.debug("unterminated frontmatter fence")
        return {}, raw

    block = "".join(lines[1:end])
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        logger.debug("invalid frontmatter YAML: %s", exc)
        return {}, raw

    body = "".join(lines[end + 1 :])
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        logger.debug("frontmatter is not a mapping: %r", type(data).__name__)
        return {}, raw
    return data, body


def metadata_text(metadata: dict[str, object], key: str) -> str:
    """Return a string field, or ``""`` when missing, null, or empty."""
    value = metadata.get(key)
    if value is None or value == "":
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def to_iso_date(value: object) -> str | None:
    """Normalize a frontmatter date value to ``YYYY-MM-DD``.

    Datetimes are converted to UTC first. Strings are parsed as ISO 8601.
    Returns ``None`` for anything that is not a recognizable date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        return None

    candidate = value.strip()
    if not candidate:
        return None
    try:
        return to_iso_date(datetime.fromisoformat(candidate.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        return date.fromisoformat(candidate[:10]).isoformat()
    except ValueError:
        return None


def mtime_iso_date(mtime: float) -> str:
    """Return the UTC calendar date for a POSIX modification timestamp."""
    return datetime.fromtimestamp(mtime, tz=timezone.utc).date().isoformat()


__all__ = [
    "split_frontmatter",
    "metadata_text",
    "to_iso_date",
    "mtime_iso_date",
]
