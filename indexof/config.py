"""User settings kept in a JSON file under the platform config directory.

Holds the content root, site name, and the last listing sort. Bad or missing
values fall back to defaults; read and write failures are logged, never raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .listing.sorting import DEFAULT_SORT_COLUMN, DEFAULT_SORT_ORDER, SORT_COLUMNS, SORT_ORDERS

APP_NAME = "indexof"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_CONTENT_ROOT = Path("content")
DEFAULT_SITE_NAME = "localhost"

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Return the settings object stored at ``CONFIG_PATH``.

    A missing file, invalid JSON, or a top-level value other than an object
    all read as ``{}``.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write settings to ``CONFIG_PATH``, creating its directory as needed.

    Failures are logged and otherwise dropped; a read-only config location
    never stops a listing from rendering.
    """
    try:
        payload = json.dumps(data, indent=2, sort_keys=True)
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)


def _load_nonempty_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def load_content_root() -> Path:
    """Return the configured content root, defaulting to ``./content``."""
    value = _load_nonempty_str("content_root")
    return Path(value).expanduser() if value is not None else DEFAULT_CONTENT_ROOT


def load_site_name() -> str:
    return _load_nonempty_str("site_name") or DEFAULT_SITE_NAME


def load_sort_preference() -> tuple[str, str]:
    """Return persisted ``(column, order)``; unknown values fall back to defaults."""
    data = load_config()
    column = data.get("sort_column")
    order = data.get("sort_order")
    if column not in SORT_COLUMNS:
        column = DEFAULT_SORT_COLUMN
    if order not in SORT_ORDERS:
        order = DEFAULT_SORT_ORDER
    return str(column), str(order)


def save_sort_preference(column: str, order: str) -> None:
    """Persist listing sort preference; invalid values are not written."""
    if column not in SORT_COLUMNS or order not in SORT_ORDERS:
        return
    config = load_config()
    config["sort_column"] = column
    config["sort_order"] = order
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_content_root",
    "load_site_name",
    "load_sort_preference",
    "save_sort_preference",
]
