"""Persistent JSON config helpers.

Stores listing preferences (hidden files, gitignore filtering) and the
preview style. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .entry_model import ListingOptions

APP_NAME = "lazybrowse"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks
    browsing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit JSON booleans are accepted."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def _save_bool(key: str, value: bool) -> None:
    config = load_config()
    config[key] = bool(value)
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference (default ``False``)."""
    return _load_bool("show_hidden", False)


def save_show_hidden(show_hidden: bool) -> None:
    _save_bool("show_hidden", show_hidden)


def load_skip_gitignored() -> bool:
    """Return persisted gitignore filtering preference (default ``True``)."""
    return _load_bool("skip_gitignored", True)


def save_skip_gitignored(skip_gitignored: bool) -> None:
    _save_bool("skip_gitignored", skip_gitignored)


def load_style() -> str:
    """Load persisted Pygments style name, falling back to ``monokai``."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE


def save_style(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)


def load_listing_options() -> ListingOptions:
    """Build listing options from persisted preferences."""
    return ListingOptions(
        show_hidden=load_show_hidden(),
        skip_gitignored=load_skip_gitignored(),
    )


def save_listing_options(options: ListingOptions) -> None:
    config = load_config()
    config["show_hidden"] = bool(options.show_hidden)
    config["skip_gitignored"] = bool(options.skip_gitignored)
    save_config(config)
