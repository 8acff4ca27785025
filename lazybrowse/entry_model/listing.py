"""Depth-1 directory enumeration with optional hidden/gitignore filtering."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..gitignore import ignored_child_names
from .errors import EntryIOError


@dataclass(frozen=True)
class ListingOptions:
    """Filters applied when a directory enumerates its children.

    Children, parents, and resolved link targets inherit the options of the
    node that produced them.
    """

    show_hidden: bool = True
    skip_gitignored: bool = False


DEFAULT_LISTING_OPTIONS = ListingOptions()


def list_child_names(directory: Path, options: ListingOptions = DEFAULT_LISTING_OPTIONS) -> list[str]:
    """Return names of the immediate children of ``directory`` in OS order.

    ``os.scandir`` never yields ``.`` or ``..``. Raises ``EntryIOError`` when
    the directory cannot be scanned.
    """
    ignored = ignored_child_names(directory) if options.skip_gitignored else None

    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not options.show_hidden and name.startswith("."):
                    continue
                if ignored is not None and name in ignored:
                    continue
                names.append(name)
    except OSError as exc:
        raise EntryIOError(directory, exc) from exc
    return names


__all__ = [
    "ListingOptions",
    "DEFAULT_LISTING_OPTIONS",
    "list_child_names",
]
