"""Domain model for lazily-populated filesystem entries.

This package contains the non-UI core:
- path canonicalization used as node identity
- ``File``/``Directory``/``SymLink`` nodes with once-filled cache slots
- the ``Entry`` wrapper and ``classify`` constructor
- depth-1 child enumeration with hidden/gitignore filters
- the ``EntryError`` taxonomy
"""

from __future__ import annotations

from .errors import (
    EntryError,
    EntryIOError,
    EntryNotFoundError,
    IncorrectFileTypeError,
    UnknownEntryError,
    UnrecognizedFileTypeError,
    wrap_unknown,
)
from .listing import DEFAULT_LISTING_OPTIONS, ListingOptions, list_child_names
from .nodes import Directory, Entry, File, Node, SymLink, classify
from .paths import PathIdentity, canonicalize, canonicalize_lenient, path_identity

__all__ = [
    "EntryError",
    "EntryIOError",
    "EntryNotFoundError",
    "IncorrectFileTypeError",
    "UnknownEntryError",
    "UnrecognizedFileTypeError",
    "wrap_unknown",
    "ListingOptions",
    "DEFAULT_LISTING_OPTIONS",
    "list_child_names",
    "Node",
    "File",
    "Directory",
    "SymLink",
    "Entry",
    "classify",
    "PathIdentity",
    "canonicalize",
    "canonicalize_lenient",
    "path_identity",
]
