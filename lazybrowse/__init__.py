"""Public package surface for lazybrowse.

Re-exports the entry model (``classify``, ``Entry``, node variants and
errors) and exposes ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .entry_model import (
    Directory,
    Entry,
    EntryError,
    EntryIOError,
    EntryNotFoundError,
    File,
    IncorrectFileTypeError,
    ListingOptions,
    SymLink,
    UnknownEntryError,
    UnrecognizedFileTypeError,
    canonicalize,
    classify,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "classify",
    "canonicalize",
    "Entry",
    "File",
    "Directory",
    "SymLink",
    "ListingOptions",
    "EntryError",
    "EntryIOError",
    "EntryNotFoundError",
    "IncorrectFileTypeError",
    "UnknownEntryError",
    "UnrecognizedFileTypeError",
]
