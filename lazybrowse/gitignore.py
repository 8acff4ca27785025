"""Gitignore-aware child filtering.

Asks git which immediate children of a directory are ignored. Directory
listings use this to optionally hide ignored content one level at a time.
"""

from __future__ import annotations

from collections import OrderedDict
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path


GITIGNORE_CACHE_MAX = 64
GITIGNORE_CACHE_TTL_SECONDS = 2.0


@dataclass(frozen=True)
class _IgnoredNamesCacheEntry:
    """Cached ignored-name set plus directory mtime and insertion timestamp."""

    names: frozenset[str] | None
    directory_mtime_ns: int | None
    loaded_at: float


_IGNORED_NAMES_CACHE: OrderedDict[str, _IgnoredNamesCacheEntry] = OrderedDict()


def clear_gitignore_cache() -> None:
    """Clear cached ignored-name sets."""
    _IGNORED_NAMES_CACHE.clear()


def _load_ignored_names(directory: Path) -> frozenset[str] | None:
    """Query git for ignored entries directly under ``directory``.

    Returns ``None`` when git is unavailable, ``directory`` is not inside a
    work tree, or the probe fails. ``ls-files`` run from ``directory`` reports
    paths relative to it; wholly ignored directories collapse to ``name/``, so
    nested paths belong to children that are not ignored themselves.
    """
    if shutil.which("git") is None:
        return None

    try:
        proc = subprocess.run(
            [
                "git",
                "-C",
                str(directory),
                "ls-files",
                "-z",
                "--others",
                "-i",
                "--exclude-standard",
                "--directory",
            ],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.SubprocessError):
        return None

    names: set[str] = set()
    for raw in proc.stdout.split(b"\x00"):
        if not raw:
            continue
        rel = raw.decode("utf-8", errors="surrogateescape").rstrip("/")
        if not rel or "/" in rel:
            continue
        names.add(rel)
    return frozenset(names)


def ignored_child_names(directory: Path) -> frozenset[str] | None:
    """Return names of gitignored children of ``directory`` with bounded staleness.

    ``None`` means no git information is available and nothing should be
    filtered.
    """
    key = str(directory)
    try:
        directory_mtime_ns: int | None = int(directory.stat().st_mtime_ns)
    except OSError:
        directory_mtime_ns = None
    now = time.monotonic()

    cached = _IGNORED_NAMES_CACHE.get(key)
    if cached is not None:
        cache_age = now - cached.loaded_at
        if (
            cached.directory_mtime_ns == directory_mtime_ns
            and cache_age <= GITIGNORE_CACHE_TTL_SECONDS
        ):
            _IGNORED_NAMES_CACHE.move_to_end(key)
            return cached.names

    names = _load_ignored_names(directory)
    _IGNORED_NAMES_CACHE[key] = _IgnoredNamesCacheEntry(
        names=names,
        directory_mtime_ns=directory_mtime_ns,
        loaded_at=now,
    )
    _IGNORED_NAMES_CACHE.move_to_end(key)
    while len(_IGNORED_NAMES_CACHE) > GITIGNORE_CACHE_MAX:
        _IGNORED_NAMES_CACHE.popitem(last=False)
    return names


__all__ = [
    "GITIGNORE_CACHE_MAX",
    "GITIGNORE_CACHE_TTL_SECONDS",
    "clear_gitignore_cache",
    "ignored_child_names",
]
