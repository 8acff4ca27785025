"""Path canonicalization used as node identity."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .errors import EntryIOError


@dataclass(frozen=True)
class PathIdentity:
    """Caller-supplied path paired with its canonical absolute form."""

    relative_path: Path
    full_path: Path


def _resolve_strict(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on interpreters before 3.13.
        raise EntryIOError(path, exc) from exc


def canonicalize(path: str | os.PathLike[str]) -> Path:
    """Return the canonical absolute path for ``path``.

    Symlinks keep their own identity: the containing directory is resolved
    and the link name appended, so a link never shares a full path with its
    target and dangling links stay addressable.
    """
    path = Path(path)
    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        raise EntryIOError(path, exc) from exc

    if not stat.S_ISLNK(mode):
        return _resolve_strict(path)

    # ``..`` before the link name must be resolved through the real parent,
    # never collapsed textually.
    absolute = path if path.is_absolute() else Path.cwd() / path
    if absolute.parent == absolute:
        return absolute
    return _resolve_strict(absolute.parent) / absolute.name


def canonicalize_lenient(path: str | os.PathLike[str]) -> Path:
    """Canonicalize when possible, otherwise resolve without requiring existence."""
    try:
        return canonicalize(path)
    except EntryIOError:
        try:
            return Path(path).resolve()
        except (OSError, RuntimeError):
            path = Path(path)
            return path if path.is_absolute() else Path.cwd() / path


def path_identity(
    path: str | os.PathLike[str],
    lookup_path: str | os.PathLike[str] | None = None,
) -> PathIdentity:
    """Build the ``(relative_path, full_path)`` identity for ``path``.

    ``lookup_path`` is canonicalized instead of ``path`` when the display
    path cannot be resolved from the working directory (children of a
    directory, symlink targets).
    """
    relative_path = Path(path)
    full_path = canonicalize(relative_path if lookup_path is None else lookup_path)
    return PathIdentity(relative_path=relative_path, full_path=full_path)


__all__ = [
    "PathIdentity",
    "canonicalize",
    "canonicalize_lenient",
    "path_identity",
]
