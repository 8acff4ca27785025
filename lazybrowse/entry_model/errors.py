"""Error taxonomy for entry classification, lookup, and population.

Every failure raised by the entry model derives from ``EntryError`` so the
presentation layer can catch one type and match on the subclass to decide
severity.
"""

from __future__ import annotations

from pathlib import Path


class EntryError(Exception):
    """Base class for entry-model failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


class UnrecognizedFileTypeError(EntryError):
    """Path exists but is not a regular file, directory, or symlink."""

    def __init__(self, path: str | Path, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unrecognized file type: {kind} ({path})", path)


class EntryNotFoundError(EntryError):
    """No cached child of a directory matched the requested path."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"file not found: {path}", path)


class IncorrectFileTypeError(EntryError):
    """Caller expected one entry variant but found another."""

    def __init__(self, path: str | Path, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"incorrect file type: {path}\nexpected: {expected}, found: {found}",
            path,
        )


class EntryIOError(EntryError):
    """Underlying filesystem call failed.

    The wrapped exception is kept on ``cause`` and is also chained as
    ``__cause__`` by the raising site.
    """

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.cause = cause
        detail = cause.strerror if isinstance(cause, OSError) and cause.strerror else str(cause)
        super().__init__(f"{detail}: {path}", path)

    @property
    def errno(self) -> int | None:
        if isinstance(self.cause, OSError):
            return self.cause.errno
        return None


class UnknownEntryError(EntryError):
    """Opaque passthrough for failures from collaborating subsystems."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


def wrap_unknown(exc: BaseException) -> EntryError:
    """Return ``exc`` unchanged when it already is an ``EntryError``."""
    if isinstance(exc, EntryError):
        return exc
    return UnknownEntryError(exc)


__all__ = [
    "EntryError",
    "UnrecognizedFileTypeError",
    "EntryNotFoundError",
    "IncorrectFileTypeError",
    "EntryIOError",
    "UnknownEntryError",
    "wrap_unknown",
]
