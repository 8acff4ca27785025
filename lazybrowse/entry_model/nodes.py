"""Lazily-populated filesystem nodes and the ``Entry`` wrapper over them.

A node is created by classifying a path against ``lstat`` metadata. Its
cache slot (file bytes, directory children, or link target) starts empty and
is filled once, on first demand. Nothing is invalidated afterwards: the model
is a snapshot taken on demand, not a live view.

Parents are never stored as strong references. ``parent()`` rebuilds a
``Directory`` from ``full_path.parent``; ``Entry`` additionally keeps a weak
reference so repeated calls return the same object while a caller holds it.
"""

from __future__ import annotations

import os
import stat
import weakref
from pathlib import Path
from typing import TypeVar

from .errors import EntryIOError, EntryNotFoundError, IncorrectFileTypeError, UnrecognizedFileTypeError
from .listing import DEFAULT_LISTING_OPTIONS, ListingOptions, list_child_names
from .paths import PathIdentity, canonicalize_lenient, path_identity

NodeT = TypeVar("NodeT", bound="Node")


class Node:
    """Identity and parent resolution shared by every node variant.

    Never instantiated directly: ``classify`` only builds ``File``,
    ``Directory``, or ``SymLink``, and each overrides ``is_populated`` and
    ``populate``.
    """

    kind = "Node"

    def __init__(self, identity: PathIdentity, options: ListingOptions = DEFAULT_LISTING_OPTIONS) -> None:
        self._identity = identity
        self.options = options

    @classmethod
    def open(cls: type[NodeT], path: str | os.PathLike[str], options: ListingOptions | None = None) -> NodeT:
        """Classify ``path`` and require it to be this variant."""
        return classify(path, options).expect(cls)

    @property
    def relative_path(self) -> Path:
        return self._identity.relative_path

    @property
    def full_path(self) -> Path:
        return self._identity.full_path

    @property
    def is_populated(self) -> bool:
        raise NotImplementedError

    def populate(self) -> None:
        raise NotImplementedError

    def parent(self) -> Directory | None:
        """Return a fresh ``Directory`` for the parent path, ``None`` at the root."""
        parent_path = self.full_path.parent
        if parent_path == self.full_path:
            return None
        return Directory(PathIdentity(parent_path, parent_path), self.options)

    def __str__(self) -> str:
        return str(self.relative_path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.relative_path)!r})"


class File(Node):
    """Regular file with lazily read byte content."""

    kind = "File"

    def __init__(self, identity: PathIdentity, options: ListingOptions = DEFAULT_LISTING_OPTIONS) -> None:
        super().__init__(identity, options)
        self._content: bytes | None = None

    @property
    def is_populated(self) -> bool:
        return self._content is not None

    @property
    def size(self) -> int | None:
        """Length of the cached content, ``None`` before the first read."""
        if self._content is None:
            return None
        return len(self._content)

    def populate(self) -> None:
        if self._content is not None:
            return
        try:
            self._content = self.full_path.read_bytes()
        except OSError as exc:
            raise EntryIOError(self.full_path, exc) from exc

    def read_content(self) -> bytes:
        self.populate()
        assert self._content is not None
        return self._content


class Directory(Node):
    """Directory whose immediate children are enumerated on first demand."""

    kind = "Directory"

    def __init__(self, identity: PathIdentity, options: ListingOptions = DEFAULT_LISTING_OPTIONS) -> None:
        super().__init__(identity, options)
        self._children: tuple[Entry, ...] | None = None

    @property
    def is_populated(self) -> bool:
        return self._children is not None

    def populate(self) -> None:
        """Enumerate and classify immediate children.

        Fail-fast: the first scan or classification error propagates and
        leaves the cache empty, so a later call retries the whole listing.
        """
        if self._children is not None:
            return
        children = tuple(
            _classify(self.relative_path / name, self.full_path / name, self.options)
            for name in list_child_names(self.full_path, self.options)
        )
        self._children = children

    def list_children(self) -> tuple[Entry, ...]:
        self.populate()
        assert self._children is not None
        return self._children

    def get_entry(self, path: str | os.PathLike[str]) -> Entry:
        """Return the cached immediate child whose full path matches ``path``.

        Relative paths are taken relative to the working directory, not to
        this directory. Deeper paths must be walked one level at a time.
        """
        children = self.list_children()
        target = canonicalize_lenient(path)
        for child in children:
            if child.full_path == target:
                return child
        raise EntryNotFoundError(path)

    def get_child(self, name: str) -> Entry:
        """Return the cached immediate child called ``name``."""
        return self.get_entry(self.full_path / name)


class SymLink(Node):
    """Symbolic link whose target is classified on first demand."""

    kind = "SymLink"

    def __init__(self, identity: PathIdentity, options: ListingOptions = DEFAULT_LISTING_OPTIONS) -> None:
        super().__init__(identity, options)
        self._target: Entry | None = None

    @property
    def is_populated(self) -> bool:
        return self._target is not None

    def read_target(self) -> Path:
        """Return the raw link text as stored in the filesystem."""
        try:
            return Path(os.readlink(self.full_path))
        except OSError as exc:
            raise EntryIOError(self.full_path, exc) from exc

    def populate(self) -> None:
        if self._target is not None:
            return
        target = self.read_target()
        if target.is_absolute():
            relative_path = lookup_path = target
        else:
            relative_path = self.relative_path.parent / target
            lookup_path = self.full_path.parent / target
        self._target = _classify(relative_path, lookup_path, self.options)

    def resolve(self) -> Entry:
        """Follow the link one hop; chains need one call per hop."""
        self.populate()
        assert self._target is not None
        return self._target


class Entry:
    """Tagged wrapper holding exactly one ``File``, ``Directory``, or ``SymLink``."""

    def __init__(self, value: File | Directory | SymLink, last_modified: int | None = None) -> None:
        self.value = value
        self.last_modified = last_modified
        self._parent_ref: weakref.ref[Directory] | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], options: ListingOptions | None = None) -> Entry:
        return classify(path, options)

    @property
    def kind(self) -> str:
        return self.value.kind

    @property
    def relative_path(self) -> Path:
        return self.value.relative_path

    @property
    def full_path(self) -> Path:
        return self.value.full_path

    @property
    def is_directory(self) -> bool:
        return isinstance(self.value, Directory)

    @property
    def is_file(self) -> bool:
        return isinstance(self.value, File)

    @property
    def is_symlink(self) -> bool:
        return isinstance(self.value, SymLink)

    def populate(self) -> None:
        self.value.populate()

    def parent(self) -> Directory | None:
        if self._parent_ref is not None:
            cached = self._parent_ref()
            if cached is not None:
                return cached
        parent = self.value.parent()
        if parent is not None:
            self._parent_ref = weakref.ref(parent)
        return parent

    def expect(self, node_type: type[NodeT]) -> NodeT:
        """Return the wrapped node if it is ``node_type``, else raise."""
        if isinstance(self.value, node_type):
            return self.value
        raise IncorrectFileTypeError(self.relative_path, node_type.kind, self.kind)

    def as_directory(self) -> Directory:
        return self.expect(Directory)

    def as_file(self) -> File:
        return self.expect(File)

    def as_symlink(self) -> SymLink:
        return self.expect(SymLink)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.full_path == other.full_path

    def __hash__(self) -> int:
        return hash(self.full_path)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Entry({self.value!r})"


def _describe_mode(mode: int) -> str:
    if stat.S_ISCHR(mode):
        return "character device"
    if stat.S_ISBLK(mode):
        return "block device"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    return f"mode {oct(stat.S_IFMT(mode))}"


def _classify(relative_path: Path, lookup_path: Path, options: ListingOptions) -> Entry:
    """Classify ``lookup_path`` while keeping ``relative_path`` for display."""
    try:
        st = os.lstat(lookup_path)
    except OSError as exc:
        raise EntryIOError(relative_path, exc) from exc

    mode = st.st_mode
    node_type: type[File] | type[Directory] | type[SymLink]
    if stat.S_ISDIR(mode):
        node_type = Directory
    elif stat.S_ISREG(mode):
        node_type = File
    elif stat.S_ISLNK(mode):
        node_type = SymLink
    else:
        raise UnrecognizedFileTypeError(relative_path, _describe_mode(mode))

    identity = path_identity(relative_path, lookup_path)
    return Entry(node_type(identity, options), last_modified=int(st.st_mtime_ns))


def classify(path: str | os.PathLike[str], options: ListingOptions | None = None) -> Entry:
    """Turn ``path`` into a typed ``Entry`` using live ``lstat`` metadata."""
    relative_path = Path(path)
    return _classify(relative_path, relative_path, options or DEFAULT_LISTING_OPTIONS)


__all__ = [
    "Node",
    "File",
    "Directory",
    "SymLink",
    "Entry",
    "classify",
]
