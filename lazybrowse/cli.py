"""Command-line front door for lazybrowse.

Parses CLI options, classifies the target path, and prints either a
directory listing or a file preview. Entry-model errors are terminal for the
requested operation: they are logged at debug level and turned into ``SystemExit``.
"""

from __future__ import annotations

import argparse
import errno
import logging
import os
import sys
from pathlib import Path

from . import config
from .entry_model import Directory, Entry, EntryError, EntryIOError, ListingOptions, classify
from .logs import LoggingConfig, configure_logging
from .preview import render_file_preview

logger = logging.getLogger("lazybrowse.cli")

MAX_LINK_HOPS = 40


def follow_links(entry: Entry, max_hops: int = MAX_LINK_HOPS) -> Entry:
    """Resolve symlink chains one hop at a time, giving up after ``max_hops``."""
    current = entry
    hops = 0
    while current.is_symlink:
        if hops >= max_hops:
            raise EntryIOError(entry.relative_path, OSError(errno.ELOOP, os.strerror(errno.ELOOP)))
        current = current.as_symlink().resolve()
        hops += 1
    return current


def format_entry_row(entry: Entry) -> str:
    """Render one listing row: ``dir/``, ``file``, or ``link -> target``."""
    if entry.is_directory:
        return f"{entry}/"
    if entry.is_symlink:
        try:
            target = entry.as_symlink().read_target()
        except EntryIOError:
            return f"{entry} -> ?"
        return f"{entry} -> {target}"
    return str(entry)


def render_listing(directory: Directory) -> str:
    rows = [format_entry_row(child) for child in directory.list_children()]
    logger.debug("listed %d children of %s", len(rows), directory.full_path)
    return "".join(f"{row}\n" for row in rows)


def render_entry(entry: Entry, style: str, no_color: bool) -> str:
    """Render a directory as a listing and a file as a preview."""
    target = follow_links(entry)
    if target.is_directory:
        return render_listing(target.as_directory())
    logger.debug("previewing %s", target.full_path)
    return render_file_preview(target.as_file(), style=style, no_color=no_color)


def _listing_options(args: argparse.Namespace) -> ListingOptions:
    """Merge explicit flags over persisted preferences."""
    show_hidden = args.show_hidden if args.show_hidden is not None else config.load_show_hidden()
    skip_gitignored = (
        args.skip_gitignored if args.skip_gitignored is not None else config.load_skip_gitignored()
    )
    return ListingOptions(show_hidden=show_hidden, skip_gitignored=skip_gitignored)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list or preview a path.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse a directory one level at a time or preview a file."
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to list or preview. Defaults to current directory.")
    parser.add_argument("--parent", action="store_true", help="List the parent directory of PATH instead.")
    parser.add_argument("--cat", metavar="FILE", help="Print FILE through the preview renderer and exit.")
    parser.add_argument("--style", default=None, help="Pygments style name for previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable syntax highlighting.")
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include dotfiles in listings (default: saved preference).",
    )
    parser.add_argument(
        "--skip-gitignored",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Hide gitignored children (default: saved preference).",
    )
    parser.add_argument("--save-preferences", action="store_true", help="Persist the effective listing flags.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    args = parser.parse_args()

    configure_logging(LoggingConfig(level="DEBUG" if args.verbose else "WARNING"))

    options = _listing_options(args)
    if args.save_preferences:
        config.save_listing_options(options)
    style = args.style or config.load_style()

    if args.cat is not None and (args.path is not None or args.parent):
        raise SystemExit("Cannot combine --cat with a positional path or --parent.")

    try:
        if args.cat is not None:
            target = follow_links(classify(args.cat, options))
            output = render_file_preview(target.as_file(), style=style, no_color=args.no_color)
        else:
            if default_path is None:
                default_path = Path.cwd()
            entry = classify(args.path or default_path, options)
            logger.debug("classified %s as %s", entry.full_path, entry.kind)
            if args.parent:
                parent = entry.parent()
                if parent is None:
                    raise SystemExit(f"No parent directory: {entry.full_path}")
                output = render_listing(parent)
            else:
                output = render_entry(entry, style, args.no_color)
    except EntryError as exc:
        logger.debug("entry error: %r", exc)
        raise SystemExit(exc.message) from exc

    sys.stdout.write(output)


if __name__ == "__main__":
    main()
