"""Tests for the entry error taxonomy."""

from __future__ import annotations

import errno
import os
import unittest

from lazybrowse.entry_model import (
    EntryError,
    EntryIOError,
    EntryNotFoundError,
    IncorrectFileTypeError,
    UnknownEntryError,
    UnrecognizedFileTypeError,
    wrap_unknown,
)


class ErrorTaxonomyTests(unittest.TestCase):
    def test_every_error_is_an_entry_error(self) -> None:
        errors = [
            UnrecognizedFileTypeError("/dev/null", "character device"),
            EntryNotFoundError("x"),
            IncorrectFileTypeError("x", "File", "Directory"),
            EntryIOError("x", OSError(errno.EACCES, os.strerror(errno.EACCES))),
            UnknownEntryError(ValueError("boom")),
        ]
        for error in errors:
            self.assertIsInstance(error, EntryError)
            self.assertEqual(str(error), error.message)

    def test_messages_name_the_path(self) -> None:
        self.assertEqual(EntryNotFoundError("src/a.txt").message, "file not found: src/a.txt")
        self.assertEqual(
            IncorrectFileTypeError("src/bin", "Directory", "File").message,
            "incorrect file type: src/bin\nexpected: Directory, found: File",
        )
        self.assertEqual(
            UnrecognizedFileTypeError("/tmp/pipe", "fifo").message,
            "unrecognized file type: fifo (/tmp/pipe)",
        )

    def test_io_error_exposes_errno_and_cause(self) -> None:
        cause = OSError(errno.ENOENT, os.strerror(errno.ENOENT))
        error = EntryIOError("missing.txt", cause)

        self.assertIs(error.cause, cause)
        self.assertEqual(error.errno, errno.ENOENT)
        self.assertEqual(error.message, f"{os.strerror(errno.ENOENT)}: missing.txt")
        self.assertIsNone(EntryIOError("loop", RuntimeError("Symlink loop")).errno)

    def test_wrap_unknown_passes_entry_errors_through(self) -> None:
        known = EntryNotFoundError("x")
        self.assertIs(wrap_unknown(known), known)

        wrapped = wrap_unknown(KeyError("k"))
        self.assertIsInstance(wrapped, UnknownEntryError)
        self.assertIsInstance(wrapped.cause, KeyError)


if __name__ == "__main__":
    unittest.main()
