"""Tests for command-line logging setup."""

from __future__ import annotations

import io
import logging
import unittest

from lazybrowse.logs import LoggingConfig, configure_logging, resolve_level


class LoggingSetupTests(unittest.TestCase):
    LOGGER_NAME = "lazybrowse.test_logs"

    def tearDown(self) -> None:
        logger = logging.getLogger(self.LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    def test_resolve_level_maps_names_and_defaults_to_warning(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level("WARN"), logging.WARNING)
        self.assertEqual(resolve_level("bogus"), logging.WARNING)

    def test_configure_is_idempotent(self) -> None:
        first_stream = io.StringIO()
        second_stream = io.StringIO()
        configure_logging(LoggingConfig(level="INFO", stream=first_stream), self.LOGGER_NAME)
        logger = configure_logging(LoggingConfig(level="DEBUG", stream=second_stream), self.LOGGER_NAME)

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        logger.debug("hello %s", "there")
        self.assertEqual(first_stream.getvalue(), "")
        self.assertEqual(second_stream.getvalue(), f"DEBUG | {self.LOGGER_NAME} | hello there\n")

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        logger = configure_logging(LoggingConfig(level="WARNING", stream=stream), self.LOGGER_NAME)
        logger.info("hidden")
        logger.error("shown")
        self.assertEqual(stream.getvalue(), f"ERROR | {self.LOGGER_NAME} | shown\n")


if __name__ == "__main__":
    unittest.main()
