"""Tests for logging configuration."""

import logging
import sys

from suntimes.logger import LevelFilter, resolve_level, setup_logging


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("suntimes", level, __file__, 1, "message", None, None)


class TestLevelFilter:

    def test_accepts_levels_in_range(self):
        f = LevelFilter(logging.DEBUG, logging.INFO)
        assert f.filter(_record(logging.DEBUG))
        assert f.filter(_record(logging.INFO))

    def test_rejects_levels_outside_range(self):
        f = LevelFilter(logging.DEBUG, logging.INFO)
        assert not f.filter(_record(logging.WARNING))
        assert not f.filter(_record(logging.ERROR))


class TestSetupLogging:

    def test_handlers_split_stdout_stderr(self):
        logger = setup_logging()
        streams = [h.stream for h in logger.handlers]
        assert streams == [sys.stdout, sys.stderr]
        assert logger.propagate is False

    def test_level_override(self):
        try:
            logger = setup_logging("debug")
            assert logger.level == logging.DEBUG
        finally:
            setup_logging()

    def test_reload_safe(self):
        """Should not stack handlers when called twice."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 2

    def test_unknown_level_falls_back_to_info(self, capsys):
        """Should keep running on a mistyped LOG_LEVEL and say so on stderr."""
        try:
            logger = setup_logging("verbose")
            assert logger.level == logging.INFO
            captured = capsys.readouterr()
            assert "Unknown log level 'verbose'" in captured.err
            assert captured.out == ""
        finally:
            setup_logging()


class TestResolveLevel:

    def test_known_names_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_unknown_name(self):
        assert resolve_level("loud") is None
