"""Unit tests for overlay logging helpers."""

from __future__ import annotations

import logging

from textdisplay import __version__
from textdisplay.common.types import LoggingConfig
from textdisplay.overlay.overlay_logging import logFormatWithVersion_get, logging_setup


class TestLogFormatWithVersion:
    """Tests for version tagging of the log format."""

    def test_version_follows_timestamp(self) -> None:
        """The version tag is inserted after the timestamp."""
        fmt = logFormatWithVersion_get("%(asctime)s - %(message)s")
        assert fmt == f"%(asctime)s [v{__version__}] - %(message)s"

    def test_format_without_timestamp_unchanged(self) -> None:
        """Formats without a timestamp are left alone."""
        assert logFormatWithVersion_get("%(message)s") == "%(message)s"


class TestLoggingSetup:
    """Tests for handler wiring."""

    def test_file_handler_added(self, monkeypatch, tmp_path) -> None:
        """A log file adds a FileHandler next to the stream handler."""
        captured: dict = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        log_file = tmp_path / "textdisplay.log"
        logging_setup(LoggingConfig(level="debug", format="%(message)s", file=str(log_file)))

        handlers = captured["handlers"]
        assert captured["level"] == logging.DEBUG
        assert [type(h) for h in handlers] == [logging.StreamHandler, logging.FileHandler]
        for handler in handlers:
            handler.close()
