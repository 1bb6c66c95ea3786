"""
Logging for the textdisplay command.

The overlay process is short-lived and mostly silent: it prints one
announcement line and waits. Logs go to stderr so they never mix with that
line, and may additionally be written to a file with ``--log-file``. Every
record carries the package version next to its timestamp, so a log pasted
from a user's machine identifies the build that produced it.
"""

from __future__ import annotations

import logging

from textdisplay import __version__
from textdisplay.common.types import LoggingConfig

__all__ = [
    "logging_setup",
    "logFormatWithVersion_get",
]


def logging_setup(config: LoggingConfig) -> None:
    """
    Install the stderr handler, plus a file handler when one is configured.

    Called once by the CLI, before the display connection is opened, so
    font fallback and shape warnings are routed from the first record on.

    Args:
        config:
            Level name (e.g. ``WARNING``), base format and optional file path.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=logFormatWithVersion_get(config.format),
        handlers=handlers,
    )


def logFormatWithVersion_get(log_format: str) -> str:
    """
    Tag the timestamp field of a format string with the textdisplay version.

    Args:
        log_format:
            Base formatter string; left unchanged if it has no timestamp.

    Returns:
        Format string rendering e.g. ``2026-01-01 12:00:00 [v1.0.0.dev]``.
    """
    return log_format.replace("%(asctime)s", f"%(asctime)s [v{__version__}]")
