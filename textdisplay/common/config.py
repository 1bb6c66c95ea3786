"""Command-line value parsing and configuration assembly"""

from __future__ import annotations

import argparse
import logging
import re
from typing import Optional

from textdisplay.common.errors import ConfigError
from textdisplay.common.settings import settings
from textdisplay.common.types import DisplayConfig, LoggingConfig, Placement, PlacementSpec

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")
_TRUE_TOKENS = frozenset({"true", "1", "yes"})


def color_parse(token: str) -> int:
    """
    Parse an RRGGBB hex color

    Args:
        token: Six hex digits, e.g. 'FF0000'

    Returns:
        24-bit RGB value

    Raises:
        ConfigError: If token is not exactly six hex digits
    """
    if not _HEX_COLOR.fullmatch(token):
        raise ConfigError(f"Invalid color '{token}': expected RRGGBB hex digits")
    return int(token, 16)


def nonNegativeInt_parse(token: str, flag_name: str) -> int:
    """
    Parse a non-negative base-10 integer flag value

    Args:
        token: Raw flag value
        flag_name: Flag name used in the error message

    Returns:
        Parsed integer

    Raises:
        ConfigError: If token is not an integer or is negative
    """
    try:
        value = int(token, 10)
    except ValueError:
        raise ConfigError(f"Invalid value for {flag_name}: '{token}' is not an integer")
    if value < 0:
        raise ConfigError(f"Invalid value for {flag_name}: {value} is negative")
    return value


def transparency_parse(token: str) -> bool:
    """
    Interpret a --transparent value; anything outside {true, 1, yes} is False

    Args:
        token: Raw flag value

    Returns:
        Whether the text-shaped mask is enabled
    """
    return token in _TRUE_TOKENS


def placement_parse(token: str) -> PlacementSpec:
    """
    Parse a --position value

    Unrecognized tokens are kept as-is; the geometry engine anchors them
    at the screen origin.

    Args:
        token: Raw flag value

    Returns:
        Placement member, or the raw token when unrecognized
    """
    placement = Placement.token_parse(token)
    if placement is None:
        logger.warning(
            "Unrecognized position '%s'; window will be anchored at (0, 0)", token
        )
        return token
    return placement


def displayConfig_build(args: argparse.Namespace) -> DisplayConfig:
    """
    Assemble the overlay request from parsed CLI arguments

    Args:
        args: Parsed CLI args (string-valued flags)

    Returns:
        Frozen display configuration

    Raises:
        ConfigError: If any value is malformed
    """
    if not args.text:
        raise ConfigError("Text to display must not be empty")

    return DisplayConfig(
        text=args.text,
        placement=placement_parse(args.position),
        font=args.font,
        font_size=nonNegativeInt_parse(args.fontsize, "--fontsize"),
        margin_x=nonNegativeInt_parse(args.marginx, "--marginx"),
        margin_y=nonNegativeInt_parse(args.marginy, "--marginy"),
        color=color_parse(args.color),
        duration=nonNegativeInt_parse(args.time, "--time"),
        transparent=transparency_parse(args.transparent),
        display_name=args.display,
    )


def loggingConfig_build(args: argparse.Namespace, log_level: Optional[str]) -> LoggingConfig:
    """
    Assemble logging configuration from CLI overrides and defaults

    Args:
        args: Parsed CLI args
        log_level: Level chosen by the log-level flags, if any

    Returns:
        Logging configuration
    """
    return LoggingConfig(
        level=log_level or settings.DEFAULT_LOG_LEVEL,
        format=settings.DEFAULT_LOG_FORMAT,
        file=getattr(args, "log_file", None),
    )
