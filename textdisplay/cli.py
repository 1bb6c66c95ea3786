"""textdisplay command-line interface"""

import argparse
import logging
import sys
from typing import NoReturn, Optional

from textdisplay import __version__
from textdisplay.common.config import displayConfig_build, loggingConfig_build
from textdisplay.common.errors import TextDisplayError
from textdisplay.common.settings import settings
from textdisplay.output.factory import overlayBackend_create
from textdisplay.overlay.controller import overlay_run
from textdisplay.overlay.overlay_logging import logging_setup

logger = logging.getLogger(__name__)

VALUE_FLAGS: tuple[str, ...] = (
    "--text",
    "--position",
    "--font",
    "--fontsize",
    "--marginx",
    "--marginy",
    "--color",
    "--time",
    "--transparent",
    "--display",
    "--backend",
    "--log-file",
)


def argv_normalize(argv: list[str]) -> tuple[list[str], list[str]]:
    """
    Bind each value flag to the token that follows it

    The token after a value flag is always its value, even when it starts
    with '-' (an XLFD font descriptor, or text such as '-hello-').
    Pairs are rewritten as '--flag=value' so the parser cannot read the
    value as an option. A value flag in last position has no value and is
    dropped.

    Args:
        argv: Raw argument list

    Returns:
        Tuple of (rewritten argument list, dropped value flags)
    """
    normalized: list[str] = []
    dropped: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if token in VALUE_FLAGS:
            if index + 1 < len(argv):
                normalized.append(f"{token}={argv[index + 1]}")
                index += 2
                continue
            dropped.append(token)
        else:
            normalized.append(token)
        index += 1
    return normalized, dropped


def parser_build() -> argparse.ArgumentParser:
    """
    Build the argument parser

    Value flags are kept as strings so that malformed values are reported
    by the config layer with exit code 1.

    Returns:
        Configured parser
    """
    parser = argparse.ArgumentParser(
        prog="textdisplay",
        allow_abbrev=False,
        description="Show a line of text as a borderless, always-on-top X11 overlay",
    )

    parser.add_argument("--version", action="version", version=f"textdisplay {__version__}")

    parser.add_argument(
        "--text", type=str, default="abc", help='Text to display (default: "abc")'
    )

    parser.add_argument(
        "--position",
        type=str,
        metavar="POSITION",
        default="top-right",
        help="Position on screen (top-right, top-left, bottom-right, bottom-left, center) "
        "(default: top-right)",
    )

    parser.add_argument(
        "--font", type=str, default=settings.FALLBACK_FONT, help="X11 font name (default: fixed)"
    )

    parser.add_argument(
        "--fontsize",
        type=str,
        metavar="PIXELS",
        default=str(settings.DEFAULT_FONT_SIZE),
        help="Pixel size used when --font is a bare family name (default: 12)",
    )

    parser.add_argument(
        "--marginx", type=str, metavar="PIXELS", default="10",
        help="X margin in pixels (default: 10)",
    )

    parser.add_argument(
        "--marginy", type=str, metavar="PIXELS", default="20",
        help="Y margin in pixels (default: 20)",
    )

    parser.add_argument(
        "--color",
        type=str,
        metavar="RRGGBB",
        default="FF0000",
        help="Text color in hex RGB (default: FF0000 for red)",
    )

    parser.add_argument(
        "--time", type=str, metavar="SECONDS", default="30",
        help="Display time in seconds (default: 30)",
    )

    parser.add_argument(
        "--transparent",
        type=str,
        metavar="BOOL",
        default="true",
        help="Use transparent background (true/false) (default: true)",
    )

    parser.add_argument(
        "--display", type=str, default=None, help="X11 display name (default: $DISPLAY)"
    )

    parser.add_argument(
        "--backend", type=str, default="x11", help="Overlay backend to use (default: x11)"
    )

    parser.add_argument(
        "--log-file", type=str, default=None, dest="log_file", help="Also write logs to this file"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    parser.add_argument(
        "--info", action="store_true", help="Enable info logging"
    )

    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging"
    )

    parser.add_argument(
        "--error", action="store_true", help="Enable error logging"
    )

    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging"
    )

    return parser


def logLevelOverride_get(args: argparse.Namespace) -> Optional[str]:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Selected log level or None. The most restrictive flag wins.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def main(argv: Optional[list[str]] = None) -> NoReturn:
    """
    Main entry point for the textdisplay command

    Args:
        argv: Argument list (default: sys.argv[1:])
    """
    normalized, dropped = argv_normalize(sys.argv[1:] if argv is None else list(argv))
    args, unknown = parser_build().parse_known_args(normalized)

    logging_setup(loggingConfig_build(args, logLevelOverride_get(args)))
    for flag in dropped:
        logger.warning("Ignoring %s: no value given", flag)
    if unknown:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(unknown))

    try:
        config = displayConfig_build(args)
        backend = overlayBackend_create(args.backend, config.display_name)
        overlay_run(config, backend)
        sys.exit(0)

    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except (TextDisplayError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
