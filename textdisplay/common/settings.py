"""Application settings singleton - single source of truth for constants

Usage:
    from textdisplay.common.settings import settings

    descriptor = settings.FALLBACK_FONT
"""

from typing import Optional


class Settings:
    """Singleton holding application constants

    The singleton pattern ensures the CLI, the font resolver and the X11
    backend agree on defaults such as the fallback font.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    # =========================================================================
    # Font Constants
    # =========================================================================

    FALLBACK_FONT: str = "fixed"
    """Font alias every X server provides

    Loaded verbatim when the requested font cannot be resolved.
    """

    DEFAULT_FONT_SIZE: int = 12
    """Size hint embedded in synthesized wildcard descriptors"""

    # =========================================================================
    # Window Constants
    # =========================================================================

    PLACEHOLDER_WIDTH: int = 100
    """Width of the window before the text has been measured"""

    PLACEHOLDER_HEIGHT: int = 50
    """Height of the window before the text has been measured"""

    # =========================================================================
    # Logging Constants
    # =========================================================================

    DEFAULT_LOG_LEVEL: str = "WARNING"
    """Keeps a normal run quiet apart from the announce line on stdout"""

    DEFAULT_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global singleton instance
settings = Settings()
