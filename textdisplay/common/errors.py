"""Error taxonomy for textdisplay"""

from __future__ import annotations


class TextDisplayError(Exception):
    """Base class for fatal textdisplay errors (exit code 1)"""


class ConfigError(TextDisplayError, ValueError):
    """Malformed command-line value, reported before any display resource is acquired"""


class DisplayConnectionError(TextDisplayError):
    """The windowing service could not be reached"""


class FontResolutionError(TextDisplayError):
    """Neither the requested font nor the fallback font could be loaded"""

    def __init__(self, descriptor: str, fallback: str) -> None:
        """
        Initialize font resolution error

        Args:
            descriptor: Font descriptor that was tried first
            fallback: Fallback font identifier that was tried second
        """
        super().__init__(f"Could not load any font (tried '{descriptor}' and '{fallback}')")
        self.descriptor: str = descriptor
        self.fallback: str = fallback
