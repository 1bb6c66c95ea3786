"""X11 display connection and management"""

import logging
from typing import Optional

from Xlib import display as xdisplay, error as xerror
from Xlib.display import Display

from textdisplay.common.errors import DisplayConnectionError
from textdisplay.common.types import ScreenGeometry

logger = logging.getLogger(__name__)


class DisplayManager:
    """Manages X11 display connection and screen information"""

    def __init__(self, display_name: Optional[str] = None) -> None:
        """
        Initialize display manager

        Args:
            display_name: X11 display name (e.g., ':0'), None for $DISPLAY
        """
        self._display: Optional[Display] = None
        self._display_name: Optional[str] = display_name

    def connection_establish(self) -> None:
        """
        Establish connection to X11 display

        Raises:
            DisplayConnectionError: If the display cannot be opened
        """
        try:
            self._display = xdisplay.Display(self._display_name)
        except (xerror.DisplayError, OSError) as e:
            raise DisplayConnectionError(f"Cannot open display: {e}") from e
        logger.debug("Connected to display %s", self._display.get_display_name())

    def connection_close(self) -> None:
        """Close X11 display connection"""
        if self._display is not None:
            self._display.close()
            self._display = None
            logger.debug("Display connection closed")

    def connection_sync(self) -> None:
        """Flush requests and wait for the server to process them"""
        self.display_get().sync()

    def display_get(self) -> Display:
        """
        Get X11 display object

        Returns:
            X11 Display object

        Raises:
            RuntimeError: If not connected to display
        """
        if self._display is None:
            raise RuntimeError("Not connected to X11 display")
        return self._display

    def screenGeometry_get(self) -> ScreenGeometry:
        """
        Get screen geometry (dimensions)

        Returns:
            Screen geometry with width and height

        Raises:
            RuntimeError: If not connected to display
        """
        screen = self.display_get().screen()
        return ScreenGeometry(width=screen.width_in_pixels, height=screen.height_in_pixels)

    def __enter__(self) -> "DisplayManager":
        """Context manager entry"""
        self.connection_establish()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit"""
        self.connection_close()
