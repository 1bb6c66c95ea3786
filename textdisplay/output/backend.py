"""Backend protocols for fonts, glyph rasterization, and overlay presentation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

from textdisplay.common.types import FontHandle, ScreenGeometry, WindowGeometry

if TYPE_CHECKING:
    from textdisplay.core.mask import VisibilityMask


class FontService(Protocol):
    """Font loading and measurement provided by the windowing service."""

    def font_load(self, descriptor: str) -> Optional[Any]:
        """
        Load a font by descriptor.

        Args:
            descriptor: Font name or pattern.

        Returns:
            Backend-native font object, or None if the descriptor does not resolve.
        """

    def font_free(self, native: Any) -> None:
        """Release a font returned by font_load."""

    def fontMetrics_get(self, native: Any) -> tuple[int, int]:
        """
        Get vertical font metrics.

        Args:
            native: Backend-native font object.

        Returns:
            Tuple of (ascent, descent) in pixels.
        """

    def textWidth_measure(self, native: Any, text: str) -> int:
        """
        Measure the advance width of a string.

        Args:
            native: Backend-native font object.
            text: String to measure.

        Returns:
            Width in pixels.
        """


class GlyphRasterizer(Protocol):
    """Renders glyphs into a monochrome buffer."""

    def glyphs_render(
        self, mask: VisibilityMask, text: str, font: FontHandle, origin_x: int, origin_y: int
    ) -> None:
        """
        Mark every pixel covered by the rendered text as visible.

        Args:
            mask: Destination mask (pixels outside it are clipped).
            text: String to render.
            font: Resolved font.
            origin_x: Baseline start x within the mask.
            origin_y: Baseline y within the mask.
        """


class OverlayBackend(FontService, GlyphRasterizer, Protocol):
    """Windowing capabilities consumed by the overlay controller."""

    def connection_establish(self) -> None:
        """Open the connection to the windowing service."""

    def connection_close(self) -> None:
        """Close the connection to the windowing service."""

    def connection_sync(self) -> None:
        """Flush pending requests and wait for the server."""

    def screenGeometry_get(self) -> ScreenGeometry:
        """Get the target surface dimensions."""

    def window_create(self, geometry: WindowGeometry) -> None:
        """
        Create the borderless overlay window.

        Args:
            geometry: Initial window rectangle.
        """

    def window_destroy(self) -> None:
        """Destroy the overlay window."""

    def windowAbove_set(self) -> None:
        """Hint the window manager to keep the window above others."""

    def window_configure(self, geometry: WindowGeometry) -> None:
        """Move and resize the overlay window."""

    def window_map(self) -> None:
        """Show the overlay window."""

    def gc_create(self, color: int) -> None:
        """
        Create the drawing context.

        Args:
            color: Foreground color as 0xRRGGBB.
        """

    def gc_free(self) -> None:
        """Release the drawing context."""

    def gcFont_set(self, font: FontHandle) -> None:
        """Select the font used by text_draw."""

    def text_draw(self, text: str, x: int, y: int) -> None:
        """Draw text with its baseline starting at (x, y)."""

    def windowShape_apply(self, mask: VisibilityMask) -> None:
        """Restrict the window's visible region to the mask's visible pixels."""
