"""X11 overlay backend: window, drawing context, fonts, and shape mask."""

from __future__ import annotations

import logging
from typing import Any, Optional

from Xlib import X, Xatom
from Xlib.ext import shape

from textdisplay.common.types import FontHandle, ScreenGeometry, WindowGeometry
from textdisplay.core.mask import VisibilityMask
from textdisplay.output.backend import OverlayBackend
from textdisplay.x11.bitmap import BitmapFormat, bitmapRows_decode
from textdisplay.x11.display import DisplayManager

logger = logging.getLogger(__name__)


def _shapeConstants_get() -> tuple[int, int]:
    """
    Resolve (SO.Set, SK.Bounding) across python-xlib versions.

    Returns:
        Tuple of (operation, destination_kind).
    """
    so = getattr(shape, "SO", None)
    sk = getattr(shape, "SK", None)
    if so is not None and sk is not None:
        return so.Set, sk.Bounding
    return getattr(shape, "ShapeSet", 0), getattr(shape, "ShapeBounding", 0)


def _rgb16_split(color: int) -> tuple[int, int, int]:
    """Split 0xRRGGBB into 16-bit X color channels"""
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return red * 257, green * 257, blue * 257


class X11OverlayBackend(OverlayBackend):
    """Overlay backend backed by X11 via python-xlib."""

    def __init__(self, display_name: Optional[str] = None) -> None:
        """
        Initialize X11 overlay backend.

        Args:
            display_name: X11 display name, None for $DISPLAY.
        """
        self._display_manager: DisplayManager = DisplayManager(display_name=display_name)
        self._window = None
        self._window_geometry: Optional[WindowGeometry] = None
        self._gc = None

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    def connection_establish(self) -> None:
        """Establish connection to the X11 display."""
        self._display_manager.connection_establish()

    def connection_close(self) -> None:
        """Close connection to the X11 display."""
        self._display_manager.connection_close()

    def connection_sync(self) -> None:
        """Flush and synchronize the X11 connection."""
        self._display_manager.connection_sync()

    def screenGeometry_get(self) -> ScreenGeometry:
        """Return screen geometry for the X11 display."""
        return self._display_manager.screenGeometry_get()

    # ------------------------------------------------------------------
    # Window
    # ------------------------------------------------------------------

    def window_create(self, geometry: WindowGeometry) -> None:
        """
        Create an override-redirect window with a black background.

        Args:
            geometry: Initial window rectangle.
        """
        display = self._display_manager.display_get()
        screen = display.screen()
        self._window = screen.root.create_window(
            geometry.x,
            geometry.y,
            max(1, geometry.width),
            max(1, geometry.height),
            0,
            screen.root_depth,
            X.InputOutput,
            X.CopyFromParent,
            background_pixel=screen.black_pixel,
            override_redirect=True,
            event_mask=0,
        )
        self._window_geometry = geometry
        logger.debug("Created overlay window 0x%x", self._window.id)

    def window_destroy(self) -> None:
        """Destroy the overlay window."""
        if self._window is None:
            return
        self._window.destroy()
        self._window = None
        self._window_geometry = None

    def windowAbove_set(self) -> None:
        """Set _NET_WM_STATE_ABOVE and raise the window."""
        display = self._display_manager.display_get()
        wm_state = display.intern_atom("_NET_WM_STATE")
        wm_state_above = display.intern_atom("_NET_WM_STATE_ABOVE")
        window = self._window_get()
        window.change_property(wm_state, Xatom.ATOM, 32, [wm_state_above])
        window.configure(stack_mode=X.Above)

    def window_configure(self, geometry: WindowGeometry) -> None:
        """
        Move and resize the overlay window.

        Args:
            geometry: Target rectangle; zero sizes are raised to 1.
        """
        self._window_get().configure(
            x=geometry.x,
            y=geometry.y,
            width=max(1, geometry.width),
            height=max(1, geometry.height),
        )
        self._window_geometry = geometry

    def window_map(self) -> None:
        """Map the window and keep it on top."""
        window = self._window_get()
        window.map()
        window.configure(stack_mode=X.Above)
        self._display_manager.connection_sync()

    def windowShape_apply(self, mask: VisibilityMask) -> None:
        """
        Apply the mask as the window's bounding shape.

        Args:
            mask: Visibility mask sized to the window.

        Raises:
            ValueError: If the mask size differs from the window's last
                requested size.
        """
        geometry = self._window_geometry
        if geometry is not None and (mask.width, mask.height) != (geometry.width, geometry.height):
            raise ValueError(
                f"Mask is {mask.width}x{mask.height} but the window is "
                f"{geometry.width}x{geometry.height}"
            )

        display = self._display_manager.display_get()
        if not display.has_extension("SHAPE"):
            logger.warning("SHAPE extension not available; window stays rectangular")
            return
        if mask.width == 0 or mask.height == 0:
            return

        window = self._window_get()
        pixmap = window.create_pixmap(mask.width, mask.height, 1)
        gc = pixmap.create_gc(foreground=0, background=0)
        try:
            pixmap.fill_rectangle(gc, 0, 0, mask.width, mask.height)
            runs = mask.runs_get()
            if runs:
                gc.change(foreground=1)
                pixmap.poly_fill_rectangle(gc, runs)
            operation, destination_kind = _shapeConstants_get()
            window.shape_mask(operation, destination_kind, 0, 0, pixmap)
            logger.debug("Applied shape mask with %d runs", len(runs))
        finally:
            gc.free()
            pixmap.free()

    def _window_get(self):
        if self._window is None:
            raise RuntimeError("Overlay window has not been created")
        return self._window

    # ------------------------------------------------------------------
    # Drawing context
    # ------------------------------------------------------------------

    def gc_create(self, color: int) -> None:
        """
        Create the text drawing context.

        Args:
            color: Foreground color as 0xRRGGBB.
        """
        display = self._display_manager.display_get()
        screen = display.screen()
        foreground = screen.default_colormap.alloc_color(*_rgb16_split(color)).pixel
        self._gc = self._window_get().create_gc(
            foreground=foreground, background=screen.black_pixel
        )

    def gc_free(self) -> None:
        """Free the text drawing context."""
        if self._gc is None:
            return
        self._gc.free()
        self._gc = None

    def gcFont_set(self, font: FontHandle) -> None:
        """Select the font for subsequent text_draw calls."""
        if self._gc is None:
            raise RuntimeError("Drawing context has not been created")
        self._gc.change(font=font.native)

    def text_draw(self, text: str, x: int, y: int) -> None:
        """Draw text into the window with its baseline at (x, y)."""
        if self._gc is None:
            raise RuntimeError("Drawing context has not been created")
        self._window_get().draw_text(self._gc, x, y, text)

    # ------------------------------------------------------------------
    # FontService
    # ------------------------------------------------------------------

    def font_load(self, descriptor: str) -> Optional[Any]:
        """
        Open a font if the server can resolve the descriptor.

        Args:
            descriptor: Font name or XLFD pattern.

        Returns:
            Xlib Font, or None if nothing matches.
        """
        display = self._display_manager.display_get()
        if not display.list_fonts(descriptor, 1):
            logger.debug("No font matches %s", descriptor)
            return None
        return display.open_font(descriptor)

    def font_free(self, native: Any) -> None:
        """Close an Xlib font."""
        native.close()

    def fontMetrics_get(self, native: Any) -> tuple[int, int]:
        """Return (ascent, descent) from QueryFont."""
        info = native.query()
        return info.font_ascent, info.font_descent

    def textWidth_measure(self, native: Any, text: str) -> int:
        """Return the overall width of text from QueryTextExtents."""
        if not text:
            return 0
        return native.query_text_extents(text).overall_width

    # ------------------------------------------------------------------
    # GlyphRasterizer
    # ------------------------------------------------------------------

    def glyphs_render(
        self, mask: VisibilityMask, text: str, font: FontHandle, origin_x: int, origin_y: int
    ) -> None:
        """
        Rasterize text into a depth-1 pixmap and copy set bits into the mask.

        Args:
            mask: Destination mask.
            text: String to render.
            font: Resolved font.
            origin_x: Baseline start x.
            origin_y: Baseline y.
        """
        if mask.width == 0 or mask.height == 0 or not text:
            return

        display = self._display_manager.display_get()
        pixmap = self._window_get().create_pixmap(mask.width, mask.height, 1)
        gc = pixmap.create_gc(foreground=0, background=0, font=font.native)
        try:
            pixmap.fill_rectangle(gc, 0, 0, mask.width, mask.height)
            gc.change(foreground=1)
            pixmap.draw_text(gc, origin_x, origin_y, text)
            image = pixmap.get_image(0, 0, mask.width, mask.height, X.XYPixmap, 1)
            rows = bitmapRows_decode(
                image.data, mask.width, mask.height, BitmapFormat.fromDisplay_get(display)
            )
        finally:
            gc.free()
            pixmap.free()

        for y, row in enumerate(rows):
            for x, visible in enumerate(row):
                if visible:
                    mask.pixel_set(x, y)
