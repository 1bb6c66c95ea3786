"""Backend abstraction layer for overlay presentation."""

from textdisplay.output.backend import FontService, GlyphRasterizer, OverlayBackend
from textdisplay.output.factory import overlayBackend_create

__all__ = [
    "FontService",
    "GlyphRasterizer",
    "OverlayBackend",
    "overlayBackend_create",
]
