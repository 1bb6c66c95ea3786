"""Binary visibility masks for text-shaped windows"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from textdisplay.common.types import FontHandle
from textdisplay.output.backend import GlyphRasterizer

logger = logging.getLogger(__name__)

Rectangle = tuple[int, int, int, int]


class VisibilityMask:
    """
    Width x height grid of visible/invisible pixels.

    Pixels are stored one byte each and are always 0 or 1. Writes outside
    the grid are clipped silently, the way drawing into a pixmap is.
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Create an all-invisible mask.

        Args:
            width: Mask width in pixels.
            height: Mask height in pixels.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Mask dimensions must be non-negative, got {width}x{height}")
        self._width: int = width
        self._height: int = height
        self._pixels: bytearray = bytearray(width * height)

    @classmethod
    def rows_build(cls, rows: Iterable[str], visible: str = "#") -> "VisibilityMask":
        """
        Build a mask from text rows, e.g. ["#.", ".#"].

        Args:
            rows: Equal-length strings, one per pixel row.
            visible: Character marking a visible pixel.

        Returns:
            Mask matching the rows.
        """
        row_list = list(rows)
        width = len(row_list[0]) if row_list else 0
        mask = cls(width, len(row_list))
        for y, row in enumerate(row_list):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            for x, char in enumerate(row):
                if char == visible:
                    mask.pixel_set(x, y)
        return mask

    @property
    def width(self) -> int:
        """Mask width in pixels"""
        return self._width

    @property
    def height(self) -> int:
        """Mask height in pixels"""
        return self._height

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) lies inside the grid"""
        return 0 <= x < self._width and 0 <= y < self._height

    def pixel_get(self, x: int, y: int) -> bool:
        """
        Read one pixel.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if visible; False if invisible or outside the grid.
        """
        if not self.contains(x, y):
            return False
        return self._pixels[y * self._width + x] == 1

    def pixel_set(self, x: int, y: int, visible: bool = True) -> None:
        """
        Write one pixel; out-of-grid writes are clipped.

        Args:
            x: Column.
            y: Row.
            visible: New pixel state.
        """
        if self.contains(x, y):
            self._pixels[y * self._width + x] = 1 if visible else 0

    def visibleCount_get(self) -> int:
        """Number of visible pixels"""
        return self._pixels.count(1)

    def runs_get(self) -> list[Rectangle]:
        """
        Decompose visible pixels into horizontal runs.

        Returns:
            List of (x, y, width, 1) rectangles, row-major.
        """
        return list(self._runs_iter())

    def _runs_iter(self) -> Iterator[Rectangle]:
        for y in range(self._height):
            offset = y * self._width
            x = 0
            while x < self._width:
                if self._pixels[offset + x]:
                    start = x
                    while x < self._width and self._pixels[offset + x]:
                        x += 1
                    yield (start, y, x - start, 1)
                else:
                    x += 1

    def rows_render(self, visible: str = "#", invisible: str = ".") -> list[str]:
        """Render the mask as text rows (debugging and tests)"""
        return [
            "".join(
                visible if self._pixels[y * self._width + x] else invisible
                for x in range(self._width)
            )
            for y in range(self._height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VisibilityMask):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return (
            f"VisibilityMask(width={self._width}, height={self._height}, "
            f"visible={self.visibleCount_get()})"
        )


def mask_build(
    width: int,
    height: int,
    text: str,
    font: FontHandle,
    origin_x: int,
    origin_y: int,
    rasterizer: GlyphRasterizer,
) -> VisibilityMask:
    """
    Build the visibility mask for a text-shaped window

    Every pixel starts invisible; the rasterizer then marks the pixels
    covered by the rendered glyphs.

    Args:
        width: Window width
        height: Window height
        text: String to render
        font: Resolved font
        origin_x: Text baseline start x inside the window
        origin_y: Text baseline y inside the window
        rasterizer: Glyph renderer provided by the windowing service

    Returns:
        Mask with exactly the window's dimensions
    """
    mask = VisibilityMask(width, height)
    rasterizer.glyphs_render(mask, text, font, origin_x, origin_y)
    logger.debug("Built %r for %d-character text", mask, len(text))
    return mask
