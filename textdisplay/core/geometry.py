"""Window size and screen placement for the overlay.

Geometry is ideal, not clamped: margins or text wider than the screen give
negative or off-screen origins, and clamping is left to the caller.
"""

from __future__ import annotations

from textdisplay.common.types import (
    Placement,
    PlacementSpec,
    Position,
    ScreenGeometry,
    TextMetrics,
    WindowGeometry,
)


def _half_truncate(value: int) -> int:
    """Halve toward zero (C integer division semantics)"""
    half = abs(value) // 2
    return half if value >= 0 else -half


def geometry_compute(
    text_metrics: TextMetrics,
    screen: ScreenGeometry,
    margin_x: int,
    margin_y: int,
    placement: PlacementSpec,
) -> WindowGeometry:
    """
    Compute the overlay window rectangle

    Args:
        text_metrics: Measured text extents
        screen: Target screen dimensions
        margin_x: Horizontal margin, applied inside the window and from the screen edge
        margin_y: Vertical margin, applied inside the window and from the screen edge
        placement: Placement member or raw token; unrecognized values anchor at (0, 0)

    Returns:
        Window geometry
    """
    width: int = text_metrics.width + 2 * margin_x
    height: int = text_metrics.height + 2 * margin_y

    if not isinstance(placement, Placement):
        placement = Placement.token_parse(placement)

    right: int = screen.width - width - margin_x
    bottom: int = screen.height - height - margin_y

    if placement is Placement.TOP_RIGHT:
        x, y = right, margin_y
    elif placement is Placement.TOP_LEFT:
        x, y = margin_x, margin_y
    elif placement is Placement.BOTTOM_RIGHT:
        x, y = right, bottom
    elif placement is Placement.BOTTOM_LEFT:
        x, y = margin_x, bottom
    elif placement is Placement.CENTER:
        x = _half_truncate(screen.width - width)
        y = _half_truncate(screen.height - height)
    else:
        x, y = 0, 0

    return WindowGeometry(x=x, y=y, width=width, height=height)


def textOrigin_compute(text_metrics: TextMetrics, margin_x: int, margin_y: int) -> Position:
    """
    Baseline origin of the text inside the window (independent of placement)

    Args:
        text_metrics: Measured text extents
        margin_x: Horizontal margin
        margin_y: Vertical margin

    Returns:
        Draw origin relative to the window
    """
    return Position(x=margin_x, y=margin_y + text_metrics.ascent)
