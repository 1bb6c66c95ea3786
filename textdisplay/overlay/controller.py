"""Overlay orchestration: connect, lay out, draw, wait, tear down."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from textdisplay.common.settings import settings
from textdisplay.common.types import DisplayConfig, WindowGeometry
from textdisplay.core.fonts import FontMetricsProvider
from textdisplay.core.geometry import geometry_compute, textOrigin_compute
from textdisplay.core.mask import VisibilityMask, mask_build
from textdisplay.output.backend import OverlayBackend
from textdisplay.overlay.session import OverlaySession

logger = logging.getLogger(__name__)


def announcement_format(config: DisplayConfig) -> str:
    """
    Build the line printed before the display wait.

    Args:
        config: Overlay request.

    Returns:
        Announcement text.
    """
    return f'Displaying "{config.text}" for {config.duration} seconds...'


def overlay_run(
    config: DisplayConfig,
    backend: OverlayBackend,
    sleep_func: Callable[[float], None] = time.sleep,
    output: Optional[TextIO] = None,
) -> Optional[VisibilityMask]:
    """
    Present the overlay for the configured duration, then release everything.

    Args:
        config: Overlay request.
        backend: Unconnected overlay backend.
        sleep_func: Blocking wait used for the display duration.
        output: Stream for the announcement line (default: stdout).

    Returns:
        The applied visibility mask, or None when transparency is off.

    Raises:
        DisplayConnectionError: If the backend cannot connect.
        FontResolutionError: If no font can be loaded.
    """
    stream: TextIO = output if output is not None else sys.stdout

    with OverlaySession() as session:
        backend.connection_establish()
        session.resource_track("display connection", backend.connection_close)

        screen = backend.screenGeometry_get()
        logger.debug("Screen geometry: %dx%d", screen.width, screen.height)

        backend.window_create(
            WindowGeometry(
                x=0, y=0, width=settings.PLACEHOLDER_WIDTH, height=settings.PLACEHOLDER_HEIGHT
            )
        )
        session.resource_track("overlay window", backend.window_destroy)
        backend.windowAbove_set()

        backend.gc_create(config.color)
        session.resource_track("graphics context", backend.gc_free)

        fonts = FontMetricsProvider(backend)
        font = fonts.resolve(config.font, config.font_size)
        session.resource_track(f"font {font.descriptor}", lambda: fonts.release(font))
        backend.gcFont_set(font)

        metrics = fonts.measure(font, config.text)
        geometry = geometry_compute(
            metrics, screen, config.margin_x, config.margin_y, config.placement
        )
        logger.debug("Window geometry: %s", geometry)
        backend.window_configure(geometry)

        origin = textOrigin_compute(metrics, config.margin_x, config.margin_y)
        backend.window_map()
        backend.text_draw(config.text, origin.x, origin.y)

        mask: Optional[VisibilityMask] = None
        if config.transparent:
            mask = mask_build(
                geometry.width,
                geometry.height,
                config.text,
                font,
                origin.x,
                origin.y,
                backend,
            )
            backend.windowShape_apply(mask)
        backend.connection_sync()

        print(announcement_format(config), file=stream, flush=True)
        sleep_func(config.duration)

    return mask
