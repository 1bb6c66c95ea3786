"""Font resolution with single fallback, and text measurement"""

from __future__ import annotations

import logging
from typing import Optional

from textdisplay.common.errors import FontResolutionError
from textdisplay.common.settings import settings
from textdisplay.common.types import FontHandle, TextMetrics
from textdisplay.output.backend import FontService

logger = logging.getLogger(__name__)


def fontDescriptor_build(font_identifier: str, size_hint: int) -> str:
    """
    Turn a font identifier into the descriptor to load

    A bare family name (no '-') is wrapped in a wildcard XLFD pattern
    carrying the size hint; anything else is already a descriptor and is
    used verbatim.

    Args:
        font_identifier: Family name (e.g. 'Arial') or full descriptor
        size_hint: Pixel size to embed in a synthesized pattern

    Returns:
        Descriptor string
    """
    if "-" in font_identifier:
        return font_identifier
    return f"-*-{font_identifier}-*-*-*-*-{size_hint}-*-*-*-*-*-*-*"


class FontMetricsProvider:
    """Resolves fonts through a FontService and measures text with them"""

    def __init__(self, font_service: FontService, fallback_font: str = settings.FALLBACK_FONT) -> None:
        """
        Initialize font metrics provider

        Args:
            font_service: Backend that loads and measures fonts
            fallback_font: Identifier tried when the requested font fails
        """
        self._font_service: FontService = font_service
        self._fallback_font: str = fallback_font

    def resolve(self, font_identifier: str, size_hint: int) -> FontHandle:
        """
        Resolve a font, retrying once with the fallback font

        Args:
            font_identifier: Requested family name or descriptor
            size_hint: Advisory pixel size

        Returns:
            Handle for the loaded font

        Raises:
            FontResolutionError: If neither font loads
        """
        descriptor: str = fontDescriptor_build(font_identifier, size_hint)
        native = self._font_service.font_load(descriptor)
        if native is not None:
            logger.debug("Loaded font %s", descriptor)
            return FontHandle(descriptor=descriptor, native=native)

        logger.warning("Could not load font: %s, trying default...", descriptor)
        fallback = self.fallback_resolve()
        if fallback is None:
            raise FontResolutionError(descriptor, self._fallback_font)
        return fallback

    def fallback_resolve(self) -> Optional[FontHandle]:
        """
        Load the fallback font exactly as named, without pattern synthesis

        Returns:
            Handle for the fallback font, or None if it is unavailable
        """
        native = self._font_service.font_load(self._fallback_font)
        if native is None:
            return None
        return FontHandle(descriptor=self._fallback_font, native=native)

    def measure(self, font: FontHandle, text: str) -> TextMetrics:
        """
        Measure text rendered with a resolved font

        Args:
            font: Resolved font
            text: String to measure

        Returns:
            Width, ascent and descent in pixels
        """
        ascent, descent = self._font_service.fontMetrics_get(font.native)
        width: int = self._font_service.textWidth_measure(font.native, text)
        return TextMetrics(width=width, ascent=ascent, descent=descent)

    def release(self, font: FontHandle) -> None:
        """Free the backend font behind a handle"""
        self._font_service.font_free(font.native)
