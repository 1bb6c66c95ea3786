"""Common types and data structures for textdisplay"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class Placement(Enum):
    """Named screen anchor for the overlay window"""
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"
    CENTER = "center"

    @classmethod
    def token_parse(cls, token: Optional[str]) -> Optional["Placement"]:
        """
        Map a CLI token onto a placement

        Args:
            token: Placement token such as 'top-right'

        Returns:
            Matching placement, or None when the token is not recognized
        """
        for placement in cls:
            if placement.value == token:
                return placement
        return None


PlacementSpec = Union[Placement, str]


@dataclass(frozen=True)
class Position:
    """2D position coordinates"""
    x: int
    y: int


@dataclass(frozen=True)
class ScreenGeometry:
    """Screen dimensions in pixels"""
    width: int
    height: int

    def __post_init__(self) -> None:
        """Reject empty screens"""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Screen dimensions must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class TextMetrics:
    """Pixel extents of a rendered string"""
    width: int
    ascent: int
    descent: int

    def __post_init__(self) -> None:
        """Reject negative extents"""
        if self.width < 0 or self.ascent < 0 or self.descent < 0:
            raise ValueError(f"Text metrics must be non-negative: {self}")

    @property
    def height(self) -> int:
        """Line height (ascent + descent)"""
        return self.ascent + self.descent


@dataclass(frozen=True)
class WindowGeometry:
    """Window rectangle in screen coordinates (never clamped to the screen)"""
    x: int
    y: int
    width: int
    height: int

    @property
    def origin(self) -> Position:
        """Top-left corner of the window"""
        return Position(x=self.x, y=self.y)


@dataclass(frozen=True)
class FontHandle:
    """Resolved font: descriptor string plus backend-native font object"""
    descriptor: str
    native: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DisplayConfig:
    """Immutable overlay request built once from the command line"""
    text: str
    placement: PlacementSpec = Placement.TOP_RIGHT
    font: str = "fixed"
    font_size: int = 12  # advisory; only used in synthesized descriptors
    margin_x: int = 10
    margin_y: int = 20
    color: int = 0xFF0000
    duration: int = 30
    transparent: bool = True
    display_name: Optional[str] = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration settings"""
    level: str
    format: str
    file: Optional[str] = None
