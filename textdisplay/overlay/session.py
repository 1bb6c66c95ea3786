"""Scoped ownership of display resources for one overlay run."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class OverlaySession:
    """
    Owns every resource acquired while presenting an overlay.

    Resources are registered as they are acquired and released exactly once,
    in reverse acquisition order, on every exit path.
    """

    def __init__(self) -> None:
        """Initialize an empty session."""
        self._releases: list[tuple[str, Callable[[], None]]] = []

    def resource_track(self, label: str, release: Callable[[], None]) -> None:
        """
        Register an acquired resource.

        Args:
            label: Human-readable resource name for logging.
            release: Callable that frees the resource.
        """
        self._releases.append((label, release))
        logger.debug("Acquired %s", label)

    def resources_release(self) -> None:
        """
        Release all held resources in reverse acquisition order.

        A failing release is logged and does not stop the remaining ones.
        """
        while self._releases:
            label, release = self._releases.pop()
            try:
                release()
                logger.debug("Released %s", label)
            except Exception as exc:
                logger.debug("Release of %s failed: %s", label, exc)

    def __enter__(self) -> "OverlaySession":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit"""
        self.resources_release()
