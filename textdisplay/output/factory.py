"""Backend factory functions."""

from __future__ import annotations

from typing import Optional

from textdisplay.output.backend import OverlayBackend


def overlayBackend_create(backend_name: str, display_name: Optional[str]) -> OverlayBackend:
    """
    Create the overlay backend.

    Args:
        backend_name: Backend identifier (e.g., "x11")
        display_name: Display name (backend-specific)

    Returns:
        Unconnected overlay backend

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = backend_name.lower()

    if backend == "x11":
        from textdisplay.x11.backend import X11OverlayBackend

        return X11OverlayBackend(display_name=display_name)

    raise ValueError(f"Unsupported backend '{backend_name}'. Supported: x11.")
