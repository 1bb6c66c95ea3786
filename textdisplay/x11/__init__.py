"""X11 implementation of the overlay backend."""
