"""Font metrics, window geometry, and visibility masks."""
