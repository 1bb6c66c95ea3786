"""Overlay lifecycle orchestration."""
