"""Unit tests for overlay resource session."""

from __future__ import annotations

import pytest

from textdisplay.overlay.session import OverlaySession


class TestOverlaySession:
    """Tests for reverse-order, exactly-once release."""

    def test_reverse_order(self) -> None:
        """Resources are released last-acquired first."""
        released: list[str] = []
        session = OverlaySession()
        for label in ("connection", "window", "gc"):
            session.resource_track(label, lambda label=label: released.append(label))

        session.resources_release()
        assert released == ["gc", "window", "connection"]

    def test_release_is_idempotent(self) -> None:
        """A second release does nothing."""
        released: list[str] = []
        session = OverlaySession()
        session.resource_track("window", lambda: released.append("window"))
        session.resources_release()
        session.resources_release()
        assert released == ["window"]

    def test_failing_release_does_not_stop_others(self, caplog) -> None:
        """A broken release is logged and the rest still run."""
        released: list[str] = []

        def _broken() -> None:
            raise RuntimeError("BadWindow")

        session = OverlaySession()
        session.resource_track("connection", lambda: released.append("connection"))
        session.resource_track("window", _broken)
        session.resource_track("gc", lambda: released.append("gc"))
        session.resources_release()

        assert released == ["gc", "connection"]
        assert "Release of window failed" in caplog.text

    def test_context_manager_releases_on_error(self) -> None:
        """Leaving the block by exception still releases."""
        released: list[str] = []
        with pytest.raises(ValueError):
            with OverlaySession() as session:
                session.resource_track("window", lambda: released.append("window"))
                raise ValueError("boom")
        assert released == ["window"]
