"""
textdisplay: flash a line of text on an X11 screen

Opens a borderless, always-on-top window sized to the text, anchors it at a
screen corner or the center, optionally shapes it so only the glyph pixels
are visible, and removes it after a fixed number of seconds.
"""

import subprocess
from pathlib import Path


def _buildTag_get() -> str:
    """Short commit hash of a source checkout, or 'dev' for installed copies"""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short=4", "HEAD"],
            cwd=Path(__file__).parent.parent,
            capture_output=True,
            text=True,
            timeout=1,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (OSError, subprocess.SubprocessError):
        pass
    return "dev"


__version__ = f"1.0.0.{_buildTag_get()}"
__author__ = "textdisplay contributors"
