"""Stylesheet loading for the panel app."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

log = logging.getLogger(__name__)

STYLES_PATH = Path(__file__).parent / "styles.css"


@functools.cache
def load_styles(path: Path = STYLES_PATH) -> str:
    """Read the panel stylesheet once.

    A missing or unreadable stylesheet is not fatal: the app runs unstyled.
    """
    try:
        return path.read_text()
    except OSError as e:
        log.warning(f"Failed to load styles from {path}: {e}")
        return ""
