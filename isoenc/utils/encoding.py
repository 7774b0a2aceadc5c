"""
Utilities for consistent UTF-8 console behavior and safe console text.
"""

from __future__ import annotations
import sys
import os
from typing import Optional

from ..core.encoder import encode_unicode_escape


def console_is_utf8(stream=None) -> bool:
    enc = (getattr(stream or sys.stdout, "encoding", None) or "").lower()
    return "utf-8" in enc or "utf8" in enc


def force_utf8_stdio() -> bool:
    """Force UTF-8 mode for stdio where possible.

    - Enables PEP 540 UTF-8 mode via PYTHONUTF8 unless already set.
    - Reconfigures stdout/stderr to utf-8 with errors="replace" when supported.

    Returns whether stdout was UTF-8 before it was reconfigured.
    """
    was_utf8 = console_is_utf8()
    os.environ.setdefault("PYTHONUTF8", "1")
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if callable(reconfigure):
            reconfigure(encoding="utf-8", errors="replace")
    return was_utf8


def safe_console_text(message: str, stream=None, utf8: Optional[bool] = None) -> str:
    """Return message if console is UTF-8; else escape what Latin-1 cannot show.

    ``utf8`` overrides the check of ``stream``, for callers that recorded the
    console encoding before reconfiguring it.
    """
    if utf8 is None:
        utf8 = console_is_utf8(stream)
    if utf8:
        return message
    return encode_unicode_escape(message)
