"""Surface cleanup for extracted sender names and timestamps."""

from __future__ import annotations

import re

_QUOTES = re.compile(r"['\"]")
_WHITESPACE = re.compile(r"\s+")
_TRAILING_COLONS = re.compile(r":+$")
_GLUED_MERIDIEM = re.compile(r"(\d)(AM|PM)", re.IGNORECASE)
_MERIDIEM = re.compile(r"am|pm", re.IGNORECASE)


def clean_user(name: str) -> str:
    """Strip quotes, collapse whitespace and drop trailing colons from a sender name."""
    name = _QUOTES.sub("", name)
    name = _WHITESPACE.sub(" ", name).strip()
    return _TRAILING_COLONS.sub("", name)


def normalize_time(time: str) -> str:
    """Canonicalize the meridiem marker: "10:30am" -> "10:30 AM".

    Only the surface text changes; the result is not validated as a time.
    """
    time = _GLUED_MERIDIEM.sub(r"\1 \2", time, count=1)
    return _MERIDIEM.sub(lambda m: m.group(0).upper(), time, count=1)
