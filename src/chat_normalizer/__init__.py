"""Normalize chat transcripts of unknown format into discrete messages."""

from __future__ import annotations

from .canonical import to_canonical
from .config import Config
from .messages import ClassifiedLine, Message
from .parser import detect_format, parse
from .rules import RULES, UNKNOWN_FORMAT, Rule, example_for, format_tags, get_rule

__all__ = [
    "RULES",
    "UNKNOWN_FORMAT",
    "ClassifiedLine",
    "Config",
    "Message",
    "Rule",
    "detect_format",
    "example_for",
    "format_tags",
    "get_rule",
    "parse",
    "to_canonical",
]
