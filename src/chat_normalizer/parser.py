"""Turn a raw transcript into an ordered list of messages."""

from __future__ import annotations

import logging

from .classify import classify_line, classify_window
from .config import Config, load_config
from .messages import Message
from .rules import RULES, UNKNOWN_FORMAT

_LOGGER = logging.getLogger(__name__)


def _split_lines(text: str) -> list[str]:
    """Trim every line and drop the blank ones; blank lines never separate messages."""
    return [line for line in (raw.strip() for raw in text.split("\n")) if line]


def parse(text: str, config: Config | None = None) -> list[Message]:
    """Parse a transcript of unknown format into messages.

    Each line either opens a new message (some rule matches it) or is folded
    into the open message as a continuation. Lines before the first match
    have nothing to attach to and are dropped.

    Args:
        text: The raw transcript.
        config: Runtime config. Read from the environment if None.

    Returns:
        Messages in transcript order. Empty when nothing matched.
    """
    if not text or not text.strip():
        return []
    if config is None:
        config = load_config()

    lines = _split_lines(text)
    messages: list[Message] = []
    current: Message | None = None
    dropped = 0

    i = 0
    while i < len(lines):
        line = lines[i]
        if config.windowed:
            classified = classify_window(lines, i)
        else:
            classified = classify_line(line)

        if classified is not None:
            if current is not None:
                messages.append(current)
            current = classified.to_message()
            i += classified.consumed
            continue

        if current is not None:
            current.content += " " + line
        else:
            dropped += 1
            _LOGGER.debug("Dropping line %d with no open message: %.60r", i, line)
        i += 1

    if current is not None:
        messages.append(current)

    if dropped:
        _LOGGER.debug("Dropped %d leading line(s) before the first message", dropped)
    return messages


def detect_format(text: str, config: Config | None = None) -> str:
    """Guess the transcript format from its first few non-empty lines.

    Advisory only: parse() classifies every line on its own regardless.

    Returns:
        The first rule (in priority order) found anywhere in the sample,
        or "unknown".
    """
    if config is None:
        config = load_config()

    sample = "\n".join(_split_lines(text or "")[: config.detect_sample_lines])
    for rule in RULES:
        if rule.pattern.search(sample):
            _LOGGER.debug("Detected format %s", rule.name)
            return rule.name
    return UNKNOWN_FORMAT
