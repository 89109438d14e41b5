"""Classify transcript lines against the rule table."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from .messages import ClassifiedLine
from .rules import RULES, Rule

_LOGGER = logging.getLogger(__name__)


def _extract(rule: Rule, match: re.Match, consumed: int = 1) -> ClassifiedLine:
    order = rule.field_order
    return ClassifiedLine(
        timestamp=match.group(order.timestamp).strip(),
        sender=match.group(order.sender).strip(),
        content=match.group(order.content).strip(),
        matched_format=rule.name,
        consumed=consumed,
    )


def classify_line(line: str, rules: Sequence[Rule] = RULES) -> ClassifiedLine | None:
    """Match a single line against every rule in priority order.

    Multi-line header rules are tried too, but they only match when ``line``
    itself contains a line break.

    Returns:
        The fields of the first matching rule, or None.
    """
    for rule in rules:
        match = rule.pattern.search(line)
        if match:
            return _extract(rule, match)
    return None


def _opens_message(line: str, rules: Sequence[Rule]) -> bool:
    return any(rule.pattern.search(line) for rule in rules if not rule.multiline)


def classify_window(
    lines: Sequence[str],
    index: int,
    rules: Sequence[Rule] = RULES,
) -> ClassifiedLine | None:
    """Classify ``lines[index]``, letting multi-line rules look ahead.

    Single-line rules are searched in ``lines[index]`` alone. A multi-line
    rule must match the whole window ``lines[index:index + rule.span]``, and
    is skipped when fewer lines remain or when any line of the window,
    including ``lines[index]`` itself, opens a message on its own.

    Returns:
        The fields of the first matching rule (``consumed`` set to the number
        of lines it covered), or None.
    """
    line = lines[index]
    # A header line carries no content of its own
    header_candidate = not _opens_message(line, rules)
    for rule in rules:
        if not rule.multiline:
            match = rule.pattern.search(line)
            if match:
                return _extract(rule, match)
            continue

        if not header_candidate:
            continue
        window = lines[index:index + rule.span]
        if len(window) < rule.span:
            continue
        if any(_opens_message(tail, rules) for tail in window[1:]):
            continue
        match = rule.pattern.fullmatch("\n".join(window))
        if match:
            _LOGGER.debug("Line %d opens a %s header spanning %d lines", index, rule.name, rule.span)
            return _extract(rule, match, consumed=rule.span)
    return None
