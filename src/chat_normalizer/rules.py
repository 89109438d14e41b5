"""The ordered table of chat line grammars.

Each rule recognizes the line that opens a new message in one chat export
convention. Rules overlap, so the table is a tuple and its declaration order
is the match priority: the first rule that matches wins.

Single-line rules carry timestamp, sender and content on one line. Multi-line
header rules put sender and timestamp on their own line(s) and the content on
the next one; their grammar embeds the line breaks and ``span`` says how many
physical lines they cover.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

# Shared time fragment: "10:30", "10:30 AM", "10:30pm".
_TIME = r"[\d:]+\s*(?:AM|PM)?"
_FLAGS = re.IGNORECASE | re.MULTILINE

UNKNOWN_FORMAT = "unknown"


class FieldOrder(NamedTuple):
    """1-based capture group numbers for each semantic field."""

    timestamp: int
    sender: int
    content: int


TIME_FIRST = FieldOrder(timestamp=1, sender=2, content=3)
SENDER_FIRST = FieldOrder(timestamp=2, sender=1, content=3)


@dataclass(frozen=True)
class Rule:
    """A named line grammar plus its fixed field mapping."""

    name: str
    pattern: re.Pattern
    field_order: FieldOrder
    span: int = 1  # physical lines covered by one match

    @property
    def multiline(self) -> bool:
        return self.span > 1


def _rule(name: str, grammar: str, field_order: FieldOrder, span: int = 1) -> Rule:
    return Rule(name=name, pattern=re.compile(grammar, _FLAGS), field_order=field_order, span=span)


RULES: tuple[Rule, ...] = (
    # iMessage: "John Doe\n10:30 AM\nHey what's up"
    _rule("imessage", rf"^(.+)\n({_TIME})\n(.+)", SENDER_FIRST, span=3),
    # Discord: "[10:30 AM] John: Hey what's up"
    _rule("discord", rf"\[({_TIME})\]\s*([^:]+):\s*(.+)", TIME_FIRST),
    # WhatsApp: "10:30 AM - John: Hey what's up"
    _rule("whatsapp1", rf"({_TIME})\s*-\s*([^:]+):\s*(.+)", TIME_FIRST),
    # WhatsApp: "John, 10:30 AM: Hey what's up"
    _rule("whatsapp2", rf"([^,]+),\s*({_TIME}):\s*(.+)", SENDER_FIRST),
    # Slack: "John 10:30 AM\nHey what's up"
    _rule("slack", rf"^([^\d\n]+)\s+({_TIME})\n(.+)", SENDER_FIRST, span=2),
    # "John (10:30): Hey what's up"
    _rule("generic1", rf"([^(]+)\s*\(({_TIME})\):\s*(.+)", SENDER_FIRST),
    # Telegram: "John [10:30]\nHey what's up"
    _rule("telegram", rf"([^\[]+)\s*\[({_TIME})\]\n(.+)", SENDER_FIRST, span=2),
    # SMS: "John 10:30\nHey what's up"
    _rule("sms", rf"^([^\d\n]+?)\s*({_TIME})\n(.+)", SENDER_FIRST, span=2),
    # Canonical output form; same surface as discord, which wins ties.
    _rule("standard", rf"\[({_TIME})\]\s*([^:]+):\s*(.+)", TIME_FIRST),
)


_EXAMPLES: dict[str, str] = {
    "imessage": "John Doe\n10:30 AM\nHey what's up",
    "discord": "[10:30 AM] John: Hey what's up",
    "whatsapp1": "10:30 AM - John: Hey what's up",
    "whatsapp2": "John, 10:30 AM: Hey what's up",
    "slack": "John 10:30 AM\nHey what's up",
    "generic1": "John (10:30): Hey what's up",
    "telegram": "John [10:30]\nHey what's up",
    "sms": "John 10:30\nHey what's up",
    "standard": "[10:30 AM] John: Hey what's up",
}


def format_tags(rules: tuple[Rule, ...] = RULES) -> list[str]:
    """Return rule names in priority order."""
    return [rule.name for rule in rules]


def get_rule(name: str, rules: tuple[Rule, ...] = RULES) -> Rule | None:
    for rule in rules:
        if rule.name == name:
            return rule
    return None


def example_for(tag: str) -> str:
    """Return a short sample transcript written in the given format.

    Unknown tags fall back to the canonical ``standard`` example.
    """
    return _EXAMPLES.get(tag, _EXAMPLES["standard"])
