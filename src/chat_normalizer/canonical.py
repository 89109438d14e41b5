"""Render messages in the canonical "[time] user: content" form."""

from __future__ import annotations

from typing import Iterable

from .messages import Message


def format_message(message: Message) -> str:
    return f"[{message.time}] {message.user}: {message.content}"


def to_canonical(messages: Iterable[Message]) -> str:
    """Render messages one per line; the output parses back to the same fields."""
    return "\n".join(format_message(m) for m in messages)
