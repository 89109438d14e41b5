"""Message types shared by the classifier, parser and serializer."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .normalize import clean_user, normalize_time


@dataclass
class Message:
    """Normalized chat message from any transcript format."""

    time: str  # normalized, e.g. "10:30 AM"
    user: str  # cleaned sender name
    content: str  # continuation lines are folded in with a single space
    format: str  # tag of the rule that matched the opening line

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ClassifiedLine:
    """Raw fields pulled out of a line that opens a new message."""

    timestamp: str
    sender: str
    content: str
    matched_format: str
    consumed: int = 1  # physical lines covered by the match

    def to_message(self) -> Message:
        return Message(
            time=normalize_time(self.timestamp),
            user=clean_user(self.sender),
            content=self.content,
            format=self.matched_format,
        )
