"""History retrieval parameters and results."""

from dataclasses import dataclass, field

from .messages import Message

DEFAULT_HISTORY_LATEST = ""
DEFAULT_HISTORY_OLDEST = "0"
DEFAULT_HISTORY_COUNT = 100
DEFAULT_HISTORY_INCLUSIVE = False
DEFAULT_HISTORY_UNREADS = False


@dataclass
class HistoryParameters:
    """Options for fetching channel, group or IM history."""

    latest: str = DEFAULT_HISTORY_LATEST
    oldest: str = DEFAULT_HISTORY_OLDEST
    count: int = DEFAULT_HISTORY_COUNT
    inclusive: bool = DEFAULT_HISTORY_INCLUSIVE
    unreads: bool = DEFAULT_HISTORY_UNREADS

    def to_values(self):
        """Return form values for the options that differ from the defaults."""
        values = {}
        if self.latest != DEFAULT_HISTORY_LATEST:
            values["latest"] = self.latest
        if self.oldest != DEFAULT_HISTORY_OLDEST:
            values["oldest"] = self.oldest
        if self.count != DEFAULT_HISTORY_COUNT:
            values["count"] = str(self.count)
        if self.inclusive != DEFAULT_HISTORY_INCLUSIVE:
            values["inclusive"] = "1" if self.inclusive else "0"
        if self.unreads != DEFAULT_HISTORY_UNREADS:
            values["unreads"] = "1" if self.unreads else "0"
        return values


@dataclass
class History:
    """A page of message history."""

    latest: str = ""
    messages: list = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_dict(cls, data):
        return cls(
            latest=data.get("latest") or "",
            messages=[Message.from_dict(m) for m in data.get("messages") or []],
            has_more=bool(data.get("has_more", False)),
        )