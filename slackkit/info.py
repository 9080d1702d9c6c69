"""Authenticated user and team details."""

import re
import warnings
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

_INTEGER = re.compile(r"[+-]?\d+")


class JSONTime(int):
    """A unix timestamp in seconds."""

    def time(self):
        """Return the timestamp as a local datetime."""
        return datetime.fromtimestamp(int(self))

    def __str__(self):
        moment = self.time()
        return f'"{moment:%a %b} {moment.day:>2}"'


def parse_json_time(value):
    """Read a timestamp given as an integer or as a (possibly quoted) string."""
    if isinstance(value, JSONTime):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return JSONTime(value)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode()
    if isinstance(value, str):
        text = value.strip('"')
        if _INTEGER.fullmatch(text):
            return JSONTime(int(text))
    raise ValueError(f"invalid timestamp: {value!r}")


def _deprecated_lookup(name):
    warnings.warn(
        f"Info.{name} is deprecated and always returns None",
        DeprecationWarning,
        stacklevel=3,
    )


@dataclass
class UserPrefs:
    """User preferences; no fields are decoded."""


@dataclass
class UserDetails:
    id: str = ""
    name: str = ""
    created: JSONTime = JSONTime(0)
    manual_presence: str = ""
    prefs: UserPrefs = field(default_factory=UserPrefs)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            created=parse_json_time(data.get("created") or 0),
            manual_presence=data.get("manual_presence") or "",
        )


@dataclass
class Team:
    id: str = ""
    name: str = ""
    domain: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            domain=data.get("domain") or "",
        )


@dataclass
class Icons:
    image_36: str = ""
    image_48: str = ""
    image_72: str = ""


@dataclass
class Info:
    """Details about the authenticated user and team."""

    url: str = ""
    user: Optional[UserDetails] = None
    team: Optional[Team] = None

    @classmethod
    def from_dict(cls, data):
        user = data.get("self")
        team = data.get("team")
        return cls(
            url=data.get("url") or "",
            user=UserDetails.from_dict(user) if user is not None else None,
            team=Team.from_dict(team) if team is not None else None,
        )

    def get_bot_by_id(self, bot_id):
        """Deprecated; warns and returns None."""
        _deprecated_lookup("get_bot_by_id")
        return None

    def get_user_by_id(self, user_id):
        """Deprecated; warns and returns None."""
        _deprecated_lookup("get_user_by_id")
        return None

    def get_channel_by_id(self, channel_id):
        """Deprecated; warns and returns None."""
        _deprecated_lookup("get_channel_by_id")
        return None

    def get_group_by_id(self, group_id):
        """Deprecated; warns and returns None."""
        _deprecated_lookup("get_group_by_id")
        return None

    def get_im_by_id(self, im_id):
        """Deprecated; warns and returns None."""
        _deprecated_lookup("get_im_by_id")
        return None