"""Do Not Disturb settings."""

from dataclasses import dataclass, field


@dataclass
class SnoozeDebug:
    snooze_end_date: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(snooze_end_date=data.get("snooze_end_date") or "")


@dataclass
class SnoozeInfo:
    snooze_enabled: bool = False
    snooze_end_time: int = 0
    snooze_remaining: int = 0
    snooze_debug: SnoozeDebug = field(default_factory=SnoozeDebug)

    @classmethod
    def from_dict(cls, data):
        return cls(
            snooze_enabled=bool(data.get("snooze_enabled", False)),
            snooze_end_time=data.get("snooze_endtime") or 0,
            snooze_remaining=data.get("snooze_remaining") or 0,
            snooze_debug=SnoozeDebug.from_dict(data.get("snooze_debug") or {}),
        )


@dataclass
class DNDStatus:
    """A user's Do Not Disturb state."""

    enabled: bool = False
    next_start_timestamp: int = 0
    next_end_timestamp: int = 0
    snooze_info: SnoozeInfo = field(default_factory=SnoozeInfo)

    @classmethod
    def from_dict(cls, data):
        return cls(
            enabled=bool(data.get("dnd_enabled", False)),
            next_start_timestamp=data.get("next_dnd_start_ts") or 0,
            next_end_timestamp=data.get("next_dnd_end_ts") or 0,
            snooze_info=SnoozeInfo.from_dict(data),
        )


class DndMixin:
    """Do Not Disturb methods; needs a client providing post_method."""

    def end_dnd(self):
        """End the user's scheduled Do Not Disturb session."""
        self.post_method("dnd.endDnd", {})

    def end_snooze(self):
        """End the current user's snooze mode."""
        return DNDStatus.from_dict(self.post_method("dnd.endSnooze", {}))

    def get_dnd_info(self, user=None):
        """Return a user's Do Not Disturb settings; the caller's when user is None."""
        values = {} if user is None else {"user": user}
        return DNDStatus.from_dict(self.post_method("dnd.info", values))

    def get_dnd_team_info(self, users):
        """Return Do Not Disturb settings for several users, keyed by user id."""
        data = self.post_method("dnd.teamInfo", {"users": ",".join(users or [])})
        return {user: DNDStatus.from_dict(status) for user, status in (data.get("users") or {}).items()}

    def set_snooze(self, minutes):
        """Start or adjust a snooze session lasting the given number of minutes."""
        return DNDStatus.from_dict(self.post_method("dnd.setSnooze", {"num_minutes": str(minutes)}))