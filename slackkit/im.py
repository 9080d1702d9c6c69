"""Direct message channel methods."""

from dataclasses import dataclass, field

from .history import History, HistoryParameters


@dataclass
class IM:
    """A direct message channel; the full API object is kept in raw."""

    id: str = ""
    user: str = ""
    is_user_deleted: bool = False
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            id=data.get("id") or "",
            user=data.get("user") or "",
            is_user_deleted=bool(data.get("is_user_deleted", False)),
            raw=dict(data),
        )


class IMMixin:
    """Direct message methods; needs a client providing post_method."""

    def close_im_channel(self, channel):
        """Close a direct message channel; return (no_op, already_closed)."""
        data = self.post_method("im.close", {"channel": channel})
        return bool(data.get("no_op", False)), bool(data.get("already_closed", False))

    def open_im_channel(self, user):
        """Open a direct message channel; return (no_op, already_open, channel_id)."""
        data = self.post_method("im.open", {"user": user})
        channel_id = (data.get("channel") or {}).get("id") or ""
        return bool(data.get("no_op", False)), bool(data.get("already_open", False)), channel_id

    def mark_im_channel(self, channel, ts):
        """Move the read cursor of a direct message channel."""
        self.post_method("im.mark", {"channel": channel, "ts": ts})

    def get_im_history(self, channel, params=None):
        """Fetch message history for a direct message channel."""
        params = params or HistoryParameters()
        values = {"channel": channel}
        values.update(params.to_values())
        return History.from_dict(self.post_method("im.history", values))

    def get_im_channels(self):
        """List direct message channels."""
        data = self.post_method("im.list", {})
        return [IM.from_dict(item) for item in data.get("ims") or []]