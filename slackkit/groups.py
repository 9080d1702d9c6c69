"""Private group methods."""

from dataclasses import dataclass, field

from .history import History, HistoryParameters


@dataclass
class Group:
    """A private group; the full API object is kept in raw."""

    id: str = ""
    name: str = ""
    is_group: bool = False
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            is_group=bool(data.get("is_group", False)),
            raw=dict(data),
        )


def _group(data):
    return Group.from_dict(data.get("group") or {})


class GroupsMixin:
    """Private group methods; needs a client providing post_method."""

    def archive_group(self, group):
        """Archive a private group."""
        self.post_method("groups.archive", {"channel": group})

    def unarchive_group(self, group):
        """Unarchive a private group."""
        self.post_method("groups.unarchive", {"channel": group})

    def create_group(self, group):
        """Create a private group with the given name."""
        return _group(self.post_method("groups.create", {"name": group}))

    def create_child_group(self, group):
        """Archive a group and create a new one with its name and members."""
        return _group(self.post_method("groups.createChild", {"channel": group}))

    def get_group_history(self, group, params=None):
        """Fetch message history for a private group."""
        params = params or HistoryParameters()
        values = {"channel": group}
        values.update(params.to_values())
        return History.from_dict(self.post_method("groups.history", values))

    def invite_user_to_group(self, group, user):
        """Invite a user; return the group and whether the user was already in it."""
        data = self.post_method("groups.invite", {"channel": group, "user": user})
        return _group(data), bool(data.get("already_in_group", False))

    def leave_group(self, group):
        """Leave a private group."""
        self.post_method("groups.leave", {"channel": group})

    def kick_user_from_group(self, group, user):
        """Remove a user from a private group."""
        self.post_method("groups.kick", {"channel": group, "user": user})

    def get_groups(self, exclude_archived=False):
        """List private groups."""
        values = {"exclude_archived": "1"} if exclude_archived else {}
        data = self.post_method("groups.list", values)
        return [Group.from_dict(g) for g in data.get("groups") or []]

    def get_group_info(self, group):
        """Return a private group's details."""
        values = {"channel": group, "include_locale": "true"}
        return _group(self.post_method("groups.info", values))

    def set_group_read_mark(self, group, ts):
        """Move the read cursor of a private group."""
        self.post_method("groups.mark", {"channel": group, "ts": ts})

    def open_group(self, group):
        """Open a private group; return (no_op, already_open)."""
        data = self.post_method("groups.open", {"channel": group})
        return bool(data.get("no_op", False)), bool(data.get("already_open", False))

    def rename_group(self, group, name):
        """Rename a private group; return the channel object the API answers with."""
        data = self.post_method("groups.rename", {"channel": group, "name": name})
        return dict(data.get("channel") or {})

    def set_group_purpose(self, group, purpose):
        """Set a group's purpose and return it."""
        data = self.post_method("groups.setPurpose", {"channel": group, "purpose": purpose})
        return data.get("purpose") or ""

    def set_group_topic(self, group, topic):
        """Set a group's topic and return it."""
        data = self.post_method("groups.setTopic", {"channel": group, "topic": topic})
        return data.get("topic") or ""