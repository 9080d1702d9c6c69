"""The Web API client."""

from .base import BaseClient
from .dnd import DndMixin
from .files import FilesMixin
from .groups import GroupsMixin
from .im import IMMixin


class Client(DndMixin, FilesMixin, GroupsMixin, IMMixin, BaseClient):
    """Web API client: construct with a token and the API's base URL."""

    def get_emoji(self):
        """Return every custom emoji, mapping its name to an image URL or alias."""
        data = self.post_method("emoji.list", {})
        return dict(data.get("emoji") or {})