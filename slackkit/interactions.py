"""Callbacks sent when a user interacts with a button, menu or dialog."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Union

from .info import Team
from .messages import Message


class InteractionType(str, Enum):
    """Kinds of interaction the API can deliver."""

    DIALOG_CANCELLATION = "dialog_cancellation"
    DIALOG_SUBMISSION = "dialog_submission"
    DIALOG_SUGGESTION = "dialog_suggestion"
    INTERACTION_MESSAGE = "interactive_message"
    MESSAGE_ACTION = "message_action"
    BLOCK_ACTIONS = "block_actions"


def _interaction_type(value):
    try:
        return InteractionType(value)
    except ValueError:
        return value


def _plain(value):
    return value.value if isinstance(value, Enum) else value


@dataclass
class ActionCallbacks:
    """The "actions" array of a callback, split into attachment and block actions."""

    attachment_actions: list = field(default_factory=list)
    block_actions: list = field(default_factory=list)

    @classmethod
    def from_list(cls, data):
        """Sort raw action objects by kind.

        An object with a string "block_id" is a block action; decoding stops
        after the first one, as the API never mixes kinds in one callback.
        """
        result = cls()
        if data is None:
            return result
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array of actions, got {type(data).__name__}")
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"expected a JSON object for an action, got {type(item).__name__}")
            if isinstance(item.get("block_id"), str):
                result.block_actions.append(dict(item))
                break
            result.attachment_actions.append(dict(item))
        return result

    def to_list(self):
        """Combine both kinds back into one array, attachment actions first."""
        return [dict(action) for action in self.attachment_actions] + [
            dict(action) for action in self.block_actions
        ]


@dataclass
class InteractionCallback:
    """What the API posts when a user interacts with a message or dialog."""

    type: Union[InteractionType, str] = ""
    token: str = ""
    callback_id: str = ""
    response_url: str = ""
    trigger_id: str = ""
    action_ts: str = ""
    team: Team = field(default_factory=Team)
    channel: dict = field(default_factory=dict)
    user: dict = field(default_factory=dict)
    original_message: Message = field(default_factory=Message)
    message: Message = field(default_factory=Message)
    name: str = ""
    value: str = ""
    message_ts: str = ""
    attachment_id: str = ""
    action_callback: ActionCallbacks = field(default_factory=ActionCallbacks)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object for a callback, got {type(data).__name__}")

        def text(key):
            return data.get(key) or ""

        return cls(
            type=_interaction_type(text("type")),
            token=text("token"),
            callback_id=text("callback_id"),
            response_url=text("response_url"),
            trigger_id=text("trigger_id"),
            action_ts=text("action_ts"),
            team=Team.from_dict(data.get("team") or {}),
            channel=dict(data.get("channel") or {}),
            user=dict(data.get("user") or {}),
            original_message=Message.from_dict(data.get("original_message") or {}),
            message=Message.from_dict(data.get("message") or {}),
            name=text("name"),
            value=text("value"),
            message_ts=text("message_ts"),
            attachment_id=text("attachment_id"),
            action_callback=ActionCallbacks.from_list(data.get("actions")),
        )

    def to_dict(self):
        return {
            "type": _plain(self.type),
            "token": self.token,
            "callback_id": self.callback_id,
            "response_url": self.response_url,
            "trigger_id": self.trigger_id,
            "action_ts": self.action_ts,
            "team": asdict(self.team),
            "channel": dict(self.channel),
            "user": dict(self.user),
            "original_message": self.original_message.to_dict(),
            "message": self.message.to_dict(),
            "name": self.name,
            "value": self.value,
            "message_ts": self.message_ts,
            "attachment_id": self.attachment_id,
            "actions": self.action_callback.to_list(),
        }