"""Chat messages and real-time outgoing messages."""

import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Optional

from .filedata import Comment, File

RESPONSE_TYPE_IN_CHANNEL = "in_channel"
RESPONSE_TYPE_EPHEMERAL = "ephemeral"


def _field(key=None, *, default=None, factory=None, omitempty=True, decode=None):
    metadata = {"key": key, "omitempty": omitempty, "decode": decode}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _wire_key(f):
    return f.metadata.get("key") or f.name


def _decode(cls, data):
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object for {cls.__name__}, got {type(data).__name__}")
    kwargs = {}
    for f in fields(cls):
        key = _wire_key(f)
        if data.get(key) is None:
            continue
        decode = f.metadata.get("decode")
        kwargs[f.name] = decode(data[key]) if decode else data[key]
    return cls(**kwargs)


def _is_empty(value):
    return value is None or (not is_dataclass(value) and not value)


def _encode_value(value):
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if is_dataclass(value):
        return _encode(value)
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode_value(item) for key, item in value.items()}
    return value


def _encode(obj):
    out = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if f.metadata.get("omitempty", True) and _is_empty(value):
            continue
        out[_wire_key(f)] = _encode_value(value)
    return out


def _list_of(cls):
    return lambda items: [_decode(cls, item) for item in items]


@dataclass
class Icon:
    icon_url: str = ""
    icon_emoji: str = ""


@dataclass
class Edited:
    user: str = ""
    timestamp: str = _field("ts", default="")


@dataclass
class Reply:
    user: str = ""
    timestamp: str = _field("ts", default="")


@dataclass
class Event:
    type: str = ""


@dataclass
class Ping:
    id: int = 0
    type: str = ""
    timestamp: int = 0


@dataclass
class Pong:
    type: str = ""
    reply_to: int = 0
    timestamp: int = 0


@dataclass
class Msg:
    """A single chat message as delivered by the API."""

    type: str = _field(default="")
    channel: str = _field(default="")
    user: str = _field(default="")
    text: str = _field(default="")
    timestamp: str = _field("ts", default="")
    thread_timestamp: str = _field("thread_ts", default="")
    is_starred: bool = _field(default=False)
    pinned_to: list = _field(factory=list, decode=list)
    attachments: list = _field(factory=list, decode=list)
    edited: Optional[Edited] = _field(decode=lambda d: _decode(Edited, d))
    last_read: str = _field(default="")
    subscribed: bool = _field(default=False)
    unread_count: int = _field(default=0)
    sub_type: str = _field("subtype", default="")
    hidden: bool = _field(default=False)
    deleted_timestamp: str = _field("deleted_ts", default="")
    event_timestamp: str = _field("event_ts", default="")
    bot_id: str = _field(default="")
    username: str = _field(default="")
    icons: Optional[Icon] = _field(decode=lambda d: _decode(Icon, d))
    inviter: str = _field(default="")
    topic: str = _field(default="")
    purpose: str = _field(default="")
    name: str = _field(default="")
    old_name: str = _field(default="")
    members: list = _field(factory=list, decode=list)
    reply_count: int = _field(default=0)
    replies: list = _field(factory=list, decode=_list_of(Reply))
    parent_user_id: str = _field(default="")
    files: list = _field(factory=list, decode=lambda items: [File.from_dict(i) for i in items])
    upload: bool = _field(default=False)
    comment: Optional[Comment] = _field(decode=Comment.from_dict)
    item_type: str = _field(default="")
    reply_to: int = _field(default=0)
    team: str = _field(default="")
    reactions: list = _field(factory=list, decode=list)
    response_type: str = _field(default="")
    replace_original: bool = _field(default=False, omitempty=False)
    delete_original: bool = _field(default=False, omitempty=False)
    blocks: list = _field(factory=list, decode=list)

    @classmethod
    def from_dict(cls, data):
        return _decode(cls, data)

    def to_dict(self):
        return _encode(self)


@dataclass
class Message(Msg):
    """A message that may carry a changed or previous sub-message."""

    sub_message: Optional[Msg] = _field("message", decode=lambda d: _decode(Msg, d))
    previous_message: Optional[Msg] = _field(decode=lambda d: _decode(Msg, d))

    @classmethod
    def from_dict(cls, data):
        return _decode(cls, data)

    def to_dict(self):
        return _encode(self)


@dataclass
class OutgoingMessage:
    """A message sent over the real-time connection."""

    id: int = _field(default=0, omitempty=False)
    channel: str = _field(default="")
    text: str = _field(default="")
    type: str = _field(default="")
    thread_timestamp: str = _field("thread_ts", default="")
    thread_broadcast: bool = _field("reply_broadcast", default=False)
    ids: list = _field(factory=list)

    def to_dict(self):
        return _encode(self)


def parse_message(text):
    """Decode a JSON document into a Message."""
    return Message.from_dict(json.loads(text))


def new_outgoing_message(id_gen, text, channel_id, *args):
    """Build a chat message with a fresh id; extra arguments are options."""
    msg = OutgoingMessage(id=id_gen.next(), type="message", channel=channel_id, text=text)
    for option in args:
        option(msg)
    return msg


def new_subscribe_user_presence(ids):
    """Build a presence subscription for the given users."""
    return OutgoingMessage(type="presence_sub", ids=list(ids))


def new_typing_message(id_gen, channel_id):
    """Build a typing indicator with a fresh id."""
    return OutgoingMessage(id=id_gen.next(), type="typing", channel=channel_id)


def rtm_option_ts(thread_timestamp):
    """Option that replies within the given thread."""

    def apply(msg):
        msg.thread_timestamp = thread_timestamp

    return apply


def rtm_option_broadcast():
    """Option that also broadcasts a thread reply to the channel."""

    def apply(msg):
        msg.thread_broadcast = True

    return apply