"""Typed references to messages, files, comments and channels."""

from dataclasses import dataclass
from typing import Optional

from .filedata import Comment, File
from .messages import Message

TYPE_MESSAGE = "message"
TYPE_FILE = "file"
TYPE_FILE_COMMENT = "file_comment"
TYPE_CHANNEL = "channel"
TYPE_IM = "im"
TYPE_GROUP = "group"


@dataclass
class Item:
    """Any kind of item: a message, file, file comment or channel."""

    type: str = ""
    channel: str = ""
    message: Optional[Message] = None
    file: Optional[File] = None
    comment: Optional[Comment] = None
    timestamp: str = ""


@dataclass
class ItemRef:
    """Points at a file, a file comment, or a message by channel and timestamp."""

    channel: str = ""
    timestamp: str = ""
    file: str = ""
    comment: str = ""


def new_message_item(channel, message):
    """Wrap a message posted in a channel."""
    return Item(type=TYPE_MESSAGE, channel=channel, message=message)


def new_file_item(file):
    """Wrap a file."""
    return Item(type=TYPE_FILE, file=file)


def new_file_comment_item(file, comment):
    """Wrap a comment on a file."""
    return Item(type=TYPE_FILE_COMMENT, file=file, comment=comment)


def new_channel_item(channel):
    """Wrap a channel id."""
    return Item(type=TYPE_CHANNEL, channel=channel)


def new_im_item(channel):
    """Wrap a direct message channel id."""
    return Item(type=TYPE_IM, channel=channel)


def new_group_item(channel):
    """Wrap a private group id."""
    return Item(type=TYPE_GROUP, channel=channel)


def new_ref_to_message(channel, timestamp):
    """Reference a message by channel and timestamp."""
    return ItemRef(channel=channel, timestamp=timestamp)


def new_ref_to_file(file):
    """Reference a file."""
    return ItemRef(file=file)


def new_ref_to_comment(comment):
    """Reference a file comment."""
    return ItemRef(comment=comment)