"""File listing, upload, download and sharing."""

import os
from dataclasses import dataclass, field, replace
from typing import BinaryIO, Optional

from .base import check_response
from .errors import ParametersMissingError, SlackError
from .filedata import Comment, File, Paging
from .info import JSONTime

DEFAULT_FILES_USER = ""
DEFAULT_FILES_CHANNEL = ""
DEFAULT_FILES_TS_FROM = 0
DEFAULT_FILES_TS_TO = -1
DEFAULT_FILES_TYPES = "all"
DEFAULT_FILES_COUNT = 100
DEFAULT_FILES_PAGE = 1


@dataclass
class FileUploadParameters:
    """What to upload: set content for small text, file for a local path, or reader for a stream.

    A reader needs a filename as well.
    """

    file: str = ""
    content: str = ""
    reader: Optional[BinaryIO] = None
    filetype: str = ""
    filename: str = ""
    title: str = ""
    initial_comment: str = ""
    channels: list = field(default_factory=list)
    thread_timestamp: str = ""


@dataclass
class GetFilesParameters:
    user: str = DEFAULT_FILES_USER
    channel: str = DEFAULT_FILES_CHANNEL
    timestamp_from: JSONTime = JSONTime(DEFAULT_FILES_TS_FROM)
    timestamp_to: JSONTime = JSONTime(DEFAULT_FILES_TS_TO)
    types: str = DEFAULT_FILES_TYPES
    count: int = DEFAULT_FILES_COUNT
    page: int = DEFAULT_FILES_PAGE


@dataclass
class ListFilesParameters:
    limit: int = DEFAULT_FILES_COUNT
    user: str = DEFAULT_FILES_USER
    channel: str = DEFAULT_FILES_CHANNEL
    types: str = DEFAULT_FILES_TYPES
    cursor: str = ""


def _file(data):
    return File.from_dict(data.get("file") or {})


def _comments(data):
    return [Comment.from_dict(c) for c in data.get("comments") or []]


def _paging(data):
    return Paging.from_dict(data.get("paging") or {})


def _files(data):
    return [File.from_dict(f) for f in data.get("files") or []]


class FilesMixin:
    """File methods; needs a client providing token, session and post_method."""

    def get_file_info(self, file_id, count, page):
        """Return a file, its comments and the comment paging."""
        data = self.post_method(
            "files.info", {"file": file_id, "count": str(count), "page": str(page)}
        )
        return _file(data), _comments(data), _paging(data)

    def get_file(self, download_url, writer):
        """Download a file from its private URL into a writable binary stream."""
        if not download_url:
            raise ParametersMissingError("received empty download URL")
        headers = {"Authorization": f"Bearer {self.token}"}
        with self.session.get(download_url, headers=headers, stream=True) as response:
            if response.status_code != 200:
                raise SlackError(f"slack server error: {response.status_code} {response.reason}")
            for chunk in response.iter_content(chunk_size=65536):
                writer.write(chunk)

    def get_files(self, params=None):
        """Return files matching the parameters and the paging information."""
        params = params or GetFilesParameters()
        values = {}
        if params.user != DEFAULT_FILES_USER:
            values["user"] = params.user
        if params.channel != DEFAULT_FILES_CHANNEL:
            values["channel"] = params.channel
        if params.timestamp_from != DEFAULT_FILES_TS_FROM:
            values["ts_from"] = str(int(params.timestamp_from))
        if params.timestamp_to != DEFAULT_FILES_TS_TO:
            values["ts_to"] = str(int(params.timestamp_to))
        if params.types != DEFAULT_FILES_TYPES:
            values["types"] = params.types
        if params.count != DEFAULT_FILES_COUNT:
            values["count"] = str(params.count)
        if params.page != DEFAULT_FILES_PAGE:
            values["page"] = str(params.page)
        data = self.post_method("files.list", values)
        return _files(data), _paging(data)

    def list_files(self, params=None):
        """Return files and the parameters for the next page, using cursor pagination."""
        params = params or ListFilesParameters()
        values = {}
        if params.user != DEFAULT_FILES_USER:
            values["user"] = params.user
        if params.channel != DEFAULT_FILES_CHANNEL:
            values["channel"] = params.channel
        if params.limit != DEFAULT_FILES_COUNT:
            values["limit"] = str(params.limit)
        if params.cursor:
            values["cursor"] = params.cursor
        data = self.post_method("files.list", values)
        cursor = (data.get("response_metadata") or {}).get("next_cursor") or ""
        return _files(data), replace(params, cursor=cursor)

    def upload_file(self, params):
        """Upload a file and return what the API reports about it."""
        self.auth_test()
        values = {}
        if params.filetype:
            values["filetype"] = params.filetype
        if params.filename:
            values["filename"] = params.filename
        if params.title:
            values["title"] = params.title
        if params.initial_comment:
            values["initial_comment"] = params.initial_comment
        if params.thread_timestamp:
            values["thread_ts"] = params.thread_timestamp
        if params.channels:
            values["channels"] = ",".join(params.channels)

        if params.content:
            values["content"] = params.content
            data = self.post_method("files.upload", values)
        elif params.file:
            with open(params.file, "rb") as stream:
                data = self._post_multipart(
                    "files.upload", values, "file", os.path.basename(params.file), stream
                )
        elif params.reader is not None:
            if not params.filename:
                raise ValueError(
                    "files.upload: FileUploadParameters.Filename is mandatory "
                    "when using FileUploadParameters.Reader"
                )
            data = self._post_multipart(
                "files.upload", values, "file", params.filename, params.reader
            )
        else:
            data = check_response({"ok": False})
        return _file(data)

    def delete_file_comment(self, comment_id, file_id):
        """Delete a comment on a file."""
        if not file_id or not comment_id:
            raise ParametersMissingError()
        self.post_method("files.comments.delete", {"file": file_id, "id": comment_id})

    def delete_file(self, file_id):
        """Delete a file."""
        self.post_method("files.delete", {"file": file_id})

    def revoke_file_public_url(self, file_id):
        """Disable public sharing for a file and return the file."""
        return _file(self.post_method("files.revokePublicURL", {"file": file_id}))

    def share_file_public_url(self, file_id):
        """Enable public sharing for a file; return the file, its comments and paging."""
        data = self.post_method("files.sharedPublicURL", {"file": file_id})
        return _file(data), _comments(data), _paging(data)