"""File, comment, share and paging records."""

from dataclasses import asdict, dataclass, field, fields

from .info import JSONTime, parse_json_time


def _build(cls, data, decoders=None):
    decoders = decoders or {}
    kwargs = {}
    for f in fields(cls):
        value = data.get(f.name)
        if value is None:
            continue
        decode = decoders.get(f.name)
        kwargs[f.name] = decode(value) if decode else value
    return cls(**kwargs)


_TIME_DECODERS = {"created": parse_json_time, "timestamp": parse_json_time}


@dataclass
class Comment:
    id: str = ""
    created: JSONTime = JSONTime(0)
    timestamp: JSONTime = JSONTime(0)
    user: str = ""
    comment: str = ""

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data, _TIME_DECODERS)


@dataclass
class ShareFileInfo:
    reply_users: list = field(default_factory=list)
    reply_users_count: int = 0
    reply_count: int = 0
    ts: str = ""
    thread_ts: str = ""
    latest_reply: str = ""
    channel_name: str = ""
    team_id: str = ""


def _share_map(mapping):
    return {key: [_build(ShareFileInfo, item) for item in items] for key, items in mapping.items()}


@dataclass
class Share:
    public: dict = field(default_factory=dict)
    private: dict = field(default_factory=dict)


@dataclass
class Paging:
    count: int = 0
    total: int = 0
    page: int = 0
    pages: int = 0

    @classmethod
    def from_dict(cls, data):
        return _build(cls, data)


@dataclass
class File:
    """Everything the API reports about a file."""

    id: str = ""
    created: JSONTime = JSONTime(0)
    timestamp: JSONTime = JSONTime(0)
    name: str = ""
    title: str = ""
    mimetype: str = ""
    image_exif_rotation: int = 0
    filetype: str = ""
    pretty_type: str = ""
    user: str = ""
    mode: str = ""
    editable: bool = False
    is_external: bool = False
    external_type: str = ""
    size: int = 0
    url: str = ""
    url_download: str = ""
    url_private: str = ""
    url_private_download: str = ""
    original_h: int = 0
    original_w: int = 0
    thumb_64: str = ""
    thumb_80: str = ""
    thumb_160: str = ""
    thumb_360: str = ""
    thumb_360_gif: str = ""
    thumb_360_w: int = 0
    thumb_360_h: int = 0
    thumb_480: str = ""
    thumb_480_w: int = 0
    thumb_480_h: int = 0
    thumb_720: str = ""
    thumb_720_w: int = 0
    thumb_720_h: int = 0
    thumb_960: str = ""
    thumb_960_w: int = 0
    thumb_960_h: int = 0
    thumb_1024: str = ""
    thumb_1024_w: int = 0
    thumb_1024_h: int = 0
    permalink: str = ""
    permalink_public: str = ""
    edit_link: str = ""
    preview: str = ""
    preview_highlight: str = ""
    lines: int = 0
    lines_more: int = 0
    is_public: bool = False
    public_url_shared: bool = False
    channels: list = field(default_factory=list)
    groups: list = field(default_factory=list)
    ims: list = field(default_factory=list)
    initial_comment: Comment = field(default_factory=Comment)
    comments_count: int = 0
    num_stars: int = 0
    is_starred: bool = False
    shares: Share = field(default_factory=Share)

    @classmethod
    def from_dict(cls, data):
        decoders = dict(
            _TIME_DECODERS,
            channels=list,
            groups=list,
            ims=list,
            initial_comment=Comment.from_dict,
            shares=lambda d: _build(Share, d, {"public": _share_map, "private": _share_map}),
        )
        return _build(cls, data, decoders)

    def to_dict(self):
        return asdict(self)