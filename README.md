# slackkit

A Python client for the Slack Web API. It covers Do Not Disturb settings,
files, private groups, direct-message channels and custom emoji. It also
provides dataclass models for messages, files, history, dialog text inputs
and interaction callbacks.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Create a `slackkit.api.Client` with an API token and the base URL of the
Web API. It posts form-encoded calls with `requests` (a `requests.Session`
may be passed as `session=`). Each method returns plain Python values or
dataclass models. When the API answers with `ok` false, the method raises
`SlackApiError`. Any other HTTP status, or a body that is not a JSON object,
raises `SlackError`.

```python
from slackkit.api import Client
from slackkit.errors import SlackApiError

client = Client("token", "https://api.example.com/")

for name, url in client.get_emoji().items():
    print(name, url)

try:
    status = client.get_dnd_info(None)
    print(status.enabled, status.next_start_timestamp, status.snooze_info.snooze_remaining)
except SlackApiError as exc:
    print("Slack said:", exc.error)
```

The Do Not Disturb methods are `end_dnd`, `end_snooze`, `get_dnd_info`,
`get_dnd_team_info` and `set_snooze`. `auth_test` checks the token.

### Files

```python
from slackkit.files import FileUploadParameters, GetFilesParameters, ListFilesParameters

uploaded = client.upload_file(
    FileUploadParameters(filename="notes.txt", content="hello", channels=["C0000000"])
)

files, paging = client.get_files(GetFilesParameters())
files, next_params = client.list_files(ListFilesParameters(limit=20))

with open("download.bin", "wb") as out:
    client.get_file(uploaded.url_private_download, out)
```

`upload_file` first calls `auth.test`. It then uploads in one of three ways:

- If `content` is set, it sends that content.
- Otherwise, if `file` is set, it sends the local file at that path.
- Otherwise, if `reader` is set, it sends the binary stream. A `filename` is then mandatory; without one, `ValueError` is raised.

With none of the three set, the upload raises `SlackApiError`.

`get_file` with an empty URL and `delete_file_comment` without both ids
raise `ParametersMissingError`.

The remaining file methods are `get_file_info`, `delete_file`,
`revoke_file_public_url` and `share_file_public_url`.

### Groups and direct messages

```python
from slackkit.history import HistoryParameters

history = client.get_group_history("G0000000", HistoryParameters(count=50))
for message in history.messages:
    print(message.user, message.text)

no_op, already_open, channel_id = client.open_im_channel("U0000000")
```

For private groups, `GroupsMixin` provides:

- archiving, creation and membership: `archive_group`, `unarchive_group`, `create_group`, `create_child_group`, `invite_user_to_group`, `kick_user_from_group`, `leave_group`;
- listing and details: `get_groups`, `get_group_info`, `open_group`;
- settings: `rename_group`, `set_group_purpose`, `set_group_topic`, `set_group_read_mark`.

`rename_group` returns the channel object as a dict.

For direct messages, `IMMixin` provides `close_im_channel`,
`open_im_channel`, `mark_im_channel`, `get_im_history` and
`get_im_channels`.

### Messages and items

```python
from slackkit.messages import parse_message

message = parse_message('{"type": "message", "text": "Hello world", "ts": "1355517523.000005"}')
print(message.text, message.timestamp, message.to_dict())
```

`slackkit.messages` also builds real-time outgoing messages:

- `new_outgoing_message` and `new_typing_message` take an id generator such as `slackkit.idgen.SafeID`.
- `new_subscribe_user_presence` builds a presence subscription.
- The options `rtm_option_ts` and `rtm_option_broadcast` set the thread and broadcast fields.

`slackkit.item` wraps messages, files and channels as `Item` values. It
builds `ItemRef` references with `new_ref_to_message`, `new_ref_to_file`
and `new_ref_to_comment`.

### Dialog inputs and interaction callbacks

`slackkit.dialog_text` offers `new_text_input` and `new_text_area_input`.
The elements are serialised with `TextInputElement.to_dict()`.

`InteractionCallback.from_dict` in `slackkit.interactions` decodes the
payload posted when a user presses a button or submits a dialog. Its
actions are split into `attachment_actions` and `block_actions`.

## Errors

All errors derive from `SlackError` in `slackkit.errors`. Errors returned by
the Slack API are raised as `SlackApiError`, with the API's error code in
`error` and the full answer in `response`.

## What it does not do

The package has no real-time (websocket) connection. It can build outgoing
real-time messages but cannot send them or receive events. It has no
methods for posting chat messages, public channels, users, reactions, pins
or stars. It has no web server for receiving callbacks or events, and no
command-line program.