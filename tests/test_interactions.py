import pytest

from slackkit.interactions import ActionCallbacks, InteractionCallback, InteractionType

ATTACHMENT_ACCEPT = {"name": "accept", "text": "Accept", "type": "button", "value": "accept"}
ATTACHMENT_REJECT = {
    "name": "reject",
    "text": "Reject",
    "type": "button",
    "value": "reject",
    "style": "danger",
}
BLOCK_ACTION = {"action_id": "click_me_123", "block_id": "b1", "type": "button", "value": "v"}


def test_interaction_type_values():
    assert InteractionType.BLOCK_ACTIONS.value == "block_actions"
    assert InteractionType.INTERACTION_MESSAGE.value == "interactive_message"
    assert InteractionType("dialog_submission") is InteractionType.DIALOG_SUBMISSION


def test_from_list_attachment_actions():
    callbacks = ActionCallbacks.from_list([ATTACHMENT_ACCEPT, ATTACHMENT_REJECT])
    assert callbacks.attachment_actions == [ATTACHMENT_ACCEPT, ATTACHMENT_REJECT]
    assert callbacks.block_actions == []


def test_from_list_block_action():
    callbacks = ActionCallbacks.from_list([BLOCK_ACTION])
    assert callbacks.block_actions == [BLOCK_ACTION]
    assert callbacks.attachment_actions == []


def test_from_list_stops_after_first_block_action():
    callbacks = ActionCallbacks.from_list([BLOCK_ACTION, ATTACHMENT_ACCEPT, BLOCK_ACTION])
    assert callbacks.block_actions == [BLOCK_ACTION]
    assert callbacks.attachment_actions == []


def test_non_string_block_id_is_an_attachment_action():
    action = {"name": "x", "block_id": 5}
    callbacks = ActionCallbacks.from_list([action])
    assert callbacks.attachment_actions == [action]


def test_from_list_none_is_empty():
    assert ActionCallbacks.from_list(None).to_list() == []


def test_to_list_orders_attachment_actions_first():
    callbacks = ActionCallbacks(
        attachment_actions=[ATTACHMENT_ACCEPT], block_actions=[BLOCK_ACTION]
    )
    assert callbacks.to_list() == [ATTACHMENT_ACCEPT, BLOCK_ACTION]


def test_list_round_trip():
    callbacks = ActionCallbacks.from_list([ATTACHMENT_ACCEPT, ATTACHMENT_REJECT])
    assert ActionCallbacks.from_list(callbacks.to_list()) == callbacks


@pytest.mark.parametrize("bad", [{"a": 1}, "actions", [1], [["x"]]])
def test_from_list_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        ActionCallbacks.from_list(bad)


def _payload():
    return {
        "type": "interactive_message",
        "token": "token",
        "callback_id": "accept_or_reject",
        "action_ts": "1458170917.164398",
        "team": {"id": "T1", "name": "team", "domain": "example"},
        "channel": {"id": "C2147483705", "name": "general"},
        "user": {"id": "U2147483697", "name": "tester"},
        "original_message": {"type": "message", "text": "Hello world", "ts": "1355517523.000005"},
        "name": "accept",
        "value": "accept",
        "message_ts": "1355517523.000005",
        "attachment_id": "1",
        "actions": [ATTACHMENT_ACCEPT],
    }


def test_callback_from_dict():
    callback = InteractionCallback.from_dict(_payload())
    assert callback.type is InteractionType.INTERACTION_MESSAGE
    assert callback.callback_id == "accept_or_reject"
    assert callback.team.domain == "example"
    assert callback.user["name"] == "tester"
    assert callback.original_message.text == "Hello world"
    assert callback.original_message.timestamp == "1355517523.000005"
    assert callback.action_callback.attachment_actions == [ATTACHMENT_ACCEPT]
    assert callback.value == "accept"


def test_callback_keeps_unknown_type():
    callback = InteractionCallback.from_dict({"type": "view_submission"})
    assert callback.type == "view_submission"
    assert callback.to_dict()["type"] == "view_submission"


def test_callback_round_trip():
    callback = InteractionCallback.from_dict(_payload())
    encoded = callback.to_dict()
    assert encoded["type"] == "interactive_message"
    assert encoded["actions"] == [ATTACHMENT_ACCEPT]
    assert InteractionCallback.from_dict(encoded) == callback


def test_callback_with_block_actions():
    payload = {"type": "block_actions", "actions": [BLOCK_ACTION]}
    callback = InteractionCallback.from_dict(payload)
    assert callback.type is InteractionType.BLOCK_ACTIONS
    assert callback.action_callback.block_actions == [BLOCK_ACTION]
    assert callback.to_dict()["actions"] == [BLOCK_ACTION]


def test_callback_rejects_non_object():
    with pytest.raises(ValueError):
        InteractionCallback.from_dict(["type"])