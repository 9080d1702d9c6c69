from urllib.parse import parse_qsl

import pytest
import responses

from slackkit.base import BaseClient
from slackkit.dnd import DNDStatus, DndMixin, SnoozeInfo
from slackkit.errors import SlackApiError

API_URL = "http://slack.test/api/"


class _Client(DndMixin, BaseClient):
    pass


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def api():
    return _Client("token", API_URL)


def _form(call):
    body = call.request.body
    if isinstance(body, bytes):
        body = body.decode()
    return dict(parse_qsl(body))


def test_end_dnd(rsps, api):
    rsps.add(responses.POST, API_URL + "dnd.endDnd", json={"ok": True})
    assert DndMixin.end_dnd(api) is None
    assert _form(rsps.calls[0]) == {"token": "token"}


def test_end_dnd_error(rsps, api):
    rsps.add(responses.POST, API_URL + "dnd.endDnd", json={"ok": False, "error": "errored"})
    with pytest.raises(SlackApiError) as excinfo:
        DndMixin.end_dnd(api)
    assert excinfo.value.error == "errored"


def test_end_snooze(rsps, api):
    rsps.add(
        responses.POST,
        API_URL + "dnd.endSnooze",
        json={
            "ok": True,
            "dnd_enabled": True,
            "next_dnd_start_ts": 1450418400,
            "next_dnd_end_ts": 1450454400,
            "snooze_enabled": False,
        },
    )
    expected = DNDStatus(
        enabled=True,
        next_start_timestamp=1450418400,
        next_end_timestamp=1450454400,
        snooze_info=SnoozeInfo(snooze_enabled=False),
    )
    assert api.end_snooze() == expected


def test_get_dnd_info(rsps, api):
    rsps.add(
        responses.POST,
        API_URL + "dnd.info",
        json={
            "ok": True,
            "dnd_enabled": True,
            "next_dnd_start_ts": 1450416600,
            "next_dnd_end_ts": 1450452600,
            "snooze_enabled": True,
            "snooze_endtime": 1450416600,
            "snooze_remaining": 1196,
        },
    )
    expected = DNDStatus(
        enabled=True,
        next_start_timestamp=1450416600,
        next_end_timestamp=1450452600,
        snooze_info=SnoozeInfo(
            snooze_enabled=True,
            snooze_end_time=1450416600,
            snooze_remaining=1196,
        ),
    )
    assert api.get_dnd_info(None) == expected
    assert "user" not in _form(rsps.calls[0])


def test_get_dnd_info_sends_user(rsps, api):
    rsps.add(responses.POST, API_URL + "dnd.info", json={"ok": True, "dnd_enabled": False})
    assert api.get_dnd_info("U023BECGF") == DNDStatus(enabled=False)
    assert _form(rsps.calls[0])["user"] == "U023BECGF"


def test_get_dnd_team_info(rsps, api):
    rsps.add(
        responses.POST,
        API_URL + "dnd.teamInfo",
        json={
            "ok": True,
            "users": {
                "U023BECGF": {
                    "dnd_enabled": True,
                    "next_dnd_start_ts": 1450387800,
                    "next_dnd_end_ts": 1450423800,
                },
                "U058CJVAA": {
                    "dnd_enabled": False,
                    "next_dnd_start_ts": 1,
                    "next_dnd_end_ts": 1,
                },
            },
        },
    )
    expected = {
        "U023BECGF": DNDStatus(
            enabled=True, next_start_timestamp=1450387800, next_end_timestamp=1450423800
        ),
        "U058CJVAA": DNDStatus(enabled=False, next_start_timestamp=1, next_end_timestamp=1),
    }
    assert api.get_dnd_team_info(None) == expected


def test_get_dnd_team_info_joins_users(rsps, api):
    rsps.add(
        responses.POST,
        API_URL + "dnd.teamInfo",
        json={"ok": True, "users": {"U1": {"dnd_enabled": True}}},
    )
    assert api.get_dnd_team_info(["U1", "U2"]) == {"U1": DNDStatus(enabled=True)}
    assert _form(rsps.calls[0])["users"] == "U1,U2"


def test_set_snooze(rsps, api):
    rsps.add(
        responses.POST,
        API_URL + "dnd.setSnooze",
        json={
            "ok": True,
            "dnd_enabled": True,
            "snooze_endtime": 1450373897,
            "snooze_remaining": 60,
        },
    )
    expected = DNDStatus(
        enabled=True,
        snooze_info=SnoozeInfo(snooze_end_time=1450373897, snooze_remaining=60),
    )
    assert api.set_snooze(60) == expected
    assert _form(rsps.calls[0])["num_minutes"] == "60"