import json

import pytest

from mxevents.core import FromStrError, InvalidEvent, deserialize_event, deserialize_event_str
from mxevents.presence import PresenceEvent, PresenceEventContent, PresenceState

JSON = (
    '{"content":{"avatar_url":"mxc://localhost:wefuiwegh8742w","currently_active":false,'
    '"last_active_ago":2478593,"presence":"online","status_msg":"Making cupcakes"},'
    '"sender":"@example:localhost","type":"m.presence"}'
)


def _event() -> PresenceEvent:
    return PresenceEvent(
        content=PresenceEventContent(
            avatar_url="mxc://localhost:wefuiwegh8742w",
            currently_active=False,
            displayname=None,
            last_active_ago=2_478_593,
            presence=PresenceState.ONLINE,
            status_msg="Making cupcakes",
        ),
        sender="@example:localhost",
    )


def test_serialization():
    assert json.dumps(_event().to_json(), separators=(",", ":")) == JSON


def test_deserialization():
    assert deserialize_event_str(PresenceEvent, JSON) == _event()


def test_round_trip_through_dict():
    event = _event()
    assert PresenceEvent.from_json(event.to_json()) == event


def test_unknown_presence_is_deserialization_error():
    data = json.loads(JSON)
    data["content"]["presence"] = "busy"
    with pytest.raises(InvalidEvent) as info:
        deserialize_event(PresenceEvent, data)
    assert info.value.is_deserialization()
    assert info.value.json == data


def test_missing_sender_is_rejected():
    data = json.loads(JSON)
    del data["sender"]
    with pytest.raises(InvalidEvent) as info:
        deserialize_event(PresenceEvent, data)
    assert "sender" in str(info.value)


def test_currently_active_must_be_boolean():
    data = json.loads(JSON)
    data["content"]["currently_active"] = "no"
    with pytest.raises(InvalidEvent):
        deserialize_event(PresenceEvent, data)


@pytest.mark.parametrize(
    "state,text",
    [
        (PresenceState.OFFLINE, "offline"),
        (PresenceState.ONLINE, "online"),
        (PresenceState.UNAVAILABLE, "unavailable"),
    ],
)
def test_presence_state_strings(state, text):
    assert str(state) == text
    assert PresenceState.from_str(text) is state


def test_presence_state_from_unknown_string():
    with pytest.raises(FromStrError):
        PresenceState.from_str("away")


def test_event_type():
    assert _event().event_type == "m.presence"