import copy
import json

import pytest

from mxevents.core import InvalidEvent, deserialize_event, deserialize_event_str
from mxevents.push_actions import HighlightTweak, SetTweak, SimpleAction, SoundTweak
from mxevents.push_conditions import (
    ContainsDisplayNameCondition,
    EventMatchCondition,
    RoomMemberCountCondition,
)
from mxevents.push_rules import (
    ConditionalPushRule,
    PatternedPushRule,
    PushRule,
    PushRulesEvent,
    PushRulesEventContent,
    Ruleset,
)


def _match(key, pattern):
    return {"key": key, "kind": "event_match", "pattern": pattern}


def _sound(name):
    return {"set_tweak": "sound", "value": name}


def _highlight(value=None):
    tweak = {"set_tweak": "highlight"}
    if value is not None:
        tweak["value"] = value
    return tweak


def _rule(rule_id, actions, conditions=None, enabled=True, pattern=None):
    rule = {"actions": actions, "default": True, "enabled": enabled, "rule_id": rule_id}
    if conditions is not None:
        rule["conditions"] = conditions
    if pattern is not None:
        rule["pattern"] = pattern
    return rule


_SPEC_DOC = {
    "content": {
        "global": {
            "content": [
                _rule(
                    ".m.rule.contains_user_name",
                    ["notify", _sound("default"), _highlight()],
                    pattern="alice",
                )
            ],
            "override": [
                _rule(".m.rule.master", ["dont_notify"], conditions=[], enabled=False),
                _rule(
                    ".m.rule.suppress_notices",
                    ["dont_notify"],
                    conditions=[_match("content.msgtype", "m.notice")],
                ),
            ],
            "room": [],
            "sender": [],
            "underride": [
                _rule(
                    ".m.rule.call",
                    ["notify", _sound("ring"), _highlight(False)],
                    conditions=[_match("type", "m.call.invite")],
                ),
                _rule(
                    ".m.rule.contains_display_name",
                    ["notify", _sound("default"), _highlight()],
                    conditions=[{"kind": "contains_display_name"}],
                ),
                _rule(
                    ".m.rule.room_one_to_one",
                    ["notify", _sound("default"), _highlight(False)],
                    conditions=[{"is": "2", "kind": "room_member_count"}],
                ),
                _rule(
                    ".m.rule.invite_for_me",
                    ["notify", _sound("default"), _highlight(False)],
                    conditions=[
                        _match("type", "m.room.member"),
                        _match("content.membership", "invite"),
                        _match("state_key", "@alice:example.com"),
                    ],
                ),
                _rule(
                    ".m.rule.member_event",
                    ["notify", _highlight(False)],
                    conditions=[_match("type", "m.room.member")],
                ),
                _rule(
                    ".m.rule.message",
                    ["notify", _highlight(False)],
                    conditions=[_match("type", "m.room.message")],
                ),
            ],
        }
    },
    "type": "m.push_rules",
}

SPEC_EXAMPLE = json.dumps(_SPEC_DOC, indent=4)


def test_sanity_check_spec_example():
    event = deserialize_event_str(PushRulesEvent, SPEC_EXAMPLE)
    ruleset = event.content.global_
    assert len(ruleset.content) == 1
    assert len(ruleset.override_rules) == 2
    assert ruleset.room == []
    assert ruleset.sender == []
    assert len(ruleset.underride) == 6
    assert event.event_type == "m.push_rules"


def test_spec_example_details():
    event = deserialize_event_str(PushRulesEvent, SPEC_EXAMPLE)
    ruleset = event.content.global_
    first = ruleset.content[0]
    assert first == PatternedPushRule(
        actions=[
            SimpleAction.NOTIFY,
            SetTweak(SoundTweak("default")),
            SetTweak(HighlightTweak(True)),
        ],
        default=True,
        enabled=True,
        rule_id=".m.rule.contains_user_name",
        pattern="alice",
    )
    assert ruleset.override_rules[0].enabled is False
    assert ruleset.override_rules[0].conditions == []
    assert ruleset.override_rules[1].conditions == [
        EventMatchCondition(key="content.msgtype", pattern="m.notice")
    ]
    assert ruleset.underride[1].conditions == [ContainsDisplayNameCondition()]
    assert ruleset.underride[2].conditions == [RoomMemberCountCondition(is_="2")]
    assert ruleset.underride[0].actions[2] == SetTweak(HighlightTweak(False))


def test_spec_example_round_trip():
    original = copy.deepcopy(_SPEC_DOC)
    event = PushRulesEvent.from_json(original)
    again = PushRulesEvent.from_json(event.to_json())
    assert again == event
    assert event.to_json()["content"]["global"]["override"] == original["content"]["global"]["override"]


def test_push_rule_serialization_order():
    rule = PushRule(
        actions=[SimpleAction.DONT_NOTIFY], default=False, enabled=True, rule_id="!room:example.com"
    )
    assert json.dumps(rule.to_json(), separators=(",", ":")) == (
        '{"actions":["dont_notify"],"default":false,"enabled":true,"rule_id":"!room:example.com"}'
    )


def test_conditional_rule_serialization():
    rule = ConditionalPushRule(
        actions=[SimpleAction.NOTIFY],
        default=True,
        enabled=True,
        rule_id=".m.rule.room_one_to_one",
        conditions=[RoomMemberCountCondition(is_="2")],
    )
    assert rule.to_json() == {
        "actions": ["notify"],
        "default": True,
        "enabled": True,
        "rule_id": ".m.rule.room_one_to_one",
        "conditions": [{"is": "2", "kind": "room_member_count"}],
    }
    assert list(rule.to_json()) == ["actions", "default", "enabled", "rule_id", "conditions"]


def test_ruleset_uses_override_key():
    ruleset = Ruleset()
    assert ruleset.to_json() == {
        "content": [],
        "override": [],
        "room": [],
        "sender": [],
        "underride": [],
    }
    assert Ruleset.from_json(ruleset.to_json()) == ruleset


def test_event_to_json_has_type():
    event = PushRulesEvent(PushRulesEventContent(Ruleset()))
    assert event.to_json()["type"] == "m.push_rules"
    assert "global" in event.to_json()["content"]


def test_missing_conditions_is_deserialization_error():
    data = {
        "content": {
            "global": {
                "content": [],
                "override": [
                    {"actions": [], "default": True, "enabled": True, "rule_id": "x"}
                ],
                "room": [],
                "sender": [],
                "underride": [],
            }
        },
        "type": "m.push_rules",
    }
    with pytest.raises(InvalidEvent) as info:
        deserialize_event(PushRulesEvent, data)
    assert info.value.is_deserialization()
    assert "conditions" in info.value.message
    assert info.value.json == data


def test_unknown_action_rejected():
    with pytest.raises(ValueError, match="not a string action"):
        PushRule.from_json(
            {"actions": ["shout"], "default": True, "enabled": True, "rule_id": "x"}
        )


def test_non_bool_enabled_rejected():
    with pytest.raises(TypeError):
        PushRule.from_json(
            {"actions": [], "default": True, "enabled": "yes", "rule_id": "x"}
        )


def test_missing_global_rejected():
    with pytest.raises(InvalidEvent) as info:
        deserialize_event(PushRulesEvent, {"content": {}, "type": "m.push_rules"})
    assert "global" in str(info.value)