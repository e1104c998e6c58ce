"""Types for the *m.push_rules* event."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .core import _json_kind, _object, _required, _string
from .push_actions import Action, action_from_json, action_to_json
from .push_conditions import PushCondition, condition_from_json, condition_to_json

EVENT_TYPE = "m.push_rules"

_T = TypeVar("_T")


def _bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a boolean")
    return value


def _list(value: Any, name: str, parse: Callable[[Any], _T]) -> list[_T]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a sequence")
    return [parse(item) for item in value]


def _common_fields(mapping: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "actions": _list(_required(mapping, "actions"), "actions", action_from_json),
        "default": _bool(_required(mapping, "default"), "default"),
        "enabled": _bool(_required(mapping, "enabled"), "enabled"),
        "rule_id": _string(_required(mapping, "rule_id"), "rule_id"),
    }


@dataclass
class PushRule:
    """A rule stating when an event is passed to a push gateway and how it is presented."""

    actions: list[Action]
    default: bool
    enabled: bool
    rule_id: str

    def to_json(self) -> dict[str, Any]:
        return {
            "actions": [action_to_json(action) for action in self.actions],
            "default": self.default,
            "enabled": self.enabled,
            "rule_id": self.rule_id,
        }

    @classmethod
    def from_json(cls, data: Any) -> "PushRule":
        return cls(**_common_fields(_object(data)))


@dataclass
class ConditionalPushRule(PushRule):
    """A push rule with conditions; used for override and underride rules.

    A rule with no conditions always matches.
    """

    conditions: list[PushCondition] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        fields = super().to_json()
        fields["conditions"] = [condition_to_json(c) for c in self.conditions]
        return fields

    @classmethod
    def from_json(cls, data: Any) -> "ConditionalPushRule":
        mapping = _object(data)
        fields = _common_fields(mapping)
        fields["conditions"] = _list(
            _required(mapping, "conditions"), "conditions", condition_from_json
        )
        return cls(**fields)


@dataclass
class PatternedPushRule(PushRule):
    """A push rule with a glob-style pattern; used for content rules."""

    pattern: str = ""

    def to_json(self) -> dict[str, Any]:
        fields = super().to_json()
        fields["pattern"] = self.pattern
        return fields

    @classmethod
    def from_json(cls, data: Any) -> "PatternedPushRule":
        mapping = _object(data)
        fields = _common_fields(mapping)
        fields["pattern"] = _string(_required(mapping, "pattern"), "pattern")
        return cls(**fields)


@dataclass
class Ruleset:
    """The complete set of push rules, grouped by scope."""

    content: list[PatternedPushRule] = field(default_factory=list)
    override_rules: list[ConditionalPushRule] = field(default_factory=list)
    room: list[PushRule] = field(default_factory=list)
    sender: list[PushRule] = field(default_factory=list)
    underride: list[ConditionalPushRule] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {
            "content": [rule.to_json() for rule in self.content],
            "override": [rule.to_json() for rule in self.override_rules],
            "room": [rule.to_json() for rule in self.room],
            "sender": [rule.to_json() for rule in self.sender],
            "underride": [rule.to_json() for rule in self.underride],
        }

    @classmethod
    def from_json(cls, data: Any) -> "Ruleset":
        mapping = _object(data)
        return cls(
            content=_list(
                _required(mapping, "content"), "content", PatternedPushRule.from_json
            ),
            override_rules=_list(
                _required(mapping, "override"), "override", ConditionalPushRule.from_json
            ),
            room=_list(_required(mapping, "room"), "room", PushRule.from_json),
            sender=_list(_required(mapping, "sender"), "sender", PushRule.from_json),
            underride=_list(
                _required(mapping, "underride"), "underride", ConditionalPushRule.from_json
            ),
        )


@dataclass
class PushRulesEventContent:
    """The payload of a push rules event."""

    global_: Ruleset

    def to_json(self) -> dict[str, Any]:
        return {"global": self.global_.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> "PushRulesEventContent":
        mapping = _object(data)
        return cls(global_=Ruleset.from_json(_required(mapping, "global")))


@dataclass
class PushRulesEvent:
    """Describes all push rules for a user."""

    content: PushRulesEventContent

    @property
    def event_type(self) -> str:
        return EVENT_TYPE

    def to_json(self) -> dict[str, Any]:
        return {"content": self.content.to_json(), "type": EVENT_TYPE}

    @classmethod
    def from_json(cls, data: Any) -> "PushRulesEvent":
        mapping = _object(data)
        return cls(content=PushRulesEventContent.from_json(_required(mapping, "content")))