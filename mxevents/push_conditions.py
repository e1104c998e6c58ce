"""Conditions that must hold for a push rule's actions to be taken."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .core import _object, _required, _string


@dataclass(frozen=True)
class EventMatchCondition:
    """A glob pattern match on a dot-separated field of the event."""

    key: str
    pattern: str

    def to_json(self) -> dict[str, Any]:
        return {"key": self.key, "kind": "event_match", "pattern": self.pattern}


@dataclass(frozen=True)
class ContainsDisplayNameCondition:
    """Matches unencrypted messages whose body contains the owner's display name."""

    def to_json(self) -> dict[str, Any]:
        return {"kind": "contains_display_name"}


@dataclass(frozen=True)
class RoomMemberCountCondition:
    """Matches the current number of members in the room.

    ``is_`` is a decimal integer optionally prefixed by ``==``, ``<``, ``>``, ``>=`` or ``<=``.
    """

    is_: str

    def to_json(self) -> dict[str, Any]:
        return {"is": self.is_, "kind": "room_member_count"}


@dataclass(frozen=True)
class SenderNotificationPermissionCondition:
    """Requires the sender to have enough power for the given notification key."""

    key: str

    def to_json(self) -> dict[str, Any]:
        return {"key": self.key, "kind": "sender_notification_permission"}


PushCondition = Union[
    EventMatchCondition,
    ContainsDisplayNameCondition,
    RoomMemberCountCondition,
    SenderNotificationPermissionCondition,
]

_CONDITION_TYPES = (
    EventMatchCondition,
    ContainsDisplayNameCondition,
    RoomMemberCountCondition,
    SenderNotificationPermissionCondition,
)


def condition_from_json(data: Any) -> PushCondition:
    """Build a push condition from its JSON object form, chosen by ``kind``."""
    mapping = _object(data)
    kind = _required(mapping, "kind")
    if not isinstance(kind, str):
        raise TypeError("field `kind` must be a string")
    if kind == "event_match":
        return EventMatchCondition(
            key=_string(_required(mapping, "key"), "key"),
            pattern=_string(_required(mapping, "pattern"), "pattern"),
        )
    if kind == "contains_display_name":
        return ContainsDisplayNameCondition()
    if kind == "room_member_count":
        return RoomMemberCountCondition(is_=_string(_required(mapping, "is"), "is"))
    if kind == "sender_notification_permission":
        return SenderNotificationPermissionCondition(
            key=_string(_required(mapping, "key"), "key")
        )
    raise ValueError(f"unknown condition kind `{kind}`")


def condition_to_json(condition: PushCondition) -> dict[str, Any]:
    """Return the JSON object form of a push condition."""
    if not isinstance(condition, _CONDITION_TYPES):
        raise TypeError(f"not a push condition: {condition!r}")
    return condition.to_json()