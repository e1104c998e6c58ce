"""Types for the *m.presence* event."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import (
    JsonStrEnum,
    _json_kind,
    _object,
    _optional_string,
    _required,
    _string,
    _uint,
)

EVENT_TYPE = "m.presence"


class PresenceState(JsonStrEnum):
    """A description of a user's connectivity and availability for chat."""

    OFFLINE = "offline"
    ONLINE = "online"
    UNAVAILABLE = "unavailable"


def _optional_bool(data: Mapping[str, Any], name: str) -> bool | None:
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a boolean")
    return value


def _optional_uint(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    return None if value is None else _uint(value, name)


def _presence_state(value: Any) -> PresenceState:
    text = _string(value, "presence")
    try:
        return PresenceState(text)
    except ValueError:
        expected = ", ".join(f"`{state.value}`" for state in PresenceState)
        raise ValueError(f"unknown variant `{text}`, expected one of {expected}") from None


@dataclass
class PresenceEventContent:
    """The payload of a presence event."""

    presence: PresenceState
    avatar_url: str | None = None
    currently_active: bool | None = None
    displayname: str | None = None
    last_active_ago: int | None = None
    status_msg: str | None = None

    def to_json(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "avatar_url": self.avatar_url,
            "currently_active": self.currently_active,
            "displayname": self.displayname,
            "last_active_ago": self.last_active_ago,
            "presence": self.presence.value,
            "status_msg": self.status_msg,
        }
        return {name: value for name, value in fields.items() if value is not None}

    @classmethod
    def from_json(cls, data: Any) -> "PresenceEventContent":
        mapping = _object(data)
        return cls(
            presence=_presence_state(_required(mapping, "presence")),
            avatar_url=_optional_string(mapping, "avatar_url"),
            currently_active=_optional_bool(mapping, "currently_active"),
            displayname=_optional_string(mapping, "displayname"),
            last_active_ago=_optional_uint(mapping, "last_active_ago"),
            status_msg=_optional_string(mapping, "status_msg"),
        )


@dataclass
class PresenceEvent:
    """Informs the client of a user's presence state change."""

    content: PresenceEventContent
    sender: str

    @property
    def event_type(self) -> str:
        return EVENT_TYPE

    def to_json(self) -> dict[str, Any]:
        return {
            "content": self.content.to_json(),
            "sender": self.sender,
            "type": EVENT_TYPE,
        }

    @classmethod
    def from_json(cls, data: Any) -> "PresenceEvent":
        mapping = _object(data)
        return cls(
            content=PresenceEventContent.from_json(_required(mapping, "content")),
            sender=_string(_required(mapping, "sender"), "sender"),
        )