"""Shared event machinery: errors, deserialization results, string enums and custom events."""

from __future__ import annotations

import copy
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar, Union

_MAX_UINT = 2**53 - 1


class InvalidEventKind(Enum):
    """Which stage rejected an event."""

    DESERIALIZATION = "deserialization"
    VALIDATION = "validation"


class InvalidEvent(Exception):
    """An event that is malformed or breaks a rule of the specification.

    Carries a message, the JSON that was received and the kind of failure.
    """

    def __init__(self, message: str, json_value: Any, kind: InvalidEventKind) -> None:
        super().__init__(message)
        self.message = message
        self.json = json_value
        self.kind = kind

    def is_deserialization(self) -> bool:
        """Whether the JSON did not have the expected structure."""
        return self.kind is InvalidEventKind.DESERIALIZATION

    def is_validation(self) -> bool:
        """Whether well-formed JSON broke an additional constraint."""
        return self.kind is InvalidEventKind.VALIDATION

    def __str__(self) -> str:
        return self.message


class InvalidInput(ValueError):
    """Data given when building a new event would make it invalid."""


class FromStrError(ValueError):
    """A value could not be parsed from a string."""

    def __init__(self, message: str = "failed to parse type from string") -> None:
        super().__init__(message)


class ValidationError(Exception):
    """Raised by ``from_json`` when well-formed data breaks a rule of the specification."""


class JsonStrEnum(str, Enum):
    """An enumeration whose members serialize to fixed JSON strings."""

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_str(cls, value: str) -> "JsonStrEnum":
        """Return the member whose string form is ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise FromStrError() from None


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def _object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"invalid type: {_json_kind(data)}, expected an object/map")
    return data


def _required(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    return data[name]


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"invalid type for `{name}`: {_json_kind(value)}, expected a string")
    return value


def _optional_string(data: Mapping[str, Any], name: str) -> str | None:
    value = data.get(name)
    return None if value is None else _string(value, name)


def _uint(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"invalid type for `{name}`: {_json_kind(value)}, expected an unsigned integer"
        )
    if not 0 <= value <= _MAX_UINT:
        raise ValueError(f"invalid value for `{name}`: {value} is out of range")
    return value


@dataclass(frozen=True)
class Empty:
    """A meaningless value that serializes to an empty JSON object."""

    def to_json(self) -> dict[str, Any]:
        return {}

    @classmethod
    def from_json(cls, data: Any) -> "Empty":
        mapping = _object(data)
        if mapping:
            raise ValueError(f"invalid length {len(mapping)}, expected an empty map")
        return cls()


@dataclass
class CustomEvent:
    """A basic event not covered by the specification; its content is arbitrary JSON."""

    content: Any
    event_type: str

    def to_json(self) -> dict[str, Any]:
        return {"content": self.content, "type": self.event_type}

    @classmethod
    def from_json(cls, data: Any) -> "CustomEvent":
        mapping = _object(data)
        return cls(
            content=_required(mapping, "content"),
            event_type=_string(_required(mapping, "type"), "type"),
        )


@dataclass
class CustomRoomEvent:
    """A room event not covered by the specification; its content is arbitrary JSON."""

    content: Any
    event_id: str
    event_type: str
    origin_server_ts: int
    sender: str
    room_id: str | None = None
    unsigned: Any = None

    def _room_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "content": self.content,
            "event_id": self.event_id,
            "origin_server_ts": self.origin_server_ts,
        }
        if self.room_id is not None:
            fields["room_id"] = self.room_id
        fields["sender"] = self.sender
        if self.unsigned is not None:
            fields["unsigned"] = self.unsigned
        return fields

    def to_json(self) -> dict[str, Any]:
        fields = self._room_fields()
        fields["type"] = self.event_type
        return fields

    @staticmethod
    def _parse_room_fields(mapping: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "content": _required(mapping, "content"),
            "event_id": _string(_required(mapping, "event_id"), "event_id"),
            "event_type": _string(_required(mapping, "type"), "type"),
            "origin_server_ts": _uint(
                _required(mapping, "origin_server_ts"), "origin_server_ts"
            ),
            "sender": _string(_required(mapping, "sender"), "sender"),
            "room_id": _optional_string(mapping, "room_id"),
            "unsigned": mapping.get("unsigned"),
        }

    @classmethod
    def from_json(cls, data: Any) -> "CustomRoomEvent":
        return cls(**cls._parse_room_fields(_object(data)))


@dataclass
class CustomStateEvent(CustomRoomEvent):
    """A state event not covered by the specification; its content is arbitrary JSON."""

    state_key: str = ""
    prev_content: Any = None

    def to_json(self) -> dict[str, Any]:
        fields = self._room_fields()
        if self.prev_content is not None:
            fields["prev_content"] = self.prev_content
        fields["state_key"] = self.state_key
        fields["type"] = self.event_type
        return fields

    @classmethod
    def from_json(cls, data: Any) -> "CustomStateEvent":
        mapping = _object(data)
        fields = cls._parse_room_fields(mapping)
        fields["state_key"] = _string(_required(mapping, "state_key"), "state_key")
        fields["prev_content"] = mapping.get("prev_content")
        return cls(**fields)


class _FromJson(Protocol):
    @classmethod
    def from_json(cls, data: Any) -> Any: ...


T = TypeVar("T")


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError) and error.args:
        return f"missing field `{error.args[0]}`"
    return str(error)


def deserialize_event(event_class: type[T], data: Any) -> T:
    """Build ``event_class`` from decoded JSON, raising :class:`InvalidEvent` on failure."""
    snapshot = copy.deepcopy(data)
    try:
        return event_class.from_json(data)  # type: ignore[attr-defined]
    except ValidationError as error:
        raise InvalidEvent(str(error), snapshot, InvalidEventKind.VALIDATION) from error
    except (KeyError, TypeError, ValueError) as error:
        raise InvalidEvent(
            _describe(error), snapshot, InvalidEventKind.DESERIALIZATION
        ) from error


def deserialize_event_str(event_class: type[T], text: str | bytes) -> T:
    """Parse JSON text and build ``event_class`` from it.

    Text that is not JSON at all raises :class:`json.JSONDecodeError`.
    """
    return deserialize_event(event_class, json.loads(text))


def deserialize_many(
    event_class: type[T], items: Iterable[Any]
) -> list[Union[T, InvalidEvent]]:
    """Deserialize each item, keeping an :class:`InvalidEvent` in place of any that fails."""
    results: list[Union[T, InvalidEvent]] = []
    for item in items:
        try:
            results.append(deserialize_event(event_class, item))
        except InvalidEvent as invalid:
            results.append(invalid)
    return results