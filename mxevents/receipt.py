"""Types for the *m.receipt* event."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .core import _object, _optional_string, _required, _string, _uint

EVENT_TYPE = "m.receipt"
_READ = "m.read"


@dataclass
class Receipt:
    """An acknowledgement of an event."""

    ts: int | None = None

    def to_json(self) -> dict[str, Any]:
        return {"ts": self.ts}

    @classmethod
    def from_json(cls, data: Any) -> "Receipt":
        mapping = _object(data)
        value = mapping.get("ts")
        return cls(ts=None if value is None else _uint(value, "ts"))


@dataclass
class Receipts:
    """A collection of receipts; ``read`` maps user IDs to their *m.read* receipt."""

    read: dict[str, Receipt] | None = None

    def to_json(self) -> dict[str, Any]:
        if self.read is None:
            return {_READ: None}
        return {_READ: {user: receipt.to_json() for user, receipt in self.read.items()}}

    @classmethod
    def from_json(cls, data: Any) -> "Receipts":
        mapping = _object(data)
        value = mapping.get(_READ)
        if value is None:
            return cls()
        return cls(
            read={
                _string(user, "user_id"): Receipt.from_json(receipt)
                for user, receipt in _object(value).items()
            }
        )


@dataclass
class ReceiptEvent:
    """Informs the client of new receipts.

    ``content`` maps the ID of each acknowledged event to its receipts.
    """

    content: dict[str, Receipts] = field(default_factory=dict)
    room_id: str | None = None

    @property
    def event_type(self) -> str:
        return EVENT_TYPE

    def to_json(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "content": {event_id: receipts.to_json() for event_id, receipts in self.content.items()}
        }
        if self.room_id is not None:
            fields["room_id"] = self.room_id
        fields["type"] = EVENT_TYPE
        return fields

    @classmethod
    def from_json(cls, data: Any) -> "ReceiptEvent":
        mapping = _object(data)
        content = _object(_required(mapping, "content"))
        return cls(
            content={
                _string(event_id, "event_id"): Receipts.from_json(receipts)
                for event_id, receipts in content.items()
            },
            room_id=_optional_string(mapping, "room_id"),
        )