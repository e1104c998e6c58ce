"""Actions of push rules: what happens when a rule matches an event."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .core import FromStrError, JsonStrEnum, _json_kind, _object, _required, _string


class SimpleAction(JsonStrEnum):
    """An action that is serialized as a plain string."""

    NOTIFY = "notify"
    DONT_NOTIFY = "dont_notify"
    COALESCE = "coalesce"


@dataclass(frozen=True)
class SoundTweak:
    """The sound to play when a notification arrives; ``"default"`` plays the default sound."""

    value: str

    def to_json(self) -> dict[str, Any]:
        return {"set_tweak": "sound", "value": self.value}


@dataclass(frozen=True)
class HighlightTweak:
    """Whether a message should be highlighted in the UI."""

    value: bool = True

    def to_json(self) -> dict[str, Any]:
        return {"set_tweak": "highlight", "value": self.value}


Tweak = Union[SoundTweak, HighlightTweak]


@dataclass(frozen=True)
class SetTweak:
    """An action setting an entry in the ``tweaks`` sent to the push gateway."""

    tweak: Tweak

    def __str__(self) -> str:
        return "set_tweak"

    def to_json(self) -> dict[str, Any]:
        return self.tweak.to_json()


Action = Union[SimpleAction, SetTweak]


def tweak_from_json(data: Any) -> Tweak:
    """Build a tweak from its JSON object form, tagged by ``set_tweak``."""
    mapping = _object(data)
    tag = _string(_required(mapping, "set_tweak"), "set_tweak")
    if tag == "sound":
        return SoundTweak(value=_string(_required(mapping, "value"), "value"))
    if tag == "highlight":
        value = mapping.get("value", True)
        if not isinstance(value, bool):
            raise TypeError(
                f"invalid type for `value`: {_json_kind(value)}, expected a boolean"
            )
        return HighlightTweak(value=value)
    raise ValueError(f"unknown variant `{tag}`, expected `sound` or `highlight`")


def action_from_json(data: Any) -> Action:
    """Build an action from a JSON string or a ``set_tweak`` object."""
    if isinstance(data, str):
        try:
            return SimpleAction.from_str(data)
        except FromStrError:
            raise ValueError("not a string action") from None
    if isinstance(data, Mapping):
        try:
            return SetTweak(tweak_from_json(data))
        except (KeyError, TypeError, ValueError):
            raise ValueError("unknown action") from None
    raise TypeError(f"invalid type: {_json_kind(data)}, expected action as string or map")


def action_to_json(action: Action) -> Any:
    """Return the JSON form of an action."""
    if isinstance(action, SimpleAction):
        return action.value
    if isinstance(action, SetTweak):
        return action.to_json()
    raise TypeError(f"not a push action: {action!r}")