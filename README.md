# mxevents

Typed Python representations of Matrix events, with conversion to and from
the JSON structures exchanged between clients and homeservers.

Covered types:

- `m.presence`: `mxevents.presence.PresenceEvent`, `PresenceEventContent`,
  `PresenceState`
- `m.receipt`: `mxevents.receipt.ReceiptEvent`, `Receipts`, `Receipt`
- `m.push_rules`: `mxevents.push_rules.PushRulesEvent`,
  `PushRulesEventContent`, `Ruleset`, `PushRule`, `ConditionalPushRule`,
  `PatternedPushRule`, with actions in `mxevents.push_actions` and conditions
  in `mxevents.push_conditions`
- Room media metadata: `mxevents.room.ImageInfo`, `ThumbnailInfo`,
  `EncryptedFile`, `JsonWebKey`
- Events outside the specification, with arbitrary JSON content:
  `mxevents.core.CustomEvent`, `CustomRoomEvent`, `CustomStateEvent`
- `mxevents.core.Empty`, which serializes to `{}`

## Installation

```
pip install mxevents
```

## Usage

Every type has `to_json()`, which returns plain Python data ready for
`json.dumps`. Event, content and metadata classes also have a `from_json()`
classmethod that takes decoded JSON.

```python
import json
from mxevents.presence import PresenceEvent, PresenceEventContent, PresenceState

event = PresenceEvent(
    content=PresenceEventContent(
        presence=PresenceState.ONLINE,
        status_msg="Making cupcakes",
    ),
    sender="@example:localhost",
)
print(json.dumps(event.to_json()))
# {"content": {"presence": "online", "status_msg": "Making cupcakes"},
#  "sender": "@example:localhost", "type": "m.presence"}
```

Optional fields that are `None` are left out of the output.
`PresenceState.from_str("online")` and `SimpleAction.from_str("notify")` parse
the string forms and raise `mxevents.core.FromStrError` for unknown values.

### Deserializing events

`from_json()` raises `KeyError`, `TypeError` or `ValueError` when the data has
the wrong shape. The helpers in `mxevents.core` turn those into a single
exception, `InvalidEvent`, which keeps the message, a copy of the JSON that was
received, and the kind of failure:

```python
from mxevents.core import InvalidEvent, deserialize_event_str, deserialize_many
from mxevents.push_rules import PushRulesEvent

try:
    event = deserialize_event_str(PushRulesEvent, raw_text)
except InvalidEvent as invalid:
    print(invalid.message, invalid.json, invalid.is_deserialization())
else:
    print(event.content.global_.override_rules)
```

- `deserialize_event(event_class, data)` works on already decoded JSON.
- `deserialize_event_str(event_class, text)` parses JSON text first; text that
  is not JSON at all raises `json.JSONDecodeError`.
- `deserialize_many(event_class, items)` never raises `InvalidEvent`: it returns
  a list in which each failed item is replaced by its `InvalidEvent`, so one bad
  event does not break a whole batch.

`InvalidEvent.is_deserialization()` is true when the JSON has the wrong shape.
`is_validation()` is true when `from_json()` raised
`mxevents.core.ValidationError`, meaning the shape was right but the data broke
a further rule.

### Push rule actions and conditions

```python
from mxevents.push_actions import SimpleAction, action_from_json, action_to_json

action_from_json("notify")                      # SimpleAction.NOTIFY
action_from_json({"set_tweak": "highlight"})    # SetTweak(HighlightTweak(value=True))
action_to_json(SimpleAction.DONT_NOTIFY)        # "dont_notify"
```

```python
from mxevents.push_conditions import condition_from_json, condition_to_json

condition = condition_from_json({"kind": "room_member_count", "is": "2"})
condition_to_json(condition)    # {"is": "2", "kind": "room_member_count"}
```

The field `is` is stored as `RoomMemberCountCondition.is_`, and the ruleset's
`override` list as `Ruleset.override_rules`; the push rules content's `global`
key is `PushRulesEventContent.global_`.

## What this package does not do

It models only the event and metadata types listed above. It has no types for
other Matrix events (room messages, membership, power levels and so on), no
enumeration of all event types, no mixed collections of events of different
types, and it does not evaluate push rules against events. It does no
networking and has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```