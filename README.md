# m3ua

A pure-Python library for building and decoding M3UA messages (SIGTRAN
MTP3 User Adaptation, RFC 4666). It handles the common message header,
the common and M3UA-specific parameters, and a set of message types. It
also converts SS7 point codes between their dash-separated formats.

It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parameters

`m3ua.params.param.Param` is a dataclass with `tag`, `length` and `data`.
The builders in `m3ua.params.builders` create each parameter with its
length filled in:

```python
from m3ua.params.builders import new_routing_context, new_protocol_data
from m3ua.params.param import parse

rc = new_routing_context(1, 2, 3)
wire = rc.marshal()
assert parse(wire).routing_contexts() == [1, 2, 3]

pd = new_protocol_data(1, 2, 3, 1, 0, 1, b"\xde\xad\xbe\xef")
payload = pd.protocol_data()
print(payload.originating_point_code, payload.data)
```

`Param.marshal()` pads the data to a 4-byte boundary. The `length` field
does not count the padding. The value accessors on `Param`, such as
`asp_identifier()`, `status_type()`, `user_identity()` and
`service_indicators()`, return `0`, `""`, `b""` or `[]` when the tag does
not match. `protocol_data()` raises `InvalidTypeError` instead.

`parse_multi_params` decodes a run of parameters and
`marshal_multi_params` encodes one. Failures raise subclasses of
`ParamError`, which is itself a `ValueError`:

- `TooShortToParseError`
- `InvalidLengthError`
- `InvalidTypeError`

The builders module also holds the value sets as `IntEnum`s:

- `ErrorCode`
- `StatusType`
- `StatusInfo`
- `UserIdentity`
- `UnavailabilityCause`
- `TrafficMode`
- `RegistrationStatusCode`
- `DeregistrationStatusCode`

`m3ua.params.protocol_data` defines `ServiceIndicator`.

Three parameters carry other parameters: Registration Result,
Deregistration Result and Routing Key. `m3ua.params.nested` builds and
decodes them:

```python
from m3ua.params.builders import (
    new_local_routing_key_identifier,
    new_registration_status,
    new_routing_context,
)
from m3ua.params.nested import (
    RegistrationResultPayload,
    new_registration_result,
    registration_result,
)

param = new_registration_result(
    RegistrationResultPayload(
        new_local_routing_key_identifier(1),
        new_registration_status(1),
        new_routing_context(1),
    )
)
result = registration_result(param)
assert result.routing_context.routing_context() == 1
```

## Messages

```python
from m3ua.messages.message import marshal, parse
from m3ua.messages.notify import new_notify
from m3ua.params.builders import StatusInfo, new_asp_identifier, new_status

notify = new_notify(new_status(StatusInfo.AS_STATE_ACTIVE), new_asp_identifier(2), None, None)
data = marshal(notify)

message = parse(data)
print(message.message_class_name(), message.message_type_name())  # Management Notify
```

`parse` reads the class and type fields and returns one of these types:

| Module | Type |
| --- | --- |
| `m3ua.messages.heartbeat` | `Heartbeat`, `HeartbeatAck` |
| `m3ua.messages.error` | `ErrorMessage` |
| `m3ua.messages.notify` | `Notify` |
| `m3ua.messages.dupu` | `DestinationUserPartUnavailable` |
| `m3ua.messages.scon` | `SignallingCongestion` |

Any other class and type combination is decoded as a
`m3ua.messages.generic.Generic`. A `Generic` keeps its header and an
ordered list of parameters.

Each module has `new_*` and `parse_*` functions. You can also build a
`Generic` by hand:

```python
from m3ua.messages.generic import new_generic
from m3ua.params.builders import new_network_appearance, new_routing_context

msg = new_generic(1, 127, 127, new_network_appearance(1), new_routing_context(1, 255))
assert msg.marshal_len() == 28
```

The common header lives in `m3ua.messages.header`, with `Header`,
`new_header` and `parse_header`. The message classes and type numbers are
`IntEnum`s in `m3ua.messages.constants`.

Message errors raise subclasses of `MessageError`:

- `TooShortToParseError` when the input is shorter than the header needs.
- `InvalidParameterError` when a typed message holds a parameter it does
  not expect.

Malformed parameters inside a message raise the `ParamError` subclasses
listed above.

## Point codes

```python
from m3ua.pc import PointCode, Variant

pc = PointCode.from_raw(1234, Variant.V383)
print(str(pc))                      # 0-154-2
print(pc.convert_to(Variant.V437))  # 1-1-82
assert int(PointCode.from_string("0-154-2", Variant.V383)) == 1234
```

`from_raw` masks the value to the variant's bit length. `from_string`
raises `ValueError` in three cases:

- the text does not split into the variant's number of fields;
- a field is not a number;
- the variant is `Variant.NONE`.

## What it does not do

This is a codec only. It does not:

- open SCTP associations or listen for peers;
- run the ASP state machine (ASP Up, Active and so on);
- send heartbeats.

It has no dedicated types for the Payload Data message, the ASP state and
traffic maintenance messages, the other SSNM messages or the routing key
management messages. `parse` returns these as `Generic`.