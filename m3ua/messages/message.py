"""Decoding of any M3UA message into the type that its class and type name."""

from __future__ import annotations

from typing import Callable, Dict, Protocol, Tuple, Union

from .constants import (
    AspsmType,
    ManagementType,
    MessageClass,
    SsnmType,
    TooShortToParseError,
)
from .dupu import DestinationUserPartUnavailable, parse_destination_user_part_unavailable
from .error import ErrorMessage, parse_error
from .generic import Generic, parse_generic
from .heartbeat import Heartbeat, HeartbeatAck, parse_heartbeat, parse_heartbeat_ack
from .notify import Notify, parse_notify
from .scon import SignallingCongestion, parse_signalling_congestion


class M3UAMessage(Protocol):
    """What every M3UA message offers."""

    def marshal(self) -> bytes: ...

    def marshal_len(self) -> int: ...

    def version(self) -> int: ...

    def message_class(self) -> int: ...

    def message_type(self) -> int: ...

    def message_class_name(self) -> str: ...

    def message_type_name(self) -> str: ...


Message = Union[
    DestinationUserPartUnavailable,
    ErrorMessage,
    Generic,
    Heartbeat,
    HeartbeatAck,
    Notify,
    SignallingCongestion,
]

_PARSERS: Dict[Tuple[int, int], Callable[[bytes], Message]] = {
    (MessageClass.SSNM, SsnmType.SIGNALLING_CONGESTION): parse_signalling_congestion,
    (
        MessageClass.SSNM,
        SsnmType.DESTINATION_USER_PART_UNAVAILABLE,
    ): parse_destination_user_part_unavailable,
    (MessageClass.ASPSM, AspsmType.HEARTBEAT): parse_heartbeat,
    (MessageClass.ASPSM, AspsmType.HEARTBEAT_ACK): parse_heartbeat_ack,
    (MessageClass.MANAGEMENT, ManagementType.ERROR): parse_error,
    (MessageClass.MANAGEMENT, ManagementType.NOTIFY): parse_notify,
}


def parse(data: bytes) -> Message:
    """Decode a message, choosing its type from the class and type fields.

    Messages of a class and type without a dedicated type are decoded as Generic.
    """
    data = bytes(data)
    if len(data) < 4:
        raise TooShortToParseError()
    parser = _PARSERS.get((data[2], data[3]), parse_generic)
    return parser(data)


def marshal(message: M3UAMessage) -> bytes:
    """Return the wire form of any message."""
    return message.marshal()