"""Heartbeat and Heartbeat Ack messages of the ASP State Maintenance class."""

from __future__ import annotations

from typing import Optional, cast

from ..params.param import Param, Tag
from .constants import AspsmType, MessageClass
from .header import ParamMessage


class Heartbeat(ParamMessage):
    """A Heartbeat message, optionally carrying Heartbeat Data."""

    MESSAGE_CLASS = MessageClass.ASPSM
    MESSAGE_TYPE = AspsmType.HEARTBEAT
    CLASS_NAME = MessageClass.ASPSM.label
    TYPE_NAME = "Heartbeat"
    FIELDS = (("heartbeat_data", Tag.HEARTBEAT_DATA),)


class HeartbeatAck(ParamMessage):
    """A Heartbeat Ack message, echoing the Heartbeat Data it answers."""

    MESSAGE_CLASS = MessageClass.ASPSM
    MESSAGE_TYPE = AspsmType.HEARTBEAT_ACK
    CLASS_NAME = MessageClass.ASPSM.label
    TYPE_NAME = "Heartbeat Ack"
    FIELDS = (("heartbeat_data", Tag.HEARTBEAT_DATA),)


def new_heartbeat(hb_data: Optional[Param]) -> Heartbeat:
    """Create a Heartbeat with its lengths filled in."""
    message = Heartbeat(heartbeat_data=hb_data)
    message.set_length()
    return message


def new_heartbeat_ack(hb_data: Optional[Param]) -> HeartbeatAck:
    """Create a Heartbeat Ack with its lengths filled in."""
    message = HeartbeatAck(heartbeat_data=hb_data)
    message.set_length()
    return message


def parse_heartbeat(data: bytes) -> Heartbeat:
    """Decode a Heartbeat message."""
    return cast(Heartbeat, Heartbeat.parse(data))


def parse_heartbeat_ack(data: bytes) -> HeartbeatAck:
    """Decode a Heartbeat Ack message."""
    return cast(HeartbeatAck, HeartbeatAck.parse(data))