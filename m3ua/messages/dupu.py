"""The Destination User Part Unavailable message of the SSNM class."""

from __future__ import annotations

from typing import Optional, cast

from ..params.param import Param, Tag
from .constants import MessageClass, SsnmType
from .header import ParamMessage


class DestinationUserPartUnavailable(ParamMessage):
    """A DUPU message telling that a user part at a destination is unavailable."""

    MESSAGE_CLASS = MessageClass.SSNM
    MESSAGE_TYPE = SsnmType.DESTINATION_USER_PART_UNAVAILABLE
    CLASS_NAME = MessageClass.SSNM.label
    TYPE_NAME = "Destination User Part Unavailable"
    FIELDS = (
        ("network_appearance", Tag.NETWORK_APPEARANCE),
        ("routing_context", Tag.ROUTING_CONTEXT),
        ("affected_point_code", Tag.AFFECTED_POINT_CODE),
        ("user_cause", Tag.USER_CAUSE),
        ("info_string", Tag.INFO_STRING),
    )


def new_destination_user_part_unavailable(
    nw_apr: Optional[Param],
    rt_ctx: Optional[Param],
    apcs: Optional[Param],
    cause: Optional[Param],
    info: Optional[Param],
) -> DestinationUserPartUnavailable:
    """Create a DUPU message with its lengths filled in."""
    message = DestinationUserPartUnavailable(
        network_appearance=nw_apr,
        routing_context=rt_ctx,
        affected_point_code=apcs,
        user_cause=cause,
        info_string=info,
    )
    message.set_length()
    return message


def parse_destination_user_part_unavailable(data: bytes) -> DestinationUserPartUnavailable:
    """Decode a DUPU message."""
    return cast(DestinationUserPartUnavailable, DestinationUserPartUnavailable.parse(data))