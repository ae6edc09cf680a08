"""The Signalling Congestion message of the SSNM class."""

from __future__ import annotations

from typing import Optional, cast

from ..params.param import Param, Tag
from .constants import MessageClass, SsnmType
from .header import ParamMessage


class SignallingCongestion(ParamMessage):
    """A SCON message reporting congestion towards a destination."""

    MESSAGE_CLASS = MessageClass.SSNM
    MESSAGE_TYPE = SsnmType.SIGNALLING_CONGESTION
    CLASS_NAME = MessageClass.SSNM.label
    TYPE_NAME = "Signalling Congestion"
    FIELDS = (
        ("network_appearance", Tag.NETWORK_APPEARANCE),
        ("routing_context", Tag.ROUTING_CONTEXT),
        ("affected_point_code", Tag.AFFECTED_POINT_CODE),
        ("concerned_destination", Tag.CONCERNED_DESTINATION),
        ("congestion_indications", Tag.CONGESTION_INDICATIONS),
        ("info_string", Tag.INFO_STRING),
    )


def new_signalling_congestion(
    nw_apr: Optional[Param],
    rt_ctx: Optional[Param],
    apc: Optional[Param],
    cdst: Optional[Param],
    ind: Optional[Param],
    info: Optional[Param],
) -> SignallingCongestion:
    """Create a SCON message with its lengths filled in."""
    message = SignallingCongestion(
        network_appearance=nw_apr,
        routing_context=rt_ctx,
        affected_point_code=apc,
        concerned_destination=cdst,
        congestion_indications=ind,
        info_string=info,
    )
    message.set_length()
    return message


def parse_signalling_congestion(data: bytes) -> SignallingCongestion:
    """Decode a SCON message."""
    return cast(SignallingCongestion, SignallingCongestion.parse(data))