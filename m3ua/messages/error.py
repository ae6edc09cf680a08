"""The Error message of the Management class."""

from __future__ import annotations

from typing import Optional, cast

from ..params.param import Param, Tag
from .constants import ManagementType, MessageClass
from .header import ParamMessage


class ErrorMessage(ParamMessage):
    """An Error message reporting a problem found in a received message."""

    MESSAGE_CLASS = MessageClass.MANAGEMENT
    MESSAGE_TYPE = ManagementType.ERROR
    CLASS_NAME = MessageClass.MANAGEMENT.label
    TYPE_NAME = "Error"
    FIELDS = (
        ("error_code", Tag.ERROR_CODE),
        ("routing_context", Tag.ROUTING_CONTEXT),
        ("network_appearance", Tag.NETWORK_APPEARANCE),
        ("affected_point_code", Tag.AFFECTED_POINT_CODE),
        ("diagnostic_information", Tag.DIAGNOSTIC_INFORMATION),
    )


def new_error(
    code: Optional[Param],
    rt_ctx: Optional[Param],
    nw_apr: Optional[Param],
    apc: Optional[Param],
    info: Optional[Param],
) -> ErrorMessage:
    """Create an Error message with its lengths filled in."""
    message = ErrorMessage(
        error_code=code,
        routing_context=rt_ctx,
        network_appearance=nw_apr,
        affected_point_code=apc,
        diagnostic_information=info,
    )
    message.set_length()
    return message


def parse_error(data: bytes) -> ErrorMessage:
    """Decode an Error message."""
    return cast(ErrorMessage, ErrorMessage.parse(data))