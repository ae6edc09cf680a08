"""The Notify message of the Management class."""

from __future__ import annotations

from typing import Optional, cast

from ..params.param import Param, Tag
from .constants import ManagementType, MessageClass
from .header import ParamMessage


class Notify(ParamMessage):
    """A Notify message reporting a change of AS state or another status.

    The Status parameter is mandatory by protocol but not enforced here.
    """

    MESSAGE_CLASS = MessageClass.MANAGEMENT
    MESSAGE_TYPE = ManagementType.NOTIFY
    CLASS_NAME = MessageClass.MANAGEMENT.label
    TYPE_NAME = "Notify"
    FIELDS = (
        ("status", Tag.STATUS),
        ("asp_identifier", Tag.ASP_IDENTIFIER),
        ("routing_context", Tag.ROUTING_CONTEXT),
        ("info_string", Tag.INFO_STRING),
    )


def new_notify(
    status: Optional[Param],
    asp_id: Optional[Param],
    rt_ctx: Optional[Param],
    info: Optional[Param],
) -> Notify:
    """Create a Notify message with its lengths filled in."""
    message = Notify(
        status=status,
        asp_identifier=asp_id,
        routing_context=rt_ctx,
        info_string=info,
    )
    message.set_length()
    return message


def parse_notify(data: bytes) -> Notify:
    """Decode a Notify message."""
    return cast(Notify, Notify.parse(data))