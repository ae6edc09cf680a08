"""Message classes, message types and errors of the M3UA message layer."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class MessageClass(IntEnum):
    """Message Class field of the common header."""

    MANAGEMENT = 0
    TRANSFER = 1
    SSNM = 2
    ASPSM = 3
    ASPTM = 4
    RKM = 9

    @property
    def label(self) -> str:
        """Return the short human readable name of the class."""
        return _CLASS_LABELS[self]


_CLASS_LABELS = {
    MessageClass.MANAGEMENT: "Management",
    MessageClass.TRANSFER: "Transfer",
    MessageClass.SSNM: "SSNM",
    MessageClass.ASPSM: "ASPSM",
    MessageClass.ASPTM: "ASPTM",
    MessageClass.RKM: "RKM",
}


class ManagementType(IntEnum):
    """Message types of the Management class."""

    ERROR = 0
    NOTIFY = 1


class TransferType(IntEnum):
    """Message types of the Transfer class."""

    PAYLOAD_DATA = 1


class SsnmType(IntEnum):
    """Message types of the SS7 Signalling Network Management class."""

    DESTINATION_UNAVAILABLE = 1
    DESTINATION_AVAILABLE = 2
    DESTINATION_STATE_AUDIT = 3
    SIGNALLING_CONGESTION = 4
    DESTINATION_USER_PART_UNAVAILABLE = 5
    DESTINATION_RESTRICTED = 6


class AspsmType(IntEnum):
    """Message types of the ASP State Maintenance class."""

    ASP_UP = 1
    ASP_DOWN = 2
    HEARTBEAT = 3
    ASP_UP_ACK = 4
    ASP_DOWN_ACK = 5
    HEARTBEAT_ACK = 6


class AsptmType(IntEnum):
    """Message types of the ASP Traffic Maintenance class."""

    ASP_ACTIVE = 1
    ASP_INACTIVE = 2
    ASP_ACTIVE_ACK = 3
    ASP_INACTIVE_ACK = 4


class RkmType(IntEnum):
    """Message types of the Routing Key Management class."""

    REGISTRATION_REQUEST = 1
    REGISTRATION_RESPONSE = 2
    DEREGISTRATION_REQUEST = 3
    DEREGISTRATION_RESPONSE = 4


class MessageError(ValueError):
    """Base class of message errors."""

    default_message = "message error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class TooShortToMarshalError(MessageError):
    default_message = "insufficient buffer to serialize M3UA to"


class TooShortToParseError(MessageError):
    default_message = "too short to decode as M3UA"


class InvalidParameterError(MessageError):
    default_message = "got invalid parameter inside a message"