"""Protocol Data parameter payload carried by M3UA DATA messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .param import TooShortToParseError

_FIXED = struct.Struct(">IIBBBB")


class ServiceIndicator(IntEnum):
    """Service Indicator values of the MTP3 user part."""

    UNUSED = 0
    SCCP = 3
    TUP = 4
    ISUP = 5
    BROADBAND_ISUP = 7
    SATELLITE_ISUP = 8
    AAL_TYPE2_SIGNALLING = 10
    BICC = 11
    GATEWAY_CONTROL_PROTOCOL = 12


@dataclass
class ProtocolDataPayload:
    """The body of a Protocol Data parameter, without its tag and length."""

    originating_point_code: int
    destination_point_code: int
    service_indicator: int
    network_indicator: int
    message_priority: int
    signaling_link_selection: int
    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def marshal(self) -> bytes:
        """Return the wire form of the payload."""
        fixed = _FIXED.pack(
            self.originating_point_code & 0xFFFFFFFF,
            self.destination_point_code & 0xFFFFFFFF,
            self.service_indicator & 0xFF,
            self.network_indicator & 0xFF,
            self.message_priority & 0xFF,
            self.signaling_link_selection & 0xFF,
        )
        return fixed + self.data

    def marshal_len(self) -> int:
        """Return the length of the wire form."""
        return _FIXED.size + len(self.data)

    def __str__(self) -> str:
        return (
            f"{{OriginatingPointCode: {int(self.originating_point_code)}, "
            f"DestinationPointCode: {int(self.destination_point_code)}, "
            f"ServiceIndicator: {int(self.service_indicator)}, "
            f"NetworkIndicator: {int(self.network_indicator)}, "
            f"MessagePriority: {int(self.message_priority)}, "
            f"SignalingLinkSelection: {int(self.signaling_link_selection)}, "
            f"Data: {self.data.hex()}}}"
        )


def parse_protocol_data_payload(data: bytes) -> ProtocolDataPayload:
    """Decode a Protocol Data payload."""
    data = bytes(data)
    if len(data) < _FIXED.size:
        raise TooShortToParseError()
    opc, dpc, si, ni, mp, sls = _FIXED.unpack_from(data)
    return ProtocolDataPayload(opc, dpc, si, ni, mp, sls, data[_FIXED.size:])