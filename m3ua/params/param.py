"""M3UA parameters: the tag-length-value container, its codec and decoders."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from .protocol_data import ProtocolDataPayload

_HEADER = struct.Struct(">HH")


class Tag(IntEnum):
    """Parameter tags, common and M3UA-specific."""

    INFO_STRING = 0x0004
    ROUTING_CONTEXT = 0x0006
    DIAGNOSTIC_INFORMATION = 0x0007
    HEARTBEAT_DATA = 0x0009
    TRAFFIC_MODE_TYPE = 0x000B
    ERROR_CODE = 0x000C
    STATUS = 0x000D
    ASP_IDENTIFIER = 0x0011
    AFFECTED_POINT_CODE = 0x0012
    CORRELATION_ID = 0x0013

    NETWORK_APPEARANCE = 0x0200
    USER_CAUSE = 0x0204
    CONGESTION_INDICATIONS = 0x0205
    CONCERNED_DESTINATION = 0x0206
    ROUTING_KEY = 0x0207
    REGISTRATION_RESULT = 0x0208
    DEREGISTRATION_RESULT = 0x0209
    LOCAL_ROUTING_KEY_IDENTIFIER = 0x020A
    DESTINATION_POINT_CODE = 0x020B
    SERVICE_INDICATORS = 0x020C
    ORIGINATING_POINT_CODE_LIST = 0x020E
    PROTOCOL_DATA = 0x0210
    REGISTRATION_STATUS = 0x0212
    DEREGISTRATION_STATUS = 0x0213


class ParamError(ValueError):
    """Base class of parameter errors."""

    default_message = "parameter error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidTypeError(ParamError):
    default_message = "got invalid type in parameter"


class InvalidLengthError(ParamError):
    default_message = "parameter has invalid length value"


class TooShortToMarshalError(ParamError):
    default_message = "insufficient buffer to serialize parameter to"


class TooShortToParseError(ParamError):
    default_message = "too short to decode as parameter"


@dataclass
class Param:
    """A single M3UA parameter."""

    tag: int
    length: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def padding(self) -> int:
        """Return the number of bytes padding the data to a 4-byte boundary."""
        return -len(self.data) % 4

    def marshal_len(self) -> int:
        """Return the length of the wire form, padding included."""
        return _HEADER.size + len(self.data) + self.padding()

    def set_length(self) -> None:
        """Set the Length field from the data."""
        self.length = (_HEADER.size + len(self.data)) & 0xFFFF

    def marshal(self) -> bytes:
        """Return the wire form of the parameter."""
        header = _HEADER.pack(int(self.tag) & 0xFFFF, int(self.length) & 0xFFFF)
        return header + self.data + bytes(self.padding())

    def __str__(self) -> str:
        return f"{{Tag: {int(self.tag)}, Length: {int(self.length)}, Data: {self.data.hex()}}}"

    def _uint32(self) -> int:
        if len(self.data) != 4:
            return 0
        return int.from_bytes(self.data, "big")

    def _uint32_list(self) -> List[int]:
        if len(self.data) % 4:
            return []
        return [value for (value,) in struct.iter_unpack(">I", self.data)]

    def _uint32_of(self, tag: Tag) -> int:
        return self._uint32() if self.tag == tag else 0

    def affected_point_code(self) -> int:
        if self.tag != Tag.AFFECTED_POINT_CODE:
            return 0
        codes = self.affected_point_codes()
        if not codes:
            raise InvalidLengthError()
        return codes[0]

    def affected_point_codes(self) -> List[int]:
        if self.tag != Tag.AFFECTED_POINT_CODE:
            return []
        return self._uint32_list()

    def asp_identifier(self) -> int:
        return self._uint32_of(Tag.ASP_IDENTIFIER)

    def concerned_destination(self) -> int:
        return self._uint32_of(Tag.CONCERNED_DESTINATION) & 0xFFFFFF

    def congestion_level(self) -> int:
        return self._uint32_of(Tag.CONGESTION_INDICATIONS) & 0xFF

    def correlation_id(self) -> int:
        return self._uint32_of(Tag.CORRELATION_ID)

    def deregistration_status(self) -> int:
        return self._uint32_of(Tag.DEREGISTRATION_STATUS)

    def destination_point_code(self) -> int:
        return self._uint32_of(Tag.DESTINATION_POINT_CODE) & 0xFFFFFF

    def diagnostic_information(self) -> bytes:
        return self.data if self.tag == Tag.DIAGNOSTIC_INFORMATION else b""

    def error_code(self) -> int:
        return self._uint32_of(Tag.ERROR_CODE)

    def heartbeat_data(self) -> bytes:
        return self.data if self.tag == Tag.HEARTBEAT_DATA else b""

    def info_string(self) -> str:
        if self.tag != Tag.INFO_STRING:
            return ""
        return self.data.decode("utf-8", errors="replace")

    def local_routing_key_identifier(self) -> int:
        return self._uint32_of(Tag.LOCAL_ROUTING_KEY_IDENTIFIER)

    def network_appearance(self) -> int:
        return self._uint32_of(Tag.NETWORK_APPEARANCE)

    def originating_point_code_list(self) -> List[int]:
        if self.tag != Tag.ORIGINATING_POINT_CODE_LIST:
            return []
        return self._uint32_list()

    def registration_status(self) -> int:
        return self._uint32_of(Tag.REGISTRATION_STATUS)

    def routing_context(self) -> int:
        if self.tag != Tag.ROUTING_CONTEXT:
            return 0
        contexts = self.routing_contexts()
        if not contexts:
            raise InvalidLengthError()
        return contexts[0]

    def routing_contexts(self) -> List[int]:
        if self.tag != Tag.ROUTING_CONTEXT:
            return []
        return self._uint32_list()

    def service_indicators(self) -> List[int]:
        if self.tag != Tag.SERVICE_INDICATORS:
            return []
        return list(self.data)

    def status(self) -> int:
        return self._uint32_of(Tag.STATUS)

    def status_type(self) -> int:
        return self._uint32_of(Tag.STATUS) >> 16

    def status_info(self) -> int:
        return self._uint32_of(Tag.STATUS) & 0xFFFF

    def traffic_mode_type(self) -> int:
        return self._uint32_of(Tag.TRAFFIC_MODE_TYPE)

    def user_cause(self) -> int:
        return self._uint32_of(Tag.USER_CAUSE)

    def user_identity(self) -> int:
        return self._uint32_of(Tag.USER_CAUSE) & 0xFFFF

    def unavailability_cause(self) -> int:
        return self._uint32_of(Tag.USER_CAUSE) >> 16

    def protocol_data(self) -> "ProtocolDataPayload":
        """Decode the data as a Protocol Data payload."""
        from .protocol_data import parse_protocol_data_payload

        if self.tag != Tag.PROTOCOL_DATA:
            raise InvalidTypeError()
        return parse_protocol_data_payload(self.data)


def new_param(tag: int, data: bytes) -> Param:
    """Create a parameter with the given tag and data, its length filled in."""
    param = Param(tag=int(tag) & 0xFFFF, data=data)
    param.set_length()
    return param


def new_nested_param(tag: int, *args: Optional[Param]) -> Param:
    """Create a parameter whose data is the wire form of other parameters."""
    inner = b"".join(p.marshal() for p in args if p is not None)
    return new_param(tag, inner)


def parse(data: bytes) -> Param:
    """Decode one parameter from the start of data."""
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise TooShortToParseError()
    tag, length = _HEADER.unpack_from(data)
    if length > len(data) or length < _HEADER.size:
        raise InvalidLengthError()
    return Param(tag=tag, length=length, data=data[_HEADER.size:length])


def parse_multi_params(data: bytes) -> List[Param]:
    """Decode every parameter in data, in order."""
    remaining = bytes(data)
    params: List[Param] = []
    while remaining:
        param = parse(remaining)
        params.append(param)
        step = param.length + param.padding()
        if len(remaining) < step:
            break
        remaining = remaining[step:]
    return params


def marshal_multi_params(params: Iterable[Param]) -> bytes:
    """Return the wire form of several parameters, one after another."""
    return b"".join(p.marshal() for p in params)