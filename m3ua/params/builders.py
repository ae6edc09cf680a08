"""Constructors for the M3UA parameters and the value sets they carry."""

from __future__ import annotations

from enum import IntEnum

from .param import Param, Tag, new_param
from .protocol_data import ProtocolDataPayload


class ErrorCode(IntEnum):
    """Error Code parameter values."""

    INVALID_VERSION = 1
    UNSUPPORTED_MESSAGE_CLASS = 3
    UNSUPPORTED_MESSAGE_TYPE = 4
    UNSUPPORTED_TRAFFIC_MODE_TYPE = 5
    UNEXPECTED_MESSAGE = 6
    PROTOCOL_ERROR = 7
    INVALID_STREAM_IDENTIFIER = 9
    REFUSED_MANAGEMENT_BLOCKING = 13
    ASP_IDENTIFIER_REQUIRED = 14
    INVALID_ASP_IDENTIFIER = 15
    INVALID_PARAMETER_VALUE = 17
    PARAMETER_FIELD_ERROR = 18
    UNEXPECTED_PARAMETER = 19
    DESTINATION_STATUS_UNKNOWN = 20
    INVALID_NETWORK_APPEARANCE = 21
    MISSING_PARAMETER = 22
    INVALID_ROUTING_CONTEXT = 25
    NO_CONFIGURED_AS_FOR_ASP = 26


class StatusType(IntEnum):
    """Status Type carried in the upper half of the Status parameter."""

    AS_STATE_CHANGE = 1
    OTHER = 2


class StatusInfo(IntEnum):
    """Status values, the status type included in the upper 16 bits."""

    AS_STATE_INACTIVE = 0x00010002
    AS_STATE_ACTIVE = 0x00010003
    AS_STATE_PENDING = 0x00010004
    INSUFFICIENT_ASP_RESOURCES = 0x00020001
    ALTERNATE_ASP_ACTIVE = 0x00020002
    ASP_FAILURE = 0x00020003


class UserIdentity(IntEnum):
    """User identity values of the User/Cause parameter."""

    UNKNOWN = 0
    UNEQUIPPED = 1
    INACCESSIBLE = 2


class UnavailabilityCause(IntEnum):
    """Unavailability cause values of the User/Cause parameter."""

    SCCP = 1
    TUP = 2
    ISUP = 3
    BROADBAND_ISUP = 5
    SATELLITE_ISUP = 6
    AAL2_SIGNALLING = 8
    BICC = 9
    GATEWAY_CONTROL_PROTOCOL = 10


class TrafficMode(IntEnum):
    """Traffic Mode Type values."""

    OVERRIDE = 1
    LOADSHARE = 2
    BROADCAST = 3


class RegistrationStatusCode(IntEnum):
    """Registration Status values."""

    SUCCESSFULLY_REGISTERED = 0
    UNKNOWN = 1
    INVALID_DPC = 2
    INVALID_NETWORK_APPEARANCE = 3
    INVALID_ROUTING_KEY = 4
    PERMISSION_DENIED = 5
    CANNOT_SUPPORT_UNIQUE_ROUTING = 6
    ROUTING_KEY_NOT_CURRENTLY_PROVISIONED = 7
    INSUFFICIENT_RESOURCES = 8
    UNSUPPORTED_RK_PARAMETER_FIELD = 9
    UNSUPPORTED_TRAFFIC_HANDLING_MODE = 10
    ROUTING_KEY_CHANGE_REFUSED = 11
    ROUTING_KEY_ALREADY_REGISTERED = 12


class DeregistrationStatusCode(IntEnum):
    """Deregistration Status values."""

    SUCCESSFULLY_DEREGISTERED = 0
    UNKNOWN = 1
    INVALID_ROUTING_CONTEXT = 2
    PERMISSION_DENIED = 3
    NOT_REGISTERED = 4
    ASP_ACTIVE_FOR_ROUTING_CONTEXT = 5


def _u32(value: int) -> bytes:
    return (int(value) & 0xFFFFFFFF).to_bytes(4, "big")


def _uint32_param(tag: Tag, value: int) -> Param:
    return new_param(tag, _u32(value))


def _uint24_param(tag: Tag, value: int) -> Param:
    return new_param(tag, b"\x00" + (int(value) & 0xFFFFFF).to_bytes(3, "big"))


def _uint8_param(tag: Tag, value: int) -> Param:
    return new_param(tag, bytes([0, 0, 0, int(value) & 0xFF]))


def _multi_uint32_param(tag: Tag, values) -> Param:
    return new_param(tag, b"".join(_u32(v) for v in values))


def _multi_uint8_param(tag: Tag, values) -> Param:
    raw = bytes(int(v) & 0xFF for v in values)
    # Always followed by at least one zero byte, up to the next 4-byte boundary.
    size = len(raw) + (4 - len(raw) % 4)
    return new_param(tag, raw.ljust(size, b"\x00"))


def new_affected_point_code(*args: int) -> Param:
    """Create an Affected Point Code parameter; each value includes its mask."""
    return _multi_uint32_param(Tag.AFFECTED_POINT_CODE, args)


def new_asp_identifier(asp_id: int) -> Param:
    """Create an ASP Identifier parameter."""
    return _uint32_param(Tag.ASP_IDENTIFIER, asp_id)


def new_concerned_destination(cd: int) -> Param:
    """Create a Concerned Destination parameter from a 24-bit point code."""
    return _uint24_param(Tag.CONCERNED_DESTINATION, cd)


def new_congestion_indications(level: int) -> Param:
    """Create a Congestion Indications parameter."""
    return _uint8_param(Tag.CONGESTION_INDICATIONS, level)


def new_correlation_id(corr_id: int) -> Param:
    """Create a Correlation ID parameter."""
    return _uint32_param(Tag.CORRELATION_ID, corr_id)


def new_deregistration_status(status: int) -> Param:
    """Create a Deregistration Status parameter."""
    return _uint32_param(Tag.DEREGISTRATION_STATUS, status)


def new_destination_point_code(dpc: int) -> Param:
    """Create a Destination Point Code parameter from a 24-bit point code."""
    return _uint24_param(Tag.DESTINATION_POINT_CODE, dpc)


def new_diagnostic_information(info: bytes) -> Param:
    """Create a Diagnostic Information parameter."""
    return new_param(Tag.DIAGNOSTIC_INFORMATION, info)


def new_error_code(code: int) -> Param:
    """Create an Error Code parameter."""
    return _uint32_param(Tag.ERROR_CODE, code)


def new_heartbeat_data(data: bytes) -> Param:
    """Create a Heartbeat Data parameter."""
    return new_param(Tag.HEARTBEAT_DATA, data)


def new_info_string(info: str) -> Param:
    """Create an INFO String parameter."""
    return new_param(Tag.INFO_STRING, info.encode("utf-8"))


def new_local_routing_key_identifier(rk_id: int) -> Param:
    """Create a Local Routing Key Identifier parameter."""
    return _uint32_param(Tag.LOCAL_ROUTING_KEY_IDENTIFIER, rk_id)


def new_network_appearance(nw_apr: int) -> Param:
    """Create a Network Appearance parameter."""
    return _uint32_param(Tag.NETWORK_APPEARANCE, nw_apr)


def new_originating_point_code_list(*args: int) -> Param:
    """Create an Originating Point Code List; each value includes its mask."""
    return _multi_uint32_param(Tag.ORIGINATING_POINT_CODE_LIST, args)


def new_registration_status(status: int) -> Param:
    """Create a Registration Status parameter."""
    return _uint32_param(Tag.REGISTRATION_STATUS, status)


def new_routing_context(*args: int) -> Param:
    """Create a Routing Context parameter holding one or more contexts."""
    return _multi_uint32_param(Tag.ROUTING_CONTEXT, args)


def new_service_indicators(*args: int) -> Param:
    """Create a Service Indicators parameter."""
    return _multi_uint8_param(Tag.SERVICE_INDICATORS, args)


def new_status(type_info: int) -> Param:
    """Create a Status parameter from a StatusInfo value."""
    return _uint32_param(Tag.STATUS, type_info)


def new_traffic_mode_type(mode: int) -> Param:
    """Create a Traffic Mode Type parameter."""
    return _uint32_param(Tag.TRAFFIC_MODE_TYPE, mode)


def new_user_cause(user: int, cause: int) -> Param:
    """Create a User/Cause parameter: cause in the upper, user in the lower half."""
    combined = ((int(cause) & 0xFFFF) << 16) | (int(user) & 0xFFFF)
    return _uint32_param(Tag.USER_CAUSE, combined)


def new_protocol_data(
    opc: int, dpc: int, si: int, ni: int, mp: int, sls: int, data: bytes
) -> Param:
    """Create a Protocol Data parameter around a serialized payload."""
    payload = ProtocolDataPayload(opc, dpc, si, ni, mp, sls, data)
    return new_param(Tag.PROTOCOL_DATA, payload.marshal())