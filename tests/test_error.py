import pytest

from m3ua.messages.constants import (
    InvalidParameterError,
    ManagementType,
    MessageClass,
    TooShortToParseError,
)
from m3ua.messages.error import ErrorMessage, new_error, parse_error
from m3ua.params.builders import (
    ErrorCode,
    new_affected_point_code,
    new_diagnostic_information,
    new_error_code,
    new_heartbeat_data,
    new_network_appearance,
    new_routing_context,
)

HAS_ALL_BYTES = bytes(
    [
        0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x34,
        0x00, 0x0C, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x02, 0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x12, 0x00, 0x0C, 0x11, 0x11, 0x11, 0x11,
        0x22, 0x22, 0x22, 0x22,
        0x00, 0x07, 0x00, 0x08, 0xDE, 0xAD, 0xBE, 0xEF,
    ]
)

HAS_NONE_BYTES = bytes([0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x08])


def _has_all():
    return new_error(
        new_error_code(ErrorCode.INVALID_VERSION),
        new_routing_context(1),
        new_network_appearance(1),
        new_affected_point_code(0x11111111, 0x22222222),
        new_diagnostic_information(b"\xde\xad\xbe\xef"),
    )


def _has_none():
    return new_error(None, None, None, None, None)


CASES = [(_has_all, HAS_ALL_BYTES), (_has_none, HAS_NONE_BYTES)]
IDS = ["has-all", "has-none"]


@pytest.mark.parametrize("build, wire", CASES, ids=IDS)
def test_decode(build, wire):
    assert parse_error(wire) == build()


@pytest.mark.parametrize("build, wire", CASES, ids=IDS)
def test_encode(build, wire):
    assert build().marshal() == wire
    assert parse_error(wire).marshal() == wire


@pytest.mark.parametrize("build, wire", CASES, ids=IDS)
def test_len(build, wire):
    assert build().marshal_len() == len(wire)
    assert parse_error(wire).marshal_len() == len(wire)


@pytest.mark.parametrize("build, wire", CASES, ids=IDS)
def test_interface(build, wire):
    decoded = parse_error(wire)
    built = build()
    assert decoded.message_class() == built.message_class()
    assert decoded.message_class_name() == built.message_class_name()
    assert decoded.message_type() == built.message_type()
    assert decoded.message_type_name() == built.message_type_name()


def test_identity_and_fields():
    message = parse_error(HAS_ALL_BYTES)
    assert isinstance(message, ErrorMessage)
    assert message.version() == 1
    assert message.message_class() == MessageClass.MANAGEMENT
    assert message.message_type() == ManagementType.ERROR
    assert message.message_class_name() == "Management"
    assert message.message_type_name() == "Error"
    assert message.error_code.error_code() == ErrorCode.INVALID_VERSION
    assert message.routing_context.routing_contexts() == [1]
    assert message.network_appearance.network_appearance() == 1
    assert message.affected_point_code.affected_point_codes() == [0x11111111, 0x22222222]
    assert message.diagnostic_information.diagnostic_information() == b"\xde\xad\xbe\xef"


def test_header_length_matches_wire():
    message = _has_all()
    assert message.header.length == len(HAS_ALL_BYTES)


def test_str_of_empty_error():
    assert str(_has_none()) == (
        "{Header: {Version: 1, Reserved: 0x0, Class: 0, Type: 0, Length: 8, Payload: }, "
        "ErrorCode: , RoutingContext: , NetworkAppearance: , "
        "AffectedPointCode: , DiagnosticInformation: }"
    )


def test_unexpected_parameter_rejected():
    body = new_heartbeat_data(b"\x01\x02\x03\x04").marshal()
    wire = bytes([0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10]) + body
    with pytest.raises(InvalidParameterError):
        parse_error(wire)


def test_too_short():
    with pytest.raises(TooShortToParseError):
        parse_error(b"\x01\x00\x00\x00")