import pytest

from m3ua.messages.constants import InvalidParameterError, TooShortToParseError
from m3ua.messages.dupu import (
    DestinationUserPartUnavailable,
    new_destination_user_part_unavailable,
    parse_destination_user_part_unavailable,
)
from m3ua.params.builders import (
    UnavailabilityCause,
    UserIdentity,
    new_affected_point_code,
    new_info_string,
    new_network_appearance,
    new_routing_context,
    new_user_cause,
)

HAS_ALL = bytes(
    [
        0x01, 0x00, 0x02, 0x05, 0x00, 0x00, 0x00, 0x38,
        0x02, 0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x02,
        0x00, 0x12, 0x00, 0x0C, 0x00, 0x00, 0x00, 0x03, 0x00, 0x00, 0x00, 0x04,
        0x02, 0x04, 0x00, 0x08, 0x00, 0x01, 0x00, 0x00,
        0x00, 0x04, 0x00, 0x0C, 0x64, 0x65, 0x61, 0x64, 0x62, 0x65, 0x65, 0x66,
    ]
)


def _has_all():
    return new_destination_user_part_unavailable(
        new_network_appearance(1),
        new_routing_context(2),
        new_affected_point_code(3, 4),
        new_user_cause(UserIdentity.UNKNOWN, UnavailabilityCause.SCCP),
        new_info_string("deadbeef"),
    )


def test_encode():
    assert _has_all().marshal() == HAS_ALL


def test_decode():
    assert parse_destination_user_part_unavailable(HAS_ALL) == _has_all()


def test_len():
    assert _has_all().marshal_len() == len(HAS_ALL)


def test_header_length_field():
    assert _has_all().header.length == 0x38


def test_interface_values():
    decoded = parse_destination_user_part_unavailable(HAS_ALL)
    assert decoded.message_class() == 2
    assert decoded.message_type() == 5
    assert decoded.message_class_name() == "SSNM"
    assert decoded.message_type_name() == "Destination User Part Unavailable"
    assert decoded.version() == 1


def test_decoded_parameter_values():
    decoded = parse_destination_user_part_unavailable(HAS_ALL)
    assert decoded.network_appearance.network_appearance() == 1
    assert decoded.routing_context.routing_context() == 2
    assert decoded.affected_point_code.affected_point_codes() == [3, 4]
    assert decoded.user_cause.unavailability_cause() == UnavailabilityCause.SCCP
    assert decoded.user_cause.user_identity() == UserIdentity.UNKNOWN
    assert decoded.info_string.info_string() == "deadbeef"


def test_empty_message():
    message = new_destination_user_part_unavailable(None, None, None, None, None)
    assert message.marshal() == bytes([0x01, 0x00, 0x02, 0x05, 0x00, 0x00, 0x00, 0x08])


def test_unexpected_parameter_is_rejected():
    data = bytes(
        [
            0x01, 0x00, 0x02, 0x05, 0x00, 0x00, 0x00, 0x10,
            0x00, 0x11, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        ]
    )
    with pytest.raises(InvalidParameterError):
        parse_destination_user_part_unavailable(data)


def test_too_short():
    with pytest.raises(TooShortToParseError):
        parse_destination_user_part_unavailable(b"\x01\x00\x02")


def test_parsed_type():
    decoded = parse_destination_user_part_unavailable(HAS_ALL)
    assert type(decoded) is DestinationUserPartUnavailable
    assert decoded.marshal() == HAS_ALL