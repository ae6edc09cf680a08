import pytest

from m3ua.params.builders import (
    new_deregistration_status,
    new_destination_point_code,
    new_local_routing_key_identifier,
    new_network_appearance,
    new_registration_status,
    new_routing_context,
    new_service_indicators,
    new_traffic_mode_type,
)
from m3ua.params.nested import (
    DeregResultPayload,
    RegistrationResultPayload,
    RoutingKeyPayload,
    deregistration_result,
    new_deregistration_result,
    new_registration_result,
    new_routing_key,
    parse_dereg_result_payload,
    parse_registration_result_payload,
    parse_routing_key_payload,
    registration_result,
    routing_key,
)
from m3ua.params.param import (
    InvalidLengthError,
    InvalidTypeError,
    marshal_multi_params,
    new_param,
    parse,
)

REG_RESULT_WIRE = bytes(
    [
        0x02, 0x08, 0x00, 0x1C,
        0x02, 0x0A, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x02, 0x12, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
    ]
)

DEREG_RESULT_WIRE = bytes(
    [
        0x02, 0x09, 0x00, 0x14,
        0x00, 0x06, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x02, 0x13, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
    ]
)


def _reg_payload():
    return RegistrationResultPayload(
        new_local_routing_key_identifier(1),
        new_registration_status(1),
        new_routing_context(1),
    )


def _dereg_payload():
    return DeregResultPayload(new_routing_context(1), new_deregistration_status(1))


def test_registration_result_encode():
    assert new_registration_result(_reg_payload()).marshal() == REG_RESULT_WIRE


def test_registration_result_decode():
    assert parse(REG_RESULT_WIRE) == new_registration_result(_reg_payload())


def test_registration_result_payload_round_trip():
    assert registration_result(parse(REG_RESULT_WIRE)) == _reg_payload()


def test_deregistration_result_encode():
    assert new_deregistration_result(_dereg_payload()).marshal() == DEREG_RESULT_WIRE


def test_deregistration_result_decode():
    assert parse(DEREG_RESULT_WIRE) == new_deregistration_result(_dereg_payload())


def test_deregistration_result_payload_round_trip():
    assert deregistration_result(parse(DEREG_RESULT_WIRE)) == _dereg_payload()


def test_dereg_payload_assigned_by_tag():
    data = marshal_multi_params([new_deregistration_status(4), new_routing_context(9)])
    payload = parse_dereg_result_payload(data)
    assert payload.routing_context.routing_context() == 9
    assert payload.deregistration_status.deregistration_status() == 4


def test_registration_result_wrong_count():
    data = marshal_multi_params([new_registration_status(1), new_routing_context(1)])
    with pytest.raises(InvalidLengthError):
        parse_registration_result_payload(data)


def test_dereg_result_wrong_count():
    with pytest.raises(InvalidLengthError):
        parse_dereg_result_payload(new_routing_context(1).marshal())


def test_accessors_reject_other_tags():
    other = new_routing_context(1)
    with pytest.raises(InvalidTypeError):
        registration_result(other)
    with pytest.raises(InvalidTypeError):
        deregistration_result(other)
    with pytest.raises(InvalidTypeError):
        routing_key(other)


def test_routing_key_round_trip():
    payload = RoutingKeyPayload(
        local_routing_key_identifier=new_local_routing_key_identifier(1),
        routing_context=new_routing_context(2),
        traffic_mode_type=new_traffic_mode_type(1),
        destination_point_code=new_destination_point_code(3),
        network_appearance=new_network_appearance(4),
        service_indicators=new_service_indicators(3, 5),
    )
    param = new_routing_key(payload)
    assert param.tag == 0x0207
    assert routing_key(parse(param.marshal())) == payload


def test_routing_key_omits_absent_parameters():
    payload = RoutingKeyPayload(
        local_routing_key_identifier=new_local_routing_key_identifier(1),
        traffic_mode_type=new_traffic_mode_type(1),
        destination_point_code=new_destination_point_code(3),
    )
    param = new_routing_key(payload)
    assert param.length == 4 + 3 * 8
    assert param.data[:4] == bytes([0x02, 0x0A, 0x00, 0x08])


def test_routing_key_too_few():
    data = marshal_multi_params(
        [new_local_routing_key_identifier(1), new_destination_point_code(3)]
    )
    with pytest.raises(InvalidLengthError):
        parse_routing_key_payload(data)


def test_routing_key_unknown_tag():
    data = marshal_multi_params(
        [
            new_local_routing_key_identifier(1),
            new_destination_point_code(3),
            new_param(1, b"\xde\xad\xbe\xef"),
        ]
    )
    with pytest.raises(InvalidTypeError):
        parse_routing_key_payload(data)