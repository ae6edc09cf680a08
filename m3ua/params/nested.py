"""Parameters that carry other parameters: registration results and routing keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .param import (
    InvalidLengthError,
    InvalidTypeError,
    Param,
    Tag,
    new_nested_param,
    parse_multi_params,
)


@dataclass
class RegistrationResultPayload:
    """The parameters held by a Registration Result."""

    local_routing_key_identifier: Optional[Param] = None
    registration_status: Optional[Param] = None
    routing_context: Optional[Param] = None


@dataclass
class DeregResultPayload:
    """The parameters held by a Deregistration Result."""

    routing_context: Optional[Param] = None
    deregistration_status: Optional[Param] = None


@dataclass
class RoutingKeyPayload:
    """The parameters held by a Routing Key."""

    local_routing_key_identifier: Optional[Param] = None
    routing_context: Optional[Param] = None
    traffic_mode_type: Optional[Param] = None
    destination_point_code: Optional[Param] = None
    network_appearance: Optional[Param] = None
    service_indicators: Optional[Param] = None
    originating_point_code_list: Optional[Param] = None


_ROUTING_KEY_FIELDS = {
    Tag.LOCAL_ROUTING_KEY_IDENTIFIER: "local_routing_key_identifier",
    Tag.ROUTING_CONTEXT: "routing_context",
    Tag.TRAFFIC_MODE_TYPE: "traffic_mode_type",
    Tag.DESTINATION_POINT_CODE: "destination_point_code",
    Tag.NETWORK_APPEARANCE: "network_appearance",
    Tag.SERVICE_INDICATORS: "service_indicators",
    Tag.ORIGINATING_POINT_CODE_LIST: "originating_point_code_list",
}


def new_registration_result(payload: RegistrationResultPayload) -> Param:
    """Create a Registration Result parameter."""
    return new_nested_param(
        Tag.REGISTRATION_RESULT,
        payload.local_routing_key_identifier,
        payload.registration_status,
        payload.routing_context,
    )


def new_deregistration_result(payload: DeregResultPayload) -> Param:
    """Create a Deregistration Result parameter."""
    return new_nested_param(
        Tag.DEREGISTRATION_RESULT,
        payload.routing_context,
        payload.deregistration_status,
    )


def new_routing_key(payload: RoutingKeyPayload) -> Param:
    """Create a Routing Key parameter; absent optional parameters are left out."""
    return new_nested_param(
        Tag.ROUTING_KEY,
        payload.local_routing_key_identifier,
        payload.routing_context,
        payload.traffic_mode_type,
        payload.destination_point_code,
        payload.network_appearance,
        payload.service_indicators,
        payload.originating_point_code_list,
    )


def parse_registration_result_payload(data: bytes) -> RegistrationResultPayload:
    """Decode the three parameters of a Registration Result, in order."""
    params = parse_multi_params(data)
    if len(params) != 3:
        raise InvalidLengthError()
    return RegistrationResultPayload(*params)


def parse_dereg_result_payload(data: bytes) -> DeregResultPayload:
    """Decode the two parameters of a Deregistration Result."""
    params = parse_multi_params(data)
    if len(params) != 2:
        raise InvalidLengthError()
    payload = DeregResultPayload()
    for param in params:
        if param.tag == Tag.ROUTING_CONTEXT:
            payload.routing_context = param
        elif param.tag == Tag.DEREGISTRATION_STATUS:
            payload.deregistration_status = param
    return payload


def parse_routing_key_payload(data: bytes) -> RoutingKeyPayload:
    """Decode the parameters of a Routing Key; at least three are required."""
    params = parse_multi_params(data)
    if len(params) < 3:
        raise InvalidLengthError()
    payload = RoutingKeyPayload()
    for param in params:
        field = _ROUTING_KEY_FIELDS.get(param.tag)
        if field is None:
            raise InvalidTypeError()
        setattr(payload, field, param)
    return payload


def registration_result(param: Param) -> RegistrationResultPayload:
    """Decode a Registration Result parameter."""
    if param.tag != Tag.REGISTRATION_RESULT:
        raise InvalidTypeError()
    return parse_registration_result_payload(param.data)


def deregistration_result(param: Param) -> DeregResultPayload:
    """Decode a Deregistration Result parameter."""
    if param.tag != Tag.DEREGISTRATION_RESULT:
        raise InvalidTypeError()
    return parse_dereg_result_payload(param.data)


def routing_key(param: Param) -> RoutingKeyPayload:
    """Decode a Routing Key parameter."""
    if param.tag != Tag.ROUTING_KEY:
        raise InvalidTypeError()
    return parse_routing_key_payload(param.data)