import pytest

from m3ua.messages.constants import TooShortToParseError
from m3ua.messages.generic import new_generic, parse_generic
from m3ua.params.builders import new_network_appearance, new_routing_context
from m3ua.params.param import InvalidLengthError

GENERIC_BYTES = bytes(
    [
        0x01, 0x00, 0x7F, 0x7F, 0x00, 0x00, 0x00, 0x1C,
        0x02, 0x00, 0x00, 0x08, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x06, 0x00, 0x0C, 0x00, 0x00, 0x00, 0x01,
        0x00, 0x00, 0x00, 0xFF,
    ]
)


def _generic():
    return new_generic(1, 127, 127, new_network_appearance(1), new_routing_context(1, 255))


def test_decode():
    assert parse_generic(GENERIC_BYTES) == _generic()


def test_encode():
    assert _generic().marshal() == GENERIC_BYTES


def test_len():
    assert _generic().marshal_len() == len(GENERIC_BYTES)


def test_identity():
    g = parse_generic(GENERIC_BYTES)
    assert g.version() == 1
    assert g.message_class() == 127
    assert g.message_type() == 127
    assert g.message_class_name() == "Unknown"
    assert g.message_type_name() == "Unknown"


def test_decoded_params():
    g = parse_generic(GENERIC_BYTES)
    assert g.params[0].network_appearance() == 1
    assert g.params[1].routing_contexts() == [1, 255]


def test_no_params():
    g = new_generic(1, 127, 127)
    assert g.marshal() == bytes([0x01, 0x00, 0x7F, 0x7F, 0x00, 0x00, 0x00, 0x08])
    assert parse_generic(g.marshal()).params == []


def test_str_without_params():
    assert str(new_generic(1, 127, 127)) == (
        "{Header: {Version: 1, Reserved: 0x0, Class: 127, Type: 127, Length: 8, Payload: }, "
        "Params: []}"
    )


def test_too_short():
    with pytest.raises(TooShortToParseError):
        parse_generic(b"\x01\x00\x7f")


def test_bad_param_length():
    with pytest.raises(InvalidLengthError):
        parse_generic(GENERIC_BYTES[:8] + b"\x00\x06\x00\x02")